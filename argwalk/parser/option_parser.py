# Argwalk CLI Parsing Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `OptionParser`, the engine that walks an argument vector
against an `OptionTable`.

The parser is driven one event at a time with `step()`. Each call classifies
the next token(s), binds and converts the option-argument, applies the
option's action, and reports what happened as a `ParseResult`. When the
session ends the caller's vector is compacted in place so that only the
program name (if any) and the operands remain.

Key Features:
- Short options, long options and short clusters (`-abc`, `-cVALUE`)
- Attached (`-cARG`, `--opt=ARG`) and, for required arguments, following
  (`-c ARG`, `--opt ARG`) arguments
- `--` ends option processing; `-` is reported as the stdio marker
- Flag, store, append and callback actions with typed conversion and bounds
- Caller-driven subcommand transfer
- Halt-on-first-error or collect-all-errors policies

Public Interface:
- `step()`: Advance to the next event.
- `parse_args()`: Drain the session and return the destination values.
- `subparser(result)`: Build the child parser after a subcommand transfer.
- `help_init()` / `format_help()` / `print_help()`: Help output.

Example Usage:
    table = OptionTable()
    table.add_option("f", "set-flag", action="set_true")
    table.add_option("s", "set-string", action="store", arg="ARG")

    argv = ["prog", "-fsHELLO", "input.txt"]
    values = OptionParser(table, argv).parse_args()

    # values == {"set_flag": True, "set_string": "HELLO"}
    # argv == ["prog", "input.txt"]

Known Ambiguity:
A required argument followed by an option-shaped token (`-c -f`) takes that
token as its argument. Set `ParserSettings.strict_option_arguments` to refuse
tokens naming a recognized option instead.
"""
from __future__ import annotations

import os
import sys
from typing import Any, Iterator

from rich.console import Console

from argwalk.config import ParserSettings
from argwalk.console import error_console
from argwalk.exceptions import (
    ArgumentParseError,
    ArgwalkError,
    OptionError,
    UnknownOptionError,
)
from argwalk.logger import logger
from argwalk.parser.binder import bind
from argwalk.parser.callbacks import ArgCursor
from argwalk.parser.dispatcher import dispatch, initial_value
from argwalk.parser.help_formatter import HelpFormatter
from argwalk.parser.option import Arity, Option
from argwalk.parser.option_action import OptionAction
from argwalk.parser.option_table import OptionTable
from argwalk.parser.parser_types import ParseResult, ParseState, ParseStatus
from argwalk.utils import get_program_invocation


class OptionParser:
    """
    Walks one argument vector against one option table.

    Each parser owns its `ParseState` and destination values; it never touches
    process-wide state, so independent parsers can run on different threads.
    The argument vector is only read while matching and is compacted in place
    once the session ends.

    Args:
        table (OptionTable): Options and subcommands to recognize.
        argv (list[str] | None): The argument vector. Defaults to `sys.argv`.
        settings (ParserSettings | None): Session policies and help layout.
        values (dict[str, Any] | None): Destination slots. Existing keys are kept;
            missing ones are seeded from the options' actions.
        prog (str | None): Program name used in diagnostics and help.
        program_name (bool): Whether `argv[0]` is the program name rather than
            a token to parse.
    """

    def __init__(
        self,
        table: OptionTable,
        argv: list[str] | None = None,
        *,
        settings: ParserSettings | None = None,
        values: dict[str, Any] | None = None,
        prog: str | None = None,
        program_name: bool = True,
    ) -> None:
        if not isinstance(table, OptionTable):
            raise ArgwalkError(f"Expected an OptionTable, got {type(table).__name__}")
        self.table: OptionTable = table
        self.settings: ParserSettings = settings or ParserSettings()
        if self.settings.validate_table:
            table.validate()
        self.argv: list[str] = sys.argv if argv is None else argv
        self._base: int = 1 if program_name and self.argv else 0
        if prog:
            self.prog: str = prog
        elif self._base:
            self.prog = os.path.basename(self.argv[0]) or get_program_invocation()
        else:
            self.prog = get_program_invocation()
        self.values: dict[str, Any] = values if values is not None else {}
        self._seed_values()
        self.state: ParseState = ParseState(index=self._base)
        self.console: Console = error_console
        self._help_header: str | None = None
        self._help_footer: str | None = None

    def _seed_values(self) -> None:
        for option in self.table:
            if option.is_subcommand:
                assert option.dest is not None, "subcommands always have a dest"
                self.values.setdefault(option.dest, None)
                continue
            if option.action.is_call or option.dest is None:
                continue
            self.values.setdefault(option.dest, initial_value(option))
            if option.length_dest:
                self.values.setdefault(option.length_dest, 0)

    @property
    def finished(self) -> bool:
        return self.state.finished

    @property
    def failed(self) -> bool:
        return self.state.failed

    @property
    def errors(self) -> list[OptionError]:
        return list(self.state.errors)

    @property
    def operands(self) -> list[str]:
        """Operands retained so far; after the session, the compacted tail of argv."""
        if self.state.finished:
            return list(self.argv[self._base :])
        return list(self.state.operands)

    def step(self) -> ParseResult:
        """
        Advance the session to its next event.

        Returns:
            ParseResult: `DONE` once the vector is exhausted (then compacted),
            `MATCH` for an applied option, `STDIO` for a lone `-`, `SUBCOMMAND`
            when a subcommand took over the remaining tokens, or `ERROR` with
            the `OptionError` of a failed occurrence.
        """
        state = self.state
        while not state.finished:
            if state.in_cluster:
                return self._step_cluster()
            if state.index >= len(self.argv):
                self._finish()
                break

            token = self.argv[state.index]
            if state.end_of_options:
                self._retain(token)
            elif token == "--":
                state.end_of_options = True
                state.index += 1
                logger.debug("[%s] End of options at index %d", self.prog, state.index)
            elif token == "-":
                self._retain(token, operand=False)
                return ParseResult(ParseStatus.STDIO)
            elif token.startswith("--"):
                return self._step_long(token)
            elif token.startswith("-"):
                state.cluster_offset = 1
                return self._step_cluster()
            else:
                command = None if state.operand_seen else self.table.find_command(token)
                if command is not None:
                    return self._transfer(command)
                self._retain(token)
        return ParseResult(ParseStatus.DONE)

    def __iter__(self) -> Iterator[ParseResult]:
        """Yield every event of the session until it is done."""
        while True:
            result = self.step()
            if result.status == ParseStatus.DONE:
                return
            yield result

    def _retain(self, token: str, operand: bool = True) -> None:
        self.state.operands.append(token)
        self.state.operand_seen = self.state.operand_seen or operand
        self.state.index += 1

    def _step_long(self, token: str) -> ParseResult:
        state = self.state
        name, separator, attached = token[2:].partition("=")
        raw = attached if separator else None
        state.index += 1
        option = self.table.find_long(name)
        if option is None:
            return self._error(self._unknown_long_error(name, token))
        if raw is None:
            raw = self._take_argument(option)
        return self._apply(option, raw)

    def _step_cluster(self) -> ParseResult:
        state = self.state
        token = self.argv[state.index]
        offset = state.cluster_offset
        char = token[offset]
        rest = token[offset + 1 :]
        option = self.table.find_short(char)

        takes_rest = option is not None and (
            option.takes_argument or option.action == OptionAction.CALL_PARSE
        )
        if rest and not takes_rest:
            state.cluster_offset = offset + 1
        else:
            state.cluster_offset = 0
            state.index += 1

        if option is None:
            return self._error(
                UnknownOptionError(
                    f"unrecognized option '-{char}' at position {offset} in '{token}'",
                    token,
                )
            )
        raw: str | None = None
        if takes_rest and rest:
            raw = rest
        elif option.takes_argument:
            raw = self._take_argument(option)
        return self._apply(option, raw)

    def _take_argument(self, option: Option) -> str | None:
        """Take the token after a required-argument option as its argument."""
        state = self.state
        if option.arity != Arity.REQUIRED or state.index >= len(self.argv):
            return None
        token = self.argv[state.index]
        if self.settings.strict_option_arguments and self._names_option(token):
            logger.debug(
                "[%s] Refusing '%s' as the argument of '%s'",
                self.prog,
                token,
                option.display_name,
            )
            return None
        state.index += 1
        return token

    def _names_option(self, token: str) -> bool:
        if token == "--":
            return True
        if token.startswith("--"):
            return self.table.find_long(token[2:].partition("=")[0]) is not None
        if token.startswith("-") and len(token) > 1:
            return self.table.find_short(token[1]) is not None
        return False

    def _unknown_long_error(self, name: str, token: str) -> UnknownOptionError:
        candidates = [
            f"--{option.long_name}"
            for option in self.table.options
            if option.long_name and name and option.long_name.startswith(name)
        ]
        if candidates:
            return UnknownOptionError(
                f"unrecognized option '--{name}'. Did you mean one of: "
                f"{', '.join(candidates)}?",
                token,
            )
        return UnknownOptionError(f"unrecognized option '--{name}'", token)

    def _apply(self, option: Option, raw: str | None) -> ParseResult:
        cursor = None
        if option.action == OptionAction.CALL_PARSE:
            cursor = ArgCursor(self.state.index)
        try:
            values = bind(option, raw)
            dispatch(option, values, self.values, self.argv, cursor)
        except OptionError as error:
            return self._error(error)
        if cursor is not None:
            self.state.index = cursor.index
        logger.debug("[%s] Matched '%s'", self.prog, option.display_name)
        return ParseResult(ParseStatus.MATCH, option=option)

    def _error(self, error: OptionError) -> ParseResult:
        state = self.state
        state.errors.append(error)
        logger.debug("[%s] %s: %s", self.prog, type(error).__name__, error)
        if self.settings.print_errors:
            self.console.print(f"{self.prog}: {error}", markup=False)
        if self.settings.halt_on_error:
            state.halted = True
            if state.in_cluster:
                state.cluster_offset = 0
                state.index += 1
            state.operands.extend(self.argv[state.index :])
            state.index = len(self.argv)
            self._finish()
        return ParseResult(ParseStatus.ERROR, error=error)

    def _transfer(self, command: Option) -> ParseResult:
        state = self.state
        state.index += 1
        remaining = list(self.argv[state.index :])
        state.index = len(self.argv)
        self._finish()
        logger.debug(
            "[%s] Transferring %d argument(s) to subcommand '%s'",
            self.prog,
            len(remaining),
            command.display_name,
        )
        return ParseResult(ParseStatus.SUBCOMMAND, option=command, argv=remaining)

    def _finish(self) -> None:
        """Compact argv in place so that only the retained operands remain."""
        state = self.state
        if state.finished:
            return
        self.argv[self._base :] = state.operands
        state.finished = True
        logger.debug(
            "[%s] Compacted argument vector to %d operand(s)",
            self.prog,
            len(state.operands),
        )

    def subparser(
        self, result: ParseResult, values: dict[str, Any] | None = None
    ) -> OptionParser:
        """
        Build the parser for the subcommand that `result` transferred to.

        The child parses `result.argv` (which has no program name slot) with
        the same settings, and compacts that list in place.
        """
        if result.status != ParseStatus.SUBCOMMAND or result.option is None:
            raise ArgwalkError("subparser() needs a SUBCOMMAND result")
        command = result.option
        assert command.subcommand is not None, "subcommands always have a table"
        assert result.argv is not None, "subcommand results always carry argv"
        return OptionParser(
            command.subcommand,
            result.argv,
            settings=self.settings,
            values=values,
            prog=f"{self.prog} {command.display_name}",
            program_name=False,
        )

    def parse_args(self) -> dict[str, Any]:
        """
        Drain the session and return the destination values.

        A matched subcommand is parsed with its own child parser; the child's
        values are stored under the subcommand's `dest`.

        Returns:
            dict[str, Any]: The destination values.

        Raises:
            ArgumentParseError: If any option occurrence failed.
        """
        for result in self:
            if result.status == ParseStatus.SUBCOMMAND:
                assert result.option is not None and result.option.dest is not None
                child = self.subparser(result)
                self.values[result.option.dest] = child.values
                try:
                    child.parse_args()
                except ArgumentParseError as error:
                    self.state.errors.extend(error.errors)
        if self.state.errors:
            raise ArgumentParseError(list(self.state.errors))
        return self.values

    def help_init(self, header: str | None = None, footer: str | None = None) -> None:
        """Register text printed before and after the option list."""
        self._help_header = header
        self._help_footer = footer

    def get_help_formatter(self) -> HelpFormatter:
        return HelpFormatter(
            self.table,
            settings=self.settings,
            header=self._help_header,
            footer=self._help_footer,
        )

    def format_help(self) -> str:
        return self.get_help_formatter().format_help()

    def print_help(self, console: Console | None = None) -> None:
        self.get_help_formatter().print_help(console)

    def __str__(self) -> str:
        return (
            f"OptionParser(prog={self.prog!r}, index={self.state.index}, "
            f"operands={len(self.state.operands)}, errors={len(self.state.errors)}, "
            f"finished={self.state.finished})"
        )

    def __repr__(self) -> str:
        return str(self)
