# Argwalk CLI Parsing Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Process-wide registration mode.

A convenience API for small programs: register one option table with
`init()`, then call `parse()` on the argument vector. It is a thin wrapper over
`OptionParser` that keeps a single hidden table, settings and value store in
module state.

This mode is NOT thread-safe. The registered table and values are shared by
the whole process; callers using it from several threads must synchronize
externally, or use `OptionParser` directly, which keeps all state per parser.

Typical Usage:
    from argwalk import registry

    registry.init(table)
    registry.help_init("usage: prog [options] FILE...")
    if registry.parse(sys.argv):
        sys.exit(1)
    values = registry.get_values()
"""
from __future__ import annotations

from typing import Any

from rich.console import Console

from argwalk.config import ParserSettings
from argwalk.exceptions import ArgwalkError
from argwalk.logger import logger
from argwalk.parser.help_formatter import HelpFormatter
from argwalk.parser.option_parser import OptionParser
from argwalk.parser.option_table import OptionTable
from argwalk.parser.parser_types import ParseStatus


class _Registry:
    """Holds the single registered table and its session data."""

    def __init__(self) -> None:
        self.table: OptionTable | None = None
        self.settings: ParserSettings = ParserSettings()
        self.values: dict[str, Any] = {}
        self.header: str | None = None
        self.footer: str | None = None

    def require_table(self) -> OptionTable:
        if self.table is None:
            raise ArgwalkError("registry.init() must be called first")
        return self.table


_registry = _Registry()


def init(table: OptionTable, settings: ParserSettings | None = None) -> None:
    """Register `table` as the process-wide option table."""
    if not isinstance(table, OptionTable):
        raise ArgwalkError(f"Expected an OptionTable, got {type(table).__name__}")
    _registry.settings = settings or ParserSettings()
    if _registry.settings.validate_table:
        table.validate()
    _registry.table = table
    _registry.values = {}
    logger.debug("Registered option table %s", table)


def parse(argv: list[str]) -> int:
    """
    Parse `argv` against the registered table and compact it in place.

    A matched subcommand is parsed right away against its child table; its
    values are stored under the subcommand's dest and its operands are
    appended to `argv` after the parent's.

    Returns:
        int: 0 on success, 1 if any option occurrence failed.
    """
    table = _registry.require_table()
    parser = OptionParser(
        table, argv, settings=_registry.settings, values=_registry.values
    )
    return 0 if _drain(parser) else 1


def _drain(parser: OptionParser) -> bool:
    succeeded = True
    for result in parser:
        if result.status == ParseStatus.SUBCOMMAND:
            assert result.option is not None and result.option.dest is not None
            child = parser.subparser(result)
            parser.values[result.option.dest] = child.values
            succeeded = _drain(child) and succeeded
            parser.argv.extend(child.argv)
    return succeeded and not parser.failed


def help_init(header: str | None = None, footer: str | None = None) -> None:
    """Register text printed before and after the options by `print_help()`."""
    _registry.header = header
    _registry.footer = footer


def _formatter() -> HelpFormatter:
    return HelpFormatter(
        _registry.require_table(),
        settings=_registry.settings,
        header=_registry.header,
        footer=_registry.footer,
    )


def format_help() -> str:
    return _formatter().format_help()


def print_help(console: Console | None = None) -> None:
    """Print help for the registered table."""
    _formatter().print_help(console)


def get_values() -> dict[str, Any]:
    """Destination values collected by `parse()`."""
    return _registry.values


def teardown() -> None:
    """Forget the registered table, settings, values and help text."""
    global _registry
    _registry = _Registry()
