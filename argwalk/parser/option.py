# Argwalk CLI Parsing Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `Option` dataclass, the declarative descriptor of one recognized
option or subcommand.

Each `Option` names the option (short and/or long form), selects the action
applied when it is matched, and describes how its option-argument is bound:
arity, type conversion, bounds, list splitting, and where the result goes.

Key Attributes:
- `short_name` / `long_name`: `-s` and `--long` forms (either may be None)
- `action`: `OptionAction` applied on match
- `dest`: Key of the destination slot in the parse values
- `arity`: `Arity.NONE`, `Arity.REQUIRED` or `Arity.OPTIONAL`
- `type`: `OptionType` conversion target
- `min` / `max`: Length bounds for `STR`, value bounds otherwise
- `list_delim`: Characters that split one argument into a list
- `subcommand`: Child `OptionTable`; turns the option into a subcommand

Options are normally created through `OptionTable.add_option()` and
`OptionTable.add_subcommand()`, which also validate them.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING, Any

from argwalk.parser.callbacks import Callback
from argwalk.parser.option_action import OptionAction
from argwalk.parser.option_type import OptionType

if TYPE_CHECKING:
    from argwalk.parser.option_table import OptionTable

SUPPRESS_HELP = "==SUPPRESS=="


class Arity(IntEnum):
    """Number of option-arguments an option takes."""

    OPTIONAL = -1
    NONE = 0
    REQUIRED = 1


@dataclass
class Option:
    """
    Represents one command-line option or subcommand.

    Attributes:
        short_name (str | None): Single-character short name, without the dash.
        long_name (str | None): Long name, without the leading `--`.
        action (OptionAction): What to do when the option is matched.
        dest (str | None): Destination key. Derived from the names if omitted.
        callback (Callback | None): Callback used by the call actions.
        arg (str): Placeholder for the option-argument in help output.
        arity (Arity | None): Argument count. Derived from the action if omitted.
        type (OptionType): Conversion target of the option-argument.
        min (float | None): Minimum string length, or minimum numeric value.
        max (float | None): Maximum string length (0 = unbounded), or maximum
            numeric value.
        description (str): Help text. `SUPPRESS_HELP` hides the option.
        length_dest (str | None): Counter incremented by the number of stored
            or appended values.
        list_delim (str | None): Characters separating list items.
        list_len_min (int): Minimum number of list items.
        list_len_max (int): Maximum number of list items (0 = unbounded).
        capacity (int | None): Maximum length of an APPEND destination.
        default (Any): Value bound when an optional argument is absent.
        subcommand (OptionTable | None): Child table of a subcommand.
    """

    short_name: str | None = None
    long_name: str | None = None
    action: OptionAction = OptionAction.SET_TRUE
    dest: str | None = None
    callback: Callback | None = None
    arg: str = ""
    arity: Arity | None = None
    type: OptionType = OptionType.STR
    min: float | None = None
    max: float | None = None
    description: str = ""
    length_dest: str | None = None
    list_delim: str | None = None
    list_len_min: int = 0
    list_len_max: int = 0
    capacity: int | None = None
    default: Any = None
    subcommand: OptionTable | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.action, OptionAction):
            self.action = OptionAction(self.action)
        if not isinstance(self.type, OptionType):
            self.type = OptionType(self.type)
        if self.arity is None:
            self.arity = self._default_arity()
        elif not isinstance(self.arity, Arity):
            self.arity = Arity(self.arity)
        if self.dest is None:
            self.dest = self._dest_from_names()

    def _default_arity(self) -> Arity:
        if self.subcommand is not None:
            return Arity.NONE
        if self.action in (
            OptionAction.STORE,
            OptionAction.APPEND,
            OptionAction.CALL,
            OptionAction.CALL_RAW,
        ):
            return Arity.REQUIRED
        return Arity.NONE

    def _dest_from_names(self) -> str | None:
        name = self.long_name or self.short_name
        if not name:
            return None
        dest = re.sub(r"\W", "_", name)
        if dest[0].isdigit():
            dest = f"_{dest}"
        return dest

    @property
    def is_subcommand(self) -> bool:
        return self.subcommand is not None

    @property
    def hidden(self) -> bool:
        return self.description == SUPPRESS_HELP

    @property
    def takes_argument(self) -> bool:
        return self.arity != Arity.NONE

    @property
    def identity(self) -> str:
        """Short name if present, otherwise the long name."""
        return self.short_name or self.long_name or ""

    @property
    def display_name(self) -> str:
        """The option as typed on a command line, e.g. `--verbose` or `-v`."""
        if self.is_subcommand:
            return self.long_name or self.short_name or ""
        if self.long_name:
            return f"--{self.long_name}"
        return f"-{self.short_name}"

    def get_flag_text(self) -> str:
        """Get the short and long forms, e.g. `-s, --set-string`."""
        if self.is_subcommand:
            return ", ".join(name for name in (self.short_name, self.long_name) if name)
        flags = []
        if self.short_name:
            flags.append(f"-{self.short_name}")
        if self.long_name:
            flags.append(f"--{self.long_name}")
        return ", ".join(flags)

    def get_arg_text(self) -> str:
        """Get the option-argument placeholder as shown in help."""
        if self.arity == Arity.NONE:
            return self.arg
        placeholder = self.arg or (self.dest or "arg").upper()
        if self.arity == Arity.OPTIONAL:
            return f"[{placeholder}]"
        return placeholder

    def get_help_text(self) -> str:
        """Get the left help column, e.g. `-s, --set-string ARG`."""
        arg_text = self.get_arg_text()
        flag_text = self.get_flag_text()
        if arg_text:
            return f"{flag_text} {arg_text}"
        return flag_text
