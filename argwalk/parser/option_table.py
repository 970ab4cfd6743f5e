# Argwalk CLI Parsing Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `OptionTable`, the ordered set of `Option` descriptors a parser
matches against.

Insertion order is the order options appear in help output; matching is by
name only. A subcommand is an `Option` that owns (by reference) a child
`OptionTable`, so tables nest to describe command trees.

Names are checked for uniqueness as options are registered. `validate()`
performs the full consistency check of every descriptor (names, arity versus
action, bounds, callbacks) and recurses into subcommand tables; parsers run it
on construction unless `ParserSettings.validate_table` is disabled.

Example:
    table = OptionTable()
    table.add_option("f", "set-flag", action="set_true", description="Set a flag.")
    table.add_option("s", "set-string", action="store", arg="ARG")
    table.add_subcommand("sub", OptionTable(), description="Run a sub task.")
"""
from __future__ import annotations

from typing import Any, Iterable, Iterator

from argwalk.exceptions import OptionTableError
from argwalk.parser.callbacks import Callback
from argwalk.parser.option import Arity, Option
from argwalk.parser.option_action import OptionAction
from argwalk.parser.option_type import OptionType


class OptionTable:
    """
    Ordered collection of options and subcommands.

    The engine only reads a table. It is safe to share one table between
    parsers running on different threads.
    """

    def __init__(self, options: Iterable[Option] | None = None) -> None:
        self._options: list[Option] = []
        self._short_map: dict[str, Option] = {}
        self._long_map: dict[str, Option] = {}
        self._command_map: dict[str, Option] = {}
        for option in options or ():
            self.register(option)

    def register(self, option: Option) -> Option:
        """Add an already built `Option`, checking its names are unique."""
        if not isinstance(option, Option):
            raise OptionTableError(f"Expected an Option, got {type(option).__name__}")
        if not option.short_name and not option.long_name:
            raise OptionTableError("Option must have a short name or a long name")

        names = self._command_map if option.is_subcommand else None
        if option.short_name:
            target = names if names is not None else self._short_map
            if option.short_name in target:
                existing = target[option.short_name]
                raise OptionTableError(
                    f"Short name '{option.short_name}' is already used by "
                    f"'{existing.display_name}'"
                )
        if option.long_name:
            target = names if names is not None else self._long_map
            if option.long_name in target:
                existing = target[option.long_name]
                raise OptionTableError(
                    f"Long name '{option.long_name}' is already used by "
                    f"'{existing.display_name}'"
                )

        if option.is_subcommand:
            for name in (option.short_name, option.long_name):
                if name:
                    self._command_map[name] = option
        else:
            if option.short_name:
                self._short_map[option.short_name] = option
            if option.long_name:
                self._long_map[option.long_name] = option
        self._options.append(option)
        return option

    def add_option(
        self,
        short_name: str | None = None,
        long_name: str | None = None,
        action: str | OptionAction = OptionAction.SET_TRUE,
        *,
        dest: str | None = None,
        callback: Callback | None = None,
        arg: str = "",
        arity: int | Arity | None = None,
        type: str | OptionType | type = OptionType.STR,
        min: float | None = None,
        max: float | None = None,
        description: str = "",
        length_dest: str | None = None,
        list_delim: str | None = None,
        list_len_min: int = 0,
        list_len_max: int = 0,
        capacity: int | None = None,
        default: Any = None,
    ) -> Option:
        """
        Define a new option.

        Args:
            short_name (str | None): Single character, e.g. "v" for `-v`.
            long_name (str | None): Long name, e.g. "verbose" for `--verbose`.
            action (str | OptionAction): Action applied on match.
            dest (str | None): Destination key; derived from the names if omitted
                (`--dry-run` gives `dry_run`, `-1` gives `_1`).
            callback (Callback | None): Callback for the call actions.
            arg (str): Option-argument placeholder for help output.
            arity (int | Arity | None): -1 optional, 0 none, 1 required.
            type (str | OptionType | type): Conversion target.
            min (float | None): Minimum length (STR) or value (numeric).
            max (float | None): Maximum length (STR, 0 = unbounded) or value.
            description (str): Help text; `SUPPRESS_HELP` hides the option.
            length_dest (str | None): Counter slot for stored/appended values.
            list_delim (str | None): Characters splitting the argument into a list.
            list_len_min (int): Minimum number of list items.
            list_len_max (int): Maximum number of list items (0 = unbounded).
            capacity (int | None): Maximum length of an APPEND destination.
            default (Any): Value bound when an optional argument is absent.

        Returns:
            Option: The registered option.
        """
        try:
            option = Option(
                short_name=short_name,
                long_name=long_name,
                action=action,
                dest=dest,
                callback=callback,
                arg=arg,
                arity=arity,
                type=type,
                min=min,
                max=max,
                description=description,
                length_dest=length_dest,
                list_delim=list_delim,
                list_len_min=list_len_min,
                list_len_max=list_len_max,
                capacity=capacity,
                default=default,
            )
        except ValueError as error:
            raise OptionTableError(str(error)) from error
        return self.register(option)

    def add_subcommand(
        self,
        name: str,
        table: OptionTable,
        *,
        short_name: str | None = None,
        dest: str | None = None,
        description: str = "",
    ) -> Option:
        """
        Define a subcommand that hands the remaining arguments to `table`.

        Args:
            name (str): The word that selects the subcommand.
            table (OptionTable): The child option table.
            short_name (str | None): Optional single-character alias.
            dest (str | None): Destination key for the child's values.
            description (str): Help text.

        Returns:
            Option: The registered subcommand descriptor.
        """
        option = Option(
            short_name=short_name,
            long_name=name,
            dest=dest,
            description=description,
            subcommand=table,
        )
        return self.register(option)

    def find_short(self, name: str) -> Option | None:
        return self._short_map.get(name)

    def find_long(self, name: str) -> Option | None:
        return self._long_map.get(name)

    def find_command(self, name: str) -> Option | None:
        return self._command_map.get(name)

    @property
    def options(self) -> list[Option]:
        """All non-subcommand options in insertion order."""
        return [option for option in self._options if not option.is_subcommand]

    @property
    def subcommands(self) -> list[Option]:
        return [option for option in self._options if option.is_subcommand]

    def validate(self) -> None:
        """
        Check every descriptor for consistency.

        Raises:
            OptionTableError: On the first invalid descriptor.
        """
        dest_actions: dict[str, OptionAction] = {}
        for option in self._options:
            self._validate_names(option)
            if option.is_subcommand:
                if not isinstance(option.subcommand, OptionTable):
                    raise OptionTableError(
                        f"Subcommand '{option.display_name}' must reference an "
                        "OptionTable"
                    )
                option.subcommand.validate()
                continue
            self._validate_arity(option)
            self._validate_callback(option)
            self._validate_bounds(option)
            self._validate_list(option)
            if not option.action.is_call:
                self._validate_dest(option, dest_actions)

    def _validate_names(self, option: Option) -> None:
        if option.short_name is not None:
            if (
                not isinstance(option.short_name, str)
                or len(option.short_name) != 1
                or option.short_name == "-"
                or option.short_name.isspace()
            ):
                raise OptionTableError(
                    f"Short name {option.short_name!r} must be a single character "
                    "other than '-'"
                )
        if option.long_name is not None:
            if not isinstance(option.long_name, str) or not option.long_name:
                raise OptionTableError("Long name must be a non-empty string")
            if option.long_name.startswith("-"):
                raise OptionTableError(
                    f"Long name '{option.long_name}' must not start with '-'"
                )
            if "=" in option.long_name or any(c.isspace() for c in option.long_name):
                raise OptionTableError(
                    f"Long name '{option.long_name}' must not contain '=' or whitespace"
                )

    def _validate_arity(self, option: Option) -> None:
        action = option.action
        if action.is_flag or action in (
            OptionAction.CALL_VOID,
            OptionAction.CALL_PARSE,
        ):
            if option.arity != Arity.NONE:
                raise OptionTableError(
                    f"Option '{option.display_name}' with action {action} cannot "
                    "take an argument"
                )
        elif option.arity == Arity.NONE:
            raise OptionTableError(
                f"Option '{option.display_name}' with action {action} requires an "
                "argument (arity 1 or -1)"
            )

    def _validate_callback(self, option: Option) -> None:
        if option.action.is_call:
            if option.callback is None or not callable(option.callback):
                raise OptionTableError(
                    f"Option '{option.display_name}' with action {option.action} "
                    "needs a callable callback"
                )
        elif option.callback is not None:
            raise OptionTableError(
                f"callback should not be provided for action {option.action}"
            )

    def _validate_bounds(self, option: Option) -> None:
        if option.min is not None and option.max is not None:
            unbounded_length = option.type is OptionType.STR and option.max == 0
            if not unbounded_length and option.min > option.max:
                raise OptionTableError(
                    f"Option '{option.display_name}': min ({option.min}) is greater "
                    f"than max ({option.max})"
                )
        if option.type is OptionType.STR:
            for bound in (option.min, option.max):
                if bound is not None and bound < 0:
                    raise OptionTableError(
                        f"Option '{option.display_name}': string length bounds "
                        "cannot be negative"
                    )
        if option.capacity is not None:
            if option.action != OptionAction.APPEND:
                raise OptionTableError(
                    f"Option '{option.display_name}': capacity only applies to "
                    "append actions"
                )
            if option.capacity < 1:
                raise OptionTableError(
                    f"Option '{option.display_name}': capacity must be at least 1"
                )

    def _validate_list(self, option: Option) -> None:
        if option.list_delim is not None and not option.list_delim:
            raise OptionTableError(
                f"Option '{option.display_name}': list_delim cannot be empty"
            )
        if option.list_len_min < 0 or option.list_len_max < 0:
            raise OptionTableError(
                f"Option '{option.display_name}': list bounds cannot be negative"
            )
        if option.list_len_max and option.list_len_min > option.list_len_max:
            raise OptionTableError(
                f"Option '{option.display_name}': list_len_min "
                f"({option.list_len_min}) is greater than list_len_max "
                f"({option.list_len_max})"
            )
        if (option.list_len_min or option.list_len_max) and not option.list_delim:
            raise OptionTableError(
                f"Option '{option.display_name}': list bounds require list_delim"
            )

    def _validate_dest(
        self, option: Option, dest_actions: dict[str, OptionAction]
    ) -> None:
        if not option.dest or not option.dest.isidentifier():
            raise OptionTableError(
                f"dest {option.dest!r} must be a valid identifier (letters, digits, "
                "and underscores only)"
            )
        existing = dest_actions.get(option.dest)
        if existing is not None and existing != option.action:
            if OptionAction.APPEND in (existing, option.action):
                raise OptionTableError(
                    f"Destination '{option.dest}' cannot be shared by {existing} "
                    f"and {option.action} actions"
                )
        dest_actions.setdefault(option.dest, option.action)
        if option.length_dest is not None and not option.length_dest.isidentifier():
            raise OptionTableError(
                f"length_dest {option.length_dest!r} must be a valid identifier"
            )

    def __iter__(self) -> Iterator[Option]:
        return iter(self._options)

    def __len__(self) -> int:
        return len(self._options)

    def __str__(self) -> str:
        return (
            f"OptionTable(options={len(self.options)}, "
            f"subcommands={len(self.subcommands)})"
        )

    def __repr__(self) -> str:
        return str(self)
