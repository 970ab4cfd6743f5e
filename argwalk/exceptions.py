# Argwalk CLI Parsing Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by argwalk.

Exceptions split into two families: `OptionTableError` for mistakes in an
option table definition (raised when a table or parser is built), and
`OptionError` for problems found while walking an argument vector.

All exceptions inherit from `ArgwalkError`, the base exception for the package.

Exception Hierarchy:
- ArgwalkError
    ├── OptionTableError
    ├── SettingsError
    ├── ArgumentParseError
    └── OptionError
        ├── UnknownOptionError
        ├── MissingArgumentError
        ├── UnexpectedArgumentError
        ├── ConversionError
        ├── RangeError
        ├── ListLengthError
        ├── CapacityError
        └── CallbackError

`OptionError`s are reported per option occurrence and never retried.
`ArgumentParseError` is raised once per failed session by
`OptionParser.parse_args()` and carries every `OptionError` collected.
"""
from __future__ import annotations


class ArgwalkError(Exception):
    """Base exception for argwalk."""


class OptionTableError(ArgwalkError):
    """Exception raised when an option table definition is invalid."""


class SettingsError(ArgwalkError):
    """Exception raised when parser settings cannot be loaded."""


class OptionError(ArgwalkError):
    """Exception raised when an argument vector cannot be parsed."""

    def __init__(self, message: str, token: str | None = None) -> None:
        super().__init__(message)
        self.token = token


class UnknownOptionError(OptionError):
    """Exception raised for an unrecognized short or long option."""


class MissingArgumentError(OptionError):
    """Exception raised when a required option-argument is absent."""


class UnexpectedArgumentError(OptionError):
    """Exception raised when a no-argument option is given an argument."""


class ConversionError(OptionError):
    """Exception raised when an option-argument cannot be converted to its type."""


class RangeError(OptionError):
    """Exception raised when a value or its length violates the option's bounds."""


class ListLengthError(OptionError):
    """Exception raised when a delimited list has too few or too many items."""


class CapacityError(OptionError):
    """Exception raised when an append would overflow the destination's capacity."""


class CallbackError(OptionError):
    """Exception raised when an option callback fails."""


class ArgumentParseError(ArgwalkError):
    """Exception raised when a parse session ends with one or more errors."""

    def __init__(self, errors: list[OptionError]) -> None:
        self.errors = errors
        if len(errors) == 1:
            message = str(errors[0])
        else:
            message = f"{len(errors)} errors: " + "; ".join(str(e) for e in errors)
        super().__init__(message)
