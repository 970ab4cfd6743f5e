# Argwalk CLI Parsing Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Callback variants for the call actions.

Each call action invokes its callback with one fixed signature:

- `OptionAction.CALL`: `ValueCallback(value)`, or `ListCallback(count, values)`
  when the option splits its argument with `list_delim`.
- `OptionAction.CALL_RAW`: `RawCallback(text)` with the option-argument as
  typed, never split or converted. An absent optional argument passes the
  option's `default`.
- `OptionAction.CALL_VOID`: `VoidCallback()`.
- `OptionAction.CALL_PARSE`: `ParseCallback(argv, cursor)`. The callback reads
  option-arguments from `argv` starting at `cursor.index` and advances the
  index past everything it consumes.

Return values are ignored. Raising an `Exception` fails the option occurrence;
raising a `FlowSignal` ends the caller's parse loop.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, Sequence, Union


class ValueCallback(Protocol):
    def __call__(self, value: Any) -> Any: ...


class ListCallback(Protocol):
    def __call__(self, count: int, values: list[Any]) -> Any: ...


class RawCallback(Protocol):
    def __call__(self, text: Any) -> Any: ...


class VoidCallback(Protocol):
    def __call__(self) -> Any: ...


@dataclass
class ArgCursor:
    """Index into the argument vector, shared with a `ParseCallback`."""

    index: int

    def take(self, argv: Sequence[str], count: int = 1) -> list[str]:
        """Consume up to `count` tokens from `argv` and return them."""
        taken = list(argv[self.index : self.index + count])
        self.index += len(taken)
        return taken


class ParseCallback(Protocol):
    def __call__(self, argv: tuple[str, ...], cursor: ArgCursor) -> Any: ...


Callback = Union[
    ValueCallback, ListCallback, RawCallback, VoidCallback, ParseCallback
]
