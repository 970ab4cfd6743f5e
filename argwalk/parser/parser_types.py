# Argwalk CLI Parsing Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
State and result models for `OptionParser`.

Contents:
- `ParseStatus`: What a single `OptionParser.step()` produced.
- `ParseResult`: The status plus the matched option, error, or the argument
  vector handed to a subcommand.
- `ParseState`: Cursor and bookkeeping of one parse session. Every parser owns
  its own state, so independent sessions never share mutable data.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from argwalk.exceptions import OptionError
from argwalk.parser.option import Option


class ParseStatus(IntEnum):
    """Outcome of one parse step. `DONE` is 0 so it is falsy."""

    DONE = 0
    ERROR = 1
    MATCH = 2
    STDIO = 3
    SUBCOMMAND = 4


@dataclass(frozen=True)
class ParseResult:
    """Result of one parse step."""

    status: ParseStatus
    option: Option | None = None
    error: OptionError | None = None
    argv: list[str] | None = None

    @property
    def identity(self) -> str | None:
        """Identity of the matched option, `-` for the stdio marker."""
        if self.status == ParseStatus.STDIO:
            return "-"
        if self.option is not None:
            return self.option.identity
        return None

    def __bool__(self) -> bool:
        return self.status != ParseStatus.DONE


@dataclass
class ParseState:
    """Tracks the position of a parse session in its argument vector."""

    index: int
    cluster_offset: int = 0
    end_of_options: bool = False
    operand_seen: bool = False
    operands: list[str] = field(default_factory=list)
    errors: list[OptionError] = field(default_factory=list)
    halted: bool = False
    finished: bool = False

    @property
    def in_cluster(self) -> bool:
        return self.cluster_offset > 0

    @property
    def failed(self) -> bool:
        return bool(self.errors)
