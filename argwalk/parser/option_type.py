# Argwalk CLI Parsing Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `OptionType`, the conversion target for option-arguments.

`STR` passes text through unchanged. `CHAR` requires exactly one character.
The integer and floating families convert to Python `int` and `float` and
reject values outside the limits of the C type they are named after
(LP64 sizes).

Example:
    OptionType("int")   → OptionType.INT
    OptionType(float)   → OptionType.DBL
    OptionType.UCHAR.limits → (0, 255)
"""
from __future__ import annotations

import sys
from enum import Enum

FLT_MAX = 3.4028234663852886e38


def _signed(bits: int) -> tuple[int, int]:
    return -(2 ** (bits - 1)), 2 ** (bits - 1) - 1


def _unsigned(bits: int) -> tuple[int, int]:
    return 0, 2**bits - 1


class OptionType(Enum):
    """
    Data type an option-argument is converted to.

    Members:
        STR: No conversion (default).
        CHAR: A single character.
        SCHAR, UCHAR, SHRT, USHRT, INT, UINT, LONG, ULONG, LLONG, ULLONG:
            Integers bounded by the matching C type.
        FLT, DBL, LDBL: Floating point numbers.
    """

    STR = "str"
    CHAR = "char"
    SCHAR = "schar"
    UCHAR = "uchar"
    SHRT = "short"
    USHRT = "ushort"
    INT = "int"
    UINT = "uint"
    LONG = "long"
    ULONG = "ulong"
    LLONG = "llong"
    ULLONG = "ullong"
    FLT = "float"
    DBL = "double"
    LDBL = "ldouble"

    @classmethod
    def _missing_(cls, value: object) -> OptionType:
        builtin = {str: "str", int: "int", float: "double"}
        if isinstance(value, type) and value in builtin:
            return cls(builtin[value])
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        aliases = {"string": "str", "shrt": "short", "ushrt": "ushort", "flt": "float"}
        normalized = aliases.get(normalized, normalized)
        for member in cls:
            if member.value == normalized or member.name.lower() == normalized:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    @property
    def is_integer(self) -> bool:
        return self in _INTEGER_LIMITS

    @property
    def is_float(self) -> bool:
        return self in (OptionType.FLT, OptionType.DBL, OptionType.LDBL)

    @property
    def is_numeric(self) -> bool:
        return self.is_integer or self.is_float

    @property
    def is_unsigned(self) -> bool:
        return self in (
            OptionType.UCHAR,
            OptionType.USHRT,
            OptionType.UINT,
            OptionType.ULONG,
            OptionType.ULLONG,
        )

    @property
    def limits(self) -> tuple[float, float] | None:
        """Return the (lowest, highest) value the type can hold, if bounded."""
        if self.is_integer:
            return _INTEGER_LIMITS[self]
        if self is OptionType.FLT:
            return -FLT_MAX, FLT_MAX
        if self.is_float:
            return -sys.float_info.max, sys.float_info.max
        return None

    def __str__(self) -> str:
        return self.value


_INTEGER_LIMITS: dict[OptionType, tuple[int, int]] = {
    OptionType.SCHAR: _signed(8),
    OptionType.UCHAR: _unsigned(8),
    OptionType.SHRT: _signed(16),
    OptionType.USHRT: _unsigned(16),
    OptionType.INT: _signed(32),
    OptionType.UINT: _unsigned(32),
    OptionType.LONG: _signed(64),
    OptionType.ULONG: _unsigned(64),
    OptionType.LLONG: _signed(64),
    OptionType.ULLONG: _unsigned(64),
}
