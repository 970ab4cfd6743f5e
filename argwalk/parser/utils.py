# Argwalk CLI Parsing Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Value conversion and list splitting utilities for argwalk argument binding.

Functions:
- convert_value: Convert option-argument text to the value of an `OptionType`.
- split_list: Split option-argument text on any of a set of delimiter characters.
- describe_type: Human readable name of an `OptionType` for diagnostics.

Conversion is strict: integers are plain decimal digits with an optional sign,
floats use the usual decimal/exponent notation (plus `inf` and `nan`), and no
surrounding whitespace or digit separators are accepted.
"""
import math
import re
from typing import Any

from argwalk.parser.option_type import OptionType

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(
    r"[+-]?(?:(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
    r"|inf|infinity|nan)",
    re.IGNORECASE,
)

_TYPE_NAMES = {
    OptionType.STR: "string",
    OptionType.CHAR: "character",
    OptionType.SCHAR: "signed char",
    OptionType.UCHAR: "unsigned char",
    OptionType.SHRT: "short",
    OptionType.USHRT: "unsigned short",
    OptionType.INT: "integer",
    OptionType.UINT: "unsigned integer",
    OptionType.LONG: "long",
    OptionType.ULONG: "unsigned long",
    OptionType.LLONG: "long long",
    OptionType.ULLONG: "unsigned long long",
    OptionType.FLT: "float",
    OptionType.DBL: "double",
    OptionType.LDBL: "long double",
}


def describe_type(option_type: OptionType) -> str:
    return _TYPE_NAMES[option_type]


def _convert_integer(value: str, option_type: OptionType) -> int:
    if not _INTEGER_RE.fullmatch(value):
        raise ValueError(f"'{value}' is not a valid {describe_type(option_type)}")
    number = int(value, 10)
    limits = option_type.limits
    assert limits is not None, "integer types are always bounded"
    lowest, highest = limits
    if not lowest <= number <= highest:
        raise ValueError(
            f"'{value}' is out of range for {describe_type(option_type)} "
            f"({int(lowest)} to {int(highest)})"
        )
    return number


def _convert_float(value: str, option_type: OptionType) -> float:
    if not _FLOAT_RE.fullmatch(value):
        raise ValueError(f"'{value}' is not a valid {describe_type(option_type)}")
    number = float(value)
    limits = option_type.limits
    assert limits is not None, "float types are always bounded"
    if math.isfinite(number) and not limits[0] <= number <= limits[1]:
        raise ValueError(f"'{value}' is out of range for {describe_type(option_type)}")
    if math.isinf(number) and "inf" not in value.lower():
        raise ValueError(f"'{value}' is out of range for {describe_type(option_type)}")
    return number


def convert_value(value: str, option_type: OptionType) -> Any:
    """
    Convert option-argument text to the given `OptionType`.

    Args:
        value (str): The raw option-argument text.
        option_type (OptionType): The conversion target.

    Returns:
        Any: `str` for STR and CHAR, `int` for the integer family, `float` for
        the floating family.

    Raises:
        ValueError: If the text is malformed or outside the type's limits.
    """
    if option_type is OptionType.STR:
        return value
    if option_type is OptionType.CHAR:
        if len(value) != 1:
            raise ValueError(f"'{value}' is not a single character")
        return value
    if option_type.is_integer:
        return _convert_integer(value, option_type)
    if option_type.is_float:
        return _convert_float(value, option_type)
    raise ValueError(f"Unsupported option type: {option_type}")


def split_list(value: str, delimiters: str) -> list[str]:
    """
    Split `value` on any character in `delimiters`.

    Empty items (from leading, trailing or repeated delimiters) are dropped.

    Example:
        split_list("a,b;;c", ",;") → ["a", "b", "c"]
    """
    pattern = "[" + re.escape(delimiters) + "]"
    return [item for item in re.split(pattern, value) if item]
