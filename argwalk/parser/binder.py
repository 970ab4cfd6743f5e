# Argwalk CLI Parsing Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Binds the raw option-argument text of one option occurrence to its values.

`bind()` applies, in order: arity checks, list splitting, type conversion,
length/range bounds and list-count bounds. It has no side effects; the
dispatcher only writes values that made it through every check.
"""
from __future__ import annotations

from typing import Any

from argwalk.exceptions import (
    ConversionError,
    ListLengthError,
    MissingArgumentError,
    RangeError,
    UnexpectedArgumentError,
)
from argwalk.parser.option import Arity, Option
from argwalk.parser.option_action import OptionAction
from argwalk.parser.option_type import OptionType
from argwalk.parser.utils import convert_value, describe_type, split_list


def _format_bound(bound: float) -> str:
    if isinstance(bound, float) and bound.is_integer():
        return str(int(bound))
    return str(bound)


def check_bounds(option: Option, value: Any, raw: str) -> None:
    """
    Check one converted value against the option's `min`/`max`.

    For `STR` the bounds apply to the length of the text and a `max` of 0 means
    unbounded. For `CHAR` they apply to the code point, and for numeric types
    to the value itself.

    Raises:
        RangeError: If the value violates a bound.
    """
    name = option.display_name
    if option.type is OptionType.STR:
        length = len(value)
        if option.min is not None and length < option.min:
            raise RangeError(
                f"option '{name}': '{raw}' is shorter than "
                f"{_format_bound(option.min)} characters",
                raw,
            )
        if option.max and length > option.max:
            raise RangeError(
                f"option '{name}': '{raw}' is longer than "
                f"{_format_bound(option.max)} characters",
                raw,
            )
        return

    number = ord(value) if option.type is OptionType.CHAR else value
    if option.min is not None and number < option.min:
        raise RangeError(
            f"option '{name}': {raw} is less than the minimum of "
            f"{_format_bound(option.min)}",
            raw,
        )
    if option.max is not None and number > option.max:
        raise RangeError(
            f"option '{name}': {raw} is greater than the maximum of "
            f"{_format_bound(option.max)}",
            raw,
        )


def check_list_length(option: Option, count: int, raw: str) -> None:
    """Check the number of list items against `list_len_min`/`list_len_max`."""
    name = option.display_name
    if count < option.list_len_min:
        raise ListLengthError(
            f"option '{name}': expected at least {option.list_len_min} list "
            f"items, got {count}",
            raw,
        )
    if option.list_len_max and count > option.list_len_max:
        raise ListLengthError(
            f"option '{name}': expected at most {option.list_len_max} list "
            f"items, got {count}",
            raw,
        )


def bind(option: Option, raw: str | None) -> list[Any]:
    """
    Produce the values of one option occurrence.

    Args:
        option (Option): The matched option.
        raw (str | None): Attached or following option-argument text, or None
            if no argument was given.

    Returns:
        list[Any]: Zero values for no-argument options, `[option.default]` for
        an absent optional argument, the text itself for CALL_RAW, otherwise
        the converted value(s).

    Raises:
        UnexpectedArgumentError: Text given to a no-argument option.
        MissingArgumentError: No text for a required argument.
        ConversionError: An item cannot be converted to the option's type.
        RangeError: An item violates `min`/`max`.
        ListLengthError: The item count violates the list bounds.
    """
    name = option.display_name
    if option.arity == Arity.NONE:
        if raw is not None:
            raise UnexpectedArgumentError(
                f"option '{name}' takes no argument (got '{raw}')", raw
            )
        return []

    if raw is None:
        if option.arity == Arity.OPTIONAL:
            return [option.default]
        raise MissingArgumentError(f"option '{name}' requires an argument")

    if option.action == OptionAction.CALL_RAW:
        return [raw]

    items = split_list(raw, option.list_delim) if option.list_delim else [raw]

    values = []
    for item in items:
        try:
            value = convert_value(item, option.type)
        except ValueError as error:
            raise ConversionError(
                f"option '{name}': invalid {describe_type(option.type)} value: "
                f"{error}",
                item,
            ) from error
        check_bounds(option, value, item)
        values.append(value)

    if option.list_delim:
        check_list_length(option, len(values), raw)
    return values
