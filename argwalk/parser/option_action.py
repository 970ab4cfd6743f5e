# Argwalk CLI Parsing Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `OptionAction`, an enum selecting what the engine does when an
option is matched.

Actions fall into three families:
- flag actions mutate a destination without using an option-argument
- store actions write converted option-arguments into a destination
- call actions hand control to a caller-registered callback

Supports alias coercion for shorthand or config-friendly values.

Example:
    OptionAction("store")  → OptionAction.STORE
    OptionAction("true")   → OptionAction.SET_TRUE (via alias)
    OptionAction("parse")  → OptionAction.CALL_PARSE (via alias)
"""
from __future__ import annotations

from enum import Enum


class OptionAction(Enum):
    """
    Defines the action to be taken when an option is encountered.

    Members:
        SET_TRUE: Set the destination to `True`.
        SET_FALSE: Set the destination to `False`.
        TOGGLE: Flip the destination between `False` and `True`.
        INCREMENT: Add one to the destination.
        DECREMENT: Subtract one from the destination.
        STORE: Overwrite the destination with the converted value.
        APPEND: Append the converted value(s) to the destination list.
        CALL: Call the callback with the converted value(s).
        CALL_RAW: Call the callback with the unconverted option-argument text.
        CALL_VOID: Call the callback without arguments.
        CALL_PARSE: Call the callback with the argument vector and a cursor,
            letting it consume option-arguments itself.

    Aliases:
        - "true" → "set_true"
        - "false" → "set_false"
        - "count" / "inc" → "increment"
        - "dec" → "decrement"
        - "raw" → "call_raw"
        - "void" → "call_void"
        - "parse" → "call_parse"
    """

    SET_TRUE = "set_true"
    SET_FALSE = "set_false"
    TOGGLE = "toggle"
    INCREMENT = "increment"
    DECREMENT = "decrement"
    STORE = "store"
    APPEND = "append"
    CALL = "call"
    CALL_RAW = "call_raw"
    CALL_VOID = "call_void"
    CALL_PARSE = "call_parse"

    @classmethod
    def choices(cls) -> list[OptionAction]:
        """Return a list of all option actions."""
        return list(cls)

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "true": "set_true",
            "false": "set_false",
            "count": "increment",
            "inc": "increment",
            "dec": "decrement",
            "raw": "call_raw",
            "void": "call_void",
            "parse": "call_parse",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> OptionAction:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower().replace("-", "_")
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    @property
    def is_flag(self) -> bool:
        return self in (
            OptionAction.SET_TRUE,
            OptionAction.SET_FALSE,
            OptionAction.TOGGLE,
            OptionAction.INCREMENT,
            OptionAction.DECREMENT,
        )

    @property
    def is_store(self) -> bool:
        return self in (OptionAction.STORE, OptionAction.APPEND)

    @property
    def is_call(self) -> bool:
        return self in (
            OptionAction.CALL,
            OptionAction.CALL_RAW,
            OptionAction.CALL_VOID,
            OptionAction.CALL_PARSE,
        )

    def __str__(self) -> str:
        """Return the string representation of the option action."""
        return self.value
