# Argwalk CLI Parsing Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Applies the action of a matched option to its bound values.

Flag and store actions write to the destination slots of a parse session (a
plain dict keyed by `Option.dest`). Call actions invoke the option's callback
with the signature selected by the action (see `argwalk.parser.callbacks`).

Every check runs before the first write, so a failed occurrence leaves the
destinations and the length counter as they were.
"""
from __future__ import annotations

from typing import Any, Sequence

from argwalk.exceptions import CallbackError, CapacityError
from argwalk.logger import logger
from argwalk.parser.callbacks import ArgCursor
from argwalk.parser.option import Option
from argwalk.parser.option_action import OptionAction


def initial_value(option: Option) -> Any:
    """Get the value a destination slot starts with before any match."""
    if option.action == OptionAction.SET_TRUE:
        return False
    elif option.action == OptionAction.SET_FALSE:
        return True
    elif option.action == OptionAction.TOGGLE:
        return False
    elif option.action in (OptionAction.INCREMENT, OptionAction.DECREMENT):
        return 0
    elif option.action == OptionAction.APPEND:
        return []
    return None


def _run_callback(option: Option, *args: Any) -> None:
    assert option.callback is not None, "call actions always have a callback"
    try:
        option.callback(*args)
    except Exception as error:
        raise CallbackError(
            f"option '{option.display_name}': callback failed: {error}"
        ) from error


def _call_parse(option: Option, argv: Sequence[str], cursor: ArgCursor) -> None:
    start = cursor.index
    try:
        _run_callback(option, tuple(argv), cursor)
    except CallbackError:
        cursor.index = start
        raise
    if not isinstance(cursor.index, int) or not start <= cursor.index <= len(argv):
        index = cursor.index
        cursor.index = start
        raise CallbackError(
            f"option '{option.display_name}': callback moved the argument index "
            f"to {index}, outside {start}..{len(argv)}"
        )


def dispatch(
    option: Option,
    values: list[Any],
    destinations: dict[str, Any],
    argv: Sequence[str] = (),
    cursor: ArgCursor | None = None,
) -> None:
    """
    Execute `option.action` with the bound `values`.

    Args:
        option (Option): The matched option.
        values (list[Any]): Values produced by `binder.bind()`.
        destinations (dict[str, Any]): Destination slots of the session.
        argv (Sequence[str]): The argument vector, for CALL_PARSE.
        cursor (ArgCursor | None): Index of the next unconsumed token, for
            CALL_PARSE. The callback advances it.

    Raises:
        CapacityError: An append would exceed `option.capacity`.
        CallbackError: The callback raised or misused the cursor.
    """
    action = option.action
    dest = option.dest
    if action.is_flag:
        assert dest is not None, "flag actions always have a dest"
        current = destinations.get(dest)
        if action == OptionAction.SET_TRUE:
            destinations[dest] = True
        elif action == OptionAction.SET_FALSE:
            destinations[dest] = False
        elif action == OptionAction.TOGGLE:
            destinations[dest] = not current
        elif action == OptionAction.INCREMENT:
            destinations[dest] = (current or 0) + 1
        elif action == OptionAction.DECREMENT:
            destinations[dest] = (current or 0) - 1
    elif action == OptionAction.STORE:
        assert dest is not None, "store actions always have a dest"
        destinations[dest] = list(values) if option.list_delim else values[0]
        _count(option, destinations, len(values))
    elif action == OptionAction.APPEND:
        assert dest is not None, "append actions always have a dest"
        current = destinations.get(dest)
        if current is None:
            current = []
        if option.capacity is not None and len(current) + len(values) > option.capacity:
            raise CapacityError(
                f"option '{option.display_name}': cannot append {len(values)} "
                f"value(s), {len(current)} of {option.capacity} slots already used"
            )
        current.extend(values)
        destinations[dest] = current
        _count(option, destinations, len(values))
    elif action == OptionAction.CALL:
        if option.list_delim:
            _run_callback(option, len(values), list(values))
        else:
            _run_callback(option, values[0])
    elif action == OptionAction.CALL_RAW:
        _run_callback(option, values[0])
    elif action == OptionAction.CALL_VOID:
        _run_callback(option)
    elif action == OptionAction.CALL_PARSE:
        assert cursor is not None, "CALL_PARSE needs a cursor"
        _call_parse(option, argv, cursor)
    logger.debug("[%s] %s -> %r", option.display_name, action, values)


def _count(option: Option, destinations: dict[str, Any], count: int) -> None:
    if option.length_dest is not None:
        destinations[option.length_dest] = (
            destinations.get(option.length_dest) or 0
        ) + count
