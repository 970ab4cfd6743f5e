# Argwalk CLI Parsing Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines flow control signals used by argwalk callbacks.

Callbacks raise these to stop the caller's parse loop early (e.g. after
printing help) without the engine treating it as a failed option.

All signals inherit from `FlowSignal`, which is a subclass of `BaseException`
so they pass through the engine's `except Exception` around callbacks.

Signals:
- HelpSignal: Help was printed; the caller should stop parsing.
- StopParsing: A callback asked to end the parse session.
"""


class FlowSignal(BaseException):
    """Base class for all flow control signals in argwalk.

    These are not errors. They are used to end a parse loop from inside
    an option callback.
    """


class HelpSignal(FlowSignal):
    """Raised to signal that help output was requested."""

    def __init__(self, message: str = "Help signal received."):
        super().__init__(message)


class StopParsing(FlowSignal):
    """Raised to end the current parse session immediately."""

    def __init__(self, message: str = "Stop parsing signal received."):
        super().__init__(message)
