"""
Argwalk CLI Parsing Engine

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .config import ParserSettings, load_settings
from .parser import (
    SUPPRESS_HELP,
    ArgCursor,
    Arity,
    Option,
    OptionAction,
    OptionParser,
    OptionTable,
    OptionType,
    ParseResult,
    ParseStatus,
)

logger = logging.getLogger("argwalk")


__all__ = [
    "ArgCursor",
    "Arity",
    "Option",
    "OptionAction",
    "OptionParser",
    "OptionTable",
    "OptionType",
    "ParseResult",
    "ParseStatus",
    "ParserSettings",
    "SUPPRESS_HELP",
    "load_settings",
]
