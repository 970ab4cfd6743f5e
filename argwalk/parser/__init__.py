"""
Argwalk CLI Parsing Engine

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .callbacks import ArgCursor
from .help_formatter import HelpFormatter
from .option import SUPPRESS_HELP, Arity, Option
from .option_action import OptionAction
from .option_parser import OptionParser
from .option_table import OptionTable
from .option_type import OptionType
from .parser_types import ParseResult, ParseState, ParseStatus

__all__ = [
    "ArgCursor",
    "Arity",
    "HelpFormatter",
    "Option",
    "OptionAction",
    "OptionParser",
    "OptionTable",
    "OptionType",
    "ParseResult",
    "ParseState",
    "ParseStatus",
    "SUPPRESS_HELP",
]
