# Argwalk CLI Parsing Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Global console instances for argwalk.

`console` writes rendered help to stdout; `error_console` writes parse
diagnostics to stderr.
"""
from rich.console import Console

console = Console(highlight=False, soft_wrap=True)
error_console = Console(stderr=True, highlight=False, soft_wrap=True)
