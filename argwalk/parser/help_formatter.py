# Argwalk CLI Parsing Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Renders an `OptionTable` as aligned, word-wrapped help text.

Each visible option becomes a two-column entry: the short/long names and the
argument placeholder on the left, the description on the right. Descriptions
wrap at whitespace to `help_max_line_length`, continuation lines line up with
the right column, and the right column never gets narrower than
`help_min_description_width`. A word wider than the column keeps its own
line unbroken. Left entries wider than `help_max_left_width` push their
description to the next line.

Subcommands are listed under their own heading, each followed by its child
table indented one more level, recursively.
"""
from __future__ import annotations

import textwrap
from dataclasses import dataclass

from rich.console import Console

from argwalk.config import ParserSettings
from argwalk.console import console as default_console
from argwalk.parser.option import Option
from argwalk.parser.option_table import OptionTable

_GAP = 2


@dataclass(frozen=True)
class HelpEntry:
    """One row of help output before layout."""

    left: str
    description: str
    level: int = 0


def wrap_text(text: str, width: int) -> list[str]:
    """
    Wrap text at whitespace without breaking words.

    Explicit newlines start new paragraphs; blank paragraphs are kept.
    """
    lines: list[str] = []
    for paragraph in text.split("\n"):
        wrapped = textwrap.wrap(
            paragraph,
            width=max(width, 1),
            break_long_words=False,
            break_on_hyphens=False,
        )
        lines.extend(wrapped or [""])
    return lines


class HelpFormatter:
    """Lays out help text for one option table and its subcommands."""

    def __init__(
        self,
        table: OptionTable,
        settings: ParserSettings | None = None,
        header: str | None = None,
        footer: str | None = None,
    ) -> None:
        self.table = table
        self.settings = settings or ParserSettings()
        self.header = header
        self.footer = footer

    def _option_entries(self, table: OptionTable, level: int) -> list[HelpEntry]:
        return [
            HelpEntry(option.get_help_text(), option.description, level)
            for option in table.options
            if not option.hidden
        ]

    def _command_entries(self, commands: list[Option], level: int) -> list[HelpEntry]:
        entries = []
        for command in commands:
            if command.hidden:
                continue
            entries.append(HelpEntry(command.get_help_text(), command.description, level))
            assert command.subcommand is not None, "subcommands always have a table"
            entries.extend(self._option_entries(command.subcommand, level + 1))
            entries.extend(
                self._command_entries(command.subcommand.subcommands, level + 1)
            )
        return entries

    def _left_text(self, entry: HelpEntry) -> str:
        indent = self.settings.help_indent * (entry.level + 1)
        return " " * indent + entry.left

    def _column(self, entries: list[HelpEntry]) -> int:
        widest = max((len(self._left_text(entry)) for entry in entries), default=0)
        return min(widest, self.settings.help_max_left_width) + _GAP

    def format_entries(self, entries: list[HelpEntry], column: int) -> list[str]:
        """Lay out entries with the description column starting at `column`."""
        width = max(
            self.settings.help_max_line_length - column,
            self.settings.help_min_description_width,
        )
        lines = []
        for entry in entries:
            left = self._left_text(entry)
            description = wrap_text(entry.description, width) if entry.description else []
            if not description:
                lines.append(left)
                continue
            if len(left) + _GAP > column:
                lines.append(left)
            else:
                lines.append(left.ljust(column) + description.pop(0))
            lines.extend(
                (" " * column + line).rstrip() if line else "" for line in description
            )
        return lines

    def format_help(self) -> str:
        """Render the complete help text."""
        option_entries = self._option_entries(self.table, 0)
        if self.settings.help_show_double_dash:
            option_entries.append(
                HelpEntry("--", self.settings.double_dash_description)
            )
        command_entries = self._command_entries(self.table.subcommands, 0)
        column = self._column(option_entries + command_entries)

        sections = []
        if self.header:
            sections.append(self.header.rstrip("\n"))
        if option_entries:
            sections.append(
                "\n".join(["Options:"] + self.format_entries(option_entries, column))
            )
        if command_entries:
            sections.append(
                "\n".join(["Commands:"] + self.format_entries(command_entries, column))
            )
        if self.footer:
            sections.append(self.footer.rstrip("\n"))
        return "\n\n".join(sections)

    def print_help(self, console: Console | None = None) -> None:
        """Print the help text through the rich console."""
        console = console or default_console
        console.print(self.format_help(), markup=False, highlight=False, emoji=False)
