# Argwalk CLI Parsing Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Parser settings and their loader.

`ParserSettings` selects the per-session policies of the engine (error
halting, table validation, argument ambiguity resolution) and the layout of
rendered help. Settings can be built in code or loaded from a YAML or TOML
file with `load_settings()`.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from pydantic import model_validator

from argwalk.exceptions import SettingsError
from argwalk.logger import logger

DOUBLE_DASH_DESCRIPTION = "Arguments following this are not treated as options."


class ParserSettings(BaseModel):
    """Per-session parser policies and help layout."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    halt_on_error: bool = False
    validate_table: bool = True
    strict_option_arguments: bool = False
    print_errors: bool = True

    help_max_line_length: int = 80
    help_min_description_width: int = 30
    help_max_left_width: int = 30
    help_indent: int = 2
    help_show_double_dash: bool = True
    double_dash_description: str = DOUBLE_DASH_DESCRIPTION

    @field_validator(
        "help_max_line_length",
        "help_min_description_width",
        "help_max_left_width",
    )
    @classmethod
    def validate_positive(cls, value: int) -> int:
        if value < 1:
            raise ValueError("help widths must be positive integers")
        return value

    @field_validator("help_indent")
    @classmethod
    def validate_indent(cls, value: int) -> int:
        if value < 0:
            raise ValueError("help_indent cannot be negative")
        return value

    @model_validator(mode="after")
    def validate_widths(self) -> ParserSettings:
        if self.help_min_description_width > self.help_max_line_length:
            raise ValueError(
                "help_min_description_width cannot exceed help_max_line_length"
            )
        return self


def load_settings(file_path: Path | str) -> ParserSettings:
    """
    Load parser settings from a YAML or TOML file.

    The file holds a flat mapping of `ParserSettings` fields. A TOML file may
    instead nest them under an `[argwalk]` table.

    Args:
        file_path (Path | str): Path to the settings file.

    Returns:
        ParserSettings: The validated settings.

    Raises:
        SettingsError: If the file is missing, has an unsupported format, or
            holds invalid settings.
    """
    if not isinstance(file_path, (str, Path)):
        raise TypeError("file_path must be a string or Path object.")
    path = Path(file_path)

    if not path.is_file():
        raise SettingsError(f"No such settings file: {file_path}")

    suffix = path.suffix
    try:
        with path.open("r", encoding="UTF-8") as settings_file:
            if suffix in (".yaml", ".yml"):
                raw_settings: Any = yaml.safe_load(settings_file)
            elif suffix == ".toml":
                raw_settings = toml.load(settings_file)
            else:
                raise SettingsError(f"Unsupported settings format: {suffix}")
    except (yaml.YAMLError, toml.TomlDecodeError) as error:
        raise SettingsError(f"Could not parse settings file {path}: {error}") from error

    if raw_settings is None:
        raw_settings = {}
    if isinstance(raw_settings, dict) and isinstance(raw_settings.get("argwalk"), dict):
        raw_settings = raw_settings["argwalk"]
    if not isinstance(raw_settings, dict):
        raise SettingsError(
            "Settings file must contain a mapping of settings.\n"
            "Example:\n"
            "halt_on_error: true\n"
            "help_max_line_length: 100"
        )

    try:
        settings = ParserSettings(**raw_settings)
    except ValidationError as error:
        raise SettingsError(f"Invalid settings in {path}: {error}") from error
    logger.debug("Loaded parser settings from '%s'.", path)
    return settings
