"""
settings.py

This module provides application configuration management for chanvar.

Features:
- Centralized application configuration using Pydantic settings
- Per-user configuration paths resolved with appdirs
- Loading and validation of an initial channel variables file

Usage:
Import appsettings for application configuration values.
"""

import json
from pathlib import Path
from typing import Any, Final
from appdirs import user_config_dir
from pydantic_settings import BaseSettings, SettingsConfigDict


# Set up the configuration directory and files using appdirs
CONFIG_DIR: Final[Path] = Path(user_config_dir("chanvar", ""))
HISTORY_FILE: Final[Path] = CONFIG_DIR / "history"
VARIABLES_FILE: Final[Path] = CONFIG_DIR / "variables.json"


class App(BaseSettings):
    """
    Application settings model.

    Provides a centralized configuration for application behavior and features.
    Settings can be overridden through environment variables with CHV_ prefix.

    Attributes:
        beQuiet: Suppress logging output
        detailedOutput: Show warnings and channel details in command output
        join_split_by: Default delimiter used by join_array
        join_capacity: Upper bound on the number of items join_array handles
        set_array_delim: Default delimiter used by set_array
        set_array_capacity: Upper bound on the number of items set_array pushes
        option_capacity: Upper bound on the number of bracketed options
        expand_depth: Maximum nesting depth for ${var} expansion
    """

    beQuiet: bool = False
    detailedOutput: bool = False

    join_split_by: str = ":|"
    join_capacity: int = 100
    set_array_delim: str = " "
    set_array_capacity: int = 25
    option_capacity: int = 20
    expand_depth: int = 10

    model_config = SettingsConfigDict(
        env_prefix="CHV_",  # Environment variables with this prefix override settings
        case_sensitive=False,  # Allow case-insensitive environment variables
        extra="allow",  # Allow additional attributes not defined in the model
    )


def json_validate(data: Any) -> bool:
    """
    Validate that data is a JSON object mapping names to string values.

    Args:
        data: The decoded JSON document

    Returns:
        bool: True if every key and value is a string, False otherwise
    """
    if not isinstance(data, dict):
        return False
    return all(isinstance(k, str) and isinstance(v, str) for k, v in data.items())


def variables_load(path: Path) -> dict[str, str]:
    """
    Load initial channel variables from a JSON file.

    Args:
        path: Location of a JSON object of name/value strings

    Returns:
        dict[str, str]: The variables, empty if the file does not exist

    Raises:
        ValueError: If the file is not valid JSON or not a flat string mapping
    """
    if not path.exists():
        return {}

    try:
        with open(path, "r", encoding="utf-8") as f:
            data: Any = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {path}: {e}")

    if not json_validate(data):
        raise ValueError(f"{path} must hold a JSON object of string values")
    return data


# Create the application settings instance
appsettings: Final[App] = App()
