"""
tagcloud UI Configuration.

Handles persistence of tag cloud preferences: indicator mode, the
background palette for new chips and the grid width.
Config is stored in ~/.config/tagcloud/ui_config.json
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

from textual.color import Color, ColorParseError

from tagcloud.exceptions import ConfigurationError

from .constants import (
    CONFIG_DIR_ENV_VAR,
    DEFAULT_COLUMNS,
    DEFAULT_CONFIG_DIR,
    UI_CONFIG_FILENAME,
)

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "is_indicator": False,
    "possible_background_colors": [],
    "columns": DEFAULT_COLUMNS,
}


def get_config_dir() -> Path:
    """Get the config directory, respecting TAGCLOUD_CONFIG_DIR."""
    override = os.environ.get(CONFIG_DIR_ENV_VAR)
    if override:
        return Path(override)
    return DEFAULT_CONFIG_DIR


def get_ui_config_path() -> Path:
    """
    Get path to UI config file.

    Returns:
        Path to <config dir>/ui_config.json
    """
    config_dir = get_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir / UI_CONFIG_FILENAME


def load_ui_config() -> dict[str, Any]:
    """
    Load UI configuration from file.

    Returns:
        Config dict, or defaults if file doesn't exist or is invalid
    """
    path = get_ui_config_path()
    if path.exists():
        try:
            config = json.loads(path.read_text())
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Ignoring unreadable config {path}: {e}")
            return DEFAULT_CONFIG.copy()
        if not isinstance(config, dict):
            logger.warning(f"Ignoring config {path}: top level is not an object")
            return DEFAULT_CONFIG.copy()
        # Merge with defaults to handle missing keys
        return {**DEFAULT_CONFIG, **config}
    return DEFAULT_CONFIG.copy()


def save_ui_config(config: dict[str, Any]) -> None:
    """
    Save UI configuration to file.

    Args:
        config: Configuration dict to save
    """
    path = get_ui_config_path()
    try:
        path.write_text(json.dumps(config, indent=2) + "\n")
    except OSError as e:
        # Config is non-critical
        logger.warning(f"Could not save config to {path}: {e}")


def validate_palette(colors: Any) -> List[str]:
    """Check that every entry is a colour Textual can parse.

    Raises:
        ConfigurationError: If the value is not a list of colour strings
    """
    if not isinstance(colors, (list, tuple, set, frozenset)):
        raise ConfigurationError(
            "Palette must be a list of colours",
            setting="possible_background_colors",
            value=colors,
        )
    palette = []
    for color in colors:
        if not isinstance(color, str):
            raise ConfigurationError(
                "Palette entries must be strings",
                setting="possible_background_colors",
                value=color,
            )
        try:
            Color.parse(color)
        except ColorParseError as e:
            raise ConfigurationError(
                "Invalid colour in palette",
                setting="possible_background_colors",
                value=color,
            ) from e
        palette.append(color)
    return palette


@dataclass
class TagCloudConfig:
    """Construction defaults for a TagCloud.

    Attributes:
        is_indicator: Start in read-only mode
        possible_background_colors: Colours new chips may be given (empty = default)
        columns: Chips per row in the wrapping grid
    """
    is_indicator: bool = False
    possible_background_colors: List[str] = field(default_factory=list)
    columns: int = DEFAULT_COLUMNS

    def __post_init__(self):
        self.possible_background_colors = validate_palette(self.possible_background_colors)
        if isinstance(self.columns, bool) or not isinstance(self.columns, int) or self.columns < 1:
            raise ConfigurationError(
                "Columns must be a positive integer",
                setting="columns",
                value=self.columns,
            )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TagCloudConfig":
        """Build a config from a dict, using defaults for missing keys."""
        merged = {**DEFAULT_CONFIG, **data}
        return cls(
            is_indicator=bool(merged["is_indicator"]),
            possible_background_colors=merged["possible_background_colors"],
            columns=merged["columns"],
        )

    @classmethod
    def load(cls) -> "TagCloudConfig":
        """Build a config from the UI config file."""
        return cls.from_dict(load_ui_config())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "is_indicator": self.is_indicator,
            "possible_background_colors": list(self.possible_background_colors),
            "columns": self.columns,
        }

    def save(self) -> None:
        config = load_ui_config()
        config.update(self.to_dict())
        save_ui_config(config)
