"""Configuration for tagcloud."""

from .ui_config import (
    DEFAULT_CONFIG,
    TagCloudConfig,
    get_config_dir,
    get_ui_config_path,
    load_ui_config,
    save_ui_config,
    validate_palette,
)

__all__ = [
    "DEFAULT_CONFIG",
    "TagCloudConfig",
    "get_config_dir",
    "get_ui_config_path",
    "load_ui_config",
    "save_ui_config",
    "validate_palette",
]
