"""
Centralized constants for tagcloud.

Defaults and user-facing strings live here so the widgets, the config
loader and the CLI agree on them.
"""

from pathlib import Path

# =============================================================================
# PATHS
# =============================================================================

CONFIG_DIR_ENV_VAR = "TAGCLOUD_CONFIG_DIR"  # Overrides the config dir, used by tests
DEFAULT_CONFIG_DIR = Path.home() / ".config" / "tagcloud"
UI_CONFIG_FILENAME = "ui_config.json"

# =============================================================================
# LAYOUT
# =============================================================================

DEFAULT_COLUMNS = 4  # Chips per row in the wrapping grid

# =============================================================================
# UI STRINGS
# =============================================================================

ADD_TAG_TITLE = "Add new tag"
ADD_TAG_PLACEHOLDER = "Type new tag here"
ADD_TAG_SUBMIT = "Submit"
ADD_TAG_CANCEL = "Cancel"
ADD_TAG_BUTTON_LABEL = "+"
REMOVE_TAG_BUTTON_LABEL = "✕"
EMPTY_TAG_ERROR = "Tag cannot be empty"
DUPLICATE_TAG_ERROR = "Tag already exists"
