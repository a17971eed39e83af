"""Custom exception hierarchy for tagcloud.

Expected conditions in the tag collection (duplicates, out-of-range
indices) are reported through return values, not exceptions. These
exceptions cover faults around it, such as an invalid configuration file.

Exception Hierarchy:
    TagCloudError (base)
    └── ConfigurationError - Settings/configuration issues

Usage:
    from tagcloud.exceptions import ConfigurationError

    raise ConfigurationError("Invalid colour", setting="possible_background_colors", value="#zz")
"""

from typing import Any, Optional


class TagCloudError(Exception):
    """Base exception for all tagcloud errors.

    Attributes:
        message: Human-readable error description
        context: Additional context about the error (e.g., setting names, values)
    """

    def __init__(self, message: str, **context: Any) -> None:
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with context."""
        if self.context:
            context_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(TagCloudError):
    """Configuration or settings error."""

    def __init__(
        self,
        message: str = "Configuration error",
        *,
        setting: Optional[str] = None,
        **context: Any,
    ) -> None:
        if setting:
            context["setting"] = setting
        super().__init__(message, **context)
