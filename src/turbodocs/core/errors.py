"""
Error types for TurboDocs theme configuration.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional


class TurboDocsError(Exception):
    """Base exception for all TurboDocs errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message


class ThemeConfigError(TurboDocsError):
    """
    Raised when a theme configuration is malformed.

    Examples:
    - Missing required field
    - primary_hue outside [0, 360)
    - Relative or empty project link
    - Empty logo or footer text
    - Unreadable or invalid themeconfig.yaml
    """

    pass


class ExportError(TurboDocsError):
    """
    Raised when a configuration cannot be written in the host renderer's schema.

    Examples:
    - Unsupported export format
    - Output path is a directory
    """

    pass


@dataclass
class ErrorContext:
    """
    Where a configuration error was found.

    Attributes:
        field: Dotted field path (e.g. "footer.text")
        value: The rejected value, if known
        file: Source file the value came from, if any
    """

    field: str
    value: Any = None
    file: Path | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "themeconfig.yaml: field 'primary_hue' (got 360)"
        """
        location = f"field {self.field!r}"
        if self.value is not None:
            location += f" (got {self.value!r})"
        if self.file:
            location = f"{self.file}: {location}"
        return location


def make_config_error(
    message: str,
    field: str,
    value: Any = None,
    file: Path | None = None,
) -> ThemeConfigError:
    """
    Helper to create a ThemeConfigError with field context.

    Args:
        message: Description of the violated constraint
        field: Dotted path of the offending field
        value: Optional rejected value
        file: Optional source file path

    Returns:
        ThemeConfigError with context attached
    """
    return ThemeConfigError(message, ErrorContext(field=field, value=value, file=file))
