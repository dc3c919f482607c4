"""Configuration-related exceptions.

This module defines exceptions for configuration errors:
- ConfigurationError: Base class for configuration errors
- MissingConfiguration: No layout configuration was supplied
- ConfigFileInvalidError: Config file has invalid syntax
- ConfigValidationError: Config values fail validation
"""

from typing import Any, Optional

from .base import KeyboardLayoutError


class ConfigurationError(KeyboardLayoutError):
    """Configuration is invalid or cannot be loaded."""
    pass


class MissingConfiguration(ConfigurationError):
    """The `layout` entry of the keyboard_layout configuration is absent."""

    def __init__(self, source: Optional[str] = None):
        """
        Initialize missing configuration error.

        Args:
            source: Where the configuration was looked up (e.g. a file path)
        """
        recovery = "Define a 'layout' entry with 'keys' and 'leds' lists"
        technical = "keyboard_layout configuration has no 'layout' entry"
        if source:
            recovery += f"\nConfig source: {source}"
            technical += f" (source: {source})"

        super().__init__(
            user_message="A keyboard layout must be configured",
            technical_message=technical,
            recoverable=False,
            recovery_hint=recovery,
        )
        self.source = source


class ConfigFileInvalidError(ConfigurationError):
    """Configuration file has invalid JSON syntax."""

    def __init__(self, file_path: str, parse_error: str):
        """
        Initialize config file invalid error.

        Args:
            file_path: Path to the invalid config file
            parse_error: The parsing error message
        """
        user_msg = "Layout configuration file has invalid syntax"
        recovery = "Check for common JSON errors:\n"
        recovery += "  - Trailing commas (remove commas after last item)\n"
        recovery += "  - Missing quotes around ids\n"
        recovery += "  - Unclosed braces or brackets\n"
        recovery += f"  - Edit: {file_path}"

        if "trailing comma" in parse_error.lower():
            user_msg = "Layout configuration file has a trailing comma"
            recovery = (
                f"Remove the trailing comma from {file_path}\n"
                "JSON doesn't allow commas after the last item in an object or array"
            )
        elif "empty" in parse_error.lower():
            user_msg = "Layout configuration file is empty"

        super().__init__(
            user_message=user_msg,
            technical_message=f"JSON parse error in {file_path}: {parse_error}",
            recoverable=True,
            recovery_hint=recovery,
        )
        self.file_path = file_path
        self.parse_error = parse_error


class ConfigValidationError(ConfigurationError):
    """Configuration values fail validation."""

    def __init__(self, field: str, value: Any, error_msg: str, file_path: Optional[str] = None):
        """
        Initialize config validation error.

        Args:
            field: The configuration field that failed validation (dotted path)
            value: The invalid value
            error_msg: Why the value is invalid
            file_path: Path to the config file (optional)
        """
        user_msg = f"Invalid layout configuration value for '{field}': {error_msg}"

        recovery = f"Update the '{field}' value in your layout configuration"
        if file_path:
            recovery += f"\nConfig file: {file_path}"

        if field.endswith("opts") or ".opts." in field:
            recovery += "\nKey options accept only 'width', 'height' and 'led'"
        elif field.endswith(".x") or field.endswith(".y"):
            recovery += "\nPositions must be numbers"

        super().__init__(
            user_message=user_msg,
            technical_message=f"Config validation failed for {field}={value!r}: {error_msg}",
            recoverable=True,
            recovery_hint=recovery,
        )
        self.field = field
        self.value = value
        self.file_path = file_path
