"""
Error conversion helpers.

Pydantic reports decode problems as `ValidationError`; callers of this
library only ever see `KeyboardLayoutError` subclasses. The helpers here
do the translation and format errors for the embedding application.

```python
from keyboard_layout.exceptions import wrap_pydantic_error

try:
    config = KeyboardLayoutConfig.model_validate(raw)
except ValidationError as e:
    raise wrap_pydantic_error(e) from e
```
"""

import logging
from typing import Optional

from .base import KeyboardLayoutError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError

logger = logging.getLogger(__name__)


def wrap_pydantic_error(error: Exception, file_path: Optional[str] = None) -> ConfigurationError:
    """
    Convert Pydantic validation errors to keyboard_layout exceptions.

    Errors are classified by their structured `type`; the message text
    echoes the offending input and is never matched against.

    Args:
        error: The Pydantic ValidationError
        file_path: Path to the config file that failed validation, if any

    Returns:
        A ConfigurationError with appropriate type and message
    """
    from pydantic import ValidationError

    if not isinstance(error, ValidationError) or not error.errors():
        logger.debug(f"Unrecognised validation error shape: {error}")
        return ConfigValidationError(
            field="unknown",
            value=None,
            error_msg=str(error),
            file_path=file_path,
        )

    errors = error.errors()

    syntax_errors = [err for err in errors if err.get("type") == "json_invalid"]
    if syntax_errors:
        parse_error = syntax_errors[0].get("msg", "invalid JSON")
        if parse_error.startswith("Invalid JSON:"):
            parse_error = parse_error[len("Invalid JSON:"):].strip()
        return ConfigFileInvalidError(file_path or "<config>", parse_error)

    if len(errors) == 1:
        first_error = errors[0]
        field = ".".join(str(loc) for loc in first_error.get("loc", ("unknown",)))
        return ConfigValidationError(
            field=field,
            value=first_error.get("input"),
            error_msg=first_error.get("msg", "validation failed"),
            file_path=file_path,
        )

    error_lines = []
    for err in errors:
        field = ".".join(str(loc) for loc in err.get("loc", ("unknown",)))
        error_lines.append(f"  - {field}: {err.get('msg', 'validation failed')}")

    return ConfigValidationError(
        field="multiple fields",
        value=None,
        error_msg=f"{len(errors)} validation errors:\n" + "\n".join(error_lines),
        file_path=file_path,
    )


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """
    Format an exception for user display.

    Returns a tuple of (message, recovery_hint).
    """
    if isinstance(error, KeyboardLayoutError):
        return error.user_message, error.recovery_hint

    error_type = type(error).__name__
    return f"{error_type}: {error}", None
