"""
Exception hierarchy for keyboard_layout.

```
KeyboardLayoutError (base)
├── LayoutError
│   ├── MissingLedReference
│   ├── DuplicateIdError
│   └── DuplicateLedAssignment
└── ConfigurationError
    ├── MissingConfiguration
    ├── ConfigFileInvalidError
    └── ConfigValidationError
```

Every exception carries `user_message`, `technical_message`, `recoverable`
and `recovery_hint`. Layout errors and MissingConfiguration are fatal: the
input is static configuration, so nothing is retried.

```python
from keyboard_layout.exceptions import MissingLedReference

try:
    layout = Layout.new(keys, leds)
except MissingLedReference as e:
    logger.error(e.technical_message)
    raise SystemExit(e.get_full_message())
```
"""

from .base import KeyboardLayoutError
from .config import (
    ConfigFileInvalidError,
    ConfigurationError,
    ConfigValidationError,
    MissingConfiguration,
)
from .handlers import format_error_for_display, wrap_pydantic_error
from .layout import DuplicateIdError, DuplicateLedAssignment, LayoutError, MissingLedReference

__all__ = [
    # Base
    "KeyboardLayoutError",
    # Layout
    "DuplicateIdError",
    "DuplicateLedAssignment",
    "LayoutError",
    "MissingLedReference",
    # Config
    "ConfigFileInvalidError",
    "ConfigValidationError",
    "ConfigurationError",
    "MissingConfiguration",
    # Handlers
    "format_error_for_display",
    "wrap_pydantic_error",
]
