"""keyboard_layout: key and LED positions of a physical keyboard, with key/LED lookups."""

__version__ = "0.1.0"

from .exceptions import (
    ConfigurationError,
    DuplicateIdError,
    DuplicateLedAssignment,
    KeyboardLayoutError,
    LayoutError,
    MissingConfiguration,
    MissingLedReference,
)
from .loader import load_from_config, load_from_file
from .models import (
    LED,
    Key,
    KeyOptions,
    Layout,
    key_for_led,
    keys,
    led_for_key,
    leds,
)

__all__ = [
    "LED",
    "ConfigurationError",
    "DuplicateIdError",
    "DuplicateLedAssignment",
    "Key",
    "KeyOptions",
    "KeyboardLayoutError",
    "Layout",
    "LayoutError",
    "MissingConfiguration",
    "MissingLedReference",
    "key_for_led",
    "keys",
    "led_for_key",
    "leds",
    "load_from_config",
    "load_from_file",
]
