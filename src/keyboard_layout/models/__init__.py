"""Data models for keyboard layouts."""

from .config import KeyboardLayoutConfig, KeyConfig, LayoutConfig, LedConfig
from .key import Key, KeyId, KeyOptions
from .layout import Layout, key_for_led, keys, led_for_key, leds
from .led import LED, LedId

__all__ = [
    # Models
    "Key",
    "KeyId",
    "KeyOptions",
    "LED",
    "Layout",
    "LedId",
    # Config records
    "KeyConfig",
    "KeyboardLayoutConfig",
    "LayoutConfig",
    "LedConfig",
    # Queries
    "key_for_led",
    "keys",
    "led_for_key",
    "leds",
]
