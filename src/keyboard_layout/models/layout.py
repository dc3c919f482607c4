"""Layout model holding the keys and LEDs of one keyboard."""

import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from keyboard_layout.exceptions import (
    DuplicateIdError,
    DuplicateLedAssignment,
    MissingLedReference,
)

from .key import Key, KeyId
from .led import LED, LedId

logger = logging.getLogger(__name__)


class Layout(BaseModel):
    """A keyboard layout made of keys and optional LEDs.

    The key -> LED and LED -> key indexes are derived from each key's `led`
    field when the layout is built. A layout never changes afterwards; to
    alter it, build a new one. Sequences are stored as tuples and the indexes
    are exposed as read-only mappings, so a layout can be shared freely
    between threads.

    Example:
        >>> layout = Layout.new([Key.new("k1", 0, 0, {"led": "l1"})], [LED.new("l1", 0, 0)])
        >>> layout.led_for_key("k1")
        LED(id='l1', x=0.0, y=0.0)
    """

    model_config = ConfigDict(frozen=True)

    keys: tuple[Key, ...] = Field(description="Keys in the order supplied")
    leds: tuple[LED, ...] = Field(default=(), description="LEDs in the order supplied")

    _key_to_led: dict[KeyId, LED] = PrivateAttr(default_factory=dict)
    _led_to_key: dict[LedId, Key] = PrivateAttr(default_factory=dict)

    def model_post_init(self, __context: Any) -> None:
        """Resolve every key's LED and build both lookup indexes.

        Raises:
            DuplicateIdError: If two keys or two LEDs share an id
            MissingLedReference: If a key names an LED that is not in `leds`
            DuplicateLedAssignment: If two keys name the same LED
        """
        leds_by_id: dict[LedId, LED] = {}
        for led in self.leds:
            if led.id in leds_by_id:
                logger.error(f"Duplicate LED id {led.id!r} in layout")
                raise DuplicateIdError("led", led.id)
            leds_by_id[led.id] = led

        seen_keys: set[KeyId] = set()
        key_to_led: dict[KeyId, LED] = {}
        led_to_key: dict[LedId, Key] = {}

        for key in self.keys:
            if key.id in seen_keys:
                logger.error(f"Duplicate key id {key.id!r} in layout")
                raise DuplicateIdError("key", key.id)
            seen_keys.add(key.id)

            if key.led is None:
                continue

            led = leds_by_id.get(key.led)
            if led is None:
                logger.error(f"Key {key.id!r} references unknown LED {key.led!r}")
                raise MissingLedReference(key.id, key.led)

            if led.id in led_to_key:
                key_ids = [k.id for k in self.keys if k.led == led.id]
                logger.error(f"LED {led.id!r} claimed by keys {key_ids!r}")
                raise DuplicateLedAssignment(led.id, key_ids)

            key_to_led[key.id] = led
            led_to_key[led.id] = key

        self._key_to_led = key_to_led
        self._led_to_key = led_to_key

        logger.debug(
            f"Built layout with {len(self.keys)} keys, {len(self.leds)} LEDs, "
            f"{len(key_to_led)} key/LED associations"
        )

    @classmethod
    def new(cls, keys: Iterable[Key], leds: Iterable[LED] = ()) -> "Layout":
        """
        Create a layout from a list of keys and an optional list of LEDs.

        Args:
            keys: Keys in layout order
            leds: LEDs in layout order

        Returns:
            Layout: The immutable layout with its lookup indexes built

        Raises:
            MissingLedReference: If a key's `led` is not among `leds`
            DuplicateIdError: If ids repeat within keys or within LEDs
            DuplicateLedAssignment: If one LED is claimed by several keys
        """
        return cls(keys=tuple(keys), leds=tuple(leds))

    def model_copy(self, *, update: Optional[Mapping[str, Any]] = None, deep: bool = False) -> "Layout":
        """Copy the layout, rebuilding the indexes when fields are replaced.

        Raises:
            LayoutError: If the updated keys and LEDs are inconsistent
        """
        copied = super().model_copy(update=update, deep=deep)
        if update:
            return type(self).new(copied.keys, copied.leds)
        return copied

    @property
    def key_to_led(self) -> Mapping[KeyId, LED]:
        """Read-only mapping of key id to LED, for keys that have one."""
        return MappingProxyType(self._key_to_led)

    @property
    def led_to_key(self) -> Mapping[LedId, Key]:
        """Read-only mapping of LED id to the key above it."""
        return MappingProxyType(self._led_to_key)

    def led_for_key(self, key_id: KeyId) -> Optional[LED]:
        """Get the LED beneath a key.

        Returns None both for an unknown key id and for a key without an LED.
        """
        return self._key_to_led.get(key_id)

    def key_for_led(self, led_id: LedId) -> Optional[Key]:
        """Get the key above an LED.

        Returns None both for an unknown LED id and for an LED no key claims.
        """
        return self._led_to_key.get(led_id)


def keys(layout: Layout) -> tuple[Key, ...]:
    """Return the keys of a layout, in layout order."""
    return layout.keys


def leds(layout: Layout) -> tuple[LED, ...]:
    """Return the LEDs of a layout, in layout order."""
    return layout.leds


def led_for_key(layout: Layout, key_id: KeyId) -> Optional[LED]:
    return layout.led_for_key(key_id)


def key_for_led(layout: Layout, led_id: LedId) -> Optional[Key]:
    return layout.key_for_led(led_id)
