"""Layout construction exceptions.

Raised synchronously while a Layout is being built. None of them are
recoverable: the key and LED lists are static input, so the caller has to
fix the data and build a new layout.
"""

from collections.abc import Sequence

from .base import KeyboardLayoutError


class LayoutError(KeyboardLayoutError):
    """Key and LED lists are inconsistent."""
    pass


class MissingLedReference(LayoutError):
    """A key declares an LED that is not part of the layout."""

    def __init__(self, key_id: str, led_id: str):
        """
        Initialize missing LED reference error.

        Args:
            key_id: Id of the key declaring the LED
            led_id: The LED id that could not be resolved
        """
        super().__init__(
            user_message=f"Key '{key_id}' references unknown LED '{led_id}'",
            technical_message=(
                f"No LED with id={led_id!r} in layout LEDs (referenced by key id={key_id!r})"
            ),
            recoverable=False,
            recovery_hint=f"Add an LED with id '{led_id}' or remove the 'led' option from key '{key_id}'",
        )
        self.key_id = key_id
        self.led_id = led_id


class DuplicateIdError(LayoutError):
    """Two keys (or two LEDs) share the same id."""

    def __init__(self, kind: str, item_id: str):
        """
        Initialize duplicate id error.

        Args:
            kind: "key" or "led"
            item_id: The repeated id
        """
        label = "LED" if kind == "led" else kind
        super().__init__(
            user_message=f"Duplicate {label} id '{item_id}'",
            technical_message=f"{label} id={item_id!r} appears more than once in layout",
            recoverable=False,
            recovery_hint=f"Give every {label} in the layout a unique id",
        )
        self.kind = kind
        self.item_id = item_id


class DuplicateLedAssignment(LayoutError):
    """More than one key declares the same LED."""

    def __init__(self, led_id: str, key_ids: Sequence[str]):
        """
        Initialize duplicate LED assignment error.

        Args:
            led_id: The LED claimed by several keys
            key_ids: Ids of the keys claiming it, in layout order
        """
        keys = ", ".join(f"'{key_id}'" for key_id in key_ids)
        super().__init__(
            user_message=f"LED '{led_id}' is assigned to more than one key ({keys})",
            technical_message=f"led id={led_id!r} referenced by keys {list(key_ids)!r}",
            recoverable=False,
            recovery_hint="Each LED can sit under at most one key",
        )
        self.led_id = led_id
        self.key_ids = tuple(key_ids)
