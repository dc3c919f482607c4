"""Key model describing one physical key."""

from collections.abc import Mapping
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field

# Ids are strings: configuration arrives as JSON or mappings.
KeyId = str


class KeyOptions(BaseModel):
    """Optional key attributes.

    Width and height are relative units: a key with a width of 2 is twice as
    wide as a key with a width of 1. Unknown option names are rejected.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    width: float = Field(default=1, description="Relative width (1 = one unit)")
    height: float = Field(default=1, description="Relative height (1 = one unit)")
    led: str | None = Field(default=None, description="Id of the LED mounted beneath the key")


class Key(BaseModel):
    """A physical key: position, relative size and the LED beneath it, if any."""

    model_config = ConfigDict(frozen=True)

    id: KeyId = Field(description="Unique key identifier")
    x: float = Field(description="X position")
    y: float = Field(description="Y position")
    width: float = Field(default=1, description="Relative width")
    height: float = Field(default=1, description="Relative height")
    led: str | None = Field(default=None, description="Associated LED id")

    @classmethod
    def new(
        cls,
        id: KeyId,
        x: float,
        y: float,
        opts: Union[KeyOptions, Mapping[str, Any], None] = None,
    ) -> "Key":
        """
        Create a key, taking width, height and led from `opts`.

        Args:
            id: Key identifier; must be a string, other types fail Pydantic
                validation
            x: X position
            y: Y position
            opts: KeyOptions or a mapping with any of `width`, `height`, `led`

        Example:
            >>> Key.new("k2", 2, 1.5, {"width": 1.5, "height": 2, "led": "l2"})
            Key(id='k2', x=2.0, y=1.5, width=1.5, height=2.0, led='l2')
        """
        if opts is None:
            opts = KeyOptions()
        elif not isinstance(opts, KeyOptions):
            opts = KeyOptions.model_validate(dict(opts))

        return cls(id=id, x=x, y=y, width=opts.width, height=opts.height, led=opts.led)

    @property
    def position(self) -> tuple[float, float]:
        """Get (x, y) position as tuple."""
        return (self.x, self.y)

    @property
    def size(self) -> tuple[float, float]:
        """Get (width, height) as tuple."""
        return (self.width, self.height)

    @property
    def has_led(self) -> bool:
        return self.led is not None
