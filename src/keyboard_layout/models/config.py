"""Typed records for the keyboard_layout configuration structure.

The embedding application supplies the `keyboard_layout` namespace, shaped as:

    layout:
      leds: [ {id, x, y}, ... ]
      keys: [ {id, x, y, opts: {width?, height?, led?}?}, ... ]

Every record forbids unknown fields so typos surface at decode time; the
namespace itself ignores entries it does not know.
"""

from pydantic import BaseModel, ConfigDict, Field

from .key import Key, KeyOptions
from .layout import Layout
from .led import LED


class LedConfig(BaseModel):
    """One LED entry."""

    model_config = ConfigDict(extra="forbid")

    id: str = Field(description="LED identifier")
    x: float = Field(description="X position")
    y: float = Field(description="Y position")

    def to_led(self) -> LED:
        return LED.new(self.id, self.x, self.y)


class KeyConfig(BaseModel):
    """One key entry; `opts` defaults to width 1, height 1 and no LED."""

    model_config = ConfigDict(extra="forbid")

    id: str = Field(description="Key identifier")
    x: float = Field(description="X position")
    y: float = Field(description="Y position")
    opts: KeyOptions | None = Field(default=None, description="Optional width/height/led")

    def to_key(self) -> Key:
        return Key.new(self.id, self.x, self.y, self.opts)


class LayoutConfig(BaseModel):
    """The `layout` entry: LED and key lists."""

    model_config = ConfigDict(extra="forbid")

    leds: list[LedConfig] = Field(default_factory=list, description="LED entries")
    keys: list[KeyConfig] = Field(default_factory=list, description="Key entries")

    def to_layout(self) -> Layout:
        """Decode every entry and build the layout."""
        return Layout.new(
            keys=[key.to_key() for key in self.keys],
            leds=[led.to_led() for led in self.leds],
        )


class KeyboardLayoutConfig(BaseModel):
    """The `keyboard_layout` configuration namespace.

    Other entries the application keeps in the namespace are ignored.
    """

    model_config = ConfigDict(extra="ignore")

    layout: LayoutConfig | None = Field(default=None, description="Layout definition")
