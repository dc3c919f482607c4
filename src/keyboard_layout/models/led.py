"""LED model describing one physical LED."""

from pydantic import BaseModel, ConfigDict, Field

LedId = str


class LED(BaseModel):
    """A physical LED location."""

    model_config = ConfigDict(frozen=True)

    id: LedId = Field(description="Unique LED identifier")
    x: float = Field(description="X position")
    y: float = Field(description="Y position")

    @classmethod
    def new(cls, id: LedId, x: float, y: float) -> "LED":
        """Create an LED at the given position.

        `id` must be a string; other types fail Pydantic validation.
        """
        return cls(id=id, x=x, y=y)

    @property
    def position(self) -> tuple[float, float]:
        """Get (x, y) position as tuple."""
        return (self.x, self.y)
