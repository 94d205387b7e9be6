"""Scene elements: buildings and antennas.

Coordinates are signed integers. Half dimensions and radii are strictly
positive, so zero-extent shapes cannot be built even outside the parser.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from kover.models.geometry import Extent


class Building(BaseModel):
    """An axis-aligned rectangular building.

    (x, y) is the center; the footprint spans [x-w, x+w] x [y-h, y+h].
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1, description="Building identifier, unique among buildings")
    x: int = Field(description="Center x-coordinate")
    y: int = Field(description="Center y-coordinate")
    w: int = Field(gt=0, description="Half-width")
    h: int = Field(gt=0, description="Half-height")

    @property
    def extent(self) -> Extent:
        """Footprint rectangle."""
        return Extent.around(self.x, self.y, self.w, self.h)

    def describe(self) -> str:
        return f"building {self.id} at {self.x} {self.y} with dimensions {self.w} {self.h}"


class Antenna(BaseModel):
    """A communication antenna with a circular coverage range."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1, description="Antenna identifier, unique among antennas")
    x: int = Field(description="Position x-coordinate")
    y: int = Field(description="Position y-coordinate")
    r: int = Field(gt=0, description="Coverage radius")

    @property
    def position(self) -> tuple[int, int]:
        return (self.x, self.y)

    @property
    def extent(self) -> Extent:
        """Square enclosing the coverage disc."""
        return Extent.around(self.x, self.y, self.r, self.r)

    def describe(self) -> str:
        return f"antenna {self.id} at {self.x} {self.y} with range {self.r}"
