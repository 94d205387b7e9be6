"""Geometric primitives for scene elements."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, model_validator


class Extent(BaseModel):
    """Closed axis-aligned box [left, right] x [bottom, top] on the integer grid."""

    model_config = ConfigDict(frozen=True)

    left: int
    right: int
    bottom: int
    top: int

    @model_validator(mode="after")
    def ordered_bounds(self) -> Extent:
        if self.left > self.right or self.bottom > self.top:
            raise ValueError("Extent bounds must satisfy left <= right and bottom <= top")
        return self

    @classmethod
    def around(cls, x: int, y: int, half_width: int, half_height: int) -> Extent:
        """Box centered on (x, y) with the given half dimensions."""
        return cls(
            left=x - half_width,
            right=x + half_width,
            bottom=y - half_height,
            top=y + half_height,
        )

    def overlaps(self, other: Extent) -> bool:
        """True when the interiors intersect.

        Boxes that only share an edge or a corner do not overlap.
        """
        return not (
            self.right <= other.left
            or self.left >= other.right
            or self.top <= other.bottom
            or self.bottom >= other.top
        )

    def union(self, other: Extent) -> Extent:
        """Smallest box containing both."""
        return Extent(
            left=min(self.left, other.left),
            right=max(self.right, other.right),
            bottom=min(self.bottom, other.bottom),
            top=max(self.top, other.top),
        )
