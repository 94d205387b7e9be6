"""Scene data models."""

from kover.models.geometry import Extent
from kover.models.elements import Antenna, Building
from kover.models.scene import Scene, SceneBuilder

__all__ = [
    "Extent",
    "Antenna",
    "Building",
    "Scene",
    "SceneBuilder",
]
