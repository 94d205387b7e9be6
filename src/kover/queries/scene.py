"""Read-only queries over a validated scene.

None of these can fail: the scene invariants were enforced while reading.
"""

from __future__ import annotations

from functools import reduce

from kover.models.geometry import Extent
from kover.models.scene import Scene

EMPTY_SUMMARY = "An empty scene"
UNDEFINED_BOUNDING_BOX = "undefined (empty scene)"


def bounding_box(scene: Scene) -> Extent | None:
    """Smallest box covering every building footprint and antenna range.

    Returns None for a scene with no elements.
    """
    extents = [b.extent for b in scene.buildings] + [a.extent for a in scene.antennas]
    if not extents:
        return None
    return reduce(Extent.union, extents)


def format_bounding_box(scene: Scene) -> str:
    box = bounding_box(scene)
    if box is None:
        return UNDEFINED_BOUNDING_BOX
    return f"bounding box [{box.left}, {box.right}] x [{box.bottom}, {box.top}]"


def _count(n: int, noun: str) -> str:
    return f"{n} {noun}{'s' if n > 1 else ''}"


def summarize(scene: Scene) -> str:
    """One-line element count, e.g. 'A scene with 2 buildings and 1 antenna'."""
    if scene.is_empty:
        return EMPTY_SUMMARY
    parts = []
    if scene.buildings:
        parts.append(_count(len(scene.buildings), "building"))
    if scene.antennas:
        parts.append(_count(len(scene.antennas), "antenna"))
    return "A scene with " + " and ".join(parts)


def describe(scene: Scene) -> str:
    """Summary line, then buildings, then antennas, each group sorted by id."""
    lines = [summarize(scene)]
    lines.extend(f"  {b.describe()}" for b in sorted(scene.buildings, key=lambda b: b.id))
    lines.extend(f"  {a.describe()}" for a in sorted(scene.antennas, key=lambda a: a.id))
    return "\n".join(lines)


def scene_to_dict(scene: Scene) -> dict:
    """Plain-data view of the scene for JSON output, elements sorted by id."""
    box = bounding_box(scene)
    return {
        "summary": summarize(scene),
        "bounding_box": box.model_dump() if box is not None else None,
        "buildings": [
            b.model_dump() for b in sorted(scene.buildings, key=lambda b: b.id)
        ],
        "antennas": [
            a.model_dump() for a in sorted(scene.antennas, key=lambda a: a.id)
        ],
    }
