"""Cross-element scene validation.

Scans over ordered element sequences:
- duplicate identifiers within one element kind
- overlapping building footprints
- antennas sharing a position
"""

from __future__ import annotations

from collections.abc import Sequence
from itertools import combinations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from kover.models.elements import Antenna, Building


def has_id(elements: Sequence[Building] | Sequence[Antenna], element_id: str) -> bool:
    """True if any element already uses this identifier."""
    return any(e.id == element_id for e in elements)


def find_overlapping(buildings: Sequence[Building], candidate: Building) -> Building | None:
    """First existing building whose footprint overlaps the candidate's."""
    footprint = candidate.extent
    return next((b for b in buildings if b.extent.overlaps(footprint)), None)


def find_collocated(antennas: Sequence[Antenna]) -> tuple[Antenna, Antenna] | None:
    """First pair of antennas at the same position, in collection order."""
    return next(
        ((a1, a2) for a1, a2 in combinations(antennas, 2) if a1.position == a2.position),
        None,
    )
