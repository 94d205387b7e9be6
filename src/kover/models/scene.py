"""Scene model and its incremental builder.

A Scene is frozen. It is assembled by a SceneBuilder that receives parsed
records in stream order, enforces the cross-element invariants on every
insertion, and only hands out the Scene once reading has finished.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict

from kover.errors import DuplicateIdError, OverlapError, SamePositionError
from kover.models.elements import Antenna, Building
from kover.validators.scene import find_collocated, find_overlapping, has_id

logger = logging.getLogger(__name__)


class Scene(BaseModel):
    """Validated buildings and antennas, in insertion order."""

    model_config = ConfigDict(frozen=True)

    buildings: tuple[Building, ...] = ()
    antennas: tuple[Antenna, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.buildings and not self.antennas

    def get_building(self, building_id: str) -> Building | None:
        """Find a building by identifier."""
        return next((b for b in self.buildings if b.id == building_id), None)

    def get_antenna(self, antenna_id: str) -> Antenna | None:
        """Find an antenna by identifier."""
        return next((a for a in self.antennas if a.id == antenna_id), None)


class SceneBuilder:
    """Accumulates buildings and antennas, rejecting the first inconsistency."""

    def __init__(self) -> None:
        self._buildings: list[Building] = []
        self._antennas: list[Antenna] = []

    def add_building(self, building: Building) -> Building:
        """Append a building.

        Raises:
            DuplicateIdError: another building already has this id.
            OverlapError: the footprint overlaps an existing building.
        """
        if has_id(self._buildings, building.id):
            raise DuplicateIdError("building", building.id)
        other = find_overlapping(self._buildings, building)
        if other is not None:
            raise OverlapError(other.id, building.id)
        self._buildings.append(building)
        logger.debug("Added building %s at (%d, %d)", building.id, building.x, building.y)
        return building

    def add_antenna(self, antenna: Antenna) -> Antenna:
        """Append an antenna.

        The position check runs after insertion, over the whole collection.

        Raises:
            DuplicateIdError: another antenna already has this id.
            SamePositionError: two antennas now share a position.
        """
        if has_id(self._antennas, antenna.id):
            raise DuplicateIdError("antenna", antenna.id)
        self._antennas.append(antenna)
        pair = find_collocated(self._antennas)
        if pair is not None:
            raise SamePositionError(pair[0].id, pair[1].id)
        logger.debug("Added antenna %s at (%d, %d)", antenna.id, antenna.x, antenna.y)
        return antenna

    def add(self, record: Building | Antenna) -> Building | Antenna:
        """Dispatch a parsed record to add_building or add_antenna."""
        if isinstance(record, Building):
            return self.add_building(record)
        return self.add_antenna(record)

    def build(self) -> Scene:
        return Scene(buildings=tuple(self._buildings), antennas=tuple(self._antennas))
