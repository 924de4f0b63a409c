"""Groups of units and the fleet-wide proximity monitor."""

from __future__ import annotations

import logging
from uuid import uuid4

import numpy as np

from swarmsim.alerts import AlertCode
from swarmsim.config import FLEET_COLLISION_DISTANCE, FLEET_RISK_DISTANCE
from swarmsim.geo import Vector3
from swarmsim.vehicles import MobileEntity, OperationalState

logger = logging.getLogger(__name__)


class Swarm:
    """Named group of units operating together.

    Besides membership, the swarm runs a periodic pairwise proximity scan.
    It only reports and fails units; trajectories are left to the local
    steering of each unit.

    Attributes:
        id (str): Unique identifier.
        name (str): Display name.
    """

    def __init__(self, name: str | None = None):
        self.id = str(uuid4())
        self.name = name or f"Swarm-{self.id[:8]}"
        self._entities: list[MobileEntity] = []

    @property
    def entities(self) -> list[MobileEntity]:
        return list(self._entities)

    def add(self, entity: MobileEntity) -> bool:
        if entity is None or entity in self._entities:
            return False
        self._entities.append(entity)
        return True

    def remove(self, entity: MobileEntity) -> bool:
        if entity not in self._entities:
            return False
        self._entities.remove(entity)
        return True

    def __len__(self) -> int:
        return len(self._entities)

    def __iter__(self):
        return iter(list(self._entities))

    def __contains__(self, entity: object) -> bool:
        return entity in self._entities

    def check_proximity(self) -> list[str]:
        """Scan every pair with at least one active unit.

        Pairs closer than 10 m collide: both units fail with a collision
        alert. Pairs closer than 50 m are reported as at risk.

        Returns:
            list[str]: One line per colliding or at-risk pair.
        """
        report: list[str] = []
        members = self._entities
        for i, first in enumerate(members):
            for second in members[i + 1 :]:
                if (
                    first.state is not OperationalState.ACTIVE
                    and second.state is not OperationalState.ACTIVE
                ):
                    continue
                distance = first.position.distance_to(second.position)
                if distance < float(FLEET_COLLISION_DISTANCE):
                    line = f"COLLISION: {first.name} and {second.name} ({distance:.1f} m)"
                    for entity, other in ((first, second), (second, first)):
                        if not entity.is_failed():
                            entity.fail(AlertCode.VEHICLE_COLLISION, f"collided with {other.name}")
                    report.append(line)
                elif distance < float(FLEET_RISK_DISTANCE):
                    report.append(f"RISK: {first.name} and {second.name} ({distance:.1f} m)")
        if report:
            logger.warning("%s: %d proximity event(s)", self.name, len(report))
        return report

    def centroid(self) -> Vector3 | None:
        if not self._entities:
            return None
        positions = np.array([entity.position.as_array() for entity in self._entities])
        return Vector3.from_array(positions.mean(axis=0))

    def mean_autonomy(self) -> float:
        if not self._entities:
            return 0.0
        return float(np.mean([entity.autonomy for entity in self._entities]))

    def __str__(self) -> str:
        return f"{self.name} ({len(self._entities)} units)"
