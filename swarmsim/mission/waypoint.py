"""Waypoint goals: every assigned unit must reach a fixed destination."""

from __future__ import annotations

from collections.abc import Callable
import logging
from typing import TYPE_CHECKING

from swarmsim.geo import Vector3
from swarmsim.vehicles import Medium, MobileEntity, OperationalState

from .mission import MissionGoal

if TYPE_CHECKING:
    from .mission import Mission

logger = logging.getLogger(__name__)

Eligibility = Callable[[MobileEntity], bool]


def any_unit(entity: MobileEntity) -> bool:
    return True


def aerial_only(entity: MobileEntity) -> bool:
    return entity.medium is Medium.AERIAL


def submersible_only(entity: MobileEntity) -> bool:
    return entity.is_submersible


class WaypointGoal(MissionGoal):
    """Bring every assigned unit within ``tolerance`` of ``destination``.

    A destination outside a unit's altitude or depth range is measured at
    the nearest point of that range.

    Units arriving are stopped, grounded and remembered in a per-mission
    arrival set so the resumption policy leaves them parked. Units that are
    not active (failed, in maintenance) are skipped and do not hold the
    mission back.

    Attributes:
        destination (Vector3): Point to reach.
        tolerance (float): Arrival radius in meters.
        label (str): Goal wording for the objective text.
    """

    def __init__(
        self,
        destination: Vector3,
        tolerance: float,
        eligibility: Eligibility = any_unit,
        label: str = "Waypoint",
    ):
        if destination is None:
            msg = "Destination cannot be None"
            raise ValueError(msg)
        if tolerance <= 0.0:
            msg = f"Arrival tolerance must be positive, got {tolerance}"
            raise ValueError(msg)
        self.destination = destination
        self.tolerance = float(tolerance)
        self.label = label
        self._eligibility = eligibility
        self._arrived: set[str] = set()

    @property
    def arrived(self) -> frozenset[str]:
        """Identifiers of the units that reached the destination."""
        return frozenset(self._arrived)

    def is_compatible(self, entity: MobileEntity) -> bool:
        return self._eligibility(entity)

    def objective(self) -> str:
        return f"{self.label} at {self.destination}"

    def is_settled(self, entity: MobileEntity) -> bool:
        return entity.id in self._arrived

    def progress(self, mission: Mission) -> float:
        entities = mission.entities
        if not entities:
            return 0.0
        return len(self._arrived) / len(entities)

    def update(self, mission: Mission, dt: float) -> None:
        entities = mission.entities
        if not entities:
            return
        for entity in entities:
            if entity.state is not OperationalState.ACTIVE or entity.id in self._arrived:
                continue
            aim = entity.reachable_point(self.destination)
            reached = entity.advance(aim, dt)
            if reached or entity.position.distance_to(aim) < self.tolerance:
                self._arrived.add(entity.id)
                entity.stop()
                entity.set_state(OperationalState.GROUNDED)
                logger.info("%s reached %s", entity.name, self.destination)

        pending = [
            entity
            for entity in entities
            if entity.id not in self._arrived and entity.state is OperationalState.ACTIVE
        ]
        if not pending:
            mission.complete(
                f"{self.label} done: {len(self._arrived)}/{len(entities)} units on site."
            )
