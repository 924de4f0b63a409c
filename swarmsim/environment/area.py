"""Bounded operating area shared by every unit of a scenario.

The area owns the ambient fields, the static hazards and the registry of
units currently operating in it. Units query it each tick for their
neighbors and for a *clamped* destination: the last safe point of the
straight path toward their target before the first obstacle or unit
footprint that covers the target.

The area is passed explicitly to units and missions, so each test or scenario
can build its own isolated world.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from swarmsim.alerts import AlertChannel
from swarmsim.config import (
    CLAMP_PULLBACK,
    FLYOVER_MARGIN,
    OBSTACLE_SAFETY_MARGIN,
    RAIN_ZONE_MAX,
    RAIN_ZONE_MIN,
    VEHICLE_FOOTPRINT,
    VEHICLE_VERTICAL_SLICE,
)
from swarmsim.geo import Vector3

from .fields import CALM_WIND, DRY, STILL_WATER, MarineCurrent, Precipitation, Wind
from .hazards import ExclusionZone, Obstacle

if TYPE_CHECKING:
    from swarmsim.vehicles import MobileEntity

logger = logging.getLogger(__name__)


def segment_entry(start: Vector3, destination: Vector3, center: Vector3, radius: float) -> float | None:
    """Find where the horizontal segment ``start -> destination`` enters a circle.

    Solves ``|start + t * d - center|^2 = radius^2`` in the XY plane and
    returns the first root within ``[0, 1]``.

    Args:
        start: Segment origin.
        destination: Segment end.
        center: Circle center (Z ignored).
        radius: Circle radius.

    Returns:
        float | None: Segment parameter of the crossing, or None when the
        segment does not cross the circle or has no horizontal extent.
    """
    dx = destination.x - start.x
    dy = destination.y - start.y
    fx = start.x - center.x
    fy = start.y - center.y

    a = dx * dx + dy * dy
    if a == 0.0:
        return None
    b = 2.0 * (fx * dx + fy * dy)
    c = fx * fx + fy * fy - radius * radius

    delta = b * b - 4.0 * a * c
    if delta < 0.0:
        return None
    root = math.sqrt(delta)
    t1 = (-b - root) / (2.0 * a)
    t2 = (-b + root) / (2.0 * a)
    if 0.0 <= t1 <= 1.0:
        return t1
    if 0.0 <= t2 <= 1.0:
        return t2
    return None


def _inside_2d(point: Vector3, center: Vector3, radius: float) -> bool:
    dx = point.x - center.x
    dy = point.y - center.y
    return dx * dx + dy * dy < radius * radius


class OperatingArea:
    """Bounding volume, weather, hazards and unit registry of a scenario.

    Attributes:
        minimum (Vector3): Lower corner of the bounding volume.
        maximum (Vector3): Upper corner of the bounding volume.
        alerts (AlertChannel): Channel shared by the units attached to the area.
    """

    def __init__(
        self,
        minimum: Vector3,
        maximum: Vector3,
        alerts: AlertChannel | None = None,
    ):
        """Create an area with calm weather and no hazards.

        Args:
            minimum: Lower corner.
            maximum: Upper corner.
            alerts: Channel to publish unit alerts on. A fresh one by default.

        Raises:
            ValueError: If a corner is missing or ``minimum`` is not strictly
                below ``maximum`` on X and Y.
        """
        if minimum is None or maximum is None:
            msg = "Operating area corners cannot be None"
            raise ValueError(msg)
        if minimum.x >= maximum.x or minimum.y >= maximum.y:
            msg = f"Degenerate operating area {minimum} -> {maximum}"
            raise ValueError(msg)

        self.minimum = minimum
        self.maximum = maximum
        self.alerts = alerts if alerts is not None else AlertChannel()

        self._wind = CALM_WIND
        self._current = STILL_WATER
        self._precipitation = DRY
        self._rain_min = Vector3(*RAIN_ZONE_MIN)
        self._rain_max = Vector3(*RAIN_ZONE_MAX)

        self._obstacles: list[Obstacle] = []
        self._exclusion_zones: list[ExclusionZone] = []
        self._entities: list[MobileEntity] = []

    # -------------------------------- Weather --------------------------------
    @property
    def wind(self) -> Wind:
        return self._wind

    @wind.setter
    def wind(self, wind: Wind):
        if wind is None:
            msg = "Wind cannot be None"
            raise ValueError(msg)
        logger.info("Wind set to %.0f%% toward %s", wind.intensity, wind.direction)
        self._wind = wind

    @property
    def current(self) -> MarineCurrent:
        return self._current

    @current.setter
    def current(self, current: MarineCurrent):
        if current is None:
            msg = "Marine current cannot be None"
            raise ValueError(msg)
        logger.info("Current set to %.0f%% toward %s", current.intensity, current.direction)
        self._current = current

    @property
    def precipitation(self) -> Precipitation:
        return self._precipitation

    @precipitation.setter
    def precipitation(self, precipitation: Precipitation):
        if precipitation is None:
            msg = "Precipitation cannot be None"
            raise ValueError(msg)
        logger.info("Precipitation set to %s at %.0f%%", precipitation.kind.name, precipitation.intensity)
        self._precipitation = precipitation

    @property
    def rain_zone(self) -> tuple[Vector3, Vector3]:
        return self._rain_min, self._rain_max

    def set_rain_zone(self, minimum: Vector3, maximum: Vector3) -> None:
        """Move the sub-region where the precipitation field applies."""
        if minimum.x > maximum.x or minimum.y > maximum.y:
            msg = f"Degenerate rain zone {minimum} -> {maximum}"
            raise ValueError(msg)
        self._rain_min = minimum
        self._rain_max = maximum

    def precipitation_at(self, position: Vector3) -> Precipitation:
        """Precipitation felt at ``position``: the field inside the rain zone, dry elsewhere."""
        if (
            self._rain_min.x <= position.x <= self._rain_max.x
            and self._rain_min.y <= position.y <= self._rain_max.y
        ):
            return self._precipitation
        return DRY

    # -------------------------------- Hazards --------------------------------
    def add_obstacle(self, obstacle: Obstacle) -> None:
        self._obstacles.append(obstacle)

    def add_exclusion_zone(self, zone: ExclusionZone) -> None:
        self._exclusion_zones.append(zone)

    @property
    def obstacles(self) -> tuple[Obstacle, ...]:
        return tuple(self._obstacles)

    @property
    def exclusion_zones(self) -> tuple[ExclusionZone, ...]:
        return tuple(self._exclusion_zones)

    def collides_with_obstacle(self, position: Vector3) -> bool:
        return any(obstacle.contains(position) for obstacle in self._obstacles)

    def in_exclusion_zone(self, position: Vector3) -> bool:
        return any(zone.contains(position) for zone in self._exclusion_zones)

    # -------------------------------- Registry --------------------------------
    def register(self, entity: MobileEntity) -> None:
        if entity is not None and entity not in self._entities:
            self._entities.append(entity)

    def deregister(self, entity: MobileEntity) -> None:
        if entity in self._entities:
            self._entities.remove(entity)

    @property
    def entities(self) -> list[MobileEntity]:
        return list(self._entities)

    def neighbors(self, requester: MobileEntity, radius: float) -> list[MobileEntity]:
        """Registered units within ``radius`` of ``requester``, excluding itself and failed units."""
        origin = requester.position
        return [
            other
            for other in self._entities
            if other is not requester
            and not other.is_failed()
            and origin.distance_to(other.position) <= radius
        ]

    def contains(self, position: Vector3) -> bool:
        return (
            self.minimum.x <= position.x <= self.maximum.x
            and self.minimum.y <= position.y <= self.maximum.y
            and self.minimum.z <= position.z <= self.maximum.z
        )

    # -------------------------------- Clamping --------------------------------
    def clamp_destination(
        self,
        requester: MobileEntity | None,
        start: Vector3,
        destination: Vector3,
        z: float,
    ) -> Vector3:
        """Pull ``destination`` back along the path when an obstacle or unit occupies it.

        Only hazards whose (inflated) footprint contains the destination are
        considered; a path merely grazing an obstacle is left to the sub-step
        collision handling of the unit.

        Args:
            requester: Unit asking, excluded from the footprint test.
            start: Current position of the unit.
            destination: Intended destination.
            z: Vertical coordinate of the unit, for the flyover test.

        Returns:
            Vector3: The destination, or the last safe point of the segment
            before the nearest blocking footprint.
        """
        min_t = 1.0
        blocker = None

        for obstacle in self._obstacles:
            if z > obstacle.z_max + float(FLYOVER_MARGIN):
                continue
            radius = obstacle.radius + float(OBSTACLE_SAFETY_MARGIN)
            if not _inside_2d(destination, obstacle.center, radius):
                continue
            t = segment_entry(start, destination, obstacle.center, radius)
            if t is not None and t < min_t:
                min_t, blocker = t, obstacle.label

        footprint = float(VEHICLE_FOOTPRINT)
        for other in self._entities:
            if other is requester:
                continue
            if abs(z - other.position.z) > float(VEHICLE_VERTICAL_SLICE):
                continue
            if not _inside_2d(destination, other.position, footprint):
                continue
            t = segment_entry(start, destination, other.position, footprint)
            if t is not None and t < min_t:
                min_t, blocker = t, other.name

        if blocker is None:
            return destination

        t_safe = max(0.0, min_t - CLAMP_PULLBACK)
        clamped = start + (destination - start) * t_safe
        logger.debug("Destination %s clamped to %s by %s", destination, clamped, blocker)
        return clamped

    def __str__(self) -> str:
        return (
            f"OperatingArea[{self.minimum} -> {self.maximum}, "
            f"{len(self._obstacles)} obstacles, {len(self._exclusion_zones)} exclusion zones, "
            f"{len(self._entities)} units]"
        )
