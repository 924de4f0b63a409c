"""Static hazards of the operating area.

Obstacles are vertical cylinders a unit may fly over or slide around.
Exclusion zones are spheres whose entry is always fatal to the move.
"""

from __future__ import annotations

from dataclasses import dataclass
import math

from swarmsim.geo import Vector3


def _check_shape(kind: str, radius: float, label: str) -> None:
    if radius <= 0.0:
        msg = f"{kind} radius must be positive, got {radius}"
        raise ValueError(msg)
    if label is None or not label.strip():
        msg = f"{kind} label cannot be blank"
        raise ValueError(msg)


@dataclass(frozen=True)
class Obstacle:
    """Cylinder spanning ``[z_min, z_max]`` around a vertical axis.

    Attributes:
        center (Vector3): Axis position; only X and Y matter.
        radius (float): Cylinder radius in meters.
        label (str): Name shown in logs.
        z_min (float): Bottom of the cylinder.
        z_max (float): Top of the cylinder.

    Example:
        >>> tower = Obstacle(Vector3(100, 0, 0), 20.0, "tower", 0.0, 150.0)
        >>> tower.contains(Vector3(110, 0, 50))
        True
        >>> tower.contains(Vector3(110, 0, 200))
        False
    """

    center: Vector3
    radius: float
    label: str
    z_min: float = -math.inf
    z_max: float = math.inf

    def __post_init__(self):
        if self.center is None:
            msg = "Obstacle center cannot be None"
            raise ValueError(msg)
        _check_shape("Obstacle", self.radius, self.label)
        if self.z_min > self.z_max:
            msg = f"Obstacle z_min {self.z_min} is above z_max {self.z_max}"
            raise ValueError(msg)

    def contains(self, position: Vector3) -> bool:
        return (
            self.z_min <= position.z <= self.z_max
            and self.center.distance_2d_to(position) < self.radius
        )


@dataclass(frozen=True)
class ExclusionZone:
    """Sphere units must never enter.

    Attributes:
        center (Vector3): Sphere center.
        radius (float): Sphere radius in meters.
        label (str): Name shown in logs.
    """

    center: Vector3
    radius: float
    label: str

    def __post_init__(self):
        if self.center is None:
            msg = "Exclusion zone center cannot be None"
            raise ValueError(msg)
        _check_shape("Exclusion zone", self.radius, self.label)

    def contains(self, position: Vector3) -> bool:
        return self.center.distance_to(position) <= self.radius
