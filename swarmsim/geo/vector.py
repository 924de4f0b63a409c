"""Immutable 3D point and displacement in meters.

Z is signed: non-negative values are altitudes, non-positive values are
depths, reported as the positive magnitude by :attr:`Vector3.depth`.
"""

from __future__ import annotations

from dataclasses import dataclass
import math

import numpy as np


@dataclass(frozen=True, slots=True)
class Vector3:
    """Cartesian triple, compared and hashed component-wise.

    Attributes:
        x (float): East coordinate in meters.
        y (float): North coordinate in meters.
        z (float): Altitude (positive) or negated depth (negative) in meters.

    Example:
        >>> a = Vector3(0, 0, 0)
        >>> b = Vector3(3, 4, 12)
        >>> a.distance_to(b)
        13.0
        >>> a.distance_2d_to(b)
        5.0
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __post_init__(self):
        for name in ("x", "y", "z"):
            value = getattr(self, name)
            if not math.isfinite(value):
                msg = f"Vector3.{name} must be finite, got {value}"
                raise ValueError(msg)
            object.__setattr__(self, name, float(value))

    @property
    def depth(self) -> float:
        """Depth below the surface, i.e. ``-z``."""
        return -self.z

    def distance_to(self, other: Vector3) -> float:
        return math.sqrt(
            (self.x - other.x) ** 2 + (self.y - other.y) ** 2 + (self.z - other.z) ** 2
        )

    def distance_2d_to(self, other: Vector3) -> float:
        """Distance in the horizontal plane, ignoring Z."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def norm(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> Vector3:
        """Unit vector with the same direction, or the zero vector unchanged."""
        n = self.norm()
        if n == 0.0:
            return self
        return Vector3(self.x / n, self.y / n, self.z / n)

    def with_z(self, z: float) -> Vector3:
        return Vector3(self.x, self.y, z)

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, k: float) -> Vector3:
        return Vector3(self.x * k, self.y * k, self.z * k)

    __rmul__ = __mul__

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def as_array(self) -> np.ndarray:
        return np.array((self.x, self.y, self.z), dtype=float)

    @classmethod
    def from_array(cls, values) -> Vector3:
        """Build a vector from any 3-element sequence or numpy array."""
        x, y, z = (float(v) for v in values)
        return cls(x, y, z)

    def __str__(self) -> str:
        return f"({self.x:.1f}, {self.y:.1f}, {self.z:.1f})"


ZERO = Vector3()
