"""Ambient fields of the operating area: wind, marine current, precipitation.

Each field is an immutable value with an intensity in ``[0, 100]``. Wind and
current also carry a direction; the drift they impose over ``dt`` seconds is
``direction * intensity / 100 * dt``. Operators change the weather by
replacing a field on the area, never by mutating one.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
import math

from swarmsim.geo import ZERO, Vector3

MAX_INTENSITY = 100.0


def _check_intensity(kind: str, intensity: float) -> float:
    if not 0.0 <= intensity <= MAX_INTENSITY:
        msg = f"{kind} intensity must be within [0, {MAX_INTENSITY}], got {intensity}"
        raise ValueError(msg)
    return float(intensity)


@dataclass(frozen=True)
class Wind:
    """Air mass movement pushing aerial units in the horizontal plane.

    Attributes:
        direction (Vector3): Direction the wind blows toward. Only X and Y
            contribute to drift.
        intensity (float): Strength in ``[0, 100]``.
    """

    direction: Vector3 = field(default=ZERO)
    intensity: float = 0.0

    def __post_init__(self):
        if self.direction is None:
            msg = "Wind direction cannot be None"
            raise ValueError(msg)
        object.__setattr__(self, "intensity", _check_intensity("Wind", self.intensity))

    @classmethod
    def from_heading(cls, heading: float, intensity: float) -> Wind:
        """Build a horizontal wind from a heading in radians (0 = +X)."""
        return cls(Vector3(math.cos(heading), math.sin(heading), 0.0), intensity)

    def drift(self, dt: float) -> Vector3:
        scale = self.intensity / MAX_INTENSITY * dt
        return Vector3(self.direction.x * scale, self.direction.y * scale, 0.0)


@dataclass(frozen=True)
class MarineCurrent:
    """Water mass movement pushing marine units on all three axes.

    Attributes:
        direction (Vector3): Direction of the flow.
        intensity (float): Strength in ``[0, 100]``.
    """

    direction: Vector3 = field(default=ZERO)
    intensity: float = 0.0

    def __post_init__(self):
        if self.direction is None:
            msg = "Current direction cannot be None"
            raise ValueError(msg)
        object.__setattr__(self, "intensity", _check_intensity("Current", self.intensity))

    def drift(self, dt: float) -> Vector3:
        return self.direction * (self.intensity / MAX_INTENSITY * dt)


class PrecipitationKind(Enum):
    NONE = auto()
    LIGHT_RAIN = auto()
    MODERATE_RAIN = auto()
    HEAVY_RAIN = auto()
    SNOW = auto()
    HAIL = auto()


@dataclass(frozen=True)
class Precipitation:
    """Rain, snow or hail. Any positive intensity counts as falling.

    Attributes:
        kind (PrecipitationKind): Type of precipitation.
        intensity (float): Strength in ``[0, 100]``.
    """

    kind: PrecipitationKind = PrecipitationKind.NONE
    intensity: float = 0.0

    def __post_init__(self):
        if self.kind is None:
            msg = "Precipitation kind cannot be None"
            raise ValueError(msg)
        object.__setattr__(
            self, "intensity", _check_intensity("Precipitation", self.intensity)
        )

    @property
    def is_falling(self) -> bool:
        return self.intensity > 0.0


CALM_WIND = Wind()
STILL_WATER = MarineCurrent()
DRY = Precipitation()
