"""Medium-specific parameters of a mobile unit.

A unit is either aerial or marine. Instead of subclassing, the unit carries
one profile record describing its medium; the free functions below dispatch
on that record for the vertical limit checks.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from swarmsim.alerts import AlertCode
from swarmsim.config import SURFACE_TOLERANCE
from swarmsim.geo import Vector3


class Medium(Enum):
    AERIAL = auto()
    MARINE = auto()


@dataclass(frozen=True)
class AerialProfile:
    """Flight envelope of an aerial unit.

    Attributes:
        max_altitude (float): Ceiling in meters, valid altitudes are ``[0, max_altitude]``.
        wind_sensitivity (float): Multiplier of the wind penalty on consumption.
    """

    max_altitude: float
    wind_sensitivity: float

    def __post_init__(self):
        if float(self.max_altitude) <= 0.0:
            msg = f"Maximum altitude must be positive, got {self.max_altitude}"
            raise ValueError(msg)
        if self.wind_sensitivity < 0.0:
            msg = f"Wind sensitivity cannot be negative, got {self.wind_sensitivity}"
            raise ValueError(msg)
        object.__setattr__(self, "max_altitude", float(self.max_altitude))

    @property
    def medium(self) -> Medium:
        return Medium.AERIAL


@dataclass(frozen=True)
class MarineProfile:
    """Diving envelope of a marine unit.

    A ``max_depth`` of zero describes a surface-only vessel.

    Attributes:
        max_depth (float): Deepest valid depth in meters.
        current_sensitivity (float): Multiplier of the current penalty on consumption.
        wind_exposure (float): Multiplier of the sea-state penalty caused by
            wind, zero for units that are not exposed at the surface.
    """

    max_depth: float
    current_sensitivity: float
    wind_exposure: float = 0.0

    def __post_init__(self):
        if float(self.max_depth) < 0.0:
            msg = f"Maximum depth cannot be negative, got {self.max_depth}"
            raise ValueError(msg)
        if self.current_sensitivity < 0.0:
            msg = f"Current sensitivity cannot be negative, got {self.current_sensitivity}"
            raise ValueError(msg)
        if self.wind_exposure < 0.0:
            msg = f"Wind exposure cannot be negative, got {self.wind_exposure}"
            raise ValueError(msg)
        object.__setattr__(self, "max_depth", float(self.max_depth))

    @property
    def medium(self) -> Medium:
        return Medium.MARINE

    @property
    def can_dive(self) -> bool:
        return self.max_depth > 0.0


Profile = AerialProfile | MarineProfile


@dataclass
class CargoHold:
    """Payload bay. The load changes, the capacity does not.

    Attributes:
        capacity (float): Maximum payload in kilograms.
        load (float): Current payload in kilograms.
    """

    capacity: float
    load: float = 0.0

    def __post_init__(self):
        if self.capacity <= 0.0:
            msg = f"Cargo capacity must be positive, got {self.capacity}"
            raise ValueError(msg)
        if not 0.0 <= self.load <= self.capacity:
            msg = f"Cargo load must be within [0, {self.capacity}], got {self.load}"
            raise ValueError(msg)

    @property
    def fraction(self) -> float:
        return self.load / self.capacity

    def add(self, weight: float) -> bool:
        if weight < 0.0 or self.load + weight > self.capacity:
            return False
        self.load += weight
        return True

    def remove(self, weight: float) -> bool:
        if weight < 0.0 or weight > self.load:
            return False
        self.load -= weight
        return True


def within_vertical_limits(profile: Profile, position: Vector3) -> bool:
    """Check the altitude or depth of ``position`` against the unit's envelope.

    Aerial units must stay within ``[0, max_altitude]``. Marine units must
    keep a depth within ``[-0.1, max_depth]``, the small negative margin
    allowing a hull riding slightly above the surface.
    """
    match profile:
        case AerialProfile(max_altitude=ceiling):
            return 0.0 <= position.z <= ceiling
        case MarineProfile(max_depth=floor):
            return -float(SURFACE_TOLERANCE) <= position.depth <= floor
    msg = f"Unknown profile {profile!r}"
    raise TypeError(msg)


def clamp_to_envelope(profile: Profile, point: Vector3) -> Vector3:
    """Nearest point to ``point`` whose altitude or depth the unit can hold."""
    match profile:
        case AerialProfile(max_altitude=ceiling):
            return point.with_z(min(max(point.z, 0.0), ceiling))
        case MarineProfile(max_depth=floor):
            return point.with_z(min(max(point.z, -floor), float(SURFACE_TOLERANCE)))
    msg = f"Unknown profile {profile!r}"
    raise TypeError(msg)


def vertical_alert(profile: Profile) -> AlertCode:
    """Alert code raised when a move breaks the vertical envelope."""
    if profile.medium is Medium.AERIAL:
        return AlertCode.INVALID_ALTITUDE
    return AlertCode.INVALID_DEPTH


def describe_limits(profile: Profile) -> str:
    match profile:
        case AerialProfile(max_altitude=ceiling, wind_sensitivity=k):
            return f"altitude 0-{ceiling:.0f} m, wind sensitivity {k:.1f}"
        case MarineProfile(max_depth=floor, current_sensitivity=k):
            return f"depth 0-{floor:.0f} m, current sensitivity {k:.1f}"
    return ""
