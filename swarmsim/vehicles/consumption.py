"""Energy model: autonomy percentage spent to travel a given distance.

The base rate is 0.4 % of a full reserve per kilometer. It is then scaled by
the conditions the unit meets at its current position:

Aerial units
    ``* (1 + wind / 100 * wind_sensitivity)``
    ``* (1 + precipitation / 200)`` when precipitation falls at the unit
    ``* (1 + altitude / max_altitude * 0.2)``

Marine units
    ``* (1 + current / 100 * current_sensitivity)``
    ``* (1 + depth / max_depth * 0.3)`` for diving units
    ``* (1 + wind / 100 * wind_exposure)`` for units exposed to sea state

Units with a cargo hold
    ``* 0.8 * (1 + load / capacity * 0.5)``
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from swarmsim.config import (
    ALTITUDE_CONSUMPTION_FACTOR,
    BASE_CONSUMPTION_PER_KM,
    CARGO_BASE_FACTOR,
    CARGO_LOAD_FACTOR,
    DEPTH_CONSUMPTION_FACTOR,
)
from swarmsim.environment import CALM_WIND, DRY, STILL_WATER
from swarmsim.geo import Vector3
from swarmsim.unit import Kilometer

from .profile import AerialProfile, CargoHold, MarineProfile, Profile

if TYPE_CHECKING:
    from swarmsim.environment import OperatingArea


def medium_factor(profile: Profile, position: Vector3, area: OperatingArea | None) -> float:
    """Multiplier applied by the medium and the ambient conditions at ``position``.

    A unit outside any operating area flies or sails in calm conditions.
    """
    wind = area.wind if area is not None else CALM_WIND
    current = area.current if area is not None else STILL_WATER
    rain = area.precipitation_at(position) if area is not None else DRY

    match profile:
        case AerialProfile():
            factor = 1.0 + wind.intensity / 100.0 * profile.wind_sensitivity
            if rain.is_falling:
                factor *= 1.0 + rain.intensity / 200.0
            altitude = max(0.0, position.z)
            factor *= 1.0 + altitude / profile.max_altitude * ALTITUDE_CONSUMPTION_FACTOR
            return factor
        case MarineProfile():
            factor = 1.0 + current.intensity / 100.0 * profile.current_sensitivity
            if profile.can_dive:
                depth = max(0.0, position.depth)
                factor *= 1.0 + depth / profile.max_depth * DEPTH_CONSUMPTION_FACTOR
            if profile.wind_exposure > 0.0:
                factor *= 1.0 + wind.intensity / 100.0 * profile.wind_exposure
            return factor
    msg = f"Unknown profile {profile!r}"
    raise TypeError(msg)


def cargo_factor(cargo: CargoHold | None) -> float:
    if cargo is None:
        return 1.0
    return CARGO_BASE_FACTOR * (1.0 + cargo.fraction * CARGO_LOAD_FACTOR)


def energy_cost(
    profile: Profile,
    position: Vector3,
    distance: float,
    area: OperatingArea | None = None,
    cargo: CargoHold | None = None,
) -> float:
    """Autonomy percentage needed to cover ``distance`` meters from ``position``.

    Args:
        profile: Medium profile of the unit.
        position: Where the conditions are sampled.
        distance: Distance to cover in meters.
        area: Operating area providing the weather, if any.
        cargo: Cargo hold of the unit, if any.

    Returns:
        float: Percentage points of autonomy.
    """
    base = distance / float(Kilometer(1)) * BASE_CONSUMPTION_PER_KM
    return base * medium_factor(profile, position, area) * cargo_factor(cargo)
