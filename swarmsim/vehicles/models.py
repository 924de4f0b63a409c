"""Factories for the unit models of the fleet, and model-specific actions.

Models:
    recon_drone: fast aerial scout with a long-range sensor and the ability
        to disable a unit at close range.
    cargo_drone: slower aerial carrier with a payload bay.
    surface_vessel: boat held on the water plane, exposed to sea state.
    submarine: diving unit.
"""

from __future__ import annotations

import logging

from swarmsim.alerts import AlertCode
from swarmsim.config import (
    CARGO_DRONE_AUTONOMY,
    CARGO_DRONE_CAPACITY,
    CARGO_DRONE_MAX_ALTITUDE,
    CARGO_DRONE_SPEED,
    CARGO_DRONE_WIND_SENSITIVITY,
    DISABLE_RANGE,
    RECON_DRONE_AUTONOMY,
    RECON_DRONE_MAX_ALTITUDE,
    RECON_DRONE_SPEED,
    RECON_DRONE_SURVEILLANCE_RANGE,
    RECON_DRONE_WIND_SENSITIVITY,
    SUBMARINE_AUTONOMY,
    SUBMARINE_CURRENT_SENSITIVITY,
    SUBMARINE_MAX_DEPTH,
    SUBMARINE_SPEED,
    SURFACE_VESSEL_AUTONOMY,
    SURFACE_VESSEL_CURRENT_SENSITIVITY,
    SURFACE_VESSEL_SPEED,
    SURFACE_VESSEL_WIND_EXPOSURE,
)
from swarmsim.environment import OperatingArea
from swarmsim.geo import Vector3
from swarmsim.unit import Time, Velocity

from .entity import Capability, EntityKind, MobileEntity
from .profile import AerialProfile, CargoHold, MarineProfile

logger = logging.getLogger(__name__)


def recon_drone(
    position: Vector3,
    max_speed: Velocity = RECON_DRONE_SPEED,
    endurance: Time = RECON_DRONE_AUTONOMY,
    area: OperatingArea | None = None,
    name: str | None = None,
) -> MobileEntity:
    return MobileEntity(
        position,
        max_speed,
        endurance,
        AerialProfile(float(RECON_DRONE_MAX_ALTITUDE), RECON_DRONE_WIND_SENSITIVITY),
        name=name,
        kind=EntityKind.RECON_DRONE,
        capabilities=(Capability.SURVEILLANCE, Capability.TARGET_DISABLE),
        sensor_range=float(RECON_DRONE_SURVEILLANCE_RANGE),
        area=area,
    )


def cargo_drone(
    position: Vector3,
    max_speed: Velocity = CARGO_DRONE_SPEED,
    endurance: Time = CARGO_DRONE_AUTONOMY,
    capacity: float = CARGO_DRONE_CAPACITY,
    area: OperatingArea | None = None,
    name: str | None = None,
) -> MobileEntity:
    return MobileEntity(
        position,
        max_speed,
        endurance,
        AerialProfile(float(CARGO_DRONE_MAX_ALTITUDE), CARGO_DRONE_WIND_SENSITIVITY),
        name=name,
        kind=EntityKind.CARGO_DRONE,
        cargo=CargoHold(capacity),
        area=area,
    )


def surface_vessel(
    position: Vector3,
    max_speed: Velocity = SURFACE_VESSEL_SPEED,
    endurance: Time = SURFACE_VESSEL_AUTONOMY,
    area: OperatingArea | None = None,
    name: str | None = None,
) -> MobileEntity:
    """Build a boat. Its position is projected onto the water plane."""
    return MobileEntity(
        position.with_z(0.0),
        max_speed,
        endurance,
        MarineProfile(0.0, SURFACE_VESSEL_CURRENT_SENSITIVITY, SURFACE_VESSEL_WIND_EXPOSURE),
        name=name,
        kind=EntityKind.SURFACE_VESSEL,
        area=area,
    )


def submarine(
    position: Vector3,
    max_speed: Velocity = SUBMARINE_SPEED,
    endurance: Time = SUBMARINE_AUTONOMY,
    max_depth: float = float(SUBMARINE_MAX_DEPTH),
    area: OperatingArea | None = None,
    name: str | None = None,
) -> MobileEntity:
    return MobileEntity(
        position,
        max_speed,
        endurance,
        MarineProfile(max_depth, SUBMARINE_CURRENT_SENSITIVITY),
        name=name,
        kind=EntityKind.SUBMARINE,
        area=area,
    )


# -------------------------------- Model actions --------------------------------
def surface(entity: MobileEntity) -> bool:
    """Bring a submersible straight up to the surface."""
    if not entity.is_submersible:
        return False
    return entity.move_to(entity.position.with_z(0.0))


def dive(entity: MobileEntity, depth: float) -> bool:
    """Send a submersible straight down to ``depth`` meters.

    Returns:
        bool: False for a non-submersible, a negative depth, a depth beyond
        the unit's limit, or a move rejected by :meth:`MobileEntity.move_to`.
    """
    if not entity.is_submersible:
        return False
    if depth < 0.0 or depth > entity.profile.max_depth:
        logger.info("%s cannot dive to %.1f m", entity.name, depth)
        return False
    return entity.move_to(entity.position.with_z(-depth))


def disable(actor: MobileEntity, target: MobileEntity) -> bool:
    """Disable ``target`` if ``actor`` can and is close enough.

    Returns:
        bool: True if the target was forced into FAILED.
    """
    if target is None or target is actor:
        return False
    if Capability.TARGET_DISABLE not in actor.capabilities:
        return False
    if actor.position.distance_to(target.position) >= float(DISABLE_RANGE):
        return False
    target.fail(AlertCode.SYSTEM_FAILURE, f"disabled by {actor.name}")
    logger.warning("%s disabled %s", actor.name, target.name)
    return True


def scan(observer: MobileEntity) -> list[MobileEntity]:
    """Units of the observer's area within its sensor range."""
    if Capability.SURVEILLANCE not in observer.capabilities or observer.area is None:
        return []
    return observer.area.neighbors(observer, observer.sensor_range)


def load_cargo(entity: MobileEntity, weight: float) -> bool:
    if entity.cargo is None:
        return False
    return entity.cargo.add(weight)


def unload_cargo(entity: MobileEntity, weight: float) -> bool:
    if entity.cargo is None:
        return False
    return entity.cargo.remove(weight)
