"""Mobile units: the entity, its medium profiles and the fleet models."""

from .consumption import energy_cost
from .entity import Capability, EntityKind, EntityStatus, MobileEntity, OperationalState
from .models import (
    cargo_drone,
    disable,
    dive,
    load_cargo,
    recon_drone,
    scan,
    submarine,
    surface,
    surface_vessel,
    unload_cargo,
)
from .profile import (
    AerialProfile,
    CargoHold,
    MarineProfile,
    Medium,
    Profile,
    clamp_to_envelope,
    vertical_alert,
    within_vertical_limits,
)

__all__ = [
    "MobileEntity",
    "OperationalState",
    "EntityKind",
    "EntityStatus",
    "Capability",
    "Medium",
    "AerialProfile",
    "MarineProfile",
    "CargoHold",
    "Profile",
    "within_vertical_limits",
    "clamp_to_envelope",
    "vertical_alert",
    "energy_cost",
    "recon_drone",
    "cargo_drone",
    "surface_vessel",
    "submarine",
    "surface",
    "dive",
    "disable",
    "scan",
    "load_cargo",
    "unload_cargo",
]
