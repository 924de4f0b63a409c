"""Heterogeneous fleet simulator.

Aerial drones, surface vessels and submarines move through a shared
operating area under wind, currents and rain, avoid each other and the
terrain, and carry out missions driven by a fixed-step simulator.

Example:
    >>> from swarmsim import OperatingArea, Simulator, Vector3
    >>> from swarmsim.vehicles import recon_drone
    >>> from swarmsim.mission import reconnaissance_mission
    >>> area = OperatingArea(Vector3(0, 0, -100), Vector3(1000, 1000, 500))
    >>> drone = recon_drone(Vector3(0, 0, 50), area=area)
    >>> mission = reconnaissance_mission(Vector3(800, 0, 50))
    >>> mission.assign(drone)
    True
"""

import logging

from .alerts import Alert, AlertChannel, AlertCode
from .environment import OperatingArea
from .fleet import Swarm
from .geo import Vector3
from .log import setup_logging
from .mission import Mission, MissionKind, MissionStatus
from .simulator import Simulator
from .vehicles import MobileEntity, OperationalState

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Alert",
    "AlertChannel",
    "AlertCode",
    "Mission",
    "MissionKind",
    "MissionStatus",
    "MobileEntity",
    "OperatingArea",
    "OperationalState",
    "Simulator",
    "Swarm",
    "Vector3",
    "setup_logging",
]
