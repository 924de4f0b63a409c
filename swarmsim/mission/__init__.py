"""Missions: lifecycle state machine and goal strategies."""

from .factory import (
    inspection_mission,
    reconnaissance_mission,
    rescue_mission,
    surveillance_mission,
)
from .mission import Mission, MissionGoal, MissionKind, MissionStatus
from .rescue import RescueGoal, RescuePhase
from .waypoint import WaypointGoal, aerial_only, any_unit, submersible_only

__all__ = [
    "Mission",
    "MissionGoal",
    "MissionKind",
    "MissionStatus",
    "WaypointGoal",
    "RescueGoal",
    "RescuePhase",
    "any_unit",
    "aerial_only",
    "submersible_only",
    "surveillance_mission",
    "reconnaissance_mission",
    "inspection_mission",
    "rescue_mission",
]
