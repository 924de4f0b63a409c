"""Constructors for the mission variants."""

from __future__ import annotations

import random

from swarmsim.config import (
    INSPECTION_TOLERANCE,
    RECONNAISSANCE_TOLERANCE,
    SURVEILLANCE_TOLERANCE,
)
from swarmsim.geo import Vector3
from swarmsim.unit import ClockTime, Time
from swarmsim.vehicles import MobileEntity

from .mission import Mission, MissionKind
from .rescue import RescueGoal
from .waypoint import WaypointGoal, aerial_only, any_unit, submersible_only


def surveillance_mission(
    destination: Vector3,
    scheduled_start: Time | float = ClockTime(0),
    scheduled_end: Time | float | None = None,
    **kwargs,
) -> Mission:
    """Any unit patrols to ``destination`` (100 m tolerance)."""
    goal = WaypointGoal(destination, float(SURVEILLANCE_TOLERANCE), any_unit, "Surveillance")
    return Mission(
        MissionKind.SURVEILLANCE,
        goal,
        scheduled_start=scheduled_start,
        scheduled_end=scheduled_end,
        **kwargs,
    )


def reconnaissance_mission(
    destination: Vector3,
    scheduled_start: Time | float = ClockTime(0),
    scheduled_end: Time | float | None = None,
    **kwargs,
) -> Mission:
    """Aerial units fly to ``destination`` (100 m tolerance)."""
    goal = WaypointGoal(destination, float(RECONNAISSANCE_TOLERANCE), aerial_only, "Reconnaissance")
    return Mission(
        MissionKind.RECONNAISSANCE,
        goal,
        scheduled_start=scheduled_start,
        scheduled_end=scheduled_end,
        **kwargs,
    )


def inspection_mission(
    destination: Vector3,
    scheduled_start: Time | float = ClockTime(0),
    scheduled_end: Time | float | None = None,
    **kwargs,
) -> Mission:
    """Submersible units dive to ``destination`` (50 m tolerance)."""
    goal = WaypointGoal(destination, float(INSPECTION_TOLERANCE), submersible_only, "Inspection")
    return Mission(
        MissionKind.INSPECTION,
        goal,
        scheduled_start=scheduled_start,
        scheduled_end=scheduled_end,
        **kwargs,
    )


def rescue_mission(
    target: MobileEntity,
    scheduled_start: Time | float = ClockTime(0),
    scheduled_end: Time | float | None = None,
    rng: random.Random | None = None,
    **kwargs,
) -> Mission:
    """Any unit but ``target`` goes to recharge it and returns to base.

    Args:
        target: Unit to rescue.
        scheduled_start: Planned start.
        scheduled_end: Planned end.
        rng: Random source of the transfer duration, seed it for replays.
        **kwargs: Forwarded to :class:`Mission` and :class:`RescueGoal`
            (``transfer_probability``).
    """
    goal_kwargs = {}
    if "transfer_probability" in kwargs:
        goal_kwargs["transfer_probability"] = kwargs.pop("transfer_probability")
    goal = RescueGoal(target, rng=rng, **goal_kwargs)
    return Mission(
        MissionKind.SEARCH_AND_RESCUE,
        goal,
        scheduled_start=scheduled_start,
        scheduled_end=scheduled_end,
        **kwargs,
    )
