"""Geometry helpers of the per-tick motion integrator.

These functions hold no state: the integrator in
:meth:`swarmsim.vehicles.MobileEntity.advance` strings them together.
"""

from __future__ import annotations

from collections.abc import Iterable
import logging
import math
from typing import TYPE_CHECKING

from swarmsim.config import (
    DEGENERATE_CENTER_RADIUS,
    FLYOVER_MARGIN,
    OBSTACLE_SAFETY_MARGIN,
    PRECIPITATION_SLOWDOWN_THRESHOLD,
    SLIDE_DISTANCE,
    STEERING_RADIUS,
    STEERING_SYMMETRY_BIAS,
    STEERING_SYMMETRY_THRESHOLD,
    SUBSTEP_LENGTH,
)
from swarmsim.environment import Precipitation
from swarmsim.geo import ZERO, Vector3

from .profile import Medium, Profile

if TYPE_CHECKING:
    from swarmsim.environment import OperatingArea

    from .entity import MobileEntity

logger = logging.getLogger(__name__)


def steer(heading: Vector3, position: Vector3, neighbors: Iterable[MobileEntity]) -> Vector3:
    """Bend a unit heading away from close neighbors.

    Every neighbor closer than the steering radius adds a horizontal push
    away from it, weighted by ``(radius - distance) / radius``. A neighbor
    almost aligned on Y gets a fixed +Y bias so two units facing each other
    always pick the same side. The heading is renormalized after each push.

    Args:
        heading: Unit propulsion vector toward the destination.
        position: Current position of the unit.
        neighbors: Candidate units, already filtered to the detection radius.

    Returns:
        Vector3: The adjusted unit heading.
    """
    radius = float(STEERING_RADIUS)
    for other in neighbors:
        distance = position.distance_to(other.position)
        if distance >= radius:
            continue
        lx = position.x - other.position.x
        ly = position.y - other.position.y
        if abs(ly) < STEERING_SYMMETRY_THRESHOLD:
            ly += STEERING_SYMMETRY_BIAS
        lateral = math.hypot(lx, ly)
        if lateral == 0.0:
            continue
        force = (radius - distance) / radius
        pushed = Vector3(heading.x + lx / lateral * force, heading.y + ly / lateral * force, heading.z)
        heading = pushed.normalized()
    return heading


def effective_speed(max_speed: float, precipitation: Precipitation) -> float:
    """Top speed under ``precipitation``, halved at full intensity.

    Example:
        >>> from swarmsim.environment import Precipitation, PrecipitationKind
        >>> effective_speed(80.0, Precipitation(PrecipitationKind.HEAVY_RAIN, 100.0))
        40.0
    """
    intensity = precipitation.intensity
    if intensity > PRECIPITATION_SLOWDOWN_THRESHOLD:
        return max_speed * (1.0 - (intensity - PRECIPITATION_SLOWDOWN_THRESHOLD) / 100.0)
    return max_speed


def drift(profile: Profile, area: OperatingArea | None, dt: float) -> Vector3:
    """Passive displacement over ``dt``: wind for aerial units, current for marine ones."""
    if area is None:
        return ZERO
    if profile.medium is Medium.AERIAL:
        return area.wind.drift(dt)
    return area.current.drift(dt)


def substep_count(displacement: Vector3) -> int:
    return max(1, math.ceil(displacement.norm() / float(SUBSTEP_LENGTH)))


def resolve_substep(current: Vector3, candidate: Vector3, area: OperatingArea) -> Vector3 | None:
    """Validate one sub-step against the hazards of ``area``.

    Obstacles are flown over when the unit is above their top plus the
    flyover margin. Otherwise the candidate is pushed out of the obstacle
    with a safety margin and slid sideways so the unit glides along it. A
    candidate sitting on an obstacle axis, or inside an exclusion zone, is a
    hard collision.

    Args:
        current: Last validated position.
        candidate: Position the sub-step would reach.
        area: Area holding the hazards.

    Returns:
        Vector3 | None: The accepted (possibly deflected) position, or None
        on a hard collision.
    """
    for obstacle in area.obstacles:
        if not obstacle.contains(candidate):
            continue
        if current.z > obstacle.z_max + float(FLYOVER_MARGIN):
            continue
        dx = candidate.x - obstacle.center.x
        dy = candidate.y - obstacle.center.y
        distance = math.hypot(dx, dy)
        if distance <= float(DEGENERATE_CENTER_RADIUS):
            logger.debug("Sub-step %s hits the axis of %s", candidate, obstacle.label)
            return None
        nx, ny = dx / distance, dy / distance
        # right-hand tangent
        tx, ty = -ny, nx
        penetration = obstacle.radius - distance + float(OBSTACLE_SAFETY_MARGIN)
        slide = float(SLIDE_DISTANCE)
        candidate = Vector3(
            candidate.x + nx * penetration + tx * slide,
            candidate.y + ny * penetration + ty * slide,
            candidate.z,
        )
        logger.debug("Sub-step deflected around %s to %s", obstacle.label, candidate)

    if area.in_exclusion_zone(candidate):
        logger.debug("Sub-step %s enters an exclusion zone", candidate)
        return None
    return candidate
