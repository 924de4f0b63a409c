"""Mobile units of the fleet and their per-tick motion integrator.

A :class:`MobileEntity` is an aerial or marine unit moving inside an
:class:`~swarmsim.environment.OperatingArea`. Its medium is described by a
profile record (:class:`~swarmsim.vehicles.profile.AerialProfile` or
:class:`~swarmsim.vehicles.profile.MarineProfile`); optional traits such as a
cargo hold or a sensor are carried alongside.

Operational State Machine:
    GROUNDED ──start──▶ ACTIVE ──stop──▶ GROUNDED
    GROUNDED/ACTIVE ──▶ MAINTENANCE ──▶ GROUNDED
    any ──exhaustion/collision──▶ FAILED

    FAILED is terminal for the engine. Only an external repair through
    :meth:`MobileEntity.set_state` brings the unit back.

Motion Integration:
    :meth:`MobileEntity.advance` moves the unit toward a target over ``dt``
    seconds: it clamps the destination against occupied footprints, steers
    away from close neighbors, pays the energy of the move, adds the drift
    of wind or current, then walks the displacement in short sub-steps,
    sliding around obstacles and failing hard on exclusion zones.

Example:
    >>> from swarmsim.environment import OperatingArea
    >>> from swarmsim.geo import Vector3
    >>> from swarmsim.vehicles import recon_drone
    >>> area = OperatingArea(Vector3(-1e4, -1e4, 0), Vector3(1e4, 1e4, 6000))
    >>> drone = recon_drone(Vector3(0, 0, 1000), area=area)
    >>> drone.start()
    True
    >>> drone.advance(Vector3(1000, 0, 1000), 1.0)
    False
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum, auto
import logging
from uuid import uuid4

from swarmsim.alerts import Alert, AlertChannel, AlertCode
from swarmsim.config import ARRIVAL_TOLERANCE, DETECTION_RADIUS, MIN_PARTIAL_MOVE
from swarmsim.energy import AutonomyReserve
from swarmsim.environment import DRY, OperatingArea
from swarmsim.geo import Vector3
from swarmsim.state import Action, StateMachine
from swarmsim.unit import Hour, Time, Velocity

from .consumption import energy_cost
from .navigation import drift, effective_speed, resolve_substep, steer, substep_count
from .profile import (
    CargoHold,
    MarineProfile,
    Medium,
    Profile,
    clamp_to_envelope,
    describe_limits,
    vertical_alert,
    within_vertical_limits,
)

logger = logging.getLogger(__name__)


class OperationalState(Enum):
    """Availability of a unit.

    States:
        GROUNDED: Idle and available for assignment.
        ACTIVE: Running a mission.
        MAINTENANCE: Withdrawn by an operator, cannot start.
        FAILED: Out of energy or crashed, cannot start until repaired.
    """

    GROUNDED = auto()
    ACTIVE = auto()
    MAINTENANCE = auto()
    FAILED = auto()


class EntityKind(Enum):
    """Model of a unit, used for display and compatibility rules."""

    AERIAL = "Aerial unit"
    MARINE = "Marine unit"
    RECON_DRONE = "Recon drone"
    CARGO_DRONE = "Cargo drone"
    SURFACE_VESSEL = "Surface vessel"
    SUBMARINE = "Submarine"


class Capability(Enum):
    SURVEILLANCE = auto()
    TARGET_DISABLE = auto()


@dataclass(frozen=True)
class EntityStatus:
    """Immutable snapshot of a unit.

    Attributes:
        id (str): Unique identifier.
        name (str): Display name.
        kind (EntityKind): Model of the unit.
        medium (Medium): Aerial or marine.
        position (Vector3): Position at snapshot time.
        state (OperationalState): Operational state.
        running (bool): Whether the propulsion is running.
        autonomy (float): Remaining autonomy in percent.
        max_speed (float): Top speed in m/s.
        endurance (Time): Nominal endurance with a full reserve.
        cargo_load (float | None): Payload in kilograms, None without a hold.
    """

    id: str
    name: str
    kind: EntityKind
    medium: Medium
    position: Vector3
    state: OperationalState
    running: bool
    autonomy: float
    max_speed: float
    endurance: Time
    cargo_load: float | None


class MobileEntity:
    """Aerial or marine unit with a position, an autonomy reserve and a state.

    Attributes:
        id (str): Unique identifier.
        name (str): Display name.
        kind (EntityKind): Model of the unit.
        profile (Profile): Medium envelope.
        cargo (CargoHold | None): Payload bay, if any.
        capabilities (frozenset[Capability]): Optional traits.
        sensor_range (float): Reach of the surveillance sensor in meters.
        received_alerts (list[str]): Messages received from other units.
    """

    def __init__(
        self,
        position: Vector3,
        max_speed: Velocity | float,
        endurance: Time,
        profile: Profile,
        *,
        name: str | None = None,
        kind: EntityKind | None = None,
        cargo: CargoHold | None = None,
        capabilities: Iterable[Capability] = (),
        sensor_range: float = 0.0,
        area: OperatingArea | None = None,
    ):
        """Create a grounded unit with a full reserve.

        Args:
            position: Initial position. Must satisfy the vertical envelope.
            max_speed: Top speed. Plain numbers are read as m/s.
            endurance: Nominal endurance with a full reserve. Plain numbers
                are read as hours.
            profile: Aerial or marine envelope.
            name: Display name. Derived from the kind and id by default.
            kind: Model of the unit. Derived from the medium by default.
            cargo: Optional payload bay.
            capabilities: Optional traits.
            sensor_range: Reach of the surveillance sensor.
            area: Operating area to register with.

        Raises:
            ValueError: If a parameter is missing or out of range.
        """
        if position is None:
            msg = "Position cannot be None"
            raise ValueError(msg)
        if profile is None:
            msg = "Profile cannot be None"
            raise ValueError(msg)
        if float(max_speed) <= 0.0:
            msg = f"Maximum speed must be positive, got {max_speed}"
            raise ValueError(msg)
        if not within_vertical_limits(profile, position):
            msg = f"Initial position {position} breaks the envelope ({describe_limits(profile)})"
            raise ValueError(msg)
        if not isinstance(endurance, Time):
            endurance = Hour(endurance)

        self.id = str(uuid4())
        self.profile = profile
        self.kind = kind or (EntityKind.AERIAL if profile.medium is Medium.AERIAL else EntityKind.MARINE)
        self.name = name or f"{self.kind.name.title().replace('_', '')}-{self.id[:8]}"
        self.cargo = cargo
        self.capabilities = frozenset(capabilities)
        self.sensor_range = float(sensor_range)
        self.received_alerts: list[str] = []

        self._position = position
        self._max_speed = float(max_speed)
        self._reserve = AutonomyReserve(endurance)
        self._running = False
        self._area: OperatingArea | None = None
        self._alerts = AlertChannel()

        self._state_machine = StateMachine(
            OperationalState.GROUNDED,
            {
                OperationalState.GROUNDED: [
                    Action(OperationalState.ACTIVE, self._enter_active),
                    Action(OperationalState.MAINTENANCE),
                    Action(OperationalState.FAILED, self._enter_failed),
                ],
                OperationalState.ACTIVE: [
                    Action(OperationalState.GROUNDED, self._enter_grounded),
                    Action(OperationalState.MAINTENANCE),
                    Action(OperationalState.FAILED, self._enter_failed),
                ],
                OperationalState.MAINTENANCE: [
                    Action(OperationalState.GROUNDED, self._enter_grounded),
                    Action(OperationalState.FAILED, self._enter_failed),
                ],
            },
            name=self.name,
        )

        if area is not None:
            self.attach_to(area)

    # -------------------------------- Accessors --------------------------------
    @property
    def position(self) -> Vector3:
        return self._position

    @property
    def max_speed(self) -> float:
        return self._max_speed

    @property
    def endurance(self) -> Time:
        return self._reserve.endurance

    @property
    def autonomy(self) -> float:
        """Remaining autonomy in percent of a full reserve."""
        return self._reserve.percentage

    @property
    def reserve(self) -> AutonomyReserve:
        return self._reserve

    @property
    def state(self) -> OperationalState:
        return self._state_machine.current

    @property
    def running(self) -> bool:
        return self._running

    @property
    def area(self) -> OperatingArea | None:
        return self._area

    @property
    def medium(self) -> Medium:
        return self.profile.medium

    @property
    def is_submersible(self) -> bool:
        return isinstance(self.profile, MarineProfile) and self.profile.can_dive

    @property
    def alerts(self) -> AlertChannel:
        """Channel alerts are published on: the area's, or the unit's own when detached."""
        if self._area is not None:
            return self._area.alerts
        return self._alerts

    def is_failed(self) -> bool:
        return self.state is OperationalState.FAILED

    def is_critical(self) -> bool:
        return self._reserve.is_critical() or self.is_failed()

    # -------------------------------- Lifecycle --------------------------------
    def attach_to(self, area: OperatingArea | None) -> None:
        """Leave the current area, if any, and register with ``area``."""
        if self._area is not None:
            self._area.deregister(self)
        self._area = area
        if area is not None:
            area.register(self)

    def start(self) -> bool:
        """Start the propulsion. A grounded unit becomes active.

        Returns:
            bool: False if the unit is failed or in maintenance.
        """
        if self.state in (OperationalState.FAILED, OperationalState.MAINTENANCE):
            logger.info("%s cannot start while %s", self.name, self.state.name)
            return False
        self._running = True
        if self.state is OperationalState.GROUNDED:
            self._state_machine.request_transition(OperationalState.ACTIVE)
        return True

    def stop(self) -> bool:
        """Stop the propulsion. An active unit returns to the ground."""
        self._running = False
        if self.state is OperationalState.ACTIVE:
            self._state_machine.request_transition(OperationalState.GROUNDED)
        return True

    def set_state(self, state: OperationalState) -> None:
        """Override the operational state, e.g. after an external repair."""
        if state is None:
            msg = "Operational state cannot be None"
            raise ValueError(msg)
        if state is self.state:
            return
        if self._state_machine.can_transition(state):
            self._state_machine.request_transition(state)
        else:
            logger.info("%s set from %s to %s", self.name, self.state.name, state.name)
            self._state_machine.force(state)

    def fail(self, code: AlertCode, message: str) -> None:
        """Force the unit into FAILED and publish a critical alert."""
        if not self.is_failed():
            self._state_machine.request_transition(OperationalState.FAILED)
        self.notify_critical(code, message)

    def _enter_active(self) -> None:
        logger.info("%s active at %s", self.name, self._position)

    def _enter_grounded(self) -> None:
        logger.info("%s grounded at %s", self.name, self._position)

    def _enter_failed(self) -> None:
        self._running = False
        logger.error("%s failed at %s", self.name, self._position)

    # -------------------------------- Energy --------------------------------
    def recharge(self) -> None:
        """Refill the reserve to 100 %."""
        self._reserve.refill()
        logger.info("%s recharged to 100%%", self.name)

    def refuel(self) -> None:
        self.recharge()

    def consume_autonomy(self, amount: float) -> None:
        """Drain ``amount`` percent of autonomy.

        The reserve never goes below zero. Reaching zero fails the unit; going
        below the critical threshold raises an alert.

        Raises:
            ValueError: If ``amount`` is negative.
        """
        self._reserve.consume(amount)
        if self._reserve.is_empty():
            self.fail(AlertCode.CRITICAL_AUTONOMY, "autonomy exhausted")
        elif self._reserve.is_critical():
            self.notify_critical(AlertCode.CRITICAL_AUTONOMY, f"autonomy at {self.autonomy:.1f}%")

    def consumption(self, distance: float, position: Vector3 | None = None) -> float:
        """Autonomy percentage needed to cover ``distance`` from ``position``."""
        return energy_cost(
            self.profile,
            position if position is not None else self._position,
            distance,
            self._area,
            self.cargo,
        )

    # -------------------------------- Alerts --------------------------------
    def notify_critical(self, code: AlertCode, message: str) -> None:
        self.alerts.publish(Alert(code, self.name, message))

    def send_alert(self, message: str, target: MobileEntity) -> bool:
        """Deliver a free-text alert to another unit."""
        if target is None or message is None:
            return False
        target.receive_alert(message, self)
        return True

    def receive_alert(self, message: str, sender: MobileEntity) -> None:
        text = f"Alert from {sender.name}: {message}"
        self.received_alerts.append(text)
        logger.info("%s received %s", self.name, text)

    # -------------------------------- Motion --------------------------------
    def _project(self, target: Vector3) -> Vector3:
        # surface-only hulls stay on the water plane
        if isinstance(self.profile, MarineProfile) and not self.profile.can_dive:
            return target.with_z(0.0)
        return target

    def reachable_point(self, target: Vector3) -> Vector3:
        """``target`` moved vertically into the altitude or depth this unit can hold."""
        return clamp_to_envelope(self.profile, self._project(target))

    def _admissible(self, position: Vector3) -> bool:
        if not within_vertical_limits(self.profile, position):
            return False
        return self._area is None or self._area.contains(position)

    def plan_route(self, target: Vector3) -> list[Vector3]:
        """Straight route from the current position to ``target``."""
        return [self._position, self._project(target)]

    def move_to(self, target: Vector3) -> bool:
        """Relocate instantly to ``target`` if the envelope, energy and area allow it.

        Args:
            target: Destination.

        Returns:
            bool: True if the unit moved. Each rejection raises an alert.
        """
        if target is None:
            return False
        target = self._project(target)
        if not within_vertical_limits(self.profile, target):
            self.notify_critical(
                vertical_alert(self.profile),
                f"target {target} outside {describe_limits(self.profile)}",
            )
            return False
        cost = self.consumption(self._position.distance_to(target))
        if cost > self.autonomy:
            self.notify_critical(AlertCode.CRITICAL_AUTONOMY, f"not enough autonomy to reach {target}")
            return False
        if self._area is not None and not self._area.contains(target):
            self.notify_critical(AlertCode.RESTRICTED_ZONE, f"target {target} outside the operating area")
            return False
        self._position = target
        self.consume_autonomy(cost)
        return True

    def advance(self, target: Vector3, dt: Time | float) -> bool:
        """Move toward ``target`` for ``dt`` seconds.

        Args:
            target: Point to head for.
            dt: Elapsed time.

        Returns:
            bool: True once the target (or the last safe point before an
            occupied target) is reached. False while still travelling and on
            every rejection or failure.
        """
        if target is None:
            return False
        dt = float(dt)
        if dt <= 0.0 or self.is_failed():
            return False
        if self._reserve.is_empty():
            self.notify_critical(AlertCode.CRITICAL_AUTONOMY, "no autonomy left")
            return False

        target = self._project(target)
        if not within_vertical_limits(self.profile, target):
            self.notify_critical(
                vertical_alert(self.profile),
                f"target {target} outside {describe_limits(self.profile)}",
            )
            return False

        area = self._area
        start = self._position
        destination = target
        if area is not None:
            destination = area.clamp_destination(self, start, target, start.z)

        remaining = start.distance_to(destination)
        if remaining < float(ARRIVAL_TOLERANCE):
            return True

        heading = (destination - start) * (1.0 / remaining)
        if area is not None:
            heading = steer(heading, start, area.neighbors(self, float(DETECTION_RADIUS)))

        rain = area.precipitation_at(start) if area is not None else DRY
        reach = effective_speed(self._max_speed, rain) * dt
        travel = min(remaining, reach)

        cost = self.consumption(travel)
        if cost > self.autonomy:
            self._exhaust(start, destination, remaining, reach * self.autonomy / cost)
            return False
        self.consume_autonomy(cost)

        displacement = heading * travel + drift(self.profile, area, dt)
        steps = substep_count(displacement)
        step = displacement * (1.0 / steps)

        current = start
        for _ in range(steps):
            candidate = current + step
            if area is not None:
                candidate = resolve_substep(current, candidate, area)
                if candidate is None:
                    self._crash(current)
                    return False
            current = candidate

        if not self._admissible(current):
            logger.info("%s: tick rejected, %s leaves the allowed volume", self.name, current)
            return False

        self._position = current
        logger.debug("%s advanced to %s (%.1f%%)", self.name, current, self.autonomy)
        return start.distance_to(target) <= reach

    def _exhaust(self, start: Vector3, destination: Vector3, remaining: float, reach: float) -> None:
        # the last straight hop the remaining energy pays for
        self._reserve.drain()
        self.fail(AlertCode.CRITICAL_AUTONOMY, "autonomy exhausted mid-move")
        reach = min(reach, remaining)
        if reach > float(MIN_PARTIAL_MOVE):
            partial = start + (destination - start) * (reach / remaining)
            if self._admissible(partial):
                self._position = partial
        logger.error("%s ran dry at %s", self.name, self._position)

    def _crash(self, last_valid: Vector3) -> None:
        if self._admissible(last_valid):
            self._position = last_valid
        self.fail(AlertCode.SYSTEM_FAILURE, f"collision near {last_valid}")

    # -------------------------------- Reporting --------------------------------
    def status(self) -> EntityStatus:
        return EntityStatus(
            id=self.id,
            name=self.name,
            kind=self.kind,
            medium=self.medium,
            position=self._position,
            state=self.state,
            running=self._running,
            autonomy=self.autonomy,
            max_speed=self._max_speed,
            endurance=self.endurance,
            cargo_load=self.cargo.load if self.cargo is not None else None,
        )

    def summary(self) -> str:
        text = (
            f"{self.kind.value} {self.name} [{self.state.name}] at {self._position}, "
            f"autonomy {self._reserve}, max speed {self._max_speed:.1f} m/s, "
            f"{describe_limits(self.profile)}"
        )
        if self.cargo is not None:
            text += f", cargo {self.cargo.load:.1f}/{self.cargo.capacity:.1f} kg"
        return text

    def __str__(self) -> str:
        return self.summary()

    def __repr__(self) -> str:
        return f"MobileEntity(name={self.name!r}, kind={self.kind.name}, state={self.state.name})"
