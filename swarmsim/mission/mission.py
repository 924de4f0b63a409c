"""Mission lifecycle.

A mission gathers idle units, starts them, then drives them tick by tick
toward its goal until it completes or is cancelled::

    PLANNED ──start──▶ ACTIVE ──complete──▶ COMPLETED
       │                  │
       └──────cancel──────┴──────▶ CANCELLED

Units can only join while the mission is PLANNED, and only when grounded and
accepted by the goal. What "progress" means is delegated to a
:class:`MissionGoal` strategy (reach a waypoint, rescue a unit).

Every tick of an active mission first restarts any assigned unit found
grounded (a unit repaired or recharged after a transient fault resumes
automatically), except units the goal has already settled, such as units
parked at their waypoint.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from enum import Enum, auto
import logging
from uuid import uuid4

from swarmsim.environment import OperatingArea
from swarmsim.state import Action, StateMachine
from swarmsim.unit import ClockTime, Time
from swarmsim.vehicles import MobileEntity, OperationalState

logger = logging.getLogger(__name__)


class MissionStatus(Enum):
    PLANNED = auto()
    ACTIVE = auto()
    COMPLETED = auto()
    CANCELLED = auto()


class MissionKind(Enum):
    SURVEILLANCE = "Surveillance"
    RECONNAISSANCE = "Reconnaissance"
    INSPECTION = "Inspection"
    SEARCH_AND_RESCUE = "Search and rescue"


class MissionGoal(ABC):
    """Strategy deciding who may join a mission and how it progresses."""

    @abstractmethod
    def is_compatible(self, entity: MobileEntity) -> bool:
        """Whether ``entity`` may be assigned. Checked at assignment only."""

    @abstractmethod
    def objective(self) -> str:
        """Human readable expected result."""

    @abstractmethod
    def update(self, mission: Mission, dt: float) -> None:
        """Drive the assigned units for one tick and complete the mission when done."""

    def on_start(self, mission: Mission) -> None:
        """Hook run when the mission becomes active."""

    def is_settled(self, entity: MobileEntity) -> bool:
        """Whether ``entity`` is done with the goal and must stay grounded."""
        return False

    def progress(self, mission: Mission) -> float:
        """Fraction of the goal achieved, within ``[0, 1]``."""
        return 0.0


class Mission:
    """A goal pursued by a set of units.

    Attributes:
        id (str): Unique identifier.
        kind (MissionKind): Variant tag.
        goal (MissionGoal): Strategy driving the units.
        name (str): Display name.
        scheduled_start (ClockTime): Planned start.
        scheduled_end (ClockTime): Planned end.
        actual_start (ClockTime | None): Time the mission actually started.
        actual_end (ClockTime | None): Time the mission completed or was cancelled.
        result (str | None): Obtained result.
    """

    def __init__(
        self,
        kind: MissionKind,
        goal: MissionGoal,
        *,
        name: str | None = None,
        scheduled_start: Time | float = ClockTime(0),
        scheduled_end: Time | float | None = None,
        area: OperatingArea | None = None,
    ):
        """Create a planned mission.

        Args:
            kind: Variant tag.
            goal: Strategy driving the units.
            name: Display name, derived from the kind by default.
            scheduled_start: Planned start on the simulation clock.
            scheduled_end: Planned end. Open-ended by default.
            area: Operating area the assigned units are attached to, if any.

        Raises:
            ValueError: If ``kind`` or ``goal`` is missing, or the planned
                start is after the planned end.
        """
        if kind is None or goal is None:
            msg = "Mission kind and goal are required"
            raise ValueError(msg)
        start = ClockTime.from_si(float(scheduled_start))
        end = ClockTime.from_si(float("inf") if scheduled_end is None else float(scheduled_end))
        if float(start) > float(end):
            msg = f"Mission start {start} is after its end {end}"
            raise ValueError(msg)

        self.id = str(uuid4())
        self.kind = kind
        self.goal = goal
        self.name = name or f"{kind.value} mission"
        self.scheduled_start = start
        self.scheduled_end = end
        self.actual_start: ClockTime | None = None
        self.actual_end: ClockTime | None = None
        self.result: str | None = None
        self.area = area

        self._entities: list[MobileEntity] = []
        self._clock = start
        self._state_machine = StateMachine(
            MissionStatus.PLANNED,
            {
                MissionStatus.PLANNED: [
                    Action(MissionStatus.ACTIVE, self._enter_active),
                    Action(MissionStatus.CANCELLED),
                ],
                MissionStatus.ACTIVE: [
                    Action(MissionStatus.COMPLETED, self._enter_completed),
                    Action(MissionStatus.CANCELLED),
                ],
            },
            name=self.name,
        )

    # -------------------------------- Accessors --------------------------------
    @property
    def status(self) -> MissionStatus:
        return self._state_machine.current

    @property
    def entities(self) -> list[MobileEntity]:
        return list(self._entities)

    @property
    def expected_result(self) -> str:
        return self.goal.objective()

    @property
    def objective(self) -> str:
        return self.goal.objective()

    @property
    def clock(self) -> ClockTime:
        return self._clock

    @property
    def progress(self) -> float:
        if self.status is MissionStatus.COMPLETED:
            return 1.0
        return self.goal.progress(self)

    @property
    def is_finished(self) -> bool:
        return self.status in (MissionStatus.COMPLETED, MissionStatus.CANCELLED)

    def _stamp(self, now: Time | float | None) -> ClockTime:
        if now is not None:
            self._clock = ClockTime.from_si(float(now))
        return self._clock

    # -------------------------------- Assignment --------------------------------
    def assign(self, entity: MobileEntity) -> bool:
        """Add a grounded, compatible unit to a planned mission.

        Returns:
            bool: False if the unit is missing or already assigned, the
            mission is not planned, the unit is not grounded, or the goal
            rejects it.
        """
        if entity is None or entity in self._entities:
            return False
        if self.status is not MissionStatus.PLANNED:
            return False
        if entity.state is not OperationalState.GROUNDED:
            logger.info("%s unavailable for %s (%s)", entity.name, self.name, entity.state.name)
            return False
        if not self.goal.is_compatible(entity):
            logger.info("%s incompatible with %s", entity.name, self.name)
            return False
        self._entities.append(entity)
        if self.area is not None and entity.area is not self.area:
            entity.attach_to(self.area)
        logger.debug("%s assigned to %s", entity.name, self.name)
        return True

    def assign_group(self, group: Iterable[MobileEntity]) -> bool:
        """Assign every unit of ``group`` (a swarm or any iterable).

        Returns:
            bool: True if at least one unit was assigned.
        """
        if group is None or self.status is not MissionStatus.PLANNED:
            return False
        members = getattr(group, "entities", group)
        assigned = False
        for entity in members:
            if self.assign(entity):
                assigned = True
        return assigned

    # -------------------------------- Lifecycle --------------------------------
    def start(self, now: Time | float | None = None) -> bool:
        """Activate the mission and start every assigned unit.

        Returns:
            bool: False if the mission is not planned or has no unit.
        """
        if self.status is not MissionStatus.PLANNED:
            return False
        if not self._entities:
            logger.info("%s cannot start without units", self.name)
            return False
        self.actual_start = self._stamp(now)
        self._state_machine.request_transition(MissionStatus.ACTIVE)
        return True

    def _enter_active(self) -> None:
        for entity in self._entities:
            entity.start()
        self.goal.on_start(self)
        logger.info("%s started at %s with %d units", self.name, self.actual_start, len(self._entities))

    def tick(self, dt: Time | float, now: Time | float | None = None) -> None:
        """Advance an active mission by ``dt`` seconds.

        Args:
            dt: Elapsed time.
            now: Simulation clock after the tick. Defaults to the mission's
                own clock advanced by ``dt``.
        """
        if self.status is not MissionStatus.ACTIVE:
            return
        if now is None:
            now = float(self._clock) + float(dt)
        self._stamp(now)

        for entity in self._entities:
            if entity.state is OperationalState.GROUNDED and not self.goal.is_settled(entity):
                logger.info("%s operational again, resuming %s", entity.name, self.name)
                entity.start()

        self.goal.update(self, float(dt))

    def complete(self, result: str, now: Time | float | None = None) -> bool:
        """Close an active mission and release its units.

        Every assigned unit is stopped and set back to GROUNDED.
        """
        if self.status is not MissionStatus.ACTIVE:
            return False
        self.actual_end = self._stamp(now)
        self.result = result
        self._state_machine.request_transition(MissionStatus.COMPLETED)
        return True

    def _enter_completed(self) -> None:
        for entity in self._entities:
            entity.stop()
            entity.set_state(OperationalState.GROUNDED)
        logger.info("%s completed at %s: %s", self.name, self.actual_end, self.result)

    def cancel(self, reason: str, stop_entities: bool = False, now: Time | float | None = None) -> bool:
        """Cancel a planned or active mission.

        Args:
            reason: Why the mission is cancelled.
            stop_entities: Also stop the assigned units and ground them.
                Units keep their state by default.
            now: Simulation clock.

        Returns:
            bool: False if the mission already completed or was cancelled.
        """
        if self.is_finished:
            return False
        started = self.status is MissionStatus.ACTIVE
        self._state_machine.request_transition(MissionStatus.CANCELLED)
        self.result = f"Mission cancelled: {reason}"
        if started:
            self.actual_end = self._stamp(now)
        if stop_entities:
            for entity in self._entities:
                entity.stop()
        logger.info("%s cancelled: %s", self.name, reason)
        return True

    def __str__(self) -> str:
        return f"{self.name} [{self.id[:8]}] - {self.objective} ({self.status.name})"
