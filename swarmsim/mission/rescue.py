"""Search-and-rescue goal: reach a stranded unit, recharge it, come back."""

from __future__ import annotations

from enum import Enum, auto
import logging
import random
from typing import TYPE_CHECKING

from swarmsim.config import (
    RESCUE_APPROACH_DISTANCE,
    RESCUE_TRANSFER_PROBABILITY,
    RESCUE_TRANSFER_THRESHOLD,
)
from swarmsim.geo import Vector3
from swarmsim.vehicles import MobileEntity, OperationalState

from .mission import MissionGoal

if TYPE_CHECKING:
    from .mission import Mission

logger = logging.getLogger(__name__)


class RescuePhase(Enum):
    APPROACH = auto()
    TRANSFER = auto()
    RETURN = auto()
    DONE = auto()


class RescueGoal(MissionGoal):
    """Send every rescuer to ``target``, transfer energy, then bring it home.

    Each rescuer goes through its own phases:

    1. APPROACH the target's current position, brought into the rescuer's
       own altitude or depth range, until within 50 m.
    2. TRANSFER: recharge the target while it is below 99 %; each tick the
       transfer ends with a small probability, modelling variable repair
       time. A target already full ends the transfer at once.
    3. RETURN to the position the rescuer held when the mission started;
       on arrival the rescuer is stopped and grounded.

    The mission completes once every rescuer that has not failed is DONE.

    Attributes:
        target (MobileEntity): Unit to rescue.
        rng (random.Random): Source of the transfer completion draws.
        transfer_probability (float): Per-tick chance of ending the transfer.
    """

    def __init__(
        self,
        target: MobileEntity,
        rng: random.Random | None = None,
        transfer_probability: float = RESCUE_TRANSFER_PROBABILITY,
    ):
        if target is None:
            msg = "Rescue target cannot be None"
            raise ValueError(msg)
        if not 0.0 <= transfer_probability <= 1.0:
            msg = f"Transfer probability must be within [0, 1], got {transfer_probability}"
            raise ValueError(msg)
        self.target = target
        self.rng = rng or random.Random()
        self.transfer_probability = transfer_probability
        self._phases: dict[str, RescuePhase] = {}
        self._homes: dict[str, Vector3] = {}

    def phase_of(self, entity: MobileEntity) -> RescuePhase | None:
        return self._phases.get(entity.id)

    def home_of(self, entity: MobileEntity) -> Vector3 | None:
        return self._homes.get(entity.id)

    def is_compatible(self, entity: MobileEntity) -> bool:
        return entity is not self.target

    def objective(self) -> str:
        return f"Rescue {self.target.name} at {self.target.position}"

    def on_start(self, mission: Mission) -> None:
        for entity in mission.entities:
            self._phases[entity.id] = RescuePhase.APPROACH
            self._homes[entity.id] = entity.position

    def is_settled(self, entity: MobileEntity) -> bool:
        return self._phases.get(entity.id) is RescuePhase.DONE

    def progress(self, mission: Mission) -> float:
        entities = mission.entities
        if not entities:
            return 0.0
        steps = {
            RescuePhase.APPROACH: 0,
            RescuePhase.TRANSFER: 1,
            RescuePhase.RETURN: 2,
            RescuePhase.DONE: 3,
        }
        done = sum(steps[self._phases.get(e.id, RescuePhase.APPROACH)] for e in entities)
        return done / (3 * len(entities))

    def update(self, mission: Mission, dt: float) -> None:
        for rescuer in mission.entities:
            if rescuer.state is OperationalState.ACTIVE:
                self._step(rescuer, dt)

        pending = [
            rescuer
            for rescuer in mission.entities
            if not rescuer.is_failed() and self._phases.get(rescuer.id) is not RescuePhase.DONE
        ]
        if not pending:
            rescued = sum(1 for p in self._phases.values() if p is RescuePhase.DONE)
            mission.complete(
                f"Rescue of {self.target.name} done, {rescued} rescuer(s) back at base."
            )

    def _step(self, rescuer: MobileEntity, dt: float) -> None:
        phase = self._phases.setdefault(rescuer.id, RescuePhase.APPROACH)
        home = self._homes.setdefault(rescuer.id, rescuer.position)

        match phase:
            case RescuePhase.APPROACH:
                site = rescuer.reachable_point(self.target.position)
                reached = rescuer.advance(site, dt)
                distance = rescuer.position.distance_to(site)
                if reached or distance < float(RESCUE_APPROACH_DISTANCE):
                    self._phases[rescuer.id] = RescuePhase.TRANSFER
                    logger.info("%s on site, assisting %s", rescuer.name, self.target.name)
            case RescuePhase.TRANSFER:
                if self.target.autonomy < RESCUE_TRANSFER_THRESHOLD:
                    self.target.recharge()
                    if self.rng.random() < self.transfer_probability:
                        self._phases[rescuer.id] = RescuePhase.RETURN
                else:
                    self._phases[rescuer.id] = RescuePhase.RETURN
                if self._phases[rescuer.id] is RescuePhase.RETURN:
                    logger.info("%s heading back to %s", rescuer.name, home)
            case RescuePhase.RETURN:
                if rescuer.advance(home, dt):
                    self._phases[rescuer.id] = RescuePhase.DONE
                    rescuer.stop()
                    rescuer.set_state(OperationalState.GROUNDED)
                    logger.info("%s back at base", rescuer.name)
