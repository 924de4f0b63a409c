"""Fixed-step simulation driver.

The simulator owns the clock and calls everything else in a fixed order on
each step:

    1. Start planned missions whose scheduled start has been reached.
    2. Tick every active mission (units move, goals update).
    3. Run the proximity monitor of every swarm.
    4. Advance the clock.

It adds no physics of its own; all motion happens inside mission ticks.
"""

from __future__ import annotations

import logging

import numpy as np
from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.table import Table

from swarmsim.config import DEFAULT_DT
from swarmsim.environment import OperatingArea
from swarmsim.fleet import Swarm
from swarmsim.mission import Mission, MissionStatus
from swarmsim.unit import ClockTime, Second, Time

logger = logging.getLogger(__name__)

CONSOLE = Console()


class Simulator:
    """Runs missions and swarms over a shared operating area.

    Attributes:
        area (OperatingArea): World every unit moves in.
        clock (ClockTime): Current simulation time.
        missions (list[Mission]): Registered missions.
        swarms (list[Swarm]): Registered swarms.
        proximity_log (list[str]): Every proximity line reported so far.
    """

    def __init__(self, area: OperatingArea):
        if area is None:
            msg = "Simulator requires an operating area"
            raise ValueError(msg)
        self.area = area
        self.clock = ClockTime(0)
        self.missions: list[Mission] = []
        self.swarms: list[Swarm] = []
        self.proximity_log: list[str] = []

    def add_mission(self, mission: Mission) -> bool:
        if mission is None or mission in self.missions:
            return False
        self.missions.append(mission)
        return True

    def add_swarm(self, swarm: Swarm) -> bool:
        if swarm is None or swarm in self.swarms:
            return False
        self.swarms.append(swarm)
        for entity in swarm:
            if entity.area is not self.area:
                entity.attach_to(self.area)
        return True

    @property
    def done(self) -> bool:
        """True when no mission is active."""
        return not any(m.status is MissionStatus.ACTIVE for m in self.missions)

    @property
    def pending(self) -> bool:
        """True while some mission is planned or active."""
        return any(
            m.status in (MissionStatus.PLANNED, MissionStatus.ACTIVE) for m in self.missions
        )

    def step(self, dt: Time | float = DEFAULT_DT) -> list[str]:
        """Advance the whole simulation by ``dt``.

        Returns:
            list[str]: Proximity lines reported by the swarms this step.
        """
        if float(dt) <= 0:
            msg = f"Time step must be positive, got {float(dt)}"
            raise ValueError(msg)
        now = ClockTime(float(self.clock) + float(dt))

        for mission in self.missions:
            if (
                mission.status is MissionStatus.PLANNED
                and float(mission.scheduled_start) <= float(self.clock)
                and mission.entities
            ):
                mission.start(self.clock)

        for mission in self.missions:
            mission.tick(dt, now)

        alerts: list[str] = []
        for swarm in self.swarms:
            alerts.extend(swarm.check_proximity())
        for line in alerts:
            logger.warning("%s %s", now, line)
        self.proximity_log.extend(alerts)

        self.clock = now
        return alerts

    def run(
        self,
        duration: Time | float,
        dt: Time | float = DEFAULT_DT,
        console: Console | None = None,
    ) -> ClockTime:
        """Step until ``duration`` has elapsed or no mission is left to run.

        Args:
            duration: Maximum simulated time.
            dt: Step length.
            console: Console for the progress bar. Defaults to stdout.

        Returns:
            ClockTime: Clock at the end of the run.

        Example:
            >>> simulator = Simulator(area)
            >>> simulator.add_mission(mission)
            >>> simulator.run(Second(600), dt=Second(1))
        """
        if float(dt) <= 0:
            msg = f"Time step must be positive, got {float(dt)}"
            raise ValueError(msg)
        end = float(self.clock) + float(duration)

        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(bar_width=40),
            TaskProgressColumn(),
            TimeElapsedColumn(),
            console=console or CONSOLE,
            auto_refresh=False,
        ) as progress:
            task = progress.add_task("[green]Simulation Time: 00:00:00", total=float(duration))
            while float(self.clock) < end and self.pending:
                step = min(float(dt), end - float(self.clock))
                self.step(Second(step))
                progress.update(
                    task,
                    advance=step,
                    description=f"[green]Simulation Time: {self.clock}",
                )
            progress.refresh()

        logger.info("Simulation stopped at %s", self.clock)
        return self.clock

    def summary(self) -> Table:
        """Mission and fleet overview as a rich table."""
        table = Table(title=f"Simulation at {self.clock}")
        table.add_column("Mission")
        table.add_column("Kind")
        table.add_column("Status")
        table.add_column("Units", justify="right")
        table.add_column("Progress", justify="right")
        table.add_column("Result")
        for mission in self.missions:
            table.add_row(
                mission.name,
                mission.kind.value,
                mission.status.name,
                str(len(mission.entities)),
                f"{mission.progress * 100:.0f}%",
                mission.result or "",
            )

        durations = np.asarray(
            [
                float(m.actual_end) - float(m.actual_start)
                for m in self.missions
                if m.status is MissionStatus.COMPLETED
            ]
        )
        if durations.size:
            mean = ClockTime(float(np.mean(durations)))
            std = ClockTime(float(np.std(durations)))
            table.caption = f"Completed mission duration: {mean} ± {std}"
        return table
