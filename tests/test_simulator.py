"""
Tests for the simulation driver.
"""

import io
import unittest

from rich.console import Console
from rich.table import Table

from swarmsim.environment import OperatingArea
from swarmsim.fleet import Swarm
from swarmsim.geo import Vector3
from swarmsim.mission import MissionStatus, reconnaissance_mission
from swarmsim.simulator import Simulator
from swarmsim.unit import Second
from swarmsim.vehicles import OperationalState, recon_drone


class TestSimulator(unittest.TestCase):
    """Test Simulator."""

    def setUp(self):
        self.area = OperatingArea(Vector3(-10_000, -10_000, 0), Vector3(10_000, 10_000, 6_000))
        self.simulator = Simulator(self.area)
        self.console = Console(file=io.StringIO(), width=120)

    def test_requires_area(self):
        """Test that a simulator needs an operating area."""
        with self.assertRaises(ValueError):
            Simulator(None)

    def test_run_until_missions_finish(self):
        """Test that the run stops once every mission is over."""
        drone = recon_drone(Vector3(0, 0, 100), area=self.area)
        mission = reconnaissance_mission(Vector3(400, 0, 100))
        mission.assign(drone)
        self.assertTrue(self.simulator.add_mission(mission))
        self.assertFalse(self.simulator.add_mission(mission))

        end = self.simulator.run(Second(60), dt=Second(1), console=self.console)

        self.assertIs(mission.status, MissionStatus.COMPLETED)
        self.assertTrue(self.simulator.done)
        self.assertLess(float(end), 60.0)
        self.assertIs(drone.state, OperationalState.GROUNDED)

    def test_run_without_missions(self):
        """Test that nothing runs when no mission is pending."""
        end = self.simulator.run(Second(60), console=self.console)
        self.assertEqual(float(end), 0.0)

    def test_scheduled_start(self):
        """Test that a mission starts once the clock reaches its planned start."""
        drone = recon_drone(Vector3(0, 0, 100), area=self.area)
        mission = reconnaissance_mission(Vector3(5000, 0, 100), scheduled_start=Second(10))
        mission.assign(drone)
        self.simulator.add_mission(mission)
        for _ in range(10):
            self.simulator.step(Second(1))
        self.assertIs(mission.status, MissionStatus.PLANNED)
        self.simulator.step(Second(1))
        self.assertIs(mission.status, MissionStatus.ACTIVE)
        self.assertEqual(float(self.simulator.clock), 11.0)

    def test_step_reports_proximity(self):
        """Test that swarm proximity lines are returned and logged."""
        swarm = Swarm("pair")
        first = recon_drone(Vector3(0, 0, 100), name="one")
        second = recon_drone(Vector3(30, 0, 100), name="two")
        swarm.add(first)
        swarm.add(second)
        self.assertTrue(self.simulator.add_swarm(swarm))
        self.assertIs(first.area, self.area)
        first.start()
        lines = self.simulator.step(Second(1))
        self.assertEqual(len(lines), 1)
        self.assertTrue(lines[0].startswith("RISK"))
        self.assertEqual(self.simulator.proximity_log, lines)

    def test_invalid_step(self):
        """Test that a non-positive step is rejected."""
        with self.assertRaises(ValueError):
            self.simulator.step(Second(0))

    def test_summary(self):
        """Test the rich summary table."""
        drone = recon_drone(Vector3(0, 0, 100), area=self.area)
        mission = reconnaissance_mission(Vector3(200, 0, 100))
        mission.assign(drone)
        self.simulator.add_mission(mission)
        self.simulator.run(Second(30), console=self.console)
        table = self.simulator.summary()
        self.assertIsInstance(table, Table)
        self.assertEqual(table.row_count, 1)
        self.assertIsNotNone(table.caption)


if __name__ == "__main__":
    unittest.main()
