"""
Tests for mobile units, their lifecycle and model actions.
"""

import unittest

from swarmsim.alerts import AlertCode
from swarmsim.environment import OperatingArea
from swarmsim.geo import Vector3
from swarmsim.unit import Hour
from swarmsim.vehicles import (
    AerialProfile,
    EntityKind,
    Medium,
    MobileEntity,
    OperationalState,
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


def make_area() -> OperatingArea:
    return OperatingArea(Vector3(-10_000, -10_000, -2_000), Vector3(10_000, 10_000, 6_000))


class TestConstruction(unittest.TestCase):
    """Test building units."""

    def test_recon_drone_defaults(self):
        """Test a freshly built recon drone."""
        drone = recon_drone(Vector3(0, 0, 100))
        self.assertIs(drone.state, OperationalState.GROUNDED)
        self.assertEqual(drone.autonomy, 100.0)
        self.assertFalse(drone.running)
        self.assertIs(drone.kind, EntityKind.RECON_DRONE)
        self.assertIs(drone.medium, Medium.AERIAL)
        self.assertTrue(drone.name.startswith("ReconDrone-"))

    def test_plain_endurance_is_hours(self):
        """Test that a plain number endurance is read as hours."""
        unit = MobileEntity(Vector3(0, 0, 0), 10.0, 2, AerialProfile(100.0, 1.0))
        self.assertIsInstance(unit.endurance, Hour)
        self.assertEqual(float(unit.endurance), 7200.0)

    def test_invalid_parameters(self):
        """Test rejected construction parameters."""
        with self.assertRaises(ValueError):
            recon_drone(Vector3(0, 0, -5))
        with self.assertRaises(ValueError):
            submarine(Vector3(0, 0, 10))
        with self.assertRaises(ValueError):
            MobileEntity(Vector3(0, 0, 0), 0.0, 1, AerialProfile(100.0, 1.0))
        with self.assertRaises(ValueError):
            MobileEntity(None, 10.0, 1, AerialProfile(100.0, 1.0))

    def test_surface_vessel_projected_to_water(self):
        """Test that a vessel always starts on the surface."""
        boat = surface_vessel(Vector3(10, 20, 30))
        self.assertEqual(boat.position, Vector3(10, 20, 0))
        self.assertFalse(boat.is_submersible)
        self.assertTrue(submarine(Vector3(0, 0, -10)).is_submersible)


class TestLifecycle(unittest.TestCase):
    """Test operational states."""

    def setUp(self):
        self.drone = recon_drone(Vector3(0, 0, 100))

    def test_start_stop(self):
        """Test start and stop toggle between grounded and active."""
        self.assertTrue(self.drone.start())
        self.assertIs(self.drone.state, OperationalState.ACTIVE)
        self.assertTrue(self.drone.running)
        self.drone.stop()
        self.assertIs(self.drone.state, OperationalState.GROUNDED)
        self.assertFalse(self.drone.running)

    def test_maintenance_blocks_start(self):
        """Test that a unit in maintenance cannot start."""
        self.drone.set_state(OperationalState.MAINTENANCE)
        self.assertFalse(self.drone.start())
        self.drone.set_state(OperationalState.GROUNDED)
        self.assertTrue(self.drone.start())

    def test_failed_unit_needs_repair(self):
        """Test that only an explicit state change revives a failed unit."""
        self.drone.start()
        self.drone.fail(AlertCode.SYSTEM_FAILURE, "engine")
        self.assertTrue(self.drone.is_failed())
        self.assertFalse(self.drone.running)
        self.assertFalse(self.drone.start())
        self.drone.set_state(OperationalState.GROUNDED)
        self.assertTrue(self.drone.start())

    def test_set_state_none(self):
        """Test that a missing state is rejected."""
        with self.assertRaises(ValueError):
            self.drone.set_state(None)


class TestAutonomy(unittest.TestCase):
    """Test the autonomy reserve of a unit."""

    def setUp(self):
        self.drone = recon_drone(Vector3(0, 0, 100))

    def test_critical_threshold_raises_alert(self):
        """Test the alert below 20 %."""
        self.drone.consume_autonomy(85.0)
        self.assertAlmostEqual(self.drone.autonomy, 15.0)
        self.assertTrue(self.drone.is_critical())
        self.assertIn(AlertCode.CRITICAL_AUTONOMY, self.drone.alerts.codes())
        self.assertFalse(self.drone.is_failed())

    def test_exhaustion_fails_unit(self):
        """Test that an empty reserve fails the unit and never goes negative."""
        self.drone.consume_autonomy(250.0)
        self.assertEqual(self.drone.autonomy, 0.0)
        self.assertIs(self.drone.state, OperationalState.FAILED)

    def test_drain_empties_reserve(self):
        """Test that draining returns what was left."""
        self.drone.consume_autonomy(30.0)
        self.assertAlmostEqual(self.drone.reserve.drain(), 70.0)
        self.assertTrue(self.drone.reserve.is_empty())
        self.assertEqual(self.drone.reserve.drain(), 0.0)

    def test_negative_consumption(self):
        """Test that negative consumption is rejected."""
        with self.assertRaises(ValueError):
            self.drone.consume_autonomy(-1.0)

    def test_recharge(self):
        """Test refilling the reserve."""
        self.drone.consume_autonomy(50.0)
        self.drone.recharge()
        self.assertEqual(self.drone.autonomy, 100.0)
        self.drone.consume_autonomy(10.0)
        self.drone.refuel()
        self.assertEqual(self.drone.autonomy, 100.0)


class TestMoveTo(unittest.TestCase):
    """Test instantaneous relocation."""

    def setUp(self):
        self.area = make_area()

    def test_move_within_limits(self):
        """Test a valid relocation pays its energy."""
        sub = submarine(Vector3(0, 0, -10), area=self.area)
        self.assertTrue(sub.move_to(Vector3(100, 0, -20)))
        self.assertEqual(sub.position, Vector3(100, 0, -20))
        self.assertLess(sub.autonomy, 100.0)

    def test_vertical_rejection(self):
        """Test that a target outside the envelope raises the medium's alert."""
        drone = recon_drone(Vector3(0, 0, 100), area=self.area)
        self.assertFalse(drone.move_to(Vector3(0, 0, -1)))
        self.assertEqual(drone.position, Vector3(0, 0, 100))
        self.assertIn(AlertCode.INVALID_ALTITUDE, self.area.alerts.codes())

        sub = submarine(Vector3(0, 0, -10), area=self.area)
        self.assertFalse(sub.move_to(Vector3(0, 0, -5000)))
        self.assertIn(AlertCode.INVALID_DEPTH, self.area.alerts.codes())

    def test_reachable_point(self):
        """Test that a target is brought into the altitude or depth range."""
        drone = recon_drone(Vector3(0, 0, 100), area=self.area)
        self.assertEqual(drone.reachable_point(Vector3(500, 0, -60)), Vector3(500, 0, 0))
        self.assertEqual(drone.reachable_point(Vector3(500, 0, 9000)), Vector3(500, 0, 5000))
        self.assertEqual(drone.reachable_point(Vector3(500, 0, 300)), Vector3(500, 0, 300))

        sub = submarine(Vector3(0, 0, -10), area=self.area)
        self.assertEqual(sub.reachable_point(Vector3(0, 0, 100)), Vector3(0, 0, 0.1))
        self.assertEqual(sub.reachable_point(Vector3(0, 0, -5000)), Vector3(0, 0, -1000))

        boat = surface_vessel(Vector3(0, 0, 0), area=self.area)
        self.assertEqual(boat.reachable_point(Vector3(50, 0, 80)), Vector3(50, 0, 0))

    def test_outside_area(self):
        """Test that leaving the area is rejected."""
        drone = recon_drone(Vector3(0, 0, 100), area=self.area)
        self.assertFalse(drone.move_to(Vector3(20_000, 0, 100)))
        self.assertIn(AlertCode.RESTRICTED_ZONE, self.area.alerts.codes())

    def test_not_enough_autonomy(self):
        """Test that a move the reserve cannot pay for is rejected."""
        drone = recon_drone(Vector3(0, 0, 100), area=self.area)
        drone.reserve.consume(100.0)
        self.assertFalse(drone.move_to(Vector3(1000, 0, 100)))
        self.assertEqual(drone.position, Vector3(0, 0, 100))

    def test_surface_vessel_stays_on_surface(self):
        """Test that a vessel target is projected onto the water plane."""
        boat = surface_vessel(Vector3(0, 0, 0), area=self.area)
        self.assertTrue(boat.move_to(Vector3(50, 0, -30)))
        self.assertEqual(boat.position, Vector3(50, 0, 0))
        self.assertEqual(boat.plan_route(Vector3(80, 0, -10)), [Vector3(50, 0, 0), Vector3(80, 0, 0)])


class TestModelActions(unittest.TestCase):
    """Test surface, dive, disable, scan and cargo actions."""

    def setUp(self):
        self.area = make_area()

    def test_surface_and_dive(self):
        """Test vertical moves of a submersible."""
        sub = submarine(Vector3(0, 0, -100), area=self.area)
        self.assertTrue(surface(sub))
        self.assertEqual(sub.position.z, 0.0)
        self.assertTrue(dive(sub, 200.0))
        self.assertEqual(sub.position.depth, 200.0)
        self.assertFalse(dive(sub, 2000.0))
        self.assertFalse(dive(sub, -5.0))

    def test_non_submersibles_cannot_dive(self):
        """Test that drones and vessels refuse vertical marine moves."""
        self.assertFalse(dive(recon_drone(Vector3(0, 0, 10)), 10.0))
        self.assertFalse(surface(surface_vessel(Vector3(0, 0, 0))))

    def test_disable(self):
        """Test disabling a close target."""
        actor = recon_drone(Vector3(0, 0, 100), area=self.area)
        target = cargo_drone(Vector3(50, 0, 100), area=self.area)
        far = cargo_drone(Vector3(500, 0, 100), area=self.area)
        self.assertTrue(disable(actor, target))
        self.assertIs(target.state, OperationalState.FAILED)
        self.assertIn(AlertCode.SYSTEM_FAILURE, self.area.alerts.codes())
        self.assertFalse(disable(actor, far))
        self.assertFalse(disable(far, actor))
        self.assertFalse(disable(actor, actor))

    def test_scan(self):
        """Test surveillance within sensor range."""
        observer = recon_drone(Vector3(0, 0, 100), area=self.area)
        seen = surface_vessel(Vector3(1500, 0, 0), area=self.area)
        surface_vessel(Vector3(3000, 0, 0), area=self.area)
        self.assertEqual(scan(observer), [seen])
        self.assertEqual(scan(seen), [])

    def test_cargo(self):
        """Test loading and unloading within capacity."""
        carrier = cargo_drone(Vector3(0, 0, 100))
        self.assertTrue(load_cargo(carrier, 20.0))
        self.assertFalse(load_cargo(carrier, 40.0))
        self.assertTrue(unload_cargo(carrier, 10.0))
        self.assertEqual(carrier.cargo.load, 10.0)
        self.assertFalse(unload_cargo(carrier, 50.0))
        self.assertFalse(load_cargo(recon_drone(Vector3(0, 0, 100)), 1.0))


class TestReporting(unittest.TestCase):
    """Test alerts between units and status snapshots."""

    def test_send_alert(self):
        """Test free-text alerts between units."""
        a = recon_drone(Vector3(0, 0, 100), name="alpha")
        b = recon_drone(Vector3(100, 0, 100), name="bravo")
        self.assertTrue(a.send_alert("low fuel", b))
        self.assertEqual(b.received_alerts, ["Alert from alpha: low fuel"])
        self.assertFalse(a.send_alert("nobody", None))

    def test_status_snapshot(self):
        """Test the immutable status record."""
        carrier = cargo_drone(Vector3(0, 0, 100), name="mule")
        load_cargo(carrier, 5.0)
        status = carrier.status()
        self.assertEqual(status.name, "mule")
        self.assertEqual(status.position, Vector3(0, 0, 100))
        self.assertEqual(status.cargo_load, 5.0)
        self.assertIs(status.state, OperationalState.GROUNDED)
        self.assertIn("mule", carrier.summary())
        self.assertIn("cargo", str(carrier))


if __name__ == "__main__":
    unittest.main()
