"""
Tests for ambient fields, hazards and the operating area.
"""

import unittest

from swarmsim.alerts import AlertCode
from swarmsim.environment import (
    DRY,
    ExclusionZone,
    MarineCurrent,
    Obstacle,
    OperatingArea,
    Precipitation,
    PrecipitationKind,
    Wind,
    segment_entry,
)
from swarmsim.geo import Vector3
from swarmsim.vehicles import recon_drone, surface_vessel


def make_area() -> OperatingArea:
    return OperatingArea(Vector3(-10_000, -10_000, -2_000), Vector3(10_000, 10_000, 6_000))


class TestFields(unittest.TestCase):
    """Test wind, current and precipitation."""

    def test_intensity_is_validated(self):
        """Test that intensities outside [0, 100] are rejected."""
        with self.assertRaises(ValueError):
            Wind(Vector3(1, 0, 0), 150)
        with self.assertRaises(ValueError):
            MarineCurrent(Vector3(1, 0, 0), -1)
        with self.assertRaises(ValueError):
            Precipitation(PrecipitationKind.SNOW, 101)

    def test_wind_drift_is_horizontal(self):
        """Test that wind only pushes along X and Y."""
        wind = Wind(Vector3(0, 1, 1), 50)
        self.assertEqual(wind.drift(2.0), Vector3(0, 1, 0))

    def test_current_drift_is_three_dimensional(self):
        """Test that current pushes along all axes."""
        current = MarineCurrent(Vector3(0, 0, -1), 100)
        self.assertEqual(current.drift(3.0), Vector3(0, 0, -3))

    def test_wind_from_heading(self):
        """Test building a wind from a heading."""
        wind = Wind.from_heading(0.0, 40)
        self.assertAlmostEqual(wind.direction.x, 1.0)
        self.assertAlmostEqual(wind.direction.y, 0.0)

    def test_precipitation_falling(self):
        """Test the falling flag."""
        self.assertFalse(DRY.is_falling)
        self.assertTrue(Precipitation(PrecipitationKind.LIGHT_RAIN, 10).is_falling)


class TestHazards(unittest.TestCase):
    """Test obstacles and exclusion zones."""

    def test_obstacle_is_a_vertical_cylinder(self):
        """Test obstacle containment on the horizontal plane and its Z span."""
        tower = Obstacle(Vector3(100, 0, 0), 20.0, "tower", 0.0, 150.0)
        self.assertTrue(tower.contains(Vector3(110, 0, 50)))
        self.assertFalse(tower.contains(Vector3(110, 0, 200)))
        self.assertFalse(tower.contains(Vector3(130, 0, 50)))

    def test_exclusion_zone_is_a_sphere(self):
        """Test exclusion zone containment in 3D."""
        zone = ExclusionZone(Vector3(0, 0, 0), 10.0, "base")
        self.assertTrue(zone.contains(Vector3(0, 0, 10)))
        self.assertFalse(zone.contains(Vector3(8, 0, 8)))

    def test_invalid_shapes(self):
        """Test that bad radii and labels are rejected."""
        with self.assertRaises(ValueError):
            Obstacle(Vector3(0, 0, 0), 0.0, "rock")
        with self.assertRaises(ValueError):
            ExclusionZone(Vector3(0, 0, 0), 5.0, "  ")
        with self.assertRaises(ValueError):
            Obstacle(Vector3(0, 0, 0), 5.0, "rock", 10.0, 0.0)


class TestSegmentEntry(unittest.TestCase):
    """Test the segment and circle intersection."""

    def test_entry_parameter(self):
        """Test the first crossing along the segment."""
        t = segment_entry(Vector3(0, 0, 0), Vector3(100, 0, 0), Vector3(100, 0, 0), 25.0)
        self.assertAlmostEqual(t, 0.75)

    def test_miss(self):
        """Test a segment passing beside the circle."""
        self.assertIsNone(segment_entry(Vector3(0, 50, 0), Vector3(100, 50, 0), Vector3(50, 0, 0), 10.0))

    def test_vertical_segment(self):
        """Test a segment without horizontal extent."""
        self.assertIsNone(segment_entry(Vector3(0, 0, 0), Vector3(0, 0, -50), Vector3(0, 0, 0), 10.0))


class TestOperatingArea(unittest.TestCase):
    """Test OperatingArea."""

    def setUp(self):
        self.area = make_area()

    def test_degenerate_area(self):
        """Test that an empty horizontal extent is rejected."""
        with self.assertRaises(ValueError):
            OperatingArea(Vector3(0, 0, 0), Vector3(0, 10, 10))

    def test_contains(self):
        """Test bounds on all three axes."""
        self.assertTrue(self.area.contains(Vector3(0, 0, 0)))
        self.assertFalse(self.area.contains(Vector3(0, 0, 7_000)))
        self.assertFalse(self.area.contains(Vector3(10_001, 0, 0)))

    def test_in_exclusion_zone(self):
        """Test the point lookup against the exclusion zones."""
        self.area.add_exclusion_zone(ExclusionZone(Vector3(500, 0, 100), 50.0, "airport"))
        self.assertTrue(self.area.in_exclusion_zone(Vector3(520, 0, 120)))
        self.assertFalse(self.area.in_exclusion_zone(Vector3(500, 0, 200)))

    def test_weather_setters(self):
        """Test replacing fields and rejecting None."""
        self.area.wind = Wind(Vector3(1, 0, 0), 30)
        self.assertEqual(self.area.wind.intensity, 30.0)
        with self.assertRaises(ValueError):
            self.area.wind = None

    def test_precipitation_only_in_rain_zone(self):
        """Test that precipitation applies inside the rain zone only."""
        self.area.precipitation = Precipitation(PrecipitationKind.HEAVY_RAIN, 80)
        self.area.set_rain_zone(Vector3(0, 0, -100), Vector3(100, 100, 100))
        self.assertEqual(self.area.precipitation_at(Vector3(50, 50, 0)).intensity, 80.0)
        self.assertIs(self.area.precipitation_at(Vector3(500, 50, 0)), DRY)

    def test_neighbors_exclude_self_and_failed(self):
        """Test the neighbor query."""
        me = recon_drone(Vector3(0, 0, 100), area=self.area)
        near = recon_drone(Vector3(30, 0, 100), area=self.area)
        broken = recon_drone(Vector3(0, 30, 100), area=self.area)
        recon_drone(Vector3(500, 0, 100), area=self.area)
        broken.fail(AlertCode.SYSTEM_FAILURE, "test")
        self.assertEqual(self.area.neighbors(me, 80.0), [near])

    def test_register_is_idempotent(self):
        """Test that a unit is registered once."""
        drone = recon_drone(Vector3(0, 0, 100), area=self.area)
        self.area.register(drone)
        self.assertEqual(self.area.entities, [drone])
        self.area.deregister(drone)
        self.assertEqual(self.area.entities, [])


class TestClampDestination(unittest.TestCase):
    """Test destination clamping against obstacles and other units."""

    def setUp(self):
        self.area = make_area()

    def test_obstacle_covering_destination(self):
        """Test stopping before the inflated obstacle boundary."""
        self.area.add_obstacle(Obstacle(Vector3(100, 0, 0), 20.0, "buoy"))
        clamped = self.area.clamp_destination(None, Vector3(0, 0, 0), Vector3(100, 0, 0), 0.0)
        self.assertAlmostEqual(clamped.x, 74.9, places=6)
        self.assertAlmostEqual(clamped.y, 0.0)

    def test_flyover(self):
        """Test that a unit well above the obstacle is not clamped."""
        self.area.add_obstacle(Obstacle(Vector3(100, 0, 0), 20.0, "hut", 0.0, 100.0))
        destination = Vector3(100, 0, 200)
        clamped = self.area.clamp_destination(None, Vector3(0, 0, 200), destination, 200.0)
        self.assertEqual(clamped, destination)

    def test_grazing_path_is_left_alone(self):
        """Test that only an occupied destination triggers clamping."""
        self.area.add_obstacle(Obstacle(Vector3(50, 0, 0), 10.0, "rock"))
        destination = Vector3(100, 0, 0)
        clamped = self.area.clamp_destination(None, Vector3(0, 0, 0), destination, 0.0)
        self.assertEqual(clamped, destination)

    def test_other_unit_footprint(self):
        """Test keeping the vehicle footprint around another unit."""
        mover = surface_vessel(Vector3(0, 0, 0), area=self.area)
        parked = surface_vessel(Vector3(50, 0, 0), area=self.area)
        clamped = self.area.clamp_destination(mover, mover.position, parked.position, 0.0)
        self.assertGreaterEqual(clamped.distance_to(parked.position), 14.5)
        self.assertLess(clamped.x, 50.0)

    def test_other_unit_outside_vertical_slice(self):
        """Test that units at another level do not clamp."""
        mover = recon_drone(Vector3(0, 0, 100), area=self.area)
        other = recon_drone(Vector3(50, 0, 300), area=self.area)
        destination = Vector3(50, 0, 100)
        clamped = self.area.clamp_destination(mover, mover.position, destination, 100.0)
        self.assertEqual(clamped, destination)
        self.assertIsNotNone(other)


if __name__ == "__main__":
    unittest.main()
