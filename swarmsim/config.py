"""Tuning constants of the fleet engine.

Distances are meters, durations seconds, autonomy percent of a full charge.
Quantities a reader is likely to tweak are declared with typed units; the
engine reads them through ``float()``.
"""

from swarmsim.unit import Hour, Meter, MeterPerSecond, Second

# Motion integration
ARRIVAL_TOLERANCE = Meter(1.0)
DETECTION_RADIUS = Meter(80.0)
STEERING_RADIUS = Meter(60.0)
STEERING_SYMMETRY_THRESHOLD = 1.0
STEERING_SYMMETRY_BIAS = 5.0
SUBSTEP_LENGTH = Meter(10.0)
MIN_PARTIAL_MOVE = Meter(0.1)

# Rain slows every unit above this intensity, down to half speed at 100
PRECIPITATION_SLOWDOWN_THRESHOLD = 50.0

# Obstacles and other units
OBSTACLE_SAFETY_MARGIN = Meter(5.0)
FLYOVER_MARGIN = Meter(10.0)
SLIDE_DISTANCE = Meter(2.0)
DEGENERATE_CENTER_RADIUS = Meter(0.1)
VEHICLE_FOOTPRINT = Meter(15.0)
VEHICLE_VERTICAL_SLICE = Meter(10.0)
CLAMP_PULLBACK = 0.001

# Marine units may sit slightly above the surface
SURFACE_TOLERANCE = Meter(0.1)

# Energy
BASE_CONSUMPTION_PER_KM = 0.4
CRITICAL_AUTONOMY = 20.0
FULL_AUTONOMY = 100.0
ALTITUDE_CONSUMPTION_FACTOR = 0.2
DEPTH_CONSUMPTION_FACTOR = 0.3
CARGO_BASE_FACTOR = 0.8
CARGO_LOAD_FACTOR = 0.5

# Fleet proximity monitor
FLEET_COLLISION_DISTANCE = Meter(10.0)
FLEET_RISK_DISTANCE = Meter(50.0)

# Missions
SURVEILLANCE_TOLERANCE = Meter(100.0)
RECONNAISSANCE_TOLERANCE = Meter(100.0)
INSPECTION_TOLERANCE = Meter(50.0)
RESCUE_APPROACH_DISTANCE = Meter(50.0)
RESCUE_TRANSFER_THRESHOLD = 99.0
RESCUE_TRANSFER_PROBABILITY = 0.1

# Default rain sub-region of an operating area
RAIN_ZONE_MIN = (20000.0, 20000.0, -2000.0)
RAIN_ZONE_MAX = (60000.0, 60000.0, 10000.0)

# Entity models
RECON_DRONE_SPEED = MeterPerSecond(80)
RECON_DRONE_AUTONOMY = Hour(4)
RECON_DRONE_MAX_ALTITUDE = Meter(5000)
RECON_DRONE_WIND_SENSITIVITY = 0.8
RECON_DRONE_SURVEILLANCE_RANGE = Meter(2000)

CARGO_DRONE_SPEED = MeterPerSecond(35)
CARGO_DRONE_AUTONOMY = Hour(12)
CARGO_DRONE_MAX_ALTITUDE = Meter(3000)
CARGO_DRONE_WIND_SENSITIVITY = 1.2
CARGO_DRONE_CAPACITY = 50.0

SURFACE_VESSEL_SPEED = MeterPerSecond(25)
SURFACE_VESSEL_AUTONOMY = Hour(12)
SURFACE_VESSEL_CURRENT_SENSITIVITY = 1.5
SURFACE_VESSEL_WIND_EXPOSURE = 0.5

SUBMARINE_SPEED = MeterPerSecond(20)
SUBMARINE_AUTONOMY = Hour(10)
SUBMARINE_MAX_DEPTH = Meter(1000)
SUBMARINE_CURRENT_SENSITIVITY = 1.0

DISABLE_RANGE = Meter(100.0)

# Simulation driver
DEFAULT_DT = Second(1)
ALERT_HISTORY = 256
