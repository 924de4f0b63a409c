from .area import OperatingArea, segment_entry
from .fields import (
    CALM_WIND,
    DRY,
    STILL_WATER,
    MarineCurrent,
    Precipitation,
    PrecipitationKind,
    Wind,
)
from .hazards import ExclusionZone, Obstacle

__all__ = [
    "OperatingArea",
    "segment_entry",
    "Wind",
    "MarineCurrent",
    "Precipitation",
    "PrecipitationKind",
    "CALM_WIND",
    "STILL_WATER",
    "DRY",
    "Obstacle",
    "ExclusionZone",
]
