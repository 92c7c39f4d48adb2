from __future__ import annotations

from enum import Enum


class Axis(str, Enum):
    LATITUDE = "latitude"
    LONGITUDE = "longitude"


class CoordinateFormat(str, Enum):
    DECIMAL_DEGREES = "decimal_degrees"
    DECIMAL_MINUTES = "decimal_minutes"
    DEGREES_MINUTES_SECONDS = "degrees_minutes_seconds"


class DistanceUnit(str, Enum):
    KILOMETERS = "kilometers"
    METERS = "meters"


EARTH_RADIUS_KM = 6371.0

LATITUDE_LIMIT = 90.0
LONGITUDE_LIMIT = 180.0

# Fractional digits kept when rendering coordinates and distances.
PRECISION = 5
DISTANCE_PRECISION = 2
