"""Parse, convert and format GPS coordinates, and measure distances between them."""

from gpspoint.domain.constants import Axis, CoordinateFormat, DistanceUnit
from gpspoint.domain.exceptions import (
    CoordinateError,
    CoordinateOutOfRange,
    FormatMismatch,
    InvalidArgumentCount,
    InvalidCoordinateFormat,
    InvalidOrientation,
    InvalidOutputFormat,
    InvalidUnit,
)
from gpspoint.domain.models import GeoPoint, Point

__all__ = [
    "Axis",
    "CoordinateError",
    "CoordinateFormat",
    "CoordinateOutOfRange",
    "DistanceUnit",
    "FormatMismatch",
    "GeoPoint",
    "InvalidArgumentCount",
    "InvalidCoordinateFormat",
    "InvalidOrientation",
    "InvalidOutputFormat",
    "InvalidUnit",
    "Point",
]
