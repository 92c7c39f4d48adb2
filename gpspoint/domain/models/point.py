from __future__ import annotations

import logging
from dataclasses import replace

from gpspoint.domain.algorithms.formatting import format_coordinate, format_pair
from gpspoint.domain.algorithms.geo_utils import distance
from gpspoint.domain.algorithms.parsing import (
    CoordinateToken,
    parse_coordinate,
    parse_pair,
)
from gpspoint.domain.constants import Axis, CoordinateFormat, DistanceUnit

from .geo import GeoPoint

logger = logging.getLogger(__name__)


class Point:
    """GPS point that accepts and renders any supported coordinate notation.

    Accepted input, either as one comma separated string or as two tokens:

        Point("41.9, 12.5")                      # decimal degrees
        Point("48°0.858277778N", "2°0.2945E")    # decimal minutes
        Point("22°57′8.7″S", "43°12′42″W")       # degrees minutes seconds

    The stored value is an immutable `GeoPoint` swapped as a whole, so a failed
    update never leaves one axis changed and the other not.
    """

    __slots__ = ("_geo_point",)
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, *coordinates: CoordinateToken) -> None:
        self._geo_point = GeoPoint()
        if coordinates:
            self.set(*coordinates)

    @property
    def geo_point(self) -> GeoPoint:
        return self._geo_point

    @property
    def latitude(self) -> float:
        return self._geo_point.lat

    @property
    def longitude(self) -> float:
        return self._geo_point.lon

    def set(self, *coordinates: CoordinateToken) -> Point:
        self._geo_point = parse_pair(*coordinates)
        logger.debug("Point set to %s", self._geo_point)
        return self

    def set_latitude(self, latitude: CoordinateToken) -> Point:
        value = parse_coordinate(latitude, Axis.LATITUDE)
        self._geo_point = replace(self._geo_point, lat=value)
        return self

    def set_longitude(self, longitude: CoordinateToken) -> Point:
        value = parse_coordinate(longitude, Axis.LONGITUDE)
        self._geo_point = replace(self._geo_point, lon=value)
        return self

    def get(self, fmt: CoordinateFormat | str = CoordinateFormat.DECIMAL_DEGREES) -> str:
        return format_pair(self._geo_point, fmt)

    def get_latitude(
        self, fmt: CoordinateFormat | str = CoordinateFormat.DECIMAL_DEGREES
    ) -> str:
        return format_coordinate(self._geo_point.lat, Axis.LATITUDE, fmt)

    def get_longitude(
        self, fmt: CoordinateFormat | str = CoordinateFormat.DECIMAL_DEGREES
    ) -> str:
        return format_coordinate(self._geo_point.lon, Axis.LONGITUDE, fmt)

    def distance_to(
        self, other: Point, unit: DistanceUnit | str = DistanceUnit.KILOMETERS
    ) -> float:
        return distance(self._geo_point, other.geo_point, unit)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self._geo_point == other._geo_point

    def __repr__(self) -> str:
        return f"Point({self.get()!r})"
