from __future__ import annotations

import logging
import math

from gpspoint.domain.constants import DISTANCE_PRECISION, EARTH_RADIUS_KM, DistanceUnit
from gpspoint.domain.exceptions import InvalidUnit
from gpspoint.domain.models.geo import GeoPoint

logger = logging.getLogger(__name__)


def great_circle_distance_km(a: GeoPoint, b: GeoPoint) -> float:
    """Great-circle distance in kilometers (spherical law of cosines, atan2 form)."""

    lat1 = math.radians(a.lat)
    lon1 = math.radians(a.lon)
    lat2 = math.radians(b.lat)
    lon2 = math.radians(b.lon)

    dlon = lon2 - lon1

    y = (math.cos(lat2) * math.sin(dlon)) ** 2 + (
        math.cos(lat1) * math.sin(lat2)
        - math.sin(lat1) * math.cos(lat2) * math.cos(dlon)
    ) ** 2
    x = math.sin(lat1) * math.sin(lat2) + math.cos(lat1) * math.cos(lat2) * math.cos(
        dlon
    )
    return math.atan2(math.sqrt(y), x) * EARTH_RADIUS_KM


def distance(
    a: GeoPoint, b: GeoPoint, unit: DistanceUnit | str = DistanceUnit.KILOMETERS
) -> float:
    try:
        unit = DistanceUnit(unit)
    except ValueError:
        raise InvalidUnit(f'Unit "{unit}" is not valid') from None

    km = great_circle_distance_km(a, b)
    logger.debug("Distance %s -> %s: %.6f km", a, b, km)
    if unit is DistanceUnit.METERS:
        return round(km * 1000.0, DISTANCE_PRECISION)
    return round(km, DISTANCE_PRECISION)
