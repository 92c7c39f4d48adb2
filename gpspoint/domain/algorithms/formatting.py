"""Render stored decimal degrees in each supported notation.

Values are converted to `Decimal` from their shortest float repr and rounded
half-up, so outputs are stable regardless of binary float noise (41.9 stays
`41.9`, never `41.899999999999999`).
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from gpspoint.domain.constants import PRECISION, Axis, CoordinateFormat
from gpspoint.domain.exceptions import InvalidOutputFormat
from gpspoint.domain.models.geo import GeoPoint

_SIXTY = Decimal(60)


def _quantum(places: int) -> Decimal:
    return Decimal(1).scaleb(-places)


def _round(value: Decimal, places: int = PRECISION) -> Decimal:
    return value.quantize(_quantum(places), rounding=ROUND_HALF_UP)


def _trim(value: Decimal) -> str:
    """Plain notation without trailing zeros; zero is always a bare `0`."""

    if value.is_zero():
        return "0"
    text = format(value, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _magnitude(value: float) -> tuple[int, Decimal]:
    """Split |value| into whole degrees and the exact fractional remainder."""

    exact = abs(Decimal(repr(float(value))))
    degrees = int(exact)
    return degrees, exact - degrees


def orientation_for(value: float, axis: Axis) -> str:
    if Axis(axis) is Axis.LATITUDE:
        return "S" if value < 0 else "N"
    return "W" if value < 0 else "E"


def to_decimal_degrees(value: float) -> str:
    return _trim(_round(Decimal(repr(float(value)))))


def to_decimal_minutes(value: float, axis: Axis) -> str:
    degrees, remainder = _magnitude(value)
    minutes = _round(remainder)
    if minutes >= 1:
        degrees += 1
        minutes = Decimal(0)

    # Rendered zero always takes N or E.
    if degrees == 0 and minutes.is_zero():
        value = 0.0
    return f"{degrees}°{_trim(minutes)}{orientation_for(value, axis)}"


def to_degrees_minutes_seconds(value: float, axis: Axis) -> str:
    """Format as D°M'S"O, carrying rounded-up seconds into minutes and degrees."""

    degrees, remainder = _magnitude(value)
    decimal_minutes = remainder * _SIXTY
    minutes = int(decimal_minutes)
    seconds = _round((decimal_minutes - minutes) * _SIXTY)

    if seconds >= _SIXTY:
        minutes += 1
        seconds = Decimal(0)
    if minutes >= 60:
        degrees += 1
        minutes = 0

    if degrees == 0 and minutes == 0 and seconds.is_zero():
        value = 0.0

    return f"{degrees}°{minutes}'{_trim(seconds)}\"{orientation_for(value, axis)}"


def format_coordinate(
    value: float,
    axis: Axis,
    fmt: CoordinateFormat | str = CoordinateFormat.DECIMAL_DEGREES,
) -> str:
    try:
        fmt = CoordinateFormat(fmt)
    except ValueError:
        raise InvalidOutputFormat(f'Format "{fmt}" is not valid') from None

    if fmt is CoordinateFormat.DECIMAL_DEGREES:
        return to_decimal_degrees(value)
    if fmt is CoordinateFormat.DECIMAL_MINUTES:
        return to_decimal_minutes(value, axis)
    return to_degrees_minutes_seconds(value, axis)


def format_pair(
    point: GeoPoint, fmt: CoordinateFormat | str = CoordinateFormat.DECIMAL_DEGREES
) -> str:
    return "{},{}".format(
        format_coordinate(point.lat, Axis.LATITUDE, fmt),
        format_coordinate(point.lon, Axis.LONGITUDE, fmt),
    )
