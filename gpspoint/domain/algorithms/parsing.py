from __future__ import annotations

import logging
import re
from decimal import Decimal
from typing import Union

from gpspoint.domain.algorithms.validation import validate_range
from gpspoint.domain.constants import Axis, CoordinateFormat
from gpspoint.domain.exceptions import (
    FormatMismatch,
    InvalidArgumentCount,
    InvalidCoordinateFormat,
    InvalidOrientation,
)
from gpspoint.domain.models.geo import GeoPoint

logger = logging.getLogger(__name__)

CoordinateToken = Union[str, int, float]

# Tried in order; the grammars never overlap.
_GRAMMARS: tuple[tuple[CoordinateFormat, re.Pattern[str]], ...] = (
    (CoordinateFormat.DECIMAL_DEGREES, re.compile(r"-?\d+(?:\.\d+)?", re.ASCII)),
    (
        CoordinateFormat.DECIMAL_MINUTES,
        re.compile(r"(\d+)°(\d+(?:\.\d+)?)([NSEW])", re.ASCII),
    ),
    (
        CoordinateFormat.DEGREES_MINUTES_SECONDS,
        re.compile(r"(\d+)°(\d+)'(\d+(?:\.\d+)?)\"([NSEW])", re.ASCII),
    ),
)

_ORIENTATIONS: dict[Axis, frozenset[str]] = {
    Axis.LATITUDE: frozenset({"N", "S"}),
    Axis.LONGITUDE: frozenset({"E", "W"}),
}

_NEGATIVE_ORIENTATIONS = frozenset({"S", "W"})


def normalize_coordinate(token: CoordinateToken) -> str:
    """Canonicalize a raw token: ASCII minute/second marks, no spaces."""

    if isinstance(token, (int, float)) and not isinstance(token, bool):
        if isinstance(token, float):
            return format(Decimal(repr(token)), "f")
        return str(token)
    return (
        str(token)
        .replace("′", "'")
        .replace("″", '"')
        .replace(" ", "")
        .strip()
    )


def split_pair(*coordinates: CoordinateToken) -> tuple[str, str]:
    """Turn `"lat,lon"` or `(lat, lon)` into two normalized tokens."""

    if len(coordinates) == 0 or len(coordinates) > 2:
        raise InvalidArgumentCount("Invalid number of arguments")

    parts: list[CoordinateToken] = list(coordinates)
    if len(parts) == 1:
        parts = list(str(parts[0]).split(","))
        if len(parts) != 2:
            raise InvalidArgumentCount("Argument format is invalid")

    latitude, longitude = (normalize_coordinate(p) for p in parts)
    return latitude, longitude


def _match_grammar(token: str) -> tuple[CoordinateFormat, re.Match[str]] | None:
    for fmt, pattern in _GRAMMARS:
        match = pattern.fullmatch(token)
        if match is not None:
            return fmt, match
    return None


def detect_format(token: str) -> CoordinateFormat | None:
    matched = _match_grammar(token)
    return matched[0] if matched is not None else None


def validate_orientation(orientation: str, axis: Axis) -> None:
    axis = Axis(axis)
    if orientation not in _ORIENTATIONS[axis]:
        raise InvalidOrientation(
            f'Orientation "{orientation}" is not valid for {axis.value}'
        )


def _require_format(token: str) -> tuple[CoordinateFormat, re.Match[str]]:
    matched = _match_grammar(token)
    if matched is None:
        logger.debug("No coordinate notation matches %r", token)
        raise InvalidCoordinateFormat(
            f'Coordinate "{token}" is not set on a valid format'
        )
    return matched


def parse_coordinate(token: CoordinateToken, axis: Axis) -> float:
    """Resolve one token to signed decimal degrees for the given axis.

    The token is normalized first. Hemisphere letters must belong to the axis
    (N/S for latitude, E/W for longitude) and the result must lie within the
    axis limits, otherwise a `CoordinateError` subclass is raised.
    """

    axis = Axis(axis)
    text = normalize_coordinate(token)
    fmt, match = _require_format(text)

    if fmt is CoordinateFormat.DECIMAL_DEGREES:
        value = float(match.group(0))
    elif fmt is CoordinateFormat.DECIMAL_MINUTES:
        degrees, minutes, orientation = match.groups()
        validate_orientation(orientation, axis)
        # The minutes group is a fractional-degree remainder, e.g. 48°0.858N.
        value = float(degrees) + float(minutes)
        if orientation in _NEGATIVE_ORIENTATIONS:
            value = -value
    else:
        degrees, minutes, seconds, orientation = match.groups()
        validate_orientation(orientation, axis)
        value = float(degrees) + float(minutes) / 60 + float(seconds) / 3600
        if orientation in _NEGATIVE_ORIENTATIONS:
            value = -value

    logger.debug("Parsed %s %r as %s -> %s", axis.value, text, fmt.value, value)
    return validate_range(value, axis, text)


def parse_pair(*coordinates: CoordinateToken) -> GeoPoint:
    """Parse a latitude/longitude pair into a validated `GeoPoint`.

    Both tokens must use the same notation. Nothing is returned unless both
    axes parse and validate.
    """

    latitude, longitude = split_pair(*coordinates)

    lat_format, _ = _require_format(latitude)
    lon_format, _ = _require_format(longitude)
    if lat_format is not lon_format:
        logger.debug(
            "Notation mismatch: %r is %s, %r is %s",
            latitude,
            lat_format.value,
            longitude,
            lon_format.value,
        )
        raise FormatMismatch(
            "Coordinates are not in the same format: "
            f'"{latitude}" is {lat_format.value}, "{longitude}" is {lon_format.value}'
        )

    return GeoPoint(
        lat=parse_coordinate(latitude, Axis.LATITUDE),
        lon=parse_coordinate(longitude, Axis.LONGITUDE),
    )
