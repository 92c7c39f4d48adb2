from __future__ import annotations

import logging

from gpspoint.domain.constants import LATITUDE_LIMIT, LONGITUDE_LIMIT, Axis
from gpspoint.domain.exceptions import CoordinateOutOfRange

logger = logging.getLogger(__name__)


def validate_range(value: float, axis: Axis, token: str | None = None) -> float:
    """Reject magnitudes beyond the axis limit, naming the offending input.

    `token` is the raw text the value was parsed from; when absent the value
    itself is reported.
    """

    axis = Axis(axis)
    limit = LATITUDE_LIMIT if axis is Axis.LATITUDE else LONGITUDE_LIMIT
    if not (-limit <= value <= limit):
        shown = token if token is not None else str(value)
        logger.debug("Rejecting %s %r: beyond +/-%s", axis.value, shown, limit)
        raise CoordinateOutOfRange(f'Coordinate "{shown}" exceeds {axis.value} limits')
    return value
