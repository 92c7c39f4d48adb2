from __future__ import annotations

from dataclasses import dataclass

from gpspoint.domain.algorithms.validation import validate_range
from gpspoint.domain.constants import Axis


@dataclass(frozen=True, slots=True)
class GeoPoint:
    lat: float = 0.0
    lon: float = 0.0

    def __post_init__(self) -> None:
        validate_range(self.lat, Axis.LATITUDE)
        validate_range(self.lon, Axis.LONGITUDE)
