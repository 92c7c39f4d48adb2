from .geo import GeoPoint
from .point import Point

__all__ = [
    "GeoPoint",
    "Point",
]
