from .coordinates import (
    CoordinateError,
    CoordinateOutOfRange,
    FormatMismatch,
    InvalidArgumentCount,
    InvalidCoordinateFormat,
    InvalidOrientation,
    InvalidOutputFormat,
    InvalidUnit,
)

__all__ = [
    "CoordinateError",
    "CoordinateOutOfRange",
    "FormatMismatch",
    "InvalidArgumentCount",
    "InvalidCoordinateFormat",
    "InvalidOrientation",
    "InvalidOutputFormat",
    "InvalidUnit",
]
