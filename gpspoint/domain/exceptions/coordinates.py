class CoordinateError(ValueError):
    """Base exception for coordinate parsing, validation and formatting failures."""


class InvalidArgumentCount(CoordinateError):
    """Raised when a coordinate pair is not given as one or two tokens."""


class InvalidCoordinateFormat(CoordinateError):
    """Raised when a token matches none of the supported notations."""


class FormatMismatch(CoordinateError):
    """Raised when the two tokens of a pair use different notations."""


class InvalidOrientation(CoordinateError):
    """Raised when a hemisphere letter does not belong to the target axis."""


class CoordinateOutOfRange(CoordinateError):
    """Raised when a latitude exceeds 90 or a longitude exceeds 180 degrees."""


class InvalidOutputFormat(CoordinateError):
    """Raised when formatting is requested in an unknown notation."""


class InvalidUnit(CoordinateError):
    """Raised when a distance is requested in an unsupported unit."""
