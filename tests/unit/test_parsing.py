from __future__ import annotations

import pytest

from gpspoint.domain.algorithms.parsing import (
    detect_format,
    normalize_coordinate,
    parse_coordinate,
    parse_pair,
    split_pair,
)
from gpspoint.domain.constants import Axis, CoordinateFormat
from gpspoint.domain.exceptions import (
    CoordinateOutOfRange,
    FormatMismatch,
    InvalidArgumentCount,
    InvalidCoordinateFormat,
    InvalidOrientation,
)
from gpspoint.domain.models.geo import GeoPoint


def test_normalize_replaces_unicode_marks_and_drops_spaces() -> None:
    assert normalize_coordinate("40°44′ 54.3″N") == "40°44'54.3\"N"
    assert normalize_coordinate(" 43° 12' 42\" W") == "43°12'42\"W"
    assert normalize_coordinate("no-match") == "no-match"


def test_normalize_renders_numbers_as_plain_decimals() -> None:
    assert normalize_coordinate(-100.52) == "-100.52"
    assert normalize_coordinate(1e-05) == "0.00001"
    assert normalize_coordinate(12) == "12"


def test_split_pair_accepts_one_string_or_two_tokens() -> None:
    assert split_pair("41.9, 12.5") == ("41.9", "12.5")
    assert split_pair("48° 0.858N", "2°0.29 E") == ("48°0.858N", "2°0.29E")


@pytest.mark.parametrize(
    ("args", "message"),
    [
        ((), "Invalid number of arguments"),
        (("1", "2", "3"), "Invalid number of arguments"),
        (("0,0,0",), "Argument format is invalid"),
        (("41.9",), "Argument format is invalid"),
    ],
)
def test_split_pair_rejects_wrong_argument_count(args: tuple, message: str) -> None:
    with pytest.raises(InvalidArgumentCount, match=message):
        split_pair(*args)


@pytest.mark.parametrize(
    ("token", "expected"),
    [
        ("41.9", CoordinateFormat.DECIMAL_DEGREES),
        ("-12", CoordinateFormat.DECIMAL_DEGREES),
        ("48°0.858N", CoordinateFormat.DECIMAL_MINUTES),
        ("2°17E", CoordinateFormat.DECIMAL_MINUTES),
        ("22°57'8.7\"S", CoordinateFormat.DEGREES_MINUTES_SECONDS),
        ("43°12'42\"W", CoordinateFormat.DEGREES_MINUTES_SECONDS),
        ("-22°57'8.7\"S", None),
        ("41.", None),
        ("22°57'S", None),
        ("12°30'0\"X", None),
        ("", None),
    ],
)
def test_detect_format(token: str, expected: CoordinateFormat | None) -> None:
    assert detect_format(token) is expected


def test_parse_decimal_degrees_keeps_sign() -> None:
    assert parse_coordinate("-41.9", Axis.LATITUDE) == -41.9
    assert parse_coordinate(12.5, Axis.LONGITUDE) == 12.5


def test_parse_decimal_minutes_adds_remainder_to_degrees() -> None:
    assert parse_coordinate("48°0.858277778N", Axis.LATITUDE) == pytest.approx(
        48.858277778
    )
    assert parse_coordinate("2°0.2945W", Axis.LONGITUDE) == pytest.approx(-2.2945)


def test_parse_degrees_minutes_seconds() -> None:
    assert parse_coordinate("22° 57′ 8.7″ S", Axis.LATITUDE) == pytest.approx(
        -22.95242, abs=1e-5
    )
    assert parse_coordinate("43°12'42\"W", "longitude") == pytest.approx(
        -43.21167, abs=1e-5
    )


@pytest.mark.parametrize(
    ("token", "axis", "message"),
    [
        ("40°44'54.3\"E", Axis.LATITUDE, 'Orientation "E" is not valid for latitude'),
        ("2°0.2945S", Axis.LONGITUDE, 'Orientation "S" is not valid for longitude'),
    ],
)
def test_parse_rejects_orientation_of_other_axis(
    token: str, axis: Axis, message: str
) -> None:
    with pytest.raises(InvalidOrientation, match=message):
        parse_coordinate(token, axis)


@pytest.mark.parametrize("token", ["abc", "12,5", True])
def test_parse_rejects_unrecognized_tokens(token: object) -> None:
    with pytest.raises(InvalidCoordinateFormat, match="is not set on a valid format"):
        parse_coordinate(token, Axis.LATITUDE)  # type: ignore[arg-type]


def test_parse_rejects_out_of_range_values_naming_the_token() -> None:
    with pytest.raises(CoordinateOutOfRange, match='"91°0N" exceeds latitude limits'):
        parse_coordinate("91°0N", Axis.LATITUDE)
    with pytest.raises(CoordinateOutOfRange, match='"190.01" exceeds longitude limits'):
        parse_coordinate(190.01, Axis.LONGITUDE)


def test_parse_pair_returns_geo_point() -> None:
    assert parse_pair("41.9, 12.5") == GeoPoint(lat=41.9, lon=12.5)
    assert parse_pair("-41.9", "-12.5") == GeoPoint(lat=-41.9, lon=-12.5)


@pytest.mark.parametrize(
    "pair",
    [
        "41.9,12°0.5E",
        "41°0.9N,12°30'0\"E",
        "41°54'0\"N,12.5",
    ],
)
def test_parse_pair_rejects_mixed_notations(pair: str) -> None:
    with pytest.raises(FormatMismatch, match="not in the same format"):
        parse_pair(pair)


def test_parse_pair_names_unrecognized_token() -> None:
    with pytest.raises(InvalidCoordinateFormat, match='Coordinate "north"'):
        parse_pair("41.9", "north")


@pytest.mark.parametrize(
    ("token", "axis"),
    [
        ("1" * 5000 + "°0N", Axis.LATITUDE),
        ("1°" + "1" * 5000 + "'0\"E", Axis.LONGITUDE),
        ("1" * 5000, Axis.LATITUDE),
    ],
)
def test_parse_rejects_oversized_numbers_as_out_of_range(
    token: str, axis: Axis
) -> None:
    with pytest.raises(CoordinateOutOfRange, match=f"exceeds {axis.value} limits"):
        parse_coordinate(token, axis)
