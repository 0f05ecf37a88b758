import math

import pytest

from routestats.geometry import GeoPoint
from routestats.geometry_utils import (
    EARTH_RADIUS_M,
    haversine_distance,
    is_valid_coordinate,
)


def test_haversine_distance_known_values():
    # Paris to London (approx)
    pos1 = GeoPoint(lat=48.8566, lon=2.3522, elevation=35.0)
    pos2 = GeoPoint(lat=51.5074, lon=-0.1278, elevation=11.0)
    expected_distance_m = 343_500
    assert haversine_distance(pos1, pos2) == pytest.approx(expected_distance_m, abs=1000)


def test_haversine_distance_zero_distance():
    pos1 = GeoPoint(lat=40.7128, lon=-74.0060, elevation=10.0)
    pos2 = GeoPoint(lat=40.7128, lon=-74.0060, elevation=99.0)  # Same place, other height
    assert haversine_distance(pos1, pos2) == 0.0


def test_haversine_distance_along_meridian_is_arc_length():
    pos1 = GeoPoint(lat=52.0, lon=-1.0, elevation=0.0)
    pos2 = GeoPoint(lat=53.0, lon=-1.0, elevation=0.0)
    expected = EARTH_RADIUS_M * math.radians(1.0)
    assert haversine_distance(pos1, pos2) == pytest.approx(expected, rel=1e-12)


def test_haversine_distance_one_degree_of_longitude_at_equator():
    pos1 = GeoPoint(lat=0.0, lon=0.0, elevation=0.0)
    pos2 = GeoPoint(lat=0.0, lon=1.0, elevation=0.0)
    assert haversine_distance(pos1, pos2) == pytest.approx(111_194.93, abs=0.01)


def test_haversine_distance_antipodal_points():
    pos1 = GeoPoint(lat=0.0, lon=0.0, elevation=0.0)
    pos2 = GeoPoint(lat=0.0, lon=180.0, elevation=0.0)
    assert haversine_distance(pos1, pos2) == pytest.approx(math.pi * EARTH_RADIUS_M)


def test_haversine_distance_is_symmetric():
    pos1 = GeoPoint(lat=35.6895, lon=139.6917, elevation=40.0)  # Tokyo
    pos2 = GeoPoint(lat=-33.8688, lon=151.2093, elevation=58.0)  # Sydney
    assert haversine_distance(pos1, pos2) == pytest.approx(haversine_distance(pos2, pos1))
    assert haversine_distance(pos1, pos2) == pytest.approx(7_826_615, abs=2000)


def test_haversine_distance_out_of_range_does_not_raise():
    pos1 = GeoPoint(lat=95.0, lon=200.0, elevation=0.0)
    pos2 = GeoPoint(lat=-100.0, lon=-400.0, elevation=0.0)
    distance = haversine_distance(pos1, pos2)
    assert math.isfinite(distance)
    assert 0.0 <= distance <= math.pi * EARTH_RADIUS_M + 1e-6


@pytest.mark.parametrize(
    "lat, lon, expected",
    [
        (0.0, 0.0, True),
        (90.0, 180.0, True),
        (-90.0, -180.0, True),
        (90.1, 0.0, False),
        (0.0, -180.5, False),
    ],
)
def test_is_valid_coordinate(lat, lon, expected):
    assert is_valid_coordinate(lat, lon) is expected


@pytest.mark.parametrize("bad", [math.inf, -math.inf, math.nan])
def test_haversine_distance_non_finite_is_nan(bad):
    pos1 = GeoPoint(lat=52.0, lon=-1.0, elevation=0.0)
    pos2 = GeoPoint(lat=bad, lon=-1.0, elevation=0.0)
    assert math.isnan(haversine_distance(pos1, pos2))
    assert math.isnan(haversine_distance(pos2, pos1))
