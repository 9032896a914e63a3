import random

import pytest

from geo.distance import EARTH_RADIUS_KM, distance_between, distance_km
from geo import distance
from rides import models


@pytest.fixture
def random_points():
    rng = random.Random(1234)
    return [
        (rng.uniform(-90, 90), rng.uniform(-180, 180))
        for _ in range(50)
    ]


def test_same_point_is_zero(random_points):
    for lat, lng in random_points:
        assert distance_km(lat, lng, lat, lng) == pytest.approx(0.0, abs=1e-9)


def test_symmetric_and_non_negative(random_points):
    for (lat1, lng1), (lat2, lng2) in zip(random_points, reversed(random_points)):
        forward = distance_km(lat1, lng1, lat2, lng2)
        backward = distance_km(lat2, lng2, lat1, lng1)
        assert forward >= 0
        assert forward == pytest.approx(backward)


def test_known_distance_origin_to_ten_ten():
    assert distance_km(0, 0, 10, 10) == pytest.approx(1568.5, abs=0.1)


def test_antipodal_points_are_half_the_circumference():
    expected = 3.141592653589793 * EARTH_RADIUS_KM
    assert distance_km(0, 0, 0, 180) == pytest.approx(expected)
    assert distance_km(90, 0, -90, 0) == pytest.approx(expected)


def test_out_of_range_values_do_not_raise():
    # no validation: callers own their coordinates
    assert distance_km(200, 400, -300, -500) >= 0


def test_distance_between_matches_distance_km():
    a = (39.7817, -89.6501)
    b = (41.8781, -87.6298)
    assert distance_between(a, b) == distance_km(*a, *b)
    # Springfield, IL -> Chicago, IL is roughly 290 km as the crow flies
    assert 280 < distance_between(a, b) < 300


def test_coordinate_type_is_shared_with_models():
    assert distance.LatLng is models.LatLng
