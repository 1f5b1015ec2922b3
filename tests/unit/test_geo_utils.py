from __future__ import annotations

import pytest

from src.domain.algorithms.geo_utils import haversine_distance_m, walking_time_minutes
from src.domain.models.geo import GeoPoint


def test_haversine_zero_for_identical_points() -> None:
    p = GeoPoint(lat=16.8, lng=96.15)
    assert haversine_distance_m(p, p) == 0.0


def test_haversine_is_symmetric_and_reasonable_scale() -> None:
    # Rough sanity check: 1 degree of latitude is about 111km.
    a = GeoPoint(lat=0.0, lng=0.0)
    b = GeoPoint(lat=1.0, lng=0.0)

    d1 = haversine_distance_m(a, b)
    d2 = haversine_distance_m(b, a)

    assert abs(d1 - d2) < 1e-6
    assert 100_000.0 < d1 < 120_000.0


def test_haversine_handles_antipodal_points() -> None:
    a = GeoPoint(lat=0.0, lng=0.0)
    b = GeoPoint(lat=0.0, lng=180.0)
    assert haversine_distance_m(a, b) == pytest.approx(20_015_086.8, rel=1e-6)


@pytest.mark.parametrize(
    ("distance_m", "minutes"),
    [(0.0, 0), (1.0, 1), (80.0, 1), (80.1, 2), (240.0, 3), (499.0, 7)],
)
def test_walking_time_rounds_up_whole_minutes(distance_m: float, minutes: int) -> None:
    assert walking_time_minutes(distance_m) == minutes
