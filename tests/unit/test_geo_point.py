import pytest
from src.domain.models.geo import GeoPoint


def test_geo_point_accepts_valid_coordinates() -> None:
    p = GeoPoint(lat=16.8409, lng=96.1735)
    assert p.lat == 16.8409
    assert p.lng == 96.1735


@pytest.mark.parametrize(
    ("lat", "lng"),
    [
        (-90.0001, 0.0),
        (90.0001, 0.0),
        (0.0, -180.0001),
        (0.0, 180.0001),
    ],
)
def test_geo_point_rejects_out_of_range_coordinates(lat: float, lng: float) -> None:
    with pytest.raises(ValueError):
        GeoPoint(lat=lat, lng=lng)
