from __future__ import annotations

import math

from src.domain.models import GeoPoint

EARTH_RADIUS_M = 6371000.0


def haversine_distance_m(a: GeoPoint, b: GeoPoint) -> float:
    """Great-circle distance in meters."""

    lat1 = math.radians(a.lat)
    lng1 = math.radians(a.lng)
    lat2 = math.radians(b.lat)
    lng2 = math.radians(b.lng)

    dlat = lat2 - lat1
    dlng = lng2 - lng1

    s = (
        math.sin(dlat / 2.0) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(dlng / 2.0) ** 2
    )
    return 2.0 * EARTH_RADIUS_M * math.asin(min(1.0, math.sqrt(s)))


def walking_time_minutes(distance_m: float, *, speed_m_per_min: float = 80.0) -> int:
    """Whole minutes needed to walk distance_m, rounded up."""

    return int(math.ceil(distance_m / speed_m_per_min))
