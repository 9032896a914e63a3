"""
Purpose: Great-circle distance between coordinates.
What it does:
- haversine distance in kilometers between two (lat, lng) points
- no validation: out-of-range values are computed as given

Rule: Pure math only. Deciding what to do with a record that has no
coordinates belongs to the search policy, not here.
"""

from __future__ import annotations

import math

from rides.models import LatLng

EARTH_RADIUS_KM = 6371.0


def distance_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Haversine distance in kilometers.

    Returns 0.0 for coincident points and is symmetric in its arguments.
    """
    lat1_rad = math.radians(lat1)
    lat2_rad = math.radians(lat2)
    dlat = lat2_rad - lat1_rad
    dlon = math.radians(lon2 - lon1)

    a = (
        math.sin(dlat / 2) ** 2
        + math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(dlon / 2) ** 2
    )
    # rounding can push antipodal points a hair past 1.0
    a = min(1.0, max(0.0, a))

    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def distance_between(a: LatLng, b: LatLng) -> float:
    """Tuple form of distance_km."""
    return distance_km(a[0], a[1], b[0], b[1])
