"""
Purpose: Synthetic ride pools for demos, simulations and tests.
What it does:
Generates rows in the same shape as the store's "rides" collection
(see snapshot.RECORD_FIELDS), with a fixed set of cities so that
location searches actually find something.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

import numpy as np
import pandas as pd

from .snapshot import RECORD_FIELDS

# (city, state, lat, lng)
CITIES = [
    ("Springfield", "IL", 39.7817, -89.6501),
    ("Chicago", "IL", 41.8781, -87.6298),
    ("Peoria", "IL", 40.6936, -89.5890),
    ("St. Louis", "MO", 38.6270, -90.1994),
    ("Indianapolis", "IN", 39.7684, -86.1581),
    ("Milwaukee", "WI", 43.0389, -87.9065),
]

STREETS = ["Elm St", "Oak Ave", "Main St", "Lake Rd", "Maple Dr", "Cedar Ln"]


def generate_mock_rides(
    num_rides: int = 200,
    *,
    seed: Optional[int] = None,
    missing_coordinates_share: float = 0.1,
    now: Optional[datetime] = None,
) -> pd.DataFrame:
    """
    Build a DataFrame of fake ride records.

    Pickups are scattered within ~5km of their city centre; about
    missing_coordinates_share of the rows have no pickup coordinates at all.
    """
    rng = np.random.default_rng(seed)
    now = now or datetime.now(timezone.utc)

    data = []
    for ride_index in range(num_rides):
        # pick two different cities for the trip
        pickup_idx, destination_idx = rng.choice(len(CITIES), size=2, replace=False)
        pickup_city, pickup_state, city_lat, city_lng = CITIES[pickup_idx]
        destination_city, destination_state, _, _ = CITIES[destination_idx]

        pickup_street = f"{rng.integers(1, 999)} {STREETS[rng.integers(len(STREETS))]}"
        destination_street = f"{rng.integers(1, 999)} {STREETS[rng.integers(len(STREETS))]}"

        has_coordinates = rng.random() >= missing_coordinates_share
        pickup_lat = np.round(city_lat + rng.uniform(-0.05, 0.05), 6) if has_coordinates else None
        pickup_lng = np.round(city_lng + rng.uniform(-0.05, 0.05), 6) if has_coordinates else None

        departure = now + timedelta(hours=int(rng.integers(1, 96)))

        data.append({
            "id": f"ride_{str(ride_index + 1).zfill(5)}",
            "pickupLocation": f"{pickup_street}, {pickup_city}, {pickup_state}",
            "destinationLocation": f"{destination_street}, {destination_city}, {destination_state}",
            "pricePerSeat": float(np.round(rng.uniform(5.0, 60.0), 2)),
            "availableSeats": int(rng.integers(0, 7)),
            "startDateTime": departure.replace(minute=0, second=0, microsecond=0).isoformat(),
            "pickupLat": pickup_lat,
            "pickupLng": pickup_lng,
            "airConditioning": bool(rng.random() < 0.6),
            "wifiAvailable": bool(rng.random() < 0.3),
        })

    return pd.DataFrame(data, columns=RECORD_FIELDS)
