"""
Purpose: Read-only views of a search result for display and reporting.
What it does:
- format_departure: "Sat, Jan 4, 8:05 AM"
- rides_found_label: "1 ride found" / "3 rides found"
- results_frame: the result list as a pandas DataFrame (one row per offer)

Departure times are shown on the UTC wall clock, the same day boundary the
departure-day filter uses (snapshots normalise every timestamp to UTC).
No conversion to the viewer's local time zone happens here.

Rule: Formatting only. Never re-filters or re-orders the results.
"""

from datetime import datetime, timezone
from typing import List, Optional, Sequence

import pandas as pd

from rides.models import LatLng, RideOffer
from .policy import SearchPolicy
from .ranking import distance_to_pickup

RESULT_COLUMNS = [
    "id",
    "pickup",
    "destination",
    "price_per_seat",
    "available_seats",
    "departure",
    "distance_km",
    "amenities",
]


def format_departure(start: datetime) -> str:
    # aware values are shown in UTC, naive ones as given
    if start.tzinfo is not None:
        start = start.astimezone(timezone.utc)
    hour = start.hour % 12 or 12
    meridiem = "AM" if start.hour < 12 else "PM"
    return f"{start:%a}, {start:%b} {start.day}, {hour}:{start:%M} {meridiem}"


def rides_found_label(count: int) -> str:
    return f"{count} {'ride' if count == 1 else 'rides'} found"


def amenities_label(offer: RideOffer) -> str:
    amenities: List[str] = []
    if offer.air_conditioning:
        amenities.append("AC")
    if offer.wifi_available:
        amenities.append("WiFi")
    return ", ".join(amenities)


def results_frame(
    offers: Sequence[RideOffer],
    user_position: Optional[LatLng] = None,
    policy: Optional[SearchPolicy] = None,
) -> pd.DataFrame:
    """
    One row per offer, in result order. distance_km is None when no user
    position is known.
    """
    rows = []
    for offer in offers:
        distance = None
        if user_position is not None:
            distance = round(distance_to_pickup(offer, user_position, policy), 1)

        rows.append({
            "id": offer.id,
            "pickup": offer.pickup_location,
            "destination": offer.destination_location,
            "price_per_seat": offer.price_per_seat,
            "available_seats": offer.available_seats,
            "departure": format_departure(offer.start_date_time),
            "distance_km": distance,
            "amenities": amenities_label(offer),
        })

    return pd.DataFrame(rows, columns=RESULT_COLUMNS)
