"""
Purpose: Core data models for the rides domain.
What it does:
- Defines the structure of a RideOffer as read from the document store.
- Defines the per-request search inputs (RideFilters, SearchQuery).

Defines enums/constants:
- SortMode = DISTANCE | PRICE | DATE

Rule: No matching, no distance math, no store calls. Models only.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Optional, Tuple

# internal coordinate type: (lat, lng)
LatLng = Tuple[float, float]


class SortMode(str, Enum):
    """
    How a result set is ordered once filters have run.
    """
    DISTANCE = "distance"
    PRICE = "price"
    DATE = "date"


@dataclass(frozen=True)
class RideOffer:
    """
    A single shared-ride trip available for booking.

    Owned by the external store: the search engine only reads these and
    hands back references, never copies.
    """
    id: str
    pickup_location: str
    destination_location: str
    price_per_seat: float
    available_seats: int
    start_date_time: datetime

    # coordinates are optional on the stored record
    pickup_lat: Optional[float] = None
    pickup_lng: Optional[float] = None

    air_conditioning: bool = False
    wifi_available: bool = False

    @property
    def has_coordinates(self) -> bool:
        return self.pickup_lat is not None and self.pickup_lng is not None


@dataclass(frozen=True)
class RideFilters:
    """
    Filter thresholds for a search. A filter is inactive when unset/False,
    so RideFilters() is the "reset filters" state.
    """
    max_price: Optional[float] = None
    min_seats: Optional[int] = None
    require_air_conditioning: bool = False
    require_wifi: bool = False

    # only rides departing on this calendar day
    departure_date: Optional[date] = None

    @property
    def is_empty(self) -> bool:
        return (
            self.max_price is None
            and self.min_seats is None
            and not self.require_air_conditioning
            and not self.require_wifi
            and self.departure_date is None
        )

    def validate(self) -> None:
        """
        Basic sanity checks. The engine itself never calls this.
        """
        if self.max_price is not None and self.max_price < 0:
            raise ValueError("max_price must be >= 0")

        if self.min_seats is not None and self.min_seats < 0:
            raise ValueError("min_seats must be >= 0")


@dataclass(frozen=True)
class SearchQuery:
    """
    One search request, built once from user input and passed into the engine.
    """
    from_text: str = ""
    to_text: str = ""
    filters: RideFilters = field(default_factory=RideFilters)
    sort_mode: SortMode = SortMode.DISTANCE

    # required for distance sorting, otherwise the order is left untouched
    user_position: Optional[LatLng] = None

    @property
    def has_route(self) -> bool:
        """True when both free-text locations were given."""
        return bool(self.from_text) and bool(self.to_text)
