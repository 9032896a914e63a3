"""
Purpose: Filter + sort pipeline over a candidate set of ride offers.
What it does:

apply_filters:
- price: price_per_seat <= max_price
- seats: available_seats >= min_seats
- amenities: air conditioning / wifi must be present when required
- departure day: start_date_time falls on departure_date (UTC calendar day)
Every predicate is skipped when its threshold is unset, and the
relative order of the offers is preserved.

sort_offers:
- PRICE: cheapest seat first
- DATE: earliest departure first
- DISTANCE: closest pickup to the user first (haversine)

Rule: Both steps return new lists and never touch the records. Sorting is
stable: equal keys keep their input order.
"""

from __future__ import annotations

import math
from datetime import datetime, timezone
from typing import List, Optional, Sequence

from geo.distance import distance_km
from rides.models import LatLng, RideFilters, RideOffer, SortMode
from .policy import MissingCoordinates, SearchPolicy, default_search_policy


def apply_filters(offers: Sequence[RideOffer], filters: RideFilters) -> List[RideOffer]:
    """
    Returns the offers that pass every active filter, in input order.
    """
    filtered: List[RideOffer] = []

    for offer in offers:
        if filters.max_price is not None and offer.price_per_seat > filters.max_price:
            continue

        if filters.min_seats is not None and offer.available_seats < filters.min_seats:
            continue

        if filters.require_air_conditioning and offer.air_conditioning is not True:
            continue

        if filters.require_wifi and offer.wifi_available is not True:
            continue

        if filters.departure_date is not None and _departure_utc(offer).date() != filters.departure_date:
            continue

        filtered.append(offer)

    return filtered


def distance_to_pickup(
    offer: RideOffer,
    user_position: LatLng,
    policy: Optional[SearchPolicy] = None,
) -> float:
    """
    Distance in km from the user to the offer's pickup point.

    Missing coordinates are resolved by the policy: under ORIGIN each absent
    field takes its value from policy.fallback_position (lat=10, lng=None is
    measured from (10, 0)); under SORT_LAST any absent field pushes the
    offer to infinity so it sorts last.
    """
    policy = policy or default_search_policy()

    if not offer.has_coordinates and policy.missing_coordinates == MissingCoordinates.SORT_LAST:
        return math.inf

    fallback_lat, fallback_lng = policy.fallback_position
    pickup_lat = offer.pickup_lat if offer.pickup_lat is not None else fallback_lat
    pickup_lng = offer.pickup_lng if offer.pickup_lng is not None else fallback_lng

    user_lat, user_lng = user_position
    return distance_km(user_lat, user_lng, pickup_lat, pickup_lng)


def sort_offers(
    offers: Sequence[RideOffer],
    mode: SortMode,
    user_position: Optional[LatLng] = None,
    *,
    policy: Optional[SearchPolicy] = None,
) -> List[RideOffer]:
    """
    Returns a new list ordered by the given mode (stable).

    DISTANCE without a user position cannot be ranked, so the input order
    is returned as is.
    """
    if mode == SortMode.PRICE:
        return sorted(offers, key=lambda offer: offer.price_per_seat)

    if mode == SortMode.DATE:
        return sorted(offers, key=_departure_utc)

    if mode == SortMode.DISTANCE:
        if user_position is None:
            return list(offers)
        policy = policy or default_search_policy()
        return sorted(
            offers,
            key=lambda offer: distance_to_pickup(offer, user_position, policy),
        )

    raise ValueError(f"Unknown sort mode: {mode!r}")


def _departure_utc(offer: RideOffer) -> datetime:
    """
    start_date_time as an aware UTC datetime; naive values are taken as UTC.
    Records built outside the snapshot loader may mix both kinds.
    """
    start = offer.start_date_time
    if start.tzinfo is None:
        return start.replace(tzinfo=timezone.utc)
    return start.astimezone(timezone.utc)
