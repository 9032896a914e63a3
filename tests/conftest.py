from datetime import datetime, timezone

import pytest

from rides.models import RideOffer


def make_offer(ride_id, **overrides) -> RideOffer:
    fields = dict(
        id=ride_id,
        pickup_location="1 Main St, Springfield, IL",
        destination_location="1 Main St, Chicago, IL",
        price_per_seat=20.0,
        available_seats=2,
        start_date_time=datetime(2026, 1, 5, 9, 0, tzinfo=timezone.utc),
        pickup_lat=None,
        pickup_lng=None,
        air_conditioning=False,
        wifi_available=False,
    )
    fields.update(overrides)
    return RideOffer(**fields)


@pytest.fixture
def offer_factory():
    return make_offer


@pytest.fixture
def offer_a():
    return make_offer(
        "A",
        pickup_location="12 Elm St, Springfield, IL",
        destination_location="1 Main, Chicago, IL",
        price_per_seat=20,
        available_seats=3,
        air_conditioning=True,
    )


@pytest.fixture
def offer_b():
    return make_offer(
        "B",
        pickup_location="5 Oak Ave, Springfield, IL",
        destination_location="9 Lake Rd, Chicago, IL",
        price_per_seat=35,
        available_seats=1,
        air_conditioning=False,
    )


@pytest.fixture
def scenario_pool(offer_a, offer_b):
    return [offer_a, offer_b]
