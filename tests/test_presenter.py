from datetime import datetime, timedelta, timezone

import pytest

from search.presenter import RESULT_COLUMNS, format_departure, results_frame, rides_found_label


@pytest.mark.parametrize("start, expected", [
    (datetime(2026, 1, 3, 8, 5), "Sat, Jan 3, 8:05 AM"),
    (datetime(2026, 1, 3, 0, 0), "Sat, Jan 3, 12:00 AM"),
    (datetime(2026, 10, 18, 12, 30), "Sun, Oct 18, 12:30 PM"),
    (datetime(2026, 10, 18, 23, 59), "Sun, Oct 18, 11:59 PM"),
])
def test_format_departure(start, expected):
    assert format_departure(start) == expected


def test_rides_found_label():
    assert rides_found_label(0) == "0 rides found"
    assert rides_found_label(1) == "1 ride found"
    assert rides_found_label(3) == "3 rides found"


def test_results_frame_keeps_result_order(offer_factory):
    offers = [
        offer_factory("near", pickup_lat=0.0, pickup_lng=0.0, air_conditioning=True, wifi_available=True),
        offer_factory("far", pickup_lat=10.0, pickup_lng=10.0,
                      start_date_time=datetime(2026, 1, 6, 17, 45, tzinfo=timezone.utc)),
    ]

    frame = results_frame(offers, user_position=(0.0, 0.0))

    assert list(frame.columns) == RESULT_COLUMNS
    assert list(frame["id"]) == ["near", "far"]
    assert list(frame["distance_km"]) == [0.0, 1568.5]
    assert list(frame["amenities"]) == ["AC, WiFi", ""]
    assert frame["departure"].iloc[1] == "Tue, Jan 6, 5:45 PM"


def test_results_frame_without_position(offer_factory):
    frame = results_frame([offer_factory("a")])
    assert frame["distance_km"].isna().all()


def test_results_frame_empty():
    frame = results_frame([])
    assert frame.empty
    assert list(frame.columns) == RESULT_COLUMNS


def test_format_departure_shows_aware_times_in_utc():
    start = datetime(2026, 1, 3, 10, 5, tzinfo=timezone(timedelta(hours=2)))
    assert format_departure(start) == "Sat, Jan 3, 8:05 AM"
