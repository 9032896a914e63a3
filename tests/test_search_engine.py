from datetime import datetime, timezone

import pytest

from rides.models import RideFilters, SearchQuery, SortMode
from search.engine import SearchEngine, match_route, search_rides
from search.policy import strict_distance_policy


def ids(offers):
    return [offer.id for offer in offers]


def test_scenario_price_filter_excludes_expensive_ride(scenario_pool):
    query = SearchQuery(
        from_text="Springfield",
        to_text="Chicago",
        filters=RideFilters(max_price=30),
        sort_mode=SortMode.PRICE,
    )
    assert ids(search_rides(scenario_pool, query)) == ["A"]


def test_scenario_price_sort_without_filters(scenario_pool, offer_a, offer_b):
    query = SearchQuery(from_text="Springfield", to_text="Chicago", sort_mode=SortMode.PRICE)

    # input order reversed, price sort puts A (20) before B (35)
    assert ids(search_rides([offer_b, offer_a], query)) == ["A", "B"]
    assert ids(search_rides(scenario_pool, query)) == ["A", "B"]


def test_scenario_empty_texts_skip_location_filter(scenario_pool):
    query = SearchQuery(from_text="", to_text="")
    assert ids(search_rides(scenario_pool, query)) == ["A", "B"]


def test_one_empty_text_also_skips_location_filter(scenario_pool, offer_factory):
    elsewhere = offer_factory("C", pickup_location="1 Pine St, Peoria, IL")
    pool = scenario_pool + [elsewhere]

    query = SearchQuery(from_text="Springfield", to_text="")
    assert ids(search_rides(pool, query)) == ["A", "B", "C"]


def test_scenario_distance_sort_nearest_first(offer_factory):
    far = offer_factory("far", pickup_lat=10.0, pickup_lng=10.0)
    near = offer_factory("near", pickup_lat=0.0, pickup_lng=0.0)

    query = SearchQuery(sort_mode=SortMode.DISTANCE, user_position=(0.0, 0.0))
    assert ids(search_rides([far, near], query)) == ["near", "far"]


def test_location_match_requires_both_ends(scenario_pool, offer_factory):
    wrong_destination = offer_factory(
        "C",
        pickup_location="3 Pine St, Springfield, IL",
        destination_location="7 River Rd, Peoria, IL",
    )
    wrong_pickup = offer_factory(
        "D",
        pickup_location="3 Pine St, Peoria, IL",
        destination_location="7 River Rd, Chicago, IL",
    )
    pool = scenario_pool + [wrong_destination, wrong_pickup]

    assert ids(match_route(pool, "Springfield", "Chicago")) == ["A", "B"]


def test_location_match_uses_city_token_of_query(scenario_pool):
    # full addresses in the query are reduced to their city token first
    query = SearchQuery(from_text="99 Any St, springfield, IL", to_text="2 Other Rd, CHICAGO, IL")
    assert ids(search_rides(scenario_pool, query)) == ["A", "B"]


def test_substring_heuristic_overmatches(scenario_pool):
    # "Spring" is contained in "Springfield": accepted heuristic behaviour
    query = SearchQuery(from_text="Spring", to_text="Chi")
    assert ids(search_rides(scenario_pool, query)) == ["A", "B"]


def test_no_match_returns_empty_list(scenario_pool):
    query = SearchQuery(from_text="Peoria", to_text="Chicago")
    assert search_rides(scenario_pool, query) == []
    assert search_rides([], SearchQuery()) == []


def test_search_is_pure_and_repeatable(scenario_pool):
    query = SearchQuery(from_text="Springfield", to_text="Chicago", sort_mode=SortMode.DATE)
    pool_before = list(scenario_pool)

    first = search_rides(scenario_pool, query)
    second = search_rides(scenario_pool, query)

    assert first == second
    assert scenario_pool == pool_before
    # results are the pool's own records, not copies
    assert all(any(result is offer for offer in scenario_pool) for result in first)


def test_search_engine_uses_its_policy(offer_factory):
    nowhere = offer_factory("nowhere")
    near = offer_factory("near", pickup_lat=1.0, pickup_lng=1.0)
    query = SearchQuery(sort_mode=SortMode.DISTANCE, user_position=(0.0, 0.0))

    assert ids(SearchEngine().search([near, nowhere], query)) == ["nowhere", "near"]
    assert ids(SearchEngine(policy=strict_distance_policy()).search([nowhere, near], query)) == ["near", "nowhere"]


class MockRideStore:
    def __init__(self, offers):
        self.offers = offers
        self.calls = 0

    def fetch_offers(self):
        self.calls += 1
        return list(self.offers)


def test_search_store_fetches_one_snapshot(scenario_pool):
    store = MockRideStore(scenario_pool)
    engine = SearchEngine(store_client=store)

    query = SearchQuery(from_text="Springfield", to_text="Chicago", filters=RideFilters(min_seats=2))
    assert ids(engine.search_store(query)) == ["A"]
    assert store.calls == 1


def test_search_store_without_client_raises():
    with pytest.raises(ValueError):
        SearchEngine().search_store(SearchQuery())


def test_date_search_over_mixed_timestamps(offer_factory):
    naive = offer_factory("naive", start_date_time=datetime(2026, 1, 5, 9, 0))
    aware = offer_factory("aware", start_date_time=datetime(2026, 1, 5, 8, 0, tzinfo=timezone.utc))

    query = SearchQuery(sort_mode=SortMode.DATE)
    assert ids(search_rides([naive, aware], query)) == ["aware", "naive"]
