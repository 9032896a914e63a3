import argparse
import os
from typing import List

from rides.mock_data import generate_mock_rides
from rides.models import RideOffer, SearchQuery, SortMode
from rides.snapshot import load_offers_csv, offers_from_frame
from search.engine import SearchEngine
from search.presenter import results_frame, rides_found_label
from search.policy import default_search_policy, strict_distance_policy
from search.query_builder import build_search_query


def load_pool(filepath=None, num_rides=300) -> List[RideOffer]:
    """
    Snapshot from a CSV export when given, otherwise a fresh synthetic pool.
    """
    if filepath:
        # Resolve the correct path depending on where the user runs the script from.
        base_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
        absolute_path = filepath if os.path.isabs(filepath) else os.path.join(base_dir, filepath)
        return load_offers_csv(absolute_path)

    return offers_from_frame(generate_mock_rides(num_rides, seed=7))


def print_results(title, results, query, policy, limit=10):
    print(f"\n--- {title} ---")
    print(rides_found_label(len(results)))
    if results:
        frame = results_frame(results[:limit], query.user_position, policy)
        print(frame.to_string(index=False))


def run_simulation(filepath=None):
    pool = load_pool(filepath)
    print(f"Loaded {len(pool)} ride offers "
          f"({sum(1 for offer in pool if not offer.has_coordinates)} without coordinates)")

    springfield = (39.7817, -89.6501)

    scenarios = [
        ("Springfield -> Chicago, cheapest first", build_search_query({
            "from": "Springfield",
            "to": "Chicago",
            "sortMode": "price",
        })),
        ("Springfield -> Chicago, under $30 with AC", build_search_query({
            "from": "Springfield",
            "to": "Chicago",
            "maxPrice": "30",
            "airConditioning": True,
            "sortMode": "date",
        })),
        ("Anywhere, 3+ seats, closest pickup first", build_search_query({
            "minSeats": "3",
            "userLat": springfield[0],
            "userLng": springfield[1],
        })),
    ]

    engine = SearchEngine(policy=default_search_policy())
    for title, query in scenarios:
        print_results(title, engine.search(pool, query), query, engine.policy)

    # Same distance search, but coordinate-less rides are pushed to the end.
    strict = SearchEngine(policy=strict_distance_policy())
    query = SearchQuery(sort_mode=SortMode.DISTANCE, user_position=(0.0, 0.0))
    print_results("From (0, 0), strict coordinates policy", strict.search(pool, query), query, strict.policy)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Run sample searches against a ride pool.")
    parser.add_argument("--csv", help="CSV snapshot of the rides collection (default: synthetic pool)")
    args = parser.parse_args()
    run_simulation(args.csv)
