#Expose the high-level search pipeline pieces:
#Location matching (city tokens)
#Ranking (filters + sort)
#Engine orchestrator (the "one call" entry point)

from .location_matcher import extract_city_token, matches, location_matches
from .ranking import apply_filters, sort_offers, distance_to_pickup
from .policy import SearchPolicy, MissingCoordinates, default_search_policy, strict_distance_policy
from .engine import search_rides, SearchEngine #the main function to call to search a ride pool
from .query_builder import build_search_query, InvalidQueryError

__all__ = [
    "extract_city_token",
    "matches",
    "location_matches",
    "apply_filters",
    "sort_offers",
    "distance_to_pickup",
    "SearchPolicy",
    "MissingCoordinates",
    "default_search_policy",
    "strict_distance_policy",
    "search_rides",
    "SearchEngine",
    "build_search_query",
    "InvalidQueryError",
]
