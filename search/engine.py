"""
Purpose: The search "orchestrator" (single entry point).
What it does:

Coordinates the pipeline end-to-end:

- takes the full candidate pool (a read-only snapshot from the store)

- narrows it by origin/destination city (location_matcher.py)

- applies the filters and the sort (ranking.py)

- returns the ordered offers; an empty list is a normal outcome

Typical public function signature:

- search_rides(pool: Sequence[RideOffer], query: SearchQuery) -> List[RideOffer]

Rule: Engine is the only file other modules should call directly for searching.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from rides.models import RideOffer, SearchQuery
from .location_matcher import extract_city_token, matches
from .policy import SearchPolicy, default_search_policy
from .ranking import apply_filters, sort_offers

logger = logging.getLogger(__name__)


def search_rides(
    pool: Sequence[RideOffer],
    query: SearchQuery,
    *,
    policy: Optional[SearchPolicy] = None,
) -> List[RideOffer]:
    """
    Run one search against a candidate pool.

    Steps:
      1) Location match, only when both from_text and to_text are given.
      2) Filters (price, seats, amenities, departure day).
      3) Sort by query.sort_mode.

    The pool and its records are never modified; every call is independent.
    """
    policy = policy or default_search_policy()

    # 1) location narrowing
    if query.has_route:
        candidates = match_route(pool, query.from_text, query.to_text)
    else:
        candidates = list(pool)

    # 2) filters
    filtered = apply_filters(candidates, query.filters)

    # 3) sort
    results = sort_offers(
        filtered,
        query.sort_mode,
        query.user_position,
        policy=policy,
    )

    logger.debug(
        f"search from={query.from_text!r} to={query.to_text!r}: "
        f"pool={len(pool)} located={len(candidates)} filtered={len(filtered)} "
        f"sort={query.sort_mode.value}"
    )
    return results


def match_route(pool: Sequence[RideOffer], from_text: str, to_text: str) -> List[RideOffer]:
    """
    Keep offers whose pickup city matches from_text AND whose destination
    city matches to_text.
    """
    from_token = extract_city_token(from_text)
    to_token = extract_city_token(to_text)

    located: List[RideOffer] = []
    for offer in pool:
        if not matches(from_token, extract_city_token(offer.pickup_location)):
            continue
        if not matches(to_token, extract_city_token(offer.destination_location)):
            continue
        located.append(offer)

    return located


class SearchEngine:
    """
    Binds a policy and (optionally) a store client to the search pipeline.
    """
    def __init__(self, store_client=None, policy: Optional[SearchPolicy] = None):
        self.store_client = store_client
        self.policy = policy or default_search_policy()

    def search(self, pool: Sequence[RideOffer], query: SearchQuery) -> List[RideOffer]:
        return search_rides(pool, query, policy=self.policy)

    def search_store(self, query: SearchQuery) -> List[RideOffer]:
        """
        Fetch one snapshot from the store, then search it.

        The fetch is the only I/O; store errors propagate to the caller
        untouched.
        """
        if self.store_client is None:
            raise ValueError("No store client configured for this SearchEngine.")

        pool = self.store_client.fetch_offers()
        logger.info(f"Fetched {len(pool)} ride offers from the store")
        return self.search(pool, query)
