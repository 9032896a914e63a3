"""
Purpose: Central configuration for search behavior (single source of truth).
What it does:

Stores the knobs for the degraded cases of a search:

DEFAULT_SORT_MODE = DISTANCE

MISSING_COORDINATES = ORIGIN (a record without pickup coordinates ranks as if at (0, 0))

FALLBACK_POSITION = (0.0, 0.0)

Rule: No logic here, just parameters so you can tune without rewriting code.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from rides.models import SortMode


class MissingCoordinates(str, Enum):
    """
    What distance sorting does with an offer that has no pickup coordinates.
    """
    # lenient: rank the offer as if it were at fallback_position
    ORIGIN = "origin"
    # strict: rank the offer after every offer that has coordinates
    SORT_LAST = "sort_last"


@dataclass(frozen=True)
class SearchPolicy:
    """
    Central configuration for the ride search engine.
    """

    # --- Query defaults ---
    # Used by the query builder when the caller has no sort preference.
    default_sort_mode: SortMode = SortMode.DISTANCE

    # --- Distance ranking ---
    # Offers stored without pickup coordinates.
    missing_coordinates: MissingCoordinates = MissingCoordinates.ORIGIN

    # Stand-in position under MissingCoordinates.ORIGIN.
    # (0, 0) sits in the Gulf of Guinea, so these offers rank far away for most users.
    fallback_position: Tuple[float, float] = (0.0, 0.0)

    def validate(self) -> None:
        """
        Basic sanity checks.
        """
        if not isinstance(self.default_sort_mode, SortMode):
            raise ValueError("default_sort_mode must be a SortMode")

        if not isinstance(self.missing_coordinates, MissingCoordinates):
            raise ValueError("missing_coordinates must be a MissingCoordinates value")

        if len(self.fallback_position) != 2:
            raise ValueError("fallback_position must be a (lat, lng) pair")


def default_search_policy() -> SearchPolicy:
    """
    Convenience factory for the default (lenient) policy.
    """
    p = SearchPolicy()
    p.validate()
    return p


def strict_distance_policy() -> SearchPolicy:
    """
    Coordinate-less offers go to the end of a distance sort instead of
    pretending to be at (0, 0).
    """
    p = SearchPolicy(missing_coordinates=MissingCoordinates.SORT_LAST)
    p.validate()
    return p
