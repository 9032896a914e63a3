"""
Purpose: Turn raw search-form input into a SearchQuery.
What it does:
- trims the free-text locations
- parses the numeric filter fields (blank means "no limit")
- maps the departure day labels ("Today", "Tomorrow", "In 2 days", ...) to dates
- defaults the sort mode from the policy (Distance)
- only sets a user position when both lat and lng are given

Rule: Validation of user input happens here, at the boundary. The engine
assumes it receives a well-formed query.
"""

from __future__ import annotations

import re
from datetime import date, timedelta
from typing import Any, Mapping, Optional

from rides.models import RideFilters, SearchQuery, SortMode
from .policy import SearchPolicy, default_search_policy

# the day choices offered by the search form
DATE_LABELS = ["Today", "Tomorrow", "In 2 days", "In 3 days"]

_IN_N_DAYS = re.compile(r"^in\s+(\d+)\s+days?$", re.IGNORECASE)


class InvalidQueryError(ValueError):
    """Raised when search-form input cannot be turned into a query."""
    pass


def build_search_query(
    form: Mapping[str, Any],
    *,
    today: Optional[date] = None,
    policy: Optional[SearchPolicy] = None,
) -> SearchQuery:
    """
    Build a SearchQuery from form fields.

    Recognised keys: from, to, date, maxPrice, minSeats, airConditioning,
    wifi, sortMode, userLat, userLng. Missing keys are treated as blank.
    """
    policy = policy or default_search_policy()

    max_price = _parse_number(form.get("maxPrice"), "maxPrice")
    min_seats = _parse_number(form.get("minSeats"), "minSeats", integer=True)

    filters = RideFilters(
        max_price=max_price,
        min_seats=min_seats,
        require_air_conditioning=_parse_flag(form.get("airConditioning")),
        require_wifi=_parse_flag(form.get("wifi")),
        departure_date=resolve_date_label(form.get("date"), today=today),
    )
    try:
        filters.validate()
    except ValueError as e:
        raise InvalidQueryError(str(e)) from e

    user_lat = _parse_number(form.get("userLat"), "userLat", allow_negative=True)
    user_lng = _parse_number(form.get("userLng"), "userLng", allow_negative=True)
    user_position = None
    if user_lat is not None and user_lng is not None:
        user_position = (user_lat, user_lng)

    return SearchQuery(
        from_text=_clean_text(form.get("from")),
        to_text=_clean_text(form.get("to")),
        filters=filters,
        sort_mode=_parse_sort_mode(form.get("sortMode"), policy.default_sort_mode),
        user_position=user_position,
    )


def resolve_date_label(label: Optional[str], *, today: Optional[date] = None) -> Optional[date]:
    """
    "Today" -> today, "Tomorrow" -> today + 1, "In N days" -> today + N.
    Blank -> None (no departure filter).
    """
    if label is None:
        return None
    text = str(label).strip()
    if not text:
        return None

    today = today or date.today()
    lowered = text.lower()

    if lowered == "today":
        return today
    if lowered == "tomorrow":
        return today + timedelta(days=1)

    match = _IN_N_DAYS.match(text)
    if match:
        return today + timedelta(days=int(match.group(1)))

    raise InvalidQueryError(f"Unknown departure day: {text!r}")


# -------------------------
# field parsers
# -------------------------

def _clean_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _parse_number(value: Any, name: str, *, integer: bool = False, allow_negative: bool = False):
    if value is None:
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None

    try:
        number = float(value)
    except (TypeError, ValueError):
        raise InvalidQueryError(f"{name} must be a number, got {value!r}")

    if number != number:  # NaN
        raise InvalidQueryError(f"{name} must be a number, got {value!r}")

    if not allow_negative and number < 0:
        raise InvalidQueryError(f"{name} must be >= 0")

    if integer:
        if not number.is_integer():
            raise InvalidQueryError(f"{name} must be a whole number")
        return int(number)
    return number


def _parse_flag(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1", "on", "yes")
    return bool(value)


def _parse_sort_mode(value: Any, default: SortMode) -> SortMode:
    if value is None:
        return default
    if isinstance(value, SortMode):
        return value
    text = str(value).strip().lower()
    if not text:
        return default
    try:
        return SortMode(text)
    except ValueError:
        raise InvalidQueryError(f"Unknown sort mode: {value!r}")
