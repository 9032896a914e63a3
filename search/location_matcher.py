#Purpose: Heuristic city-level matching of free-text addresses.
#Not a geocoder: assumes conventional "street, city, state/country" formatting.
#Typical responsibilities:
#pull a comparable city token out of a raw address
#case-insensitive containment of the query token in the candidate token
#Output: booleans the search engine uses to narrow the candidate pool.


def extract_city_token(address: str) -> str:
    """
    Pick the city-level segment of a comma separated address.

    More than two segments -> second-to-last ("12 Elm St, Springfield, IL" -> "Springfield").
    One or two segments -> last ("Springfield, IL" -> "IL", "Springfield" -> "Springfield").
    """
    segments = [segment.strip() for segment in address.split(",")]
    if len(segments) > 2:
        return segments[-2]
    return segments[-1]


def matches(query_token: str, candidate_token: str) -> bool:
    """
    True when candidate_token contains query_token, ignoring case.

    Only tested in this direction: a long query never matches a short
    candidate. An empty query token matches everything.
    """
    if not query_token:
        return True
    return query_token.lower() in candidate_token.lower()


def location_matches(query_text: str, address: str) -> bool:
    """Tokenize both sides and compare them."""
    return matches(extract_city_token(query_text), extract_city_token(address))
