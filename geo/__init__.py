#Marks geo as a package.
#Re-exports the distance helpers so callers import from geo without knowing file names.
#No business logic.

from .distance import EARTH_RADIUS_KM, distance_between, distance_km

__all__ = [
    "EARTH_RADIUS_KM",
    "distance_km",
    "distance_between",
]
