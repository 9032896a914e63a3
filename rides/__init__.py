"""
Purpose: Package entry + stable exports.
What it does:

Marks rides as a Python package and re-exports the public API so other
modules can do:

from rides import RideOffer, SearchQuery, load_offers_csv

Should not contain business logic.

Public API:
- Domain models: RideOffer, RideFilters, SearchQuery, SortMode
- Snapshots: offer_from_record, offers_from_records, offers_from_frame, load_offers_csv
- Store adapter: RideStoreClient, RideStoreError
"""
from .models import LatLng, RideOffer, RideFilters, SearchQuery, SortMode
from .snapshot import (
    InvalidRideRecordError,
    offer_from_record,
    offers_from_records,
    offers_from_frame,
    load_offers_csv,
)
from .store_client import RideStoreClient, RideStoreError

__all__ = ["LatLng",
           "RideOffer",
           "RideFilters",
           "SearchQuery",
           "SortMode",
           "InvalidRideRecordError",
           "offer_from_record",
           "offers_from_records",
           "offers_from_frame",
           "load_offers_csv",
           "RideStoreClient",
           "RideStoreError",
           ]
