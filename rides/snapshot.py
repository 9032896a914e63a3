"""
Purpose: Build read-only snapshots of RideOffer records.
What it does:
- Maps a document-store record (camelCase fields, as stored in the "rides"
  collection) into a RideOffer.
- Coerces loosely typed values: numeric strings become numbers, timestamps
  are parsed and normalised to UTC, blank/NaN coordinates become None.
- Loads whole pools from a list of records, a pandas DataFrame, or a CSV file.

Rule: Parsing only. A record that cannot become a RideOffer is rejected
here so the search engine never sees it.
"""

from __future__ import annotations

import logging
import math
from datetime import datetime
from typing import Any, Iterable, List, Mapping, Optional

import numpy as np
import pandas as pd

from .models import RideOffer

logger = logging.getLogger(__name__)

RECORD_FIELDS = [
    "id",
    "pickupLocation",
    "destinationLocation",
    "pricePerSeat",
    "availableSeats",
    "startDateTime",
    "pickupLat",
    "pickupLng",
    "airConditioning",
    "wifiAvailable",
]


class InvalidRideRecordError(ValueError):
    """Raised when a store record cannot be turned into a RideOffer."""
    pass


def offer_from_record(record: Mapping[str, Any]) -> RideOffer:
    """
    Convert one store record into a RideOffer.

    Raises InvalidRideRecordError when a required field is missing or
    cannot be parsed.
    """
    ride_id = _required(record, "id")

    return RideOffer(
        id=str(ride_id),
        pickup_location=str(_required(record, "pickupLocation")),
        destination_location=str(_required(record, "destinationLocation")),
        price_per_seat=_parse_float(_required(record, "pricePerSeat"), "pricePerSeat", ride_id),
        available_seats=_parse_int(_required(record, "availableSeats"), "availableSeats", ride_id),
        start_date_time=_parse_timestamp(_required(record, "startDateTime"), ride_id),
        pickup_lat=_parse_coordinate(record.get("pickupLat"), "pickupLat", ride_id),
        pickup_lng=_parse_coordinate(record.get("pickupLng"), "pickupLng", ride_id),
        air_conditioning=_parse_flag(record.get("airConditioning")),
        wifi_available=_parse_flag(record.get("wifiAvailable")),
    )


def offers_from_records(
    records: Iterable[Mapping[str, Any]],
    *,
    skip_invalid: bool = True,
) -> List[RideOffer]:
    """
    Convert many records, keeping their order.

    With skip_invalid (default) bad records are logged and dropped so one
    broken document does not block the whole pool.
    """
    offers: List[RideOffer] = []
    skipped = 0

    for record in records:
        try:
            offers.append(offer_from_record(record))
        except InvalidRideRecordError as e:
            if not skip_invalid:
                raise
            skipped += 1
            logger.warning(f"Skipping ride record: {e}")

    if skipped:
        logger.warning(f"Skipped {skipped} invalid ride records out of {len(offers) + skipped}")
    return offers


def offers_from_frame(frame: pd.DataFrame, *, skip_invalid: bool = True) -> List[RideOffer]:
    """
    Convert a DataFrame whose columns follow RECORD_FIELDS.
    """
    # NaN -> None so missing values look like missing record fields
    cleaned = frame.astype(object).where(pd.notna(frame), None)
    return offers_from_records(cleaned.to_dict(orient="records"), skip_invalid=skip_invalid)


def load_offers_csv(path, *, skip_invalid: bool = True) -> List[RideOffer]:
    """
    Load a pool snapshot from a CSV export of the rides collection.
    """
    frame = pd.read_csv(path, dtype={"id": str})
    return offers_from_frame(frame, skip_invalid=skip_invalid)


# -------------------------
# field parsers
# -------------------------

def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str) and not value.strip():
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    return False


def _required(record: Mapping[str, Any], name: str) -> Any:
    value = record.get(name)
    if _is_missing(value):
        raise InvalidRideRecordError(f"record {record.get('id')!r} is missing {name}")
    return value


def _parse_float(value: Any, name: str, ride_id: Any) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise InvalidRideRecordError(f"record {ride_id!r}: {name} is not a number ({value!r})")
    if math.isnan(number) or number < 0:
        raise InvalidRideRecordError(f"record {ride_id!r}: {name} must be >= 0")
    return number


def _parse_int(value: Any, name: str, ride_id: Any) -> int:
    number = _parse_float(value, name, ride_id)
    if not number.is_integer():
        raise InvalidRideRecordError(f"record {ride_id!r}: {name} must be a whole number")
    return int(number)


def _parse_coordinate(value: Any, name: str, ride_id: Any) -> Optional[float]:
    if _is_missing(value):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise InvalidRideRecordError(f"record {ride_id!r}: {name} is not a number ({value!r})")
    if math.isnan(number):
        return None
    return number


def _parse_timestamp(value: Any, ride_id: Any) -> datetime:
    try:
        timestamp = pd.Timestamp(value)
    except (TypeError, ValueError):
        raise InvalidRideRecordError(f"record {ride_id!r}: startDateTime is not a timestamp ({value!r})")
    if pd.isna(timestamp):
        raise InvalidRideRecordError(f"record {ride_id!r} is missing startDateTime")

    if timestamp.tzinfo is None:
        timestamp = timestamp.tz_localize("UTC")
    else:
        timestamp = timestamp.tz_convert("UTC")
    return timestamp.to_pydatetime()


def _parse_flag(value: Any) -> bool:
    # only a real true counts; "yes", 1 and friends do not
    if isinstance(value, (bool, np.bool_)):
        return bool(value)
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return False
