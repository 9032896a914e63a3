#Purpose: The ride store "adapter/client".
#Sole responsibility: read ride records from the external document store via HTTP
#and return normalized RideOffer snapshots.
#Encapsulates store-specific details:
#URL construction (/<collection>)
#paging (pageSize / pageToken)
#timeouts and error handling
#It never writes and should not contain matching, filtering or sorting rules.

from dotenv import load_dotenv
import logging
import os
from typing import Any, Dict, List, Optional

import requests

from .models import RideOffer
from .snapshot import offers_from_records

# Read the store base URL from environment
# Example in .env:
# RIDE_STORE_URL=http://localhost:8080/v1
load_dotenv()
RIDE_STORE_URL = os.getenv("RIDE_STORE_URL")

logger = logging.getLogger(__name__)


class RideStoreError(Exception):
    """Custom exception for ride store client errors."""
    pass


class RideStoreClient:
    """
    Ride store Adapter / Client

    Sole responsibility:
    - Talk to the document store via HTTP (read only)
    - Walk the pages of a collection
    - Return records or parsed RideOffers
    """
    def __init__(
        self,
        base_url: Optional[str] = None,
        collection: str = "rides",
        timeout: int = 5,
        page_size: int = 100,
    ):
        self.base_url = (base_url or RIDE_STORE_URL or "").rstrip("/")
        self.collection = collection
        self.timeout = timeout  # seconds to wait for the store before giving up
        self.page_size = page_size

        if not self.base_url:
            raise ValueError("Ride store URL not set. Please set RIDE_STORE_URL in the .env file.")
        if self.page_size <= 0:
            raise ValueError("page_size must be > 0")

    def collection_url(self) -> str:
        return f"{self.base_url}/{self.collection}"

    def fetch_page(self, page_token: Optional[str] = None) -> Dict[str, Any]:
        """
        One GET against the collection.

        Returns:
            {
                "documents": [ {record}, ... ],
                "nextPageToken": str | None,
            }
        """
        params = {"pageSize": self.page_size}
        if page_token:
            params["pageToken"] = page_token

        try:
            response = requests.get(self.collection_url(), params=params, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error(f"Ride store request failed: {e}")
            raise RideStoreError(f"Ride store request failed: {e}") from e

        if not response.ok:
            raise RideStoreError(f"Ride store error: HTTP {response.status_code}")

        try:
            data = response.json()
        except ValueError as e:
            raise RideStoreError("Ride store returned invalid JSON") from e

        documents = data.get("documents")
        if not isinstance(documents, list):
            raise RideStoreError("Ride store response has no 'documents' list")

        return {
            "documents": documents,
            "nextPageToken": data.get("nextPageToken"),
        }

    def fetch_records(self) -> List[Dict[str, Any]]:
        """
        Every record in the collection, in store order.
        """
        records: List[Dict[str, Any]] = []
        page_token = None

        while True:
            page = self.fetch_page(page_token)
            records.extend(page["documents"])

            page_token = page["nextPageToken"]
            if not page_token:
                break

        return records

    def fetch_offers(self) -> List[RideOffer]:
        """
        A read-only snapshot of the collection; unparseable records are skipped.
        """
        return offers_from_records(self.fetch_records())
