# clients/foursquare_client.py
from __future__ import annotations
import logging
import os
import requests
from typing import List, Optional

from models.itinerary import Place
from models.search import PlaceSearchQuery

logger = logging.getLogger(__name__)


class FoursquareClient:
    """
    Foursquare Places search (real data only).
    Errors are logged and re-raised; callers decide what a failed search means.
    """

    BASE_URL = "https://places-api.foursquare.com/places/search"
    API_VERSION = "2025-06-17"

    def __init__(self, api_key: Optional[str] = None, timeout: int = 15):
        self.api_key = api_key or os.getenv("FOURSQUARE_API_KEY")
        self.timeout = timeout

    def enabled(self) -> bool:
        return bool(self.api_key)

    def search(self, query: PlaceSearchQuery) -> List[Place]:
        try:
            if not self.enabled():
                raise ValueError("FOURSQUARE_API_KEY is missing.")
            headers = {
                "X-Places-Api-Version": self.API_VERSION,
                "Accept": "application/json",
                "Authorization": f"Bearer {self.api_key}",
            }
            res = requests.get(self.BASE_URL, params=query.to_params(), headers=headers, timeout=self.timeout)
            res.raise_for_status()
            data = res.json()
        except (requests.RequestException, ValueError) as e:
            logger.error("Foursquare search failed for %r near %r: %s", query.query, query.near, e)
            raise

        results = data.get("results") or []
        logger.debug("Foursquare returned %d places for %r near %r", len(results), query.query, query.near)
        return list(results)
