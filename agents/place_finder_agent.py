# agents/place_finder_agent.py
from __future__ import annotations
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional

from clients.foursquare_client import FoursquareClient
from models.itinerary import Place
from models.preferences import TripPreferences
from models.search import PlaceSearchQuery

logger = logging.getLogger(__name__)

MAX_WORKERS = 8


class PlaceFinderAgent:
    """
    Runs one place search per category, concurrently.
    Results come back in category order; the first failed search aborts the lot.
    """

    def __init__(self, foursquare: Optional[FoursquareClient] = None, limit: int = 5, sort: str = "RATING"):
        self.foursquare = foursquare or FoursquareClient()
        self.limit = limit
        self.sort = sort

    def run(self, prefs: TripPreferences) -> List[List[Place]]:
        queries = [
            PlaceSearchQuery(query=category, near=prefs.location, limit=self.limit, sort=self.sort)
            for category in prefs.categories
        ]
        if not queries:
            return []

        with ThreadPoolExecutor(max_workers=min(MAX_WORKERS, len(queries))) as pool:
            futures = [pool.submit(self.foursquare.search, q) for q in queries]
            # result() re-raises the search error in the caller's thread
            results = [f.result() for f in futures]

        for q, places in zip(queries, results):
            logger.info("%d place(s) for %r near %s", len(places), q.query, q.near)
        return results
