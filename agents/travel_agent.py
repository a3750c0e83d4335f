# agents/travel_agent.py
from __future__ import annotations
import logging
from typing import Optional

from agents.itinerary_planner_agent import ItineraryPlannerAgent
from agents.place_finder_agent import PlaceFinderAgent
from agents.trip_preferences_agent import TripPreferencesAgent
from models.itinerary import TripPlan

logger = logging.getLogger(__name__)


class TravelAgent:
    """
    Orchestrator: free text -> preferences -> place searches -> itinerary.
    """

    def __init__(
        self,
        pref_agent: Optional[TripPreferencesAgent] = None,
        place_agent: Optional[PlaceFinderAgent] = None,
        itinerary_agent: Optional[ItineraryPlannerAgent] = None,
    ):
        self.pref_agent = pref_agent or TripPreferencesAgent()
        self.place_agent = place_agent or PlaceFinderAgent()
        self.itinerary_agent = itinerary_agent or ItineraryPlannerAgent()

    def generate_trip(self, user_input: str) -> TripPlan:
        try:
            # 1) Gemini -> structured preferences (falls back, never raises)
            prefs = self.pref_agent.run(user_input)

            # 2) One Foursquare search per category
            places_by_category = self.place_agent.run(prefs)

            # 3) Round-robin the results into days
            itinerary = self.itinerary_agent.run(prefs, places_by_category)
        except Exception:
            logger.exception("Error generating trip")
            raise

        return TripPlan(preferences=prefs, itinerary=itinerary)
