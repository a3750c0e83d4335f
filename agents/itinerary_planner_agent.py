# agents/itinerary_planner_agent.py
from __future__ import annotations
from typing import List, Sequence

from models.itinerary import ItineraryDay, Place
from models.preferences import TripPreferences


class ItineraryPlannerAgent:
    """
    Builds a day-by-day plan by rotating through each category's results:
    day index i takes results[i % len(results)] from every non-empty category.
    """

    def run(self, prefs: TripPreferences, places_by_category: Sequence[Sequence[Place]]) -> List[ItineraryDay]:
        return [
            ItineraryDay(day=i + 1, places=self._places_for_day(i, places_by_category))
            for i in range(max(0, prefs.duration))
        ]

    def _places_for_day(self, day_index: int, places_by_category: Sequence[Sequence[Place]]) -> List[Place]:
        picked: List[Place] = []
        for places in places_by_category:
            if not places:
                continue
            picked.append(places[day_index % len(places)])
        return picked
