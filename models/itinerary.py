# models/itinerary.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List

from models.preferences import TripPreferences

# Venue record as returned by the places API; its shape is owned by the provider.
Place = Dict[str, Any]


@dataclass
class ItineraryDay:
    day: int
    places: List[Place] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"day": self.day, "places": list(self.places)}


@dataclass
class TripPlan:
    preferences: TripPreferences
    itinerary: List[ItineraryDay]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "preferences": self.preferences.to_dict(),
            "itinerary": [d.to_dict() for d in self.itinerary],
        }
