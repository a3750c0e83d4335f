# models/preferences.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List

LEVELS = ("low", "medium", "high")


@dataclass(frozen=True)
class TripPreferences:
    categories: List[str] = field(default_factory=list)
    location: str = ""
    duration: int = 0
    pace: str = "medium"
    budget: str = "medium"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "categories": list(self.categories),
            "location": self.location,
            "duration": self.duration,
            "pace": self.pace,
            "budget": self.budget,
        }


# Returned whenever the request text cannot be turned into preferences.
FALLBACK_PREFERENCES = TripPreferences(
    categories=["food", "culture", "nature"],
    location="Montreal",
    duration=3,
    pace="high",
    budget="high",
)
