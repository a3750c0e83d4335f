# models/search.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict

SORT_OPTIONS = ("RELEVANCE", "RATING", "DISTANCE", "POPULARITY")


@dataclass(frozen=True)
class PlaceSearchQuery:
    query: str
    near: str
    limit: int = 5
    sort: str = "RATING"

    def __post_init__(self):
        if self.sort not in SORT_OPTIONS:
            raise ValueError(f"Unsupported sort {self.sort!r}; expected one of {', '.join(SORT_OPTIONS)}")

    def to_params(self) -> Dict[str, Any]:
        return {
            "query": self.query,
            "near": self.near,
            "limit": self.limit,
            "sort": self.sort,
        }
