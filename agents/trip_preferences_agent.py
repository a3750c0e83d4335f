# agents/trip_preferences_agent.py
from __future__ import annotations
import logging
from dataclasses import dataclass, replace
from typing import Any, Dict, List, Optional

import requests

from clients.gemini_client import GeminiClient
from models.preferences import FALLBACK_PREFERENCES, LEVELS, TripPreferences
from utils.json_text import extract_json_object

logger = logging.getLogger(__name__)

PROMPT_TEMPLATE = """Return ONLY a JSON object (no backticks, no markdown) for this trip request: "{request}".
Format: {{
  "categories": [],
  "location": "city name",
  "duration": number,
  "pace": "low/medium/high pace",
  "budget": "low/medium/high"
}}"""


@dataclass(frozen=True)
class ExtractionResult:
    preferences: TripPreferences
    fallback_reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.fallback_reason is None

    @classmethod
    def fallback(cls, reason: str) -> "ExtractionResult":
        # fresh list each time so callers cannot alter the shared fallback
        prefs = replace(FALLBACK_PREFERENCES, categories=list(FALLBACK_PREFERENCES.categories))
        return cls(preferences=prefs, fallback_reason=reason)


class TripPreferencesAgent:
    """
    Turns a free-text trip request into TripPreferences via Gemini.

    Never fails outwardly: transport errors, malformed model output and schema
    mismatches all resolve to FALLBACK_PREFERENCES with a warning logged.
    """

    def __init__(self, gemini: Optional[GeminiClient] = None):
        self.gemini = gemini or GeminiClient()

    def run(self, user_input: str) -> TripPreferences:
        result = self.extract(user_input)
        if not result.ok:
            logger.warning("Preference extraction fell back to defaults: %s", result.fallback_reason)
        return result.preferences

    def extract(self, user_input: str) -> ExtractionResult:
        prompt = self.build_prompt(user_input)
        try:
            text = self.gemini.generate(prompt)
        except (requests.RequestException, ValueError, KeyError, IndexError, TypeError) as e:
            return ExtractionResult.fallback(f"Gemini API error: {e}")

        try:
            raw = extract_json_object(text)
        except ValueError as e:
            return ExtractionResult.fallback(f"unparseable model output: {e}")

        try:
            prefs = self._from_dict(raw)
        except (TypeError, ValueError) as e:
            return ExtractionResult.fallback(f"invalid preferences: {e}")

        logger.info(
            "Extracted preferences: %s, %d day(s), categories=%s",
            prefs.location,
            prefs.duration,
            prefs.categories,
        )
        return ExtractionResult(preferences=prefs)

    def build_prompt(self, user_input: str) -> str:
        return PROMPT_TEMPLATE.format(request=str(user_input))

    # ----------------------
    # helpers
    # ----------------------

    def _from_dict(self, d: Dict[str, Any]) -> TripPreferences:
        missing = [k for k in ("categories", "location", "duration", "pace", "budget") if k not in d]
        if missing:
            raise ValueError(f"missing field(s): {', '.join(missing)}")

        return TripPreferences(
            categories=self._categories(d["categories"]),
            location=self._location(d["location"]),
            duration=self._duration(d["duration"]),
            pace=self._level("pace", d["pace"]),
            budget=self._level("budget", d["budget"]),
        )

    def _categories(self, value: Any) -> List[str]:
        if not isinstance(value, list):
            raise TypeError("categories must be a list")
        categories: List[str] = []
        for item in value:
            if not isinstance(item, str) or not item.strip():
                raise ValueError(f"invalid category {item!r}")
            categories.append(item.strip())
        return categories

    def _location(self, value: Any) -> str:
        if not isinstance(value, str) or not value.strip():
            raise ValueError("location must be a non-empty string")
        return value.strip()

    def _duration(self, value: Any) -> int:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError("duration must be a number")
        if isinstance(value, float) and not value.is_integer():
            raise ValueError(f"duration must be a whole number of days, got {value}")
        days = int(value)
        if days < 0:
            raise ValueError(f"duration must not be negative, got {days}")
        return days

    def _level(self, name: str, value: Any) -> str:
        if not isinstance(value, str):
            raise TypeError(f"{name} must be a string")
        level = value.strip().lower()
        # the prompt shows "low/medium/high pace", so models sometimes echo the suffix
        if level.endswith(" pace"):
            level = level[: -len(" pace")].strip()
        if level not in LEVELS:
            raise ValueError(f"{name} must be one of {', '.join(LEVELS)}, got {value!r}")
        return level
