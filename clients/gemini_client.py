# clients/gemini_client.py
from __future__ import annotations
import os
import requests
from typing import Any, Dict, Optional


class GeminiClient:
    """
    Thin wrapper over the Gemini generateContent endpoint.
    Sends a single text prompt and hands back the first text part of the reply.
    """

    BASE_URL = "https://generativelanguage.googleapis.com/v1beta/models"
    MODEL = "gemini-2.0-flash"

    def __init__(self, api_key: Optional[str] = None, timeout: int = 15):
        self.api_key = api_key or os.getenv("GEMINI_API_KEY")
        self.timeout = timeout

    def enabled(self) -> bool:
        return bool(self.api_key)

    def generate(self, prompt: str) -> str:
        if not self.enabled():
            raise ValueError("GEMINI_API_KEY is missing.")
        url = f"{self.BASE_URL}/{self.MODEL}:generateContent"
        body = {"contents": [{"parts": [{"text": prompt}]}]}
        headers = {
            "Content-Type": "application/json",
            "X-goog-api-key": self.api_key,
        }
        res = requests.post(url, json=body, headers=headers, timeout=self.timeout)
        res.raise_for_status()
        return self._first_text(res.json())

    def _first_text(self, data: Dict[str, Any]) -> str:
        # candidates[0].content.parts[0].text; any missing level raises
        text = data["candidates"][0]["content"]["parts"][0]["text"]
        if not isinstance(text, str):
            raise TypeError("Gemini response text is not a string")
        return text
