# utils/json_text.py
from __future__ import annotations
import json
from typing import Any, Dict


def strip_markdown(text: str) -> str:
    """Drop ```json / ``` fences and newlines a model may wrap around its answer."""
    return (
        text.replace("```json", "")
        .replace("```", "")
        .replace("\n", "")
        .strip()
    )


def extract_json_object(text: str) -> Dict[str, Any]:
    """
    Decode the substring between the first "{" and the last "}" (inclusive).
    Raises ValueError when there is no such pair or the payload is not an object.
    """
    cleaned = strip_markdown(text)
    start = cleaned.find("{")
    end = cleaned.rfind("}")
    if start == -1 or end < start:
        raise ValueError("no JSON object found in model output")

    try:
        payload = json.loads(cleaned[start : end + 1])
    except RecursionError:
        raise ValueError("model output nested too deeply") from None
    if not isinstance(payload, dict):
        raise ValueError("model output is not a JSON object")
    return payload
