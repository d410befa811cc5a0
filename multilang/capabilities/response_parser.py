"""Parses and validates raw capability JSON output."""

import json
import math
from typing import Any

from multilang.capabilities.exceptions import CapabilityResponseError
from multilang.capabilities.models import (
    LanguageDetection,
    RawAnalysis,
    RawExtraction,
    RawTranslation,
)


def parse_json(raw: str) -> dict[str, Any]:
    """Decode a JSON object, tolerating surrounding markdown code fences.

    Raises:
        CapabilityResponseError: if *raw* is not a JSON object.
    """
    cleaned = raw.strip()
    if cleaned.startswith("```"):
        lines = cleaned.splitlines()
        if lines and lines[0].startswith("```"):
            lines = lines[1:]
        if lines and lines[-1].strip() == "```":
            lines = lines[:-1]
        cleaned = "\n".join(lines)

    try:
        parsed = json.loads(cleaned)
    except json.JSONDecodeError as exc:
        raise CapabilityResponseError(f"Invalid JSON response: {exc}") from exc

    if not isinstance(parsed, dict):
        raise CapabilityResponseError("JSON response must be an object")
    return parsed


def build_extraction(data: dict[str, Any]) -> RawExtraction:
    return RawExtraction(
        text=_require_string(data, "text"),
        language_hint=_optional_string(data, "language"),
        confidence=_require_number(data, "confidence"),
    )


def build_detection(data: dict[str, Any]) -> LanguageDetection:
    return LanguageDetection(
        language=_optional_string(data, "language"),
        confidence=_require_number(data, "confidence"),
    )


def build_translation(data: dict[str, Any]) -> RawTranslation:
    return RawTranslation(
        translated_text=_require_string(data, "translated_text"),
        detected_language=_optional_string(data, "detected_language"),
        confidence=_require_number(data, "confidence"),
    )


def build_analysis(data: dict[str, Any]) -> RawAnalysis:
    """Empty summary and empty lists are valid: nothing was extractable."""
    return RawAnalysis(
        summary=_require_string(data, "summary"),
        action_points=_require_string_list(data, "action_points"),
        key_insights=_require_string_list(data, "key_insights"),
    )


def _require_string(data: dict[str, Any], key: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        raise CapabilityResponseError(f"'{key}' must be a string")
    return value


def _optional_string(data: dict[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise CapabilityResponseError(f"'{key}' must be a string or null")
    return value


def _require_number(data: dict[str, Any], key: str) -> float:
    value = data.get(key)
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise CapabilityResponseError(f"'{key}' must be a number")
    if not math.isfinite(value):
        raise CapabilityResponseError(f"'{key}' must be finite")
    return float(value)


def _require_string_list(data: dict[str, Any], key: str) -> list[str]:
    value = data.get(key)
    if not isinstance(value, list):
        raise CapabilityResponseError(f"'{key}' must be a list")
    for i, item in enumerate(value):
        if not isinstance(item, str):
            raise CapabilityResponseError(f"'{key}' item at index {i} must be a string")
    return list(value)
