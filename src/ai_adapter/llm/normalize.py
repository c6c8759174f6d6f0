"""
Response Normalization

Turns the raw text generated by a model into the adapter's result shape:
the parsed JSON document when the text is valid JSON, otherwise
``{"text": <raw text>}``.
"""

import json
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ParseOutcome:
    """Result of a fallible JSON parse."""

    ok: bool
    value: Any = None


def try_parse_json(text: str) -> ParseOutcome:
    """
    Parse text as a JSON document without raising.

    Any JSON value counts (object, array or scalar). ``ok`` is False for
    empty or malformed input.
    """
    try:
        value = json.loads(text)
    except (TypeError, ValueError):
        return ParseOutcome(ok=False)
    return ParseOutcome(ok=True, value=value)


def normalize_text(text: Any) -> Any:
    """
    Build the normalized response for a model's raw output.

    Args:
        text: Raw generated text (non-strings are treated as "")

    Returns:
        The parsed JSON value, or {"text": text} if it is not JSON
    """
    if not isinstance(text, str):
        text = ""

    outcome = try_parse_json(text)
    if outcome.ok:
        return outcome.value
    return {"text": text}


def dig(data: Any, *path: Any) -> Any:
    """
    Walk nested dicts/lists, returning None on any missing step.

    Example:
        >>> dig({"choices": []}, "choices", 0, "message", "content") is None
        True
    """
    current = data
    for step in path:
        if isinstance(step, int):
            if not isinstance(current, list) or not -len(current) <= step < len(current):
                return None
            current = current[step]
        else:
            if not isinstance(current, dict):
                return None
            current = current.get(step)
        if current is None:
            return None
    return current


def extract_text(data: Any, *path: Any) -> str:
    """Locate generated text in a provider envelope; absent or empty -> ""."""
    value = dig(data, *path)
    return value if isinstance(value, str) else ""
