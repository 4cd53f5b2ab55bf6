"""Best-effort extraction of an explanation and patch from model output."""

import json
import re
from typing import Any

# Outermost brace span; greedy so nested objects stay intact
_JSON_OBJECT = re.compile(r"\{[\s\S]*\}")


def parse_generation_response(text: str) -> tuple[str, dict[str, Any]]:
    """Split a raw completion into (explanation, raw patch mapping).

    Never raises. Anything that does not decode to a JSON object yields
    the raw text as explanation and an empty patch. The returned patch is
    untyped and must still go through PatchValidator.

    Args:
        text: Raw completion text, possibly wrapped in prose or fences.

    Returns:
        Tuple of explanation string and patch mapping.
    """
    fallback: tuple[str, dict[str, Any]] = (text, {"files": []})

    match = _JSON_OBJECT.search(text)
    if match is None:
        return fallback

    try:
        parsed = json.loads(match.group(0))
    except json.JSONDecodeError:
        return fallback

    if not isinstance(parsed, dict):
        return fallback

    explanation = parsed.get("explanation")
    if not isinstance(explanation, str):
        explanation = text

    patch = parsed.get("patch")
    if not isinstance(patch, dict):
        patch = {"files": []}

    return explanation, patch
