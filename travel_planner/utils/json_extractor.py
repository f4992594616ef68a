"""
Best-effort extraction of a JSON document from free-form model output.

A ```json fenced block wins. Otherwise the widest span from the first
opening bracket to the last closing bracket of the requested shape is
taken, with no bracket counting. Prose that itself contains braces or
brackets can therefore widen the capture past the real payload.
"""
import json
import re
from typing import Any

from travel_planner.utils.logger import logger

OBJECT = "object"
ARRAY = "array"

FENCED_BLOCK_PATTERN = re.compile(r"```json\n(.*?)\n```", re.DOTALL)
SPAN_PATTERNS = {
    OBJECT: re.compile(r"\{.*\}", re.DOTALL),
    ARRAY: re.compile(r"\[.*\]", re.DOTALL),
}


def _reject_constant(name):
    # NaN and Infinity are accepted by json.loads but are not valid JSON
    raise ValueError(f"Unexpected token {name} in JSON")


class ExtractionError(ValueError):
    """Raised when no JSON could be recovered from a model response."""


class ResponseParseError(ExtractionError):
    """Raised when a JSON-looking region was found but failed to parse."""


def find_json_candidate(text: str, shape: str = OBJECT):
    """Return the substring that should hold the JSON document, or None."""
    if shape not in SPAN_PATTERNS:
        raise ValueError(f"Unknown JSON shape: {shape}")

    fenced = FENCED_BLOCK_PATTERN.search(text)
    if fenced:
        return fenced.group(1)

    span = SPAN_PATTERNS[shape].search(text)
    if span:
        return span.group(0)

    return None


def extract_json(text: str, shape: str = OBJECT) -> Any:
    """
    Extract and parse the JSON document embedded in a model response.

    Args:
        text: Raw text from the model
        shape: "object" or "array"; selects the bracket fallback

    Returns:
        The parsed JSON value

    Raises:
        ExtractionError: If no JSON-shaped region exists in the text
        ResponseParseError: If the located region is not valid JSON
    """
    candidate = find_json_candidate(text, shape)
    if candidate is None:
        logger.error(f"No JSON {shape} found in response: {text[:100]}...")
        raise ExtractionError("Could not parse JSON from the response")

    try:
        return json.loads(candidate, parse_constant=_reject_constant)
    except ValueError as e:
        raise ResponseParseError(str(e)) from e
