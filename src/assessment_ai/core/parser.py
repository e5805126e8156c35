"""
Parse JSON out of model output, tolerating Markdown code fences.
"""
import json
import logging
import re
from typing import Any

from assessment_ai.errors import ParseError

logger = logging.getLogger(__name__)

# ```json ... ``` or ``` ... ```, spanning the whole text
_FENCE_RE = re.compile(r"^```[\w-]*[ \t]*\r?\n?(.*?)\r?\n?```$", re.DOTALL)


def strip_code_fence(text: str) -> str:
    """Remove a surrounding Markdown code fence, if present."""
    clean_text = text.strip()
    match = _FENCE_RE.match(clean_text)
    if match:
        return match.group(1).strip()
    return clean_text


def parse_structured(text: str) -> Any:
    """
    Deserialize model output as JSON.

    Args:
        text: Raw model output, optionally wrapped in a fenced code block

    Returns:
        The decoded mapping or list

    Raises:
        ParseError: The text is not valid JSON after fence-stripping
    """
    if not isinstance(text, str):
        raise ParseError("Failed to parse AI response as JSON", raw_text=text)

    try:
        return json.loads(strip_code_fence(text))
    except json.JSONDecodeError as e:
        logger.error("Failed to parse AI response: %s", text)
        raise ParseError(
            f"Failed to parse AI response as JSON: {e}", raw_text=text
        ) from e
