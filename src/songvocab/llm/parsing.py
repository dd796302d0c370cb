"""Parsing of structured LLM replies."""

from __future__ import annotations

import json
import re
from typing import Any, Final

from pydantic import ValidationError

from songvocab.analyzer.models import LLMCandidate
from songvocab.exceptions import LLMResponseError

# Models sometimes wrap JSON in a markdown code fence
CODE_FENCE_PATTERN: Final[re.Pattern[str]] = re.compile(r"```(?:json)?\s*([\s\S]*?)\s*```")


def parse_json_content(content: str) -> Any:
    """Parse a reply as JSON, falling back to the first fenced code block.

    Raises:
        LLMResponseError: If neither the reply nor a fenced block is valid JSON.
    """
    try:
        return json.loads(content)
    except json.JSONDecodeError:
        pass

    match = CODE_FENCE_PATTERN.search(content)
    if match:
        try:
            return json.loads(match.group(1))
        except json.JSONDecodeError as e:
            raise LLMResponseError(f"Invalid JSON in fenced block: {e}") from e

    raise LLMResponseError("Invalid JSON response from LLM")


def parse_candidates(data: Any) -> list[LLMCandidate]:
    """Read candidates from {"words": [...]} or a bare list.

    Raises:
        LLMResponseError: If the shape is wrong or an entry is invalid.
    """
    if isinstance(data, dict):
        data = data.get("words", [])
    if not isinstance(data, list):
        raise LLMResponseError("Expected a list of words from LLM")

    try:
        return [LLMCandidate.model_validate(entry) for entry in data]
    except ValidationError as e:
        raise LLMResponseError(f"Malformed word entry from LLM: {e}") from e


def parse_translations(data: Any) -> list[str]:
    """Read the "translations" array.

    Non-string entries become "" so they show up as missing translations
    without shifting the remaining ones.

    Raises:
        LLMResponseError: If there is no translations array.
    """
    if not isinstance(data, dict) or not isinstance(data.get("translations", []), list):
        raise LLMResponseError("Expected a JSON object with a translations array")
    return [entry if isinstance(entry, str) else "" for entry in data.get("translations", [])]
