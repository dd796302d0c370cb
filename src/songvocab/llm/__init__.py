"""LLM integration: candidate extraction, language detection, translation."""

from .client import OpenAIClient
from .languages import NATIVE_LANGUAGES, language_label
from .parsing import parse_candidates, parse_json_content, parse_translations

__all__ = [
    "OpenAIClient",
    "NATIVE_LANGUAGES",
    "language_label",
    "parse_candidates",
    "parse_json_content",
    "parse_translations",
]
