"""Native languages offered for translation."""

from types import MappingProxyType
from typing import Final

NATIVE_LANGUAGES: Final = MappingProxyType(
    {
        "es": "Spanish",
        "pt": "Portuguese",
        "fr": "French",
        "de": "German",
        "it": "Italian",
        "ru": "Russian",
        "uk": "Ukrainian",
        "pl": "Polish",
        "tr": "Turkish",
        "ar": "Arabic",
        "zh-CN": "Chinese (Simplified)",
        "ja": "Japanese",
        "ko": "Korean",
    }
)


def language_label(code: str) -> str:
    """Human-readable name for a language code; unknown codes are returned as-is."""
    code = code.strip()
    return NATIVE_LANGUAGES.get(code, code)
