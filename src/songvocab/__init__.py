"""songvocab - Vocabulary extraction from song lyrics."""

from songvocab.config import Settings, settings
from songvocab.exceptions import (
    AnalyzerError,
    CollaboratorError,
    EmptyLyricsError,
    InvalidLevelError,
    LLMAPIError,
    LLMResponseError,
    LyricsTooLongError,
    LyricsValidationError,
    NLTKResourceError,
    SongVocabError,
    TranslationError,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Configuration
    "Settings",
    "settings",
    # Exceptions
    "AnalyzerError",
    "CollaboratorError",
    "EmptyLyricsError",
    "InvalidLevelError",
    "LLMAPIError",
    "LLMResponseError",
    "LyricsTooLongError",
    "LyricsValidationError",
    "NLTKResourceError",
    "SongVocabError",
    "TranslationError",
]
