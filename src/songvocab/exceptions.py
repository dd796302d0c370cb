"""Custom exceptions for songvocab."""

from typing import Any


class SongVocabError(Exception):
    """Base exception for songvocab.

    Attributes:
        message: Human-readable error message
        context: Additional context information
    """

    def __init__(self, message: str, **context: Any) -> None:
        self.message = message
        self.context = context
        super().__init__(message)

    def __str__(self) -> str:
        context = {k: v for k, v in self.context.items() if v is not None}
        if context:
            context_str = ", ".join(f"{k}={v!r}" for k, v in context.items())
            return f"{self.message} ({context_str})"
        return self.message


class AnalyzerError(SongVocabError):
    """Base exception for analyzer errors."""


class InvalidLevelError(AnalyzerError):
    """Level is not one of the CEFR levels A1..C2.

    Attributes:
        level: The rejected level value
    """

    def __init__(self, message: str, level: str | None = None) -> None:
        super().__init__(message, level=level)
        self.level = level


class NLTKResourceError(AnalyzerError):
    """NLTK resource not available.

    Attributes:
        resource_name: Name of the missing NLTK resource
    """

    def __init__(self, message: str, resource_name: str | None = None) -> None:
        super().__init__(message, resource_name=resource_name)
        self.resource_name = resource_name


class LyricsValidationError(SongVocabError):
    """Lyrics input rejected before any processing starts."""


class EmptyLyricsError(LyricsValidationError):
    """Lyrics text is empty or contains only whitespace."""


class LyricsTooLongError(LyricsValidationError):
    """Lyrics text exceeds the configured maximum length.

    Attributes:
        length: Length of the rejected text
        max_length: Configured maximum
    """

    def __init__(self, message: str, length: int, max_length: int) -> None:
        super().__init__(message, length=length, max_length=max_length)
        self.length = length
        self.max_length = max_length


class CollaboratorError(SongVocabError):
    """Base exception for failures of external services (LLM, translation)."""


class LLMAPIError(CollaboratorError):
    """Error from the LLM HTTP API.

    Attributes:
        status_code: HTTP status code if available
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        **context: Any,
    ) -> None:
        super().__init__(message, status_code=status_code, **context)
        self.status_code = status_code


class LLMResponseError(CollaboratorError):
    """LLM replied, but the reply could not be parsed into the expected shape."""


class TranslationError(CollaboratorError):
    """Translation collaborator failed."""
