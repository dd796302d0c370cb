"""Lyrics segmentation and token normalization."""

from __future__ import annotations

import re
from typing import Final

from nltk.stem import WordNetLemmatizer

from songvocab.analyzer.nltk_resources import LEMMATIZER_RESOURCES, ensure_resources
from songvocab.exceptions import EmptyLyricsError, LyricsTooLongError, NLTKResourceError

# Pattern to match section headers like [Verse 1], [Chorus], [Bridge], etc.
SECTION_HEADER_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"\[([A-Za-z0-9\s\-:]+)\]",
    re.IGNORECASE,
)

# Example units end at line breaks and sentence-terminating punctuation
EXAMPLE_BOUNDARY_PATTERN: Final[re.Pattern[str]] = re.compile(r"[\r\n.!?]+")

# Runs of characters that are neither letters nor apostrophes, at either edge
EDGE_NOISE_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^(?:[^\w']|[\d_])+|(?:[^\w']|[\d_])+$"
)

# Typographic apostrophes pasted from lyrics sites, folded to "'"
APOSTROPHE_VARIANTS: Final[dict[int, str]] = str.maketrans(
    {"\u2019": "'", "\u2018": "'", "\u02bc": "'"}
)

# Module-level cached lemmatizer for performance
_lemmatizer: WordNetLemmatizer | None = None


def _get_lemmatizer() -> WordNetLemmatizer:
    """Get or create the WordNet lemmatizer.

    Raises:
        NLTKResourceError: If WordNet is not available.
    """
    global _lemmatizer
    if _lemmatizer is None:
        ensure_resources(LEMMATIZER_RESOURCES)
        try:
            _lemmatizer = WordNetLemmatizer()
        except LookupError as e:
            raise NLTKResourceError(f"NLTK WordNet initialization failed: {e}") from e
    return _lemmatizer


def validate_lyrics(text: str, max_length: int | None = None) -> str:
    """Check lyrics input before any processing starts.

    The extraction pipeline itself accepts any text; this is for callers
    that want to reject bad input with a user-facing message.

    Args:
        text: Raw lyrics text.
        max_length: Maximum allowed characters (no limit if None).

    Returns:
        The text, unchanged.

    Raises:
        EmptyLyricsError: If text is empty or whitespace only.
        LyricsTooLongError: If text is longer than max_length.
    """
    if not text or not text.strip():
        raise EmptyLyricsError("Please paste the song lyrics first.")
    if max_length is not None and len(text) > max_length:
        raise LyricsTooLongError(
            f"Lyrics are too long ({len(text):,} characters). "
            f"Maximum is {max_length:,} characters.",
            length=len(text),
            max_length=max_length,
        )
    return text


def remove_section_headers(text: str) -> str:
    """Remove section headers such as [Verse 1] or [Chorus]."""
    return SECTION_HEADER_PATTERN.sub("", text)


def segment_lyrics(text: str) -> list[str]:
    """Split lyrics into example units.

    Units end at line breaks and at '.', '!' and '?'. Each unit is trimmed
    and empty units are dropped; order is preserved.

    Args:
        text: Raw lyrics text.

    Returns:
        List of example strings, verbatim apart from trimming.
    """
    if not text:
        return []
    units = (unit.strip() for unit in EXAMPLE_BOUNDARY_PATTERN.split(text))
    return [unit for unit in units if unit]


def tokenize_example(example: str) -> list[str]:
    """Split an example unit into raw tokens on whitespace runs."""
    return example.split()


def normalize_token(token: str) -> str:
    """Convert a raw token to its canonical word form.

    Lowercases the token, folds curly apostrophes to "'" and strips
    leading/trailing characters that are neither letters nor apostrophes.
    Internal characters are kept, so "Don't!" and "Don\u2019t!" both
    become "don't".

    Args:
        token: Raw whitespace-delimited token.

    Returns:
        Canonical word, or "" if the token contains no letters.
    """
    if not any(char.isalpha() for char in token):
        return ""
    return EDGE_NOISE_PATTERN.sub("", token.lower().translate(APOSTROPHE_VARIANTS))


def lemmatize_word(word: str) -> str:
    """Reduce a canonical word to its WordNet lemma ("troubles" -> "trouble").

    Raises:
        NLTKResourceError: If NLTK WordNet is not available.
    """
    lemmatizer = _get_lemmatizer()
    lemma: str = lemmatizer.lemmatize(word)
    return lemma
