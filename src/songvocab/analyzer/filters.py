"""Word filtering for vocabulary extraction."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from songvocab.analyzer.models import ExtractionConfig

# Function words never worth studying from a song
STOP_WORDS: Final[frozenset[str]] = frozenset(
    {
        # Pronouns
        "i",
        "me",
        "my",
        "mine",
        "myself",
        "you",
        "your",
        "yours",
        "yourself",
        "he",
        "him",
        "his",
        "himself",
        "she",
        "her",
        "hers",
        "herself",
        "it",
        "its",
        "itself",
        "we",
        "us",
        "our",
        "ours",
        "they",
        "them",
        "their",
        "theirs",
        "this",
        "that",
        "these",
        "those",
        "who",
        "whom",
        "what",
        "which",
        # Articles and determiners
        "a",
        "an",
        "the",
        "all",
        "some",
        "any",
        "no",
        # Auxiliaries
        "am",
        "is",
        "are",
        "was",
        "were",
        "be",
        "been",
        "being",
        "have",
        "has",
        "had",
        "do",
        "does",
        "did",
        "will",
        "would",
        "shall",
        "should",
        "can",
        "could",
        "may",
        "might",
        "must",
        # Prepositions
        "in",
        "on",
        "at",
        "to",
        "of",
        "for",
        "with",
        "by",
        "from",
        "up",
        "down",
        "into",
        "over",
        "about",
        "as",
        # Conjunctions and particles
        "and",
        "or",
        "but",
        "if",
        "so",
        "than",
        "then",
        "not",
        "just",
        "oh",
        # Contractions
        "i'm",
        "i've",
        "i'll",
        "i'd",
        "you're",
        "you've",
        "you'll",
        "it's",
        "he's",
        "she's",
        "we're",
        "they're",
        "that's",
        "there's",
        "don't",
        "doesn't",
        "didn't",
        "can't",
        "won't",
        "wouldn't",
        "isn't",
        "aren't",
        "wasn't",
        "ain't",
    }
)


def get_stop_words(config: ExtractionConfig | None = None) -> frozenset[str]:
    """Get the set of stop words for filtering.

    Combines the built-in list with any custom stop words from config.
    Returns an empty set when stop word removal is disabled.

    Args:
        config: Extraction configuration (uses default if None).

    Returns:
        Frozen set of lowercase stop words.
    """
    if config is None:
        from songvocab.analyzer.models import ExtractionConfig

        config = ExtractionConfig()

    if not config.remove_stop_words:
        return frozenset()

    return STOP_WORDS | frozenset(word.lower() for word in config.custom_stop_words)


def is_stop_word(word: str, stop_words: frozenset[str] = STOP_WORDS) -> bool:
    """Check a canonical word against the stop word set, ignoring case."""
    return word.lower() in stop_words


def contains_digit(word: str) -> bool:
    """Check whether the word contains any digit."""
    return any(char.isdigit() for char in word)
