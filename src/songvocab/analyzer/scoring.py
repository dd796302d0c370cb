"""Heuristic difficulty scoring for canonical words."""

from __future__ import annotations

import re
from typing import Final

from songvocab.analyzer.frequency import (
    MOST_COMMON_TIER,
    FrequencyClassifier,
    get_frequency_tier,
)
from songvocab.analyzer.models import ScoreBreakdown

VOWEL_GROUP_PATTERN: Final[re.Pattern[str]] = re.compile(r"[aeiouy]+")

# Abstract/academic endings; matched against the end of the word only
ABSTRACT_SUFFIXES: Final[tuple[str, ...]] = (
    "tion",
    "sion",
    "ment",
    "less",
    "ship",
    "ance",
    "ence",
    "ious",
    "eous",
    "tive",
    "ward",
    "wise",
    "ism",
    "ity",
    "ness",
)

COMPLEX_CLUSTERS: Final[tuple[str, ...]] = ("ph", "que", "rh", "zh", "ch", "sh", "x", "z")

LONG_WORD_LENGTH: Final[int] = 10
VERY_LONG_WORD_LENGTH: Final[int] = 12
MANY_SYLLABLES: Final[int] = 4
VERY_MANY_SYLLABLES: Final[int] = 5
CLUSTER_BONUS: Final[float] = 0.5


def count_syllables(word: str) -> int:
    """Approximate syllables as runs of consecutive vowels (y included).

    A word without vowels counts as one syllable.
    """
    return max(1, len(VOWEL_GROUP_PATTERN.findall(word)))


def has_abstract_suffix(word: str) -> bool:
    """Check whether the word ends with an abstract/academic suffix."""
    return word.endswith(ABSTRACT_SUFFIXES)


def has_complex_cluster(word: str) -> bool:
    """Check whether the word contains a hard-to-spell letter cluster."""
    return any(cluster in word for cluster in COMPLEX_CLUSTERS)


def score_breakdown(word: str, classifier: FrequencyClassifier | None = None) -> ScoreBreakdown:
    """Compute every component of a word's difficulty score.

    Args:
        word: Canonical word.
        classifier: Tier source (uses the built-in table if None).

    Returns:
        ScoreBreakdown whose total is the difficulty score.
    """
    tier = get_frequency_tier(word, classifier)
    syllables = count_syllables(word)

    length_bonus = 0.0
    if len(word) >= LONG_WORD_LENGTH:
        length_bonus += 1
    if len(word) >= VERY_LONG_WORD_LENGTH:
        length_bonus += 1

    syllable_bonus = 0.0
    if syllables >= MANY_SYLLABLES:
        syllable_bonus += 1
    if syllables >= VERY_MANY_SYLLABLES:
        syllable_bonus += 1

    return ScoreBreakdown(
        word=word,
        tier=tier,
        # Tier 1 contributes nothing, unknown words (tier 5) contribute 4
        base=float(tier - MOST_COMMON_TIER),
        length_bonus=length_bonus,
        syllables=syllables,
        syllable_bonus=syllable_bonus,
        suffix_bonus=1.0 if has_abstract_suffix(word) else 0.0,
        cluster_bonus=CLUSTER_BONUS if has_complex_cluster(word) else 0.0,
    )


def score_word(word: str, classifier: FrequencyClassifier | None = None) -> float:
    """Return the difficulty score of a canonical word, rounded to 0.1."""
    return score_breakdown(word, classifier).total
