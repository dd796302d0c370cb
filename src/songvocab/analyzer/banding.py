"""Level thresholds and difficulty bands."""

from __future__ import annotations

from types import MappingProxyType
from typing import Final

from songvocab.analyzer.models import CEFRLevel, DifficultyBand
from songvocab.exceptions import InvalidLevelError

# Higher level => higher threshold => fewer, harder words admitted
LEVEL_THRESHOLDS: Final = MappingProxyType(
    {
        CEFRLevel.A1: 2,
        CEFRLevel.A2: 3,
        CEFRLevel.B1: 4,
        CEFRLevel.B2: 5,
        CEFRLevel.C1: 6,
        CEFRLevel.C2: 7,
    }
)

# Width of the "stretch" band above the threshold
STRETCH_WIDTH: Final[int] = 2


def parse_level(level: CEFRLevel | str) -> CEFRLevel:
    """Convert a level name such as "b1" to a CEFRLevel.

    Raises:
        InvalidLevelError: If the value is not one of A1..C2.
    """
    if isinstance(level, CEFRLevel):
        return level
    try:
        return CEFRLevel(str(level).strip().upper())
    except ValueError:
        raise InvalidLevelError(
            f"Unknown level {level!r}, expected one of A1, A2, B1, B2, C1, C2",
            level=str(level),
        ) from None


def get_level_threshold(level: CEFRLevel | str) -> int:
    """Return the score cutoff for a level.

    Words scoring at or below the threshold are too easy to surface.
    """
    return LEVEL_THRESHOLDS[parse_level(level)]


def band_for_score(score: float, threshold: int) -> DifficultyBand:
    """Map a score to a band relative to the learner's threshold.

    Args:
        score: Difficulty score.
        threshold: Level threshold.

    Returns:
        COMFORTABLE at or below the threshold, STRETCH up to two points
        above it, CHALLENGING beyond that.
    """
    if score <= threshold:
        return DifficultyBand.COMFORTABLE
    if score <= threshold + STRETCH_WIDTH:
        return DifficultyBand.STRETCH
    return DifficultyBand.CHALLENGING
