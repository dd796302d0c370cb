"""Shared test fixtures for analyzer tests."""

import pytest

from songvocab.analyzer.frequency import StaticFrequencyTable
from songvocab.analyzer.models import ExtractionConfig, LearningItem


@pytest.fixture
def sample_lyrics_text() -> str:
    """Sample lyrics spanning several lines and example units."""
    return """Yesterday, all my troubles seemed so far away
Now it looks as though they're here to stay
Oh, I believe in yesterday

Suddenly, I'm not half the man I used to be
There's a shadow hanging over me
Oh, yesterday came suddenly

Why she had to go I don't know, she wouldn't say
I said something wrong, now I long for yesterday"""


@pytest.fixture
def rare_words_text() -> str:
    """Lyrics made of words with well-known scores."""
    return "Relationship philosophy. Mysterious jazz, jazz!"


@pytest.fixture
def default_config() -> ExtractionConfig:
    """Default extraction configuration."""
    return ExtractionConfig()


@pytest.fixture
def config_no_stop_words() -> ExtractionConfig:
    """Extraction config without stop word filtering."""
    return ExtractionConfig(remove_stop_words=False)


@pytest.fixture
def small_table() -> StaticFrequencyTable:
    """Tiny frequency table for classifier injection."""
    return StaticFrequencyTable({1: ["jazz", "love"], 4: ["melody"]})


@pytest.fixture
def sample_items() -> list[LearningItem]:
    """Learning items as produced at level A2 (threshold 3)."""
    return [
        LearningItem(
            id="troubles",
            word="troubles",
            difficulty_score=4.0,
            level_threshold=3,
            count=1,
            example="Yesterday, all my troubles seemed so far away",
        ),
        LearningItem(
            id="shadow",
            word="shadow",
            difficulty_score=2.5,
            level_threshold=3,
            count=2,
            example="There's a shadow hanging over me",
        ),
        LearningItem(
            id="relationship",
            word="relationship",
            difficulty_score=8.5,
            level_threshold=3,
            count=1,
            example="Our relationship",
        ),
    ]
