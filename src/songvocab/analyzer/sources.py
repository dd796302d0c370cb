"""Interchangeable sources of learning items.

The heuristic pipeline and the LLM extractor produce the same LearningItem
shape, so callers can pick either one, or both, behind ExtractionSource.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from songvocab.analyzer.banding import STRETCH_WIDTH, get_level_threshold
from songvocab.analyzer.frequency import FrequencyClassifier
from songvocab.analyzer.models import (
    CEFRLevel,
    DifficultyBand,
    ExtractionConfig,
    LearningItem,
    LLMCandidate,
)
from songvocab.analyzer.pipeline import TraceHook, extract_learning_items, rank_items
from songvocab.logging import get_logger

logger = get_logger("analyzer.sources")


class ExtractionSource(Protocol):
    """Anything that turns lyrics into learning items for a level."""

    def extract(self, lyrics: str, level: CEFRLevel | str) -> list[LearningItem]: ...


class CandidateExtractor(Protocol):
    """Text-generation collaborator proposing candidates for a level."""

    def extract_candidates(
        self, lyrics: str, level: CEFRLevel | str, language_label: str = "English"
    ) -> list[LLMCandidate]: ...


def band_score(band: DifficultyBand, threshold: int) -> float:
    """Pick a score that lands in the given band for this threshold.

    At B1 (threshold 4) this gives 3, 5 and 7.
    """
    if band is DifficultyBand.COMFORTABLE:
        return float(max(threshold - 1, 0))
    if band is DifficultyBand.STRETCH:
        return float(threshold + 1)
    return float(threshold + STRETCH_WIDTH + 1)


def items_from_candidates(
    candidates: Sequence[LLMCandidate], level: CEFRLevel | str
) -> list[LearningItem]:
    """Convert collaborator candidates into learning items.

    The service reports no counts, so every item has count 1. Order is kept.
    """
    threshold = get_level_threshold(level)
    return [
        LearningItem(
            id=f"{candidate.display_text}-{index}",
            word=candidate.display_text,
            difficulty_score=band_score(candidate.difficulty, threshold),
            level_threshold=threshold,
            count=1,
            example=candidate.example,
            explanation=candidate.explanation or None,
        )
        for index, candidate in enumerate(candidates)
    ]


class HeuristicSource:
    """Deterministic frequency/morphology pipeline."""

    def __init__(
        self,
        config: ExtractionConfig | None = None,
        classifier: FrequencyClassifier | None = None,
        trace: TraceHook | None = None,
    ) -> None:
        self.config = config
        self.classifier = classifier
        self.trace = trace

    def extract(self, lyrics: str, level: CEFRLevel | str) -> list[LearningItem]:
        return extract_learning_items(
            lyrics,
            level,
            config=self.config,
            classifier=self.classifier,
            trace=self.trace,
        )


class LLMSource:
    """Learning items proposed by a text-generation service.

    Any collaborator error propagates: a failed request yields no items.
    """

    def __init__(self, extractor: CandidateExtractor, language_label: str = "English") -> None:
        self.extractor = extractor
        self.language_label = language_label

    def extract(self, lyrics: str, level: CEFRLevel | str) -> list[LearningItem]:
        candidates = self.extractor.extract_candidates(lyrics, level, self.language_label)
        logger.info("LLM proposed %d candidates", len(candidates))
        return items_from_candidates(candidates, level)


class CombinedSource:
    """LLM candidates topped up with heuristic words the LLM missed."""

    def __init__(self, llm: LLMSource, heuristic: HeuristicSource | None = None) -> None:
        self.llm = llm
        self.heuristic = heuristic or HeuristicSource()

    def extract(self, lyrics: str, level: CEFRLevel | str) -> list[LearningItem]:
        llm_items = self.llm.extract(lyrics, level)
        seen = {item.word.lower() for item in llm_items}
        extra = [
            item for item in self.heuristic.extract(lyrics, level) if item.word not in seen
        ]
        logger.debug("Heuristic pipeline added %d items", len(extra))
        return rank_items([*llm_items, *extra])
