"""Heuristic extraction of learning items from lyrics."""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from songvocab.analyzer.banding import get_level_threshold
from songvocab.analyzer.filters import contains_digit, get_stop_words, is_stop_word
from songvocab.analyzer.frequency import FrequencyClassifier
from songvocab.analyzer.models import (
    CEFRLevel,
    ExtractionConfig,
    LearningItem,
    TokenDecision,
    TokenEvent,
)
from songvocab.analyzer.processor import (
    lemmatize_word,
    normalize_token,
    remove_section_headers,
    segment_lyrics,
    tokenize_example,
)
from songvocab.analyzer.scoring import score_breakdown
from songvocab.logging import get_logger

logger = get_logger("analyzer.pipeline")

TraceHook = Callable[[TokenEvent], None]


class ExtractionTrace:
    """Trace hook that keeps every token event and per-decision counts."""

    def __init__(self) -> None:
        self.events: list[TokenEvent] = []
        self.decisions: Counter[TokenDecision] = Counter()

    def __call__(self, event: TokenEvent) -> None:
        self.events.append(event)
        self.decisions[event.decision] += 1

    @property
    def total_tokens(self) -> int:
        """Number of raw tokens scanned, including ones that were not words."""
        return len(self.events)

    def count(self, decision: TokenDecision) -> int:
        """Number of tokens that ended with the given decision."""
        return self.decisions[decision]


class LoggingTraceHook:
    """Trace hook that writes each token's fate to the package logger."""

    def __call__(self, event: TokenEvent) -> None:
        if event.score is not None:
            logger.debug(
                "[%d] %r -> %r: %s (tier=%s, score=%s)",
                event.example_index,
                event.token,
                event.word,
                event.decision,
                event.tier,
                event.score,
            )
        else:
            logger.debug(
                "[%d] %r -> %r: %s",
                event.example_index,
                event.token,
                event.word,
                event.decision,
            )


@dataclass
class _Entry:
    score: float
    example: str
    count: int = 1


def rank_items(items: Iterable[LearningItem]) -> list[LearningItem]:
    """Sort by score descending, then count descending.

    Full ties keep their original order.
    """
    return sorted(items, key=lambda item: (-item.difficulty_score, -item.count))


def extract_learning_items(
    lyrics: str,
    level: CEFRLevel | str,
    config: ExtractionConfig | None = None,
    classifier: FrequencyClassifier | None = None,
    trace: TraceHook | None = None,
) -> list[LearningItem]:
    """Extract ranked learning items from raw lyrics.

    Every raw token is normalized, filtered (empty, stop word, digits),
    scored and compared with the level threshold. Accepted words are
    deduplicated on their canonical form; the first example unit a word
    appears in is kept as its example.

    Args:
        lyrics: Raw lyrics text.
        level: Learner level (A1..C2).
        config: Extraction configuration (uses default if None).
        classifier: Frequency tier source (uses the built-in table if None).
        trace: Optional callable receiving a TokenEvent for every token.

    Returns:
        Learning items sorted by difficulty score, then count. Empty when
        the lyrics are empty or every word is filtered out.

    Raises:
        InvalidLevelError: If level is not a CEFR level.
        NLTKResourceError: If lemmatization is enabled and WordNet is missing.
    """
    if config is None:
        config = ExtractionConfig()

    threshold = get_level_threshold(level)
    stop_words = get_stop_words(config)

    if config.strip_section_headers:
        lyrics = remove_section_headers(lyrics)
    examples = segment_lyrics(lyrics)

    def report(event: TokenEvent) -> None:
        if trace is not None:
            trace(event)

    entries: dict[str, _Entry] = {}
    for example_index, example in enumerate(examples):
        for token in tokenize_example(example):
            word = normalize_token(token)
            if not word:
                report(
                    TokenEvent(
                        example_index=example_index,
                        token=token,
                        word=word,
                        decision=TokenDecision.EMPTY,
                    )
                )
                continue

            if config.use_lemmatization:
                word = lemmatize_word(word)

            if is_stop_word(word, stop_words):
                decision = TokenDecision.STOP_WORD
            elif contains_digit(word):
                decision = TokenDecision.CONTAINS_DIGITS
            else:
                decision = None

            if decision is not None:
                report(
                    TokenEvent(
                        example_index=example_index,
                        token=token,
                        word=word,
                        decision=decision,
                    )
                )
                continue

            breakdown = score_breakdown(word, classifier)
            score = breakdown.total
            decision = (
                TokenDecision.TOO_EASY if score <= threshold else TokenDecision.ACCEPTED
            )
            report(
                TokenEvent(
                    example_index=example_index,
                    token=token,
                    word=word,
                    decision=decision,
                    tier=breakdown.tier,
                    score=score,
                )
            )
            if decision is TokenDecision.TOO_EASY:
                continue

            entry = entries.get(word)
            if entry is None:
                entries[word] = _Entry(score=score, example=example)
            else:
                entry.count += 1

    items = [
        LearningItem(
            id=word,
            word=word,
            difficulty_score=entry.score,
            level_threshold=threshold,
            count=entry.count,
            example=entry.example,
        )
        for word, entry in entries.items()
    ]

    logger.debug(
        "Extracted %d items from %d example units at threshold %d",
        len(items),
        len(examples),
        threshold,
    )
    return rank_items(items)
