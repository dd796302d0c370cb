"""Vocabulary extraction from lyrics."""

from songvocab.analyzer.banding import (
    LEVEL_THRESHOLDS,
    band_for_score,
    get_level_threshold,
    parse_level,
)
from songvocab.analyzer.filters import (
    STOP_WORDS,
    contains_digit,
    get_stop_words,
    is_stop_word,
)
from songvocab.analyzer.frequency import (
    DEFAULT_FREQUENCY_TABLE,
    UNKNOWN_TIER,
    FrequencyClassifier,
    StaticFrequencyTable,
    get_frequency_tier,
)
from songvocab.analyzer.models import (
    CEFRLevel,
    DifficultyBand,
    ExtractionConfig,
    LearningItem,
    LLMCandidate,
    ScoreBreakdown,
    TokenDecision,
    TokenEvent,
)
from songvocab.analyzer.pipeline import (
    ExtractionTrace,
    LoggingTraceHook,
    extract_learning_items,
    rank_items,
)
from songvocab.analyzer.processor import (
    lemmatize_word,
    normalize_token,
    segment_lyrics,
    tokenize_example,
    validate_lyrics,
)
from songvocab.analyzer.scoring import count_syllables, score_breakdown, score_word
from songvocab.analyzer.sources import (
    CombinedSource,
    ExtractionSource,
    HeuristicSource,
    LLMSource,
    items_from_candidates,
)
from songvocab.analyzer.translation import Translator, translate_items

__all__ = [
    # Models
    "CEFRLevel",
    "DifficultyBand",
    "ExtractionConfig",
    "LearningItem",
    "LLMCandidate",
    "ScoreBreakdown",
    "TokenDecision",
    "TokenEvent",
    # Processor
    "normalize_token",
    "segment_lyrics",
    "tokenize_example",
    "lemmatize_word",
    "validate_lyrics",
    # Filters
    "STOP_WORDS",
    "get_stop_words",
    "is_stop_word",
    "contains_digit",
    # Frequency
    "DEFAULT_FREQUENCY_TABLE",
    "UNKNOWN_TIER",
    "FrequencyClassifier",
    "StaticFrequencyTable",
    "get_frequency_tier",
    # Scoring
    "count_syllables",
    "score_breakdown",
    "score_word",
    # Banding
    "LEVEL_THRESHOLDS",
    "band_for_score",
    "get_level_threshold",
    "parse_level",
    # Pipeline
    "ExtractionTrace",
    "LoggingTraceHook",
    "extract_learning_items",
    "rank_items",
    # Sources
    "ExtractionSource",
    "HeuristicSource",
    "LLMSource",
    "CombinedSource",
    "items_from_candidates",
    # Translation
    "Translator",
    "translate_items",
]
