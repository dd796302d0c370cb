"""Pydantic models for vocabulary extraction."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field, computed_field, field_validator


class CEFRLevel(StrEnum):
    """Learner level on the CEFR scale."""

    A1 = "A1"
    A2 = "A2"
    B1 = "B1"
    B2 = "B2"
    C1 = "C1"
    C2 = "C2"


class DifficultyBand(StrEnum):
    """Qualitative difficulty of a word relative to the learner's level."""

    COMFORTABLE = "comfortable"
    STRETCH = "stretch"
    CHALLENGING = "challenging"


class TokenDecision(StrEnum):
    """What the pipeline did with a single raw token."""

    ACCEPTED = "accepted"
    EMPTY = "empty"
    STOP_WORD = "stop word"
    CONTAINS_DIGITS = "contains digits"
    TOO_EASY = "too easy"


class ExtractionConfig(BaseModel, frozen=True):
    """Configuration for heuristic extraction.

    Attributes:
        remove_stop_words: Whether to filter out stop words.
        custom_stop_words: Additional stop words to filter.
        use_lemmatization: Score and deduplicate WordNet lemmas instead of
            surface forms ("troubles" and "trouble" become one item).
        strip_section_headers: Drop bracketed headers like [Chorus] before
            segmenting.
    """

    remove_stop_words: bool = Field(default=True, description="Whether to filter out stop words")
    custom_stop_words: frozenset[str] = Field(
        default_factory=frozenset, description="Additional stop words to filter"
    )
    use_lemmatization: bool = Field(
        default=False, description="Whether to lemmatize canonical words before scoring"
    )
    strip_section_headers: bool = Field(
        default=False, description="Whether to drop [Verse]/[Chorus] style headers"
    )


class LearningItem(BaseModel, frozen=True, extra="forbid"):
    """A word worth learning, with its difficulty relative to a level.

    Attributes:
        id: Stable identifier, unique within one extraction result.
        word: Display form of the word or phrase.
        difficulty_score: Heuristic difficulty, higher is harder.
        level_threshold: Threshold of the level the item was extracted for.
        count: Occurrences that passed all filters.
        example: First example unit containing the word, verbatim.
        explanation: Why the word is useful (LLM-sourced items only).
        translation: Translation into the learner's language.
        translation_error: Why no translation is available.
    """

    id: str = Field(..., min_length=1, description="Stable identifier")
    word: str = Field(..., min_length=1, description="Display form")
    difficulty_score: float = Field(..., ge=0.0, description="Heuristic difficulty score")
    level_threshold: int = Field(..., ge=0, description="Level threshold used for banding")
    count: int = Field(default=1, ge=1, description="Number of occurrences")
    example: str = Field(default="", description="First example line, verbatim")
    explanation: str | None = Field(default=None, description="Explanation from the LLM")
    translation: str | None = Field(default=None, description="Translated text")
    translation_error: str | None = Field(default=None, description="Translation failure")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def difficulty_band(self) -> DifficultyBand:
        """Band derived from score and level threshold."""
        from songvocab.analyzer.banding import band_for_score

        return band_for_score(self.difficulty_score, self.level_threshold)


class LLMCandidate(BaseModel, frozen=True):
    """A word or phrase proposed by a text-generation service."""

    word: str = Field(..., min_length=1, description="Word in the song's language")
    phrase: str | None = Field(default=None, description="Multi-word expression, if any")
    difficulty: DifficultyBand = Field(..., description="Band relative to the learner")
    explanation: str = Field(default="", description="Why it is worth learning")
    example: str = Field(default="", description="Line from the song")

    @field_validator("difficulty", mode="before")
    @classmethod
    def normalize_difficulty(cls, v: object) -> object:
        """Accept band names in any case."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("phrase", mode="before")
    @classmethod
    def blank_phrase_to_none(cls, v: object) -> object:
        """Treat an empty phrase as absent."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @property
    def display_text(self) -> str:
        """Phrase when the service gave one, otherwise the word."""
        return self.phrase or self.word


class TokenEvent(BaseModel, frozen=True):
    """The fate of one raw token, reported to trace hooks.

    Attributes:
        example_index: Zero-based index of the example unit.
        token: The raw token as it appeared in the lyrics.
        word: Canonical form ("" when the token had no letters).
        decision: What the pipeline did with the token.
        tier: Frequency tier, when it was computed.
        score: Difficulty score, when it was computed.
    """

    example_index: int = Field(..., ge=0)
    token: str
    word: str
    decision: TokenDecision
    tier: int | None = Field(default=None, ge=1, le=5)
    score: float | None = Field(default=None, ge=0.0)


class ScoreBreakdown(BaseModel, frozen=True):
    """Individual contributions to a word's difficulty score."""

    word: str
    tier: int = Field(..., ge=1, le=5)
    base: float = Field(..., ge=0.0)
    length_bonus: float = Field(default=0.0, ge=0.0)
    syllables: int = Field(..., ge=1)
    syllable_bonus: float = Field(default=0.0, ge=0.0)
    suffix_bonus: float = Field(default=0.0, ge=0.0)
    cluster_bonus: float = Field(default=0.0, ge=0.0)

    @property
    def total(self) -> float:
        """Sum of all components, rounded to one decimal place."""
        return round(
            self.base
            + self.length_bonus
            + self.syllable_bonus
            + self.suffix_bonus
            + self.cluster_bonus,
            1,
        )
