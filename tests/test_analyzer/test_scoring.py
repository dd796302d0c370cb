"""Tests for difficulty scoring."""

import pytest

from songvocab.analyzer.frequency import StaticFrequencyTable
from songvocab.analyzer.scoring import (
    count_syllables,
    has_abstract_suffix,
    has_complex_cluster,
    score_breakdown,
    score_word,
)


class TestCountSyllables:
    """Tests for count_syllables function."""

    @pytest.mark.parametrize(
        ("word", "expected"),
        [
            ("love", 2),
            ("yesterday", 3),
            ("beautiful", 3),
            ("queue", 1),
            ("rhythm", 1),
            ("relationship", 4),
            ("unconditionally", 6),
        ],
    )
    def test_counts_vowel_groups(self, word: str, expected: int) -> None:
        assert count_syllables(word) == expected

    def test_no_vowels_counts_as_one(self) -> None:
        assert count_syllables("hmm") == 1
        assert count_syllables("") == 1


class TestSuffixAndClusters:
    """Tests for morphology helpers."""

    @pytest.mark.parametrize("word", ["nation", "kindness", "friendship", "careless", "realism"])
    def test_suffix_at_end(self, word: str) -> None:
        assert has_abstract_suffix(word)

    def test_suffix_inside_word_does_not_count(self) -> None:
        assert not has_abstract_suffix("unconditionally")
        assert not has_abstract_suffix("nations")

    @pytest.mark.parametrize("word", ["shadow", "philosophy", "rhythm", "jazz", "exit", "unique"])
    def test_complex_clusters(self, word: str) -> None:
        assert has_complex_cluster(word)

    def test_plain_word_has_no_cluster(self) -> None:
        assert not has_complex_cluster("love")


class TestScoreWord:
    """Tests for score_word and score_breakdown."""

    @pytest.mark.parametrize(
        ("word", "expected"),
        [
            ("love", 0.0),  # tier 1, nothing else
            ("believe", 1.0),  # tier 2
            ("yesterday", 2.0),  # tier 3
            ("suddenly", 2.0),  # tier 3
            ("shadow", 2.5),  # tier 3 + "sh"
            ("happiness", 3.0),  # tier 3 + "-ness"
            ("melody", 3.0),  # tier 4
            ("troubles", 4.0),  # unknown
            ("hmm", 4.0),  # unknown, no vowels
            ("jazz", 4.5),  # unknown + "z"
            ("rhythm", 4.5),  # unknown + "rh"
            ("kindness", 5.0),  # unknown + "-ness"
            ("mysterious", 6.0),  # unknown + length 10 + "-ious"
            ("philosophy", 6.5),  # unknown + length 10 + 4 syllables + "ph"
            ("relationship", 8.5),  # unknown + length 12 + 4 syllables + "-ship" + "sh"
        ],
    )
    def test_scores(self, word: str, expected: float) -> None:
        assert score_word(word) == expected

    def test_unconditionally_has_no_suffix_bonus(self) -> None:
        """Suffixes are matched at the end of the word, never as substrings."""
        breakdown = score_breakdown("unconditionally")
        assert breakdown.tier == 5
        assert breakdown.base == 4.0
        assert breakdown.length_bonus == 2.0
        assert breakdown.syllables == 6
        assert breakdown.syllable_bonus == 2.0
        assert breakdown.suffix_bonus == 0.0
        assert breakdown.cluster_bonus == 0.0
        assert score_word("unconditionally") == 8.0

    def test_rarer_word_scores_higher(self) -> None:
        table = StaticFrequencyTable({1: ["aaa"], 2: ["bbb"], 3: ["ccc"], 4: ["ddd"]})
        scores = [score_word(word, table) for word in ("aaa", "bbb", "ccc", "ddd", "eee")]
        assert scores == sorted(scores)
        assert scores[0] == 0.0
        assert scores[-1] == 4.0

    def test_length_bonus_thresholds(self) -> None:
        table = StaticFrequencyTable({1: ["bcdfghjklm", "bcdfghjklmn", "bcdfghjklmnp"]})
        assert score_breakdown("bcdfghjklm", table).length_bonus == 1.0
        assert score_breakdown("bcdfghjklmn", table).length_bonus == 1.0
        assert score_breakdown("bcdfghjklmnp", table).length_bonus == 2.0

    def test_cluster_bonus_applies_once(self) -> None:
        # "sh", "ch" and "z" all present
        assert score_breakdown("shchz").cluster_bonus == 0.5

    def test_uses_injected_classifier(self, small_table: StaticFrequencyTable) -> None:
        assert score_word("jazz", small_table) == 0.5

    def test_deterministic(self) -> None:
        assert score_word("philosophy") == score_word("philosophy")

    def test_score_is_rounded_to_one_decimal(self) -> None:
        assert score_breakdown("shadow").total == round(score_breakdown("shadow").total, 1)
