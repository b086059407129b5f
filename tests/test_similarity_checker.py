"""
Tests for Similarity Checker
============================
Tests Levenshtein distance and real-word similarity against a
length-bucketed dictionary.
"""

import pytest
import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from similarity_checker import (
    DEFAULT_THRESHOLD,
    SimilarityChecker,
    is_similar_to_real_word,
    levenshtein_distance,
    nearest_real_word,
    possible_matches,
)


@pytest.fixture
def index():
    return {
        3: {"cat"},
        4: {"plan"},
        5: {"table"},
    }


class TestLevenshtein:
    """Tests for edit distance."""

    def test_classic_example(self):
        assert levenshtein_distance("kitten", "sitting") == 3

    def test_identical(self):
        assert levenshtein_distance("plan", "plan") == 0

    def test_single_substitution(self):
        assert levenshtein_distance("plam", "plan") == 1

    def test_insertion_and_deletion(self):
        assert levenshtein_distance("pla", "plan") == 1
        assert levenshtein_distance("plans", "plan") == 1

    def test_empty(self):
        assert levenshtein_distance("", "abc") == 3
        assert levenshtein_distance("abc", "") == 3

    def test_symmetric(self):
        assert levenshtein_distance("tuna", "nut") == levenshtein_distance("nut", "tuna")


class TestPossibleMatches:
    """Tests for neighbor-length candidate gathering."""

    def test_neighbor_lengths_only(self, index):
        assert set(possible_matches("plam", index)) == {"cat", "plan", "table"}
        assert set(possible_matches("ab", index)) == {"cat"}
        assert set(possible_matches("abcdefg", index)) == set()


class TestIsSimilarToRealWord:
    """Tests for the similarity predicate."""

    def test_default_threshold(self):
        assert DEFAULT_THRESHOLD == 3

    def test_close_word_accepted(self, index):
        assert is_similar_to_real_word("plam", index)

    def test_distant_word_rejected(self, index):
        assert not is_similar_to_real_word("xyzq", index)

    def test_threshold_boundary(self):
        index = {4: {"plan"}}
        # plan -> pxyz is three substitutions
        assert is_similar_to_real_word("pxyz", index, threshold=3)
        assert not is_similar_to_real_word("pxyz", index, threshold=2)

    def test_no_neighbor_bucket(self):
        assert not is_similar_to_real_word("plam", {7: {"planner"}})

    def test_empty_word_raises(self, index):
        with pytest.raises(ValueError):
            is_similar_to_real_word("", index)

    def test_missing_index_raises(self):
        with pytest.raises(ValueError):
            is_similar_to_real_word("plam", {})
        with pytest.raises(ValueError):
            is_similar_to_real_word("plam", None)


class TestNearestRealWord:
    """Tests for closest-word lookup."""

    def test_finds_closest(self):
        word, distance = nearest_real_word("plam", {3: {"cut"}, 4: {"plan", "stop"}})
        assert (word, distance) == ("plan", 1)

    def test_exact_match(self, index):
        assert nearest_real_word("table", index) == ("table", 0)

    def test_nothing_in_range(self):
        assert nearest_real_word("plam", {9: {"something"}}) == (None, None)


class TestSimilarityChecker:
    """Tests for the checker wrapper."""

    def test_check_result(self, index):
        result = SimilarityChecker(index).check("plam")
        assert result.closest_word == "plan"
        assert result.distance == 1
        assert result.is_similar
        assert not result.is_real_word

    def test_real_word(self, index):
        result = SimilarityChecker(index).check("cat")
        assert result.is_real_word

    def test_custom_threshold(self, index):
        checker = SimilarityChecker(index, threshold=0)
        assert not checker.is_similar("plam")
        assert checker.is_similar("plan")

    def test_empty_index_rejected(self):
        with pytest.raises(ValueError):
            SimilarityChecker({})
