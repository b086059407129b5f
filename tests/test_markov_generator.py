"""
Tests for Markov Generator
==========================
Tests normalization, n-gram training (plain and restricted) and sampling
in markov_generator.py.
"""

import pytest
import random
import sys
from collections import Counter
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from markov_generator import (
    END,
    START,
    MarkovGenerator,
    MarkovTrainer,
    build_bigram_model,
    build_trigram_model,
    build_trigram_model_restricted,
    normalize_dictionary,
    normalize_word,
)


class TestNormalization:
    """Tests for word cleaning."""

    def test_lowercases(self):
        assert normalize_word("Hello") == "hello"

    def test_strips_non_letters(self):
        assert normalize_word("Don't") == "dont"
        assert normalize_word("e-mail 2") == "email"
        assert normalize_word("café") == "caf"

    def test_all_non_letters_becomes_empty(self):
        assert normalize_word("123-!") == ""

    def test_dictionary_drops_empties_and_duplicates(self):
        words = ["Cat", "cat", "C.A.T", "123", "dog"]
        assert normalize_dictionary(words) == ["cat", "dog"]


class TestTrigramModel:
    """Tests for unrestricted trigram training."""

    def test_single_word(self):
        model = build_trigram_model(["cat"])
        assert model == {
            "AA": ["c"],
            "Ac": ["a"],
            "ca": ["t"],
            "at": ["Z"],
        }

    def test_multiplicity_is_kept(self):
        model = build_trigram_model(["cat", "cab"])
        assert model["AA"] == ["c", "c"]
        assert model["ca"] == ["t", "b"]

    def test_repeated_words_reinforce(self):
        model = build_trigram_model(["cat", "cat"])
        assert model["at"] == ["Z", "Z"]

    def test_words_are_normalized(self):
        assert build_trigram_model(["C-a.T"]) == build_trigram_model(["cat"])

    def test_empty_input(self):
        assert build_trigram_model([]) == {}
        assert build_trigram_model(["", "42"]) == {}

    def test_every_window_is_covered(self):
        """Each sliding window of each padded word appears in the table."""
        words = ["banana", "bandana", "cabin", "a"]
        model = build_trigram_model(words)
        counts = {state: Counter(nexts) for state, nexts in model.items()}

        for word in words:
            padded = [START, START] + list(word) + [END]
            for i in range(len(padded) - 2):
                state = padded[i] + padded[i + 1]
                assert counts[state][padded[i + 2]] >= 1

    def test_single_letter_word(self):
        model = build_trigram_model(["a"])
        assert model == {"AA": ["a"], "Aa": ["Z"]}


class TestBigramModel:
    """Tests for bigram training."""

    def test_single_word(self):
        model = build_bigram_model(["cat"])
        assert model == {
            "A": ["c"],
            "c": ["a"],
            "a": ["t"],
            "t": ["Z"],
        }

    def test_keys_are_single_letters(self):
        model = build_bigram_model(["banana", "kiwi"])
        assert all(len(state) == 1 for state in model)


class TestRestrictedModel:
    """Tests for letter-restricted trigram training."""

    def test_disallowed_windows_are_dropped(self):
        model = build_trigram_model_restricted(["cat", "sat"], {"a", "t", "s"})
        assert model == {
            "AA": ["s"],
            "As": ["a"],
            "sa": ["t"],
            "at": ["Z", "Z"],
        }

    def test_sentinels_are_always_allowed(self):
        model = build_trigram_model_restricted(["tin"], {"t", "i", "n"})
        assert model["AA"] == ["t"]
        assert model["in"] == ["Z"]

    def test_every_letter_is_allowed_or_sentinel(self):
        allowed = set("aeiou") | set("stpdhnmbl")
        words = ["banana", "strength", "hotel", "zebra", "almost", "pudding"]
        model = build_trigram_model_restricted(words, allowed)

        assert model
        for state, nexts in model.items():
            for char in state + "".join(nexts):
                assert char in allowed or char in (START, END)

    def test_order_must_be_at_least_two(self):
        with pytest.raises(ValueError):
            MarkovTrainer(order=1)


class TestMarkovGenerator:
    """Tests for token sampling and word extraction."""

    def test_generates_training_word(self):
        gen = MarkovGenerator(build_trigram_model(["cat"]), rng=random.Random(1))
        assert gen.generate_tokens(10) == ["A", "A", "c", "a", "t", "Z"]
        assert gen.generate(10) == "cat"

    def test_terminates_at_max_length(self):
        """A model with no stop transition still halts within M+2 tokens."""
        model = {"AA": ["a"], "Aa": ["a"], "aa": ["a"]}
        gen = MarkovGenerator(model, rng=random.Random(1))
        for max_length in (1, 3, 8):
            tokens = gen.generate_tokens(max_length)
            assert len(tokens) == max_length + 2

    def test_cutoff_drops_last_letter(self):
        model = {"AA": ["a"], "Aa": ["a"], "aa": ["a"]}
        gen = MarkovGenerator(model, rng=random.Random(1))
        assert gen.generate(5) == "aaaa"

    def test_extract_word_drops_sentinels(self):
        assert MarkovGenerator.extract_word(["A", "A", "b", "o", "Z"]) == "bo"

    def test_missing_state_uses_fallback(self):
        gen = MarkovGenerator({}, fallback=["e"], rng=random.Random(1))
        assert gen.generate_tokens(3) == ["A", "A", "e", "e", "e"]

    def test_empty_fallback_rejected(self):
        with pytest.raises(ValueError):
            MarkovGenerator({}, fallback=[])

    def test_sampling_follows_multiplicity(self):
        model = {"AA": ["x", "x", "x", "y"], "Ax": ["Z"], "Ay": ["Z"]}
        gen = MarkovGenerator(model, rng=random.Random(7))
        counts = Counter(gen.generate(5) for _ in range(2000))
        assert set(counts) == {"x", "y"}
        assert counts["x"] > 2 * counts["y"]

    def test_seeded_runs_repeat(self, syllable_dictionary):
        model = build_trigram_model(syllable_dictionary)
        first = MarkovGenerator(model, rng=random.Random(3))
        second = MarkovGenerator(model, rng=random.Random(3))
        assert [first.generate(6) for _ in range(20)] == [second.generate(6) for _ in range(20)]
