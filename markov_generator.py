#!/usr/bin/env python3
"""
Markov Chain Word Generator
===========================
Builds character-level n-gram transition tables from a dictionary and
samples new letter sequences from them.

Key features:
- Bigram and trigram tables
- Letter-restricted variants (only an allow-list of letters)
- Frequency-weighted sampling (repeated successors weigh more)
- Fallback successors for states the model never saw

Theory:
-------
A transition table maps the previous n-1 letters (the state key) to every
letter that followed them somewhere in the dictionary. Successors are kept
as a flat list with repeats, so picking a uniformly random index samples
P(next | state) without storing explicit counts.

Words are padded with sentinel letters before training:

    trigram:  "cat" -> A A c a t Z
    bigram:   "cat" -> A c a t Z

Sentinels are uppercase and therefore never collide with real (lowercase)
letters.
"""

from __future__ import annotations

import random
import re
from typing import Iterable, Optional, Sequence

# =============================================================================
# CONSTANTS & TYPES
# =============================================================================

START = 'A'
END = 'Z'
SENTINELS = frozenset({START, END})

# state key -> successors, repeated by frequency
MarkovModel = dict[str, list[str]]

_NON_LETTERS = re.compile(r'[^a-z]')


# =============================================================================
# NORMALIZATION
# =============================================================================

def normalize_word(word: str) -> str:
    """Lowercase a raw word and drop every character outside a-z."""
    return _NON_LETTERS.sub('', word.lower())


def normalize_dictionary(words: Iterable[str]) -> list[str]:
    """Normalize words, drop empties and duplicates (first occurrence wins)."""
    seen = set()
    result = []
    for word in words:
        clean = normalize_word(word)
        if clean and clean not in seen:
            seen.add(clean)
            result.append(clean)
    return result


# =============================================================================
# MODEL BUILDING
# =============================================================================

class MarkovTrainer:
    """Trains transition tables on a word list"""

    def __init__(self, order: int = 3, allowed_letters: Optional[Iterable[str]] = None):
        """
        Args:
            order: n-gram size (2 = bigram, 3 = trigram)
            allowed_letters: If given, only n-grams made of these letters
                (plus sentinels) are kept
        """
        if order < 2:
            raise ValueError(f"order must be at least 2, got {order}")
        self.order = order
        self.allowed_letters = (
            frozenset(allowed_letters) | SENTINELS
            if allowed_letters is not None else None
        )

    def pad(self, letters: str) -> list[str]:
        """Surround letters with start/stop sentinels."""
        return [START] * (self.order - 1) + list(letters) + [END]

    def _allowed(self, window: Sequence[str]) -> bool:
        if self.allowed_letters is None:
            return True
        return all(char in self.allowed_letters for char in window)

    def train(self, words: Iterable[str]) -> MarkovModel:
        """Train a transition table on a list of words"""
        model: MarkovModel = {}
        context = self.order - 1

        for word in words:
            clean = normalize_word(word)
            if not clean:
                continue

            padded = self.pad(clean)
            for i in range(len(padded) - context):
                window = padded[i:i + self.order]
                if not self._allowed(window):
                    continue
                state = ''.join(window[:context])
                model.setdefault(state, []).append(window[context])

        return model


def build_trigram_model(dictionary: Iterable[str]) -> MarkovModel:
    return MarkovTrainer(order=3).train(dictionary)


def build_bigram_model(dictionary: Iterable[str]) -> MarkovModel:
    return MarkovTrainer(order=2).train(dictionary)


def build_trigram_model_restricted(dictionary: Iterable[str],
                                   allowed_letters: Iterable[str]) -> MarkovModel:
    return MarkovTrainer(order=3, allowed_letters=allowed_letters).train(dictionary)


# =============================================================================
# GENERATION
# =============================================================================

class MarkovGenerator:
    """Samples letter sequences from a trigram transition table"""

    DEFAULT_FALLBACK = ('e',)

    def __init__(self,
                 model: MarkovModel,
                 fallback: Sequence[str] = DEFAULT_FALLBACK,
                 rng: Optional[random.Random] = None):
        """
        Args:
            model: Trigram transition table
            fallback: Successors to sample from when a state is missing
            rng: Random source (module-level random if None)
        """
        if not fallback:
            raise ValueError("fallback successors cannot be empty")
        self.model = model
        self.fallback = list(fallback)
        self.rng = rng or random.Random()

    def choose(self, choices: Sequence[str]) -> str:
        """Uniform pick over a flat list, so repeats act as weights."""
        return choices[self.rng.randrange(len(choices))]

    def generate_tokens(self, max_length: int) -> list[str]:
        """
        Sample tokens until the stop sentinel or max_length letters.

        Returns the raw token list, start sentinels included.
        """
        tokens = [START, START]

        while tokens[-1] != END and len(tokens) - 2 < max_length:
            state = ''.join(tokens[-2:])
            choices = self.model.get(state) or self.fallback
            tokens.append(self.choose(choices))

        return tokens

    @staticmethod
    def extract_word(tokens: Sequence[str]) -> str:
        """Drop the two start sentinels and the final token."""
        # The final token is dropped even when max_length cut generation
        # short, which loses one real letter.
        return ''.join(tokens[2:-1])

    def generate(self, max_length: int) -> str:
        """Generate a single candidate word."""
        return self.extract_word(self.generate_tokens(max_length))
