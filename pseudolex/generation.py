#!/usr/bin/env python3
"""
Generation Loop
===============
Samples candidates from a trigram model and keeps the ones that pass every
filter, without repeating itself within a session.

Each word moves through a small state machine:

    SAMPLING -> FILTERING -> ACCEPTED
                    |
                    +-----> REJECTED -> SAMPLING

Rejections are silent and simply trigger another sample. The loop has no
natural upper bound; pass `max_attempts` to turn an endless search into a
`GenerationExhausted` error.

Usage:
    from pseudolex.generation import GenerationSession, generate_words

    session = GenerationSession()
    for word in generate_words(99, trigram_model, preprocessed_dictionary,
                               session=session, min_length=9, max_length=14):
        print(word)
"""

from __future__ import annotations

import logging
import random
from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional, Sequence

from markov_generator import MarkovGenerator, MarkovModel
from similarity_checker import DEFAULT_THRESHOLD, PreprocessedDictionary
from pseudolex.quality import CandidateFilter, Rejection
from pseudolex.settings import get_setting, require_setting

logger = logging.getLogger(__name__)

DEFAULT_MIN_LENGTH = require_setting("generation.default_min_length")
DEFAULT_MAX_LENGTH = require_setting("generation.default_max_length")
DEFAULT_FALLBACK = tuple(get_setting("generation.fallback", MarkovGenerator.DEFAULT_FALLBACK))


class GenerationExhausted(RuntimeError):
    """Raised when the attempt budget runs out before a word is accepted."""

    def __init__(self, attempts: int, rejections: Counter):
        self.attempts = attempts
        self.rejections = rejections
        summary = ', '.join(f"{r.value}={n}" for r, n in rejections.most_common())
        super().__init__(
            f"No acceptable word after {attempts} attempts"
            + (f" ({summary})" if summary else "")
        )


class Phase(Enum):
    """Where the current word is in the generation state machine."""
    SAMPLING = "sampling"
    FILTERING = "filtering"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


@dataclass
class GenerationSession:
    """State for one generation run: words already emitted and counters."""
    used_words: set[str] = field(default_factory=set)
    rejections: Counter = field(default_factory=Counter)
    phase: Phase = Phase.SAMPLING
    attempts: int = 0
    total_attempts: int = 0

    def is_used(self, word: str) -> bool:
        return word in self.used_words

    def mark_used(self, word: str):
        self.used_words.add(word)

    def start_word(self):
        self.attempts = 0
        self.phase = Phase.SAMPLING

    def sampled(self):
        self.attempts += 1
        self.total_attempts += 1
        self.phase = Phase.FILTERING

    def reject(self, reason: Rejection):
        self.rejections[reason] += 1
        self.phase = Phase.REJECTED

    def accept(self):
        self.phase = Phase.ACCEPTED


class NonEnglishWordGenerator:
    """Ties a Markov sampler to the candidate filter."""

    def __init__(self,
                 trigram_model: MarkovModel,
                 preprocessed_dictionary: PreprocessedDictionary,
                 min_length: int = DEFAULT_MIN_LENGTH,
                 max_length: int = DEFAULT_MAX_LENGTH,
                 threshold: int = DEFAULT_THRESHOLD,
                 max_attempts: Optional[int] = None,
                 fallback: Sequence[str] = DEFAULT_FALLBACK,
                 rng: Optional[random.Random] = None):
        """
        Args:
            trigram_model: Transition table to sample from
            preprocessed_dictionary: Length index of real words
            min_length: Shortest acceptable word
            max_length: Letter cap passed to the sampler
            threshold: Max edit distance to the nearest real word
            max_attempts: Candidates allowed per word (None = unbounded)
            fallback: Successors for states missing from the model
            rng: Random source, seed it for reproducible runs
        """
        if trigram_model is None:
            raise ValueError("trigram_model is required")
        if not preprocessed_dictionary:
            raise ValueError("preprocessed_dictionary is required")
        # Words keep at most max_length - 1 letters
        if min_length >= max_length:
            raise ValueError(
                f"min_length ({min_length}) must be less than max_length ({max_length})"
            )
        if max_attempts is not None and max_attempts < 1:
            raise ValueError(f"max_attempts must be positive, got {max_attempts}")

        self.sampler = MarkovGenerator(trigram_model, fallback=fallback, rng=rng)
        self.filter = CandidateFilter(preprocessed_dictionary, min_length, threshold)
        self.max_length = max_length
        self.max_attempts = max_attempts

    def _sample(self, session: GenerationSession) -> str:
        if self.max_attempts is not None and session.attempts >= self.max_attempts:
            raise GenerationExhausted(session.attempts, session.rejections)
        word = self.sampler.generate(self.max_length)
        session.sampled()
        return word

    def generate_better_word(self, session: GenerationSession) -> str:
        """Sample until a new word passes the length, sound and similarity gates."""
        while True:
            word = self._sample(session)

            if session.is_used(word):
                session.reject(Rejection.USED)
                continue

            rejection = self.filter.gate(word)
            if rejection is None:
                return word
            session.reject(rejection)

    def generate_word(self, session: GenerationSession) -> str:
        """Generate one word that is not itself in the dictionary."""
        session.start_word()
        while True:
            word = self.generate_better_word(session)
            if not self.filter.is_real_word(word):
                session.accept()
                logger.debug(f"Accepted '{word}' after {session.attempts} attempts")
                return word
            session.reject(Rejection.REAL_WORD)

    def generate(self, count: int,
                 session: Optional[GenerationSession] = None) -> Iterator[str]:
        """Yield `count` distinct words, recording each in the session."""
        session = session if session is not None else GenerationSession()
        for _ in range(count):
            word = self.generate_word(session)
            session.mark_used(word)
            yield word


# =============================================================================
# Convenience functions
# =============================================================================

def generate_better_word(trigram_model: MarkovModel,
                         preprocessed_dictionary: PreprocessedDictionary,
                         session: Optional[GenerationSession] = None,
                         **kwargs) -> str:
    session = session if session is not None else GenerationSession()
    generator = NonEnglishWordGenerator(trigram_model, preprocessed_dictionary, **kwargs)
    session.start_word()
    return generator.generate_better_word(session)


def generate_non_english_word(trigram_model: MarkovModel,
                              preprocessed_dictionary: PreprocessedDictionary,
                              session: Optional[GenerationSession] = None,
                              **kwargs) -> str:
    session = session if session is not None else GenerationSession()
    generator = NonEnglishWordGenerator(trigram_model, preprocessed_dictionary, **kwargs)
    return generator.generate_word(session)


def generate_words(count: int,
                   trigram_model: MarkovModel,
                   preprocessed_dictionary: PreprocessedDictionary,
                   session: Optional[GenerationSession] = None,
                   **kwargs) -> Iterator[str]:
    generator = NonEnglishWordGenerator(trigram_model, preprocessed_dictionary, **kwargs)
    return generator.generate(count, session)
