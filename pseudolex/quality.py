#!/usr/bin/env python3
"""
Candidate filtering for generated words.

A candidate survives when it is long enough, pronounceable, close to some
real word, and not itself a real word.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from similarity_checker import (
    DEFAULT_THRESHOLD,
    PreprocessedDictionary,
    is_similar_to_real_word,
)
from pseudolex.settings import require_setting


def _load_patterns() -> list[re.Pattern]:
    vowels = re.escape(require_setting("quality.vowels"))
    max_consonants = require_setting("quality.max_consonant_run")
    max_vowels = require_setting("quality.max_vowel_run")
    banned = require_setting("quality.banned_substrings")
    return [
        re.compile(f"[^{vowels}]{{{max_consonants + 1},}}"),
        re.compile(f"[{vowels}]{{{max_vowels + 1},}}"),
        re.compile('|'.join(re.escape(s) for s in banned)),
    ]


BAD_PATTERNS = _load_patterns()


def is_pronounceable(word: str) -> bool:
    """
    Reject long consonant or vowel runs and hard letter combinations.

    Matching is case-sensitive; pass lowercase words.
    """
    return not any(pattern.search(word) for pattern in BAD_PATTERNS)


class Rejection(Enum):
    """Why a candidate was discarded."""
    USED = "used"
    TOO_SHORT = "too_short"
    UNPRONOUNCEABLE = "unpronounceable"
    NOT_SIMILAR = "not_similar"
    REAL_WORD = "real_word"


@dataclass
class FilterVerdict:
    word: str
    rejection: Optional[Rejection] = None

    @property
    def accepted(self) -> bool:
        return self.rejection is None


class CandidateFilter:
    """
    Applies the candidate gates against one length index.

    `gate` runs the cheap checks first and the edit-distance check last.
    `is_real_word` is the final membership check on the candidate's own
    length bucket.
    """

    def __init__(self,
                 preprocessed_dictionary: PreprocessedDictionary,
                 min_length: int,
                 threshold: int = DEFAULT_THRESHOLD):
        self.preprocessed_dictionary = preprocessed_dictionary
        self.min_length = min_length
        self.threshold = threshold

    def gate(self, word: str) -> Optional[Rejection]:
        if len(word) < self.min_length:
            return Rejection.TOO_SHORT
        if not is_pronounceable(word):
            return Rejection.UNPRONOUNCEABLE
        if not is_similar_to_real_word(word, self.preprocessed_dictionary, self.threshold):
            return Rejection.NOT_SIMILAR
        return None

    def is_real_word(self, word: str) -> bool:
        """
        Raises:
            KeyError: If the index has no bucket for the word's length
        """
        return word in self.preprocessed_dictionary[len(word)]

    def evaluate(self, word: str) -> FilterVerdict:
        """Run every check, reporting the first failure.

        Unlike `is_real_word`, a missing length bucket counts as "not a
        real word" here, so arbitrary words can be diagnosed.
        """
        rejection = self.gate(word)
        if rejection is None and word in self.preprocessed_dictionary.get(len(word), ()):
            rejection = Rejection.REAL_WORD
        return FilterVerdict(word=word, rejection=rejection)
