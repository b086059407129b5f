#!/usr/bin/env python3
"""
Real-Word Similarity Checker
============================
Checks whether a generated word stays close to real dictionary words.

A candidate is compared against every real word whose length is within one
letter of its own, using Levenshtein distance. Words that land far from
everything in the dictionary tend to look like keyboard noise, so the
generator only keeps candidates within a small edit distance of a real word.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

from settings import require_setting

# word length -> real words of that length
PreprocessedDictionary = dict[int, set[str]]

DEFAULT_THRESHOLD = require_setting("generation.similarity_threshold")


def levenshtein_distance(s1: str, s2: str) -> int:
    """Calculate Levenshtein (edit) distance between two strings."""
    if len(s1) < len(s2):
        s1, s2 = s2, s1

    if len(s2) == 0:
        return len(s1)

    previous_row = range(len(s2) + 1)
    for i, c1 in enumerate(s1):
        current_row = [i + 1]
        for j, c2 in enumerate(s2):
            insertions = previous_row[j + 1] + 1
            deletions = current_row[j] + 1
            substitutions = previous_row[j] + (c1 != c2)
            current_row.append(min(insertions, deletions, substitutions))
        previous_row = current_row

    return previous_row[-1]


def _check_arguments(word: str, preprocessed_dictionary: PreprocessedDictionary):
    if not word or not preprocessed_dictionary:
        raise ValueError("Missing required properties: word and preprocessed_dictionary")


def possible_matches(word: str,
                     preprocessed_dictionary: PreprocessedDictionary) -> Iterator[str]:
    """Yield real words whose length is within one of the candidate's."""
    seen = set()
    length = len(word)
    for bucket in range(length - 1, length + 2):
        for real_word in preprocessed_dictionary.get(bucket, ()):
            if real_word not in seen:
                seen.add(real_word)
                yield real_word


def is_similar_to_real_word(word: str,
                            preprocessed_dictionary: PreprocessedDictionary,
                            threshold: int = DEFAULT_THRESHOLD) -> bool:
    """
    Check if a word is within `threshold` edits of some real word.

    Raises:
        ValueError: If word or preprocessed_dictionary is empty or missing
    """
    _check_arguments(word, preprocessed_dictionary)
    return any(
        levenshtein_distance(word, real_word) <= threshold
        for real_word in possible_matches(word, preprocessed_dictionary)
    )


def nearest_real_word(word: str,
                      preprocessed_dictionary: PreprocessedDictionary) -> tuple[Optional[str], Optional[int]]:
    """
    Find the closest real word of neighboring length.

    Returns:
        (closest_word, distance), or (None, None) if no bucket is in range
    """
    _check_arguments(word, preprocessed_dictionary)
    best_word = None
    best_distance = None
    # Sorted so ties resolve the same way on every run
    for real_word in sorted(possible_matches(word, preprocessed_dictionary)):
        distance = levenshtein_distance(word, real_word)
        if best_distance is None or distance < best_distance:
            best_word, best_distance = real_word, distance
            if distance == 0:
                break
    return best_word, best_distance


@dataclass
class SimilarityResult:
    """Result of similarity checking"""
    word: str
    closest_word: Optional[str]
    distance: Optional[int]
    threshold: int

    @property
    def is_similar(self) -> bool:
        return self.distance is not None and self.distance <= self.threshold

    @property
    def is_real_word(self) -> bool:
        return self.distance == 0


class SimilarityChecker:
    """
    Checks candidates against a length-bucketed dictionary.

    Usage:
        checker = SimilarityChecker(preprocessed_dictionary)
        result = checker.check("plam")
        result.closest_word, result.distance  # ('plan', 1)
    """

    def __init__(self, preprocessed_dictionary: PreprocessedDictionary,
                 threshold: int = DEFAULT_THRESHOLD):
        if not preprocessed_dictionary:
            raise ValueError("preprocessed_dictionary cannot be empty")
        self.preprocessed_dictionary = preprocessed_dictionary
        self.threshold = threshold

    def is_similar(self, word: str) -> bool:
        return is_similar_to_real_word(word, self.preprocessed_dictionary, self.threshold)

    def check(self, word: str) -> SimilarityResult:
        closest, distance = nearest_real_word(word, self.preprocessed_dictionary)
        return SimilarityResult(
            word=word,
            closest_word=closest,
            distance=distance,
            threshold=self.threshold,
        )
