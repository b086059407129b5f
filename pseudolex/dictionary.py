#!/usr/bin/env python3
"""
Dictionary Sources & Length Index
=================================
Loads the base English word list and buckets it by word length.

Word sources:
- wordfreq: the English list bundled with the `wordfreq` package
- file: a plain-text file, one word per line, `#` comments allowed

The length index is built from the raw source list. Unlike the Markov
tables it is neither lowercased nor stripped of punctuation, so an entry
such as "Don't" stays as-is under bucket 5.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator, Optional

from wordfreq import top_n_list

from similarity_checker import PreprocessedDictionary
from pseudolex.settings import get_setting, require_setting

logger = logging.getLogger(__name__)

PROVIDERS = ('wordfreq', 'file')


# =============================================================================
# Word Sources
# =============================================================================

def wordfreq_words(language: str = None, top_n: int = None) -> list[str]:
    """Most frequent words for a language, most common first."""
    language = language or require_setting("word_source.language")
    top_n = top_n or require_setting("word_source.top_n")
    words = top_n_list(language, top_n)
    logger.info(f"Loaded {len(words):,} words from wordfreq ({language})")
    return words


def _iter_file_words(filepath: Path, comment_char: str = '#') -> Iterator[str]:
    with open(filepath, 'r', encoding='utf-8', errors='ignore') as f:
        for line in f:
            line = line.strip()

            # Skip empty lines and comments
            if not line or line.startswith(comment_char):
                continue

            # Handle inline comments: "word # comment"
            if comment_char in line:
                line = line.split(comment_char)[0].strip()

            if line:
                yield line


def file_words(filepath: Path | str) -> list[str]:
    """Read a plain-text word list."""
    filepath = Path(filepath)
    if not filepath.exists():
        raise FileNotFoundError(f"Word list not found: {filepath}")
    words = list(_iter_file_words(filepath))
    logger.info(f"Loaded {len(words):,} words from {filepath}")
    return words


def load_words(provider: str = None,
               path: Optional[Path | str] = None,
               language: str = None,
               top_n: int = None) -> list[str]:
    """
    Load the base dictionary from the configured source.

    Args:
        provider: 'wordfreq' or 'file' (default from app.yaml)
        path: Word list path for the 'file' provider
        language: wordfreq language code
        top_n: Number of wordfreq words to take
    """
    provider = provider or get_setting("word_source.provider", "wordfreq")

    if provider == 'wordfreq':
        return wordfreq_words(language=language, top_n=top_n)

    if provider == 'file':
        path = path or get_setting("word_source.path")
        if not path:
            raise ValueError("word_source.path must be set for the 'file' provider")
        return file_words(path)

    available = ', '.join(PROVIDERS)
    raise ValueError(f"Unknown word source '{provider}'. Available sources: {available}")


# =============================================================================
# Letter Restriction
# =============================================================================

def allowed_letters() -> frozenset[str]:
    """Vowels plus the restricted consonant subset from app.yaml."""
    vowels = require_setting("restriction.vowels")
    consonants = require_setting("restriction.consonants")
    return frozenset(vowels) | frozenset(consonants)


# =============================================================================
# Length-Bucketed Index
# =============================================================================

def preprocess_dictionary(dictionary: Iterable[str],
                          allowed: Optional[Iterable[str]] = None) -> PreprocessedDictionary:
    """
    Bucket words by length for fast similarity lookup.

    Args:
        dictionary: Raw word source (not normalized)
        allowed: If given, skip words containing any other character
    """
    allowed = frozenset(allowed) if allowed is not None else None
    processed: PreprocessedDictionary = {}

    for word in dictionary:
        if not word:
            continue
        if allowed is not None and not all(char in allowed for char in word):
            continue
        processed.setdefault(len(word), set()).add(word)

    return processed


def preprocess_dictionary_restricted(dictionary: Iterable[str],
                                     allowed: Iterable[str]) -> PreprocessedDictionary:
    return preprocess_dictionary(dictionary, allowed)
