#!/usr/bin/env python3
"""
Build Pipeline
==============
Turns the base dictionary into the five stored artifacts:

    trigramModel                      trigram table, all letters
    bigramModel                       bigram table, all letters
    trigramModelRestricted            trigram table, allowed letters only
    preprocessedDictionary            length index, raw words
    preprocessedDictionaryRestricted  length index, allowed-letter words

The Markov tables are trained on the lowercased, deduplicated word list.
The length indexes are built from the raw list.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Iterable, Optional

from markov_generator import (
    build_bigram_model,
    build_trigram_model,
    build_trigram_model_restricted,
)
from pseudolex.dictionary import (
    allowed_letters as default_allowed_letters,
    preprocess_dictionary,
    preprocess_dictionary_restricted,
)
from pseudolex.settings import require_setting
from pseudolex.store import ModelStore

logger = logging.getLogger(__name__)


def artifact_name(key: str) -> str:
    """Stored name for an artifact key (trigram, bigram, dictionary, ...)."""
    return require_setting(f"store.artifacts.{key}")


@dataclass
class BuildReport:
    """What a build produced."""
    source_words: int = 0
    unique_words: int = 0
    artifacts: dict[str, int] = field(default_factory=dict)  # name -> entry count


def lowercase_unique(words: Iterable[str]) -> list[str]:
    """Lowercase and deduplicate, keeping first-seen order."""
    return list(dict.fromkeys(word.lower() for word in words))


def build_artifacts(words: list[str],
                    store: ModelStore,
                    allowed: Optional[Iterable[str]] = None,
                    on_step: Optional[Callable[[str], None]] = None) -> BuildReport:
    """
    Build every model and index from a raw word list and save them.

    Args:
        words: Raw dictionary, in source order
        store: Where to save the artifacts
        allowed: Letter allow-list for the restricted variants (app.yaml if None)
        on_step: Called with a short description before each step
    """
    allowed = frozenset(allowed) if allowed is not None else default_allowed_letters()
    unique = lowercase_unique(words)
    report = BuildReport(source_words=len(words), unique_words=len(unique))
    logger.info(f"Building from {len(words):,} words ({len(unique):,} unique)")

    steps = [
        ("trigram", "Training trigram model", lambda: build_trigram_model(unique)),
        ("bigram", "Training bigram model", lambda: build_bigram_model(unique)),
        ("trigram_restricted", "Training restricted trigram model",
         lambda: build_trigram_model_restricted(unique, allowed)),
        ("dictionary", "Indexing dictionary", lambda: preprocess_dictionary(words)),
        ("dictionary_restricted", "Indexing restricted dictionary",
         lambda: preprocess_dictionary_restricted(words, allowed)),
    ]

    for key, description, build in steps:
        if on_step:
            on_step(description)
        artifact = build()
        name = artifact_name(key)
        store.save(name, artifact)
        report.artifacts[name] = len(artifact)

    return report


def load_generation_artifacts(store: ModelStore, restricted: bool = False):
    """
    Load the trigram model and length index used for generation.

    Raises:
        FileNotFoundError: If either artifact has not been built
    """
    suffix = "_restricted" if restricted else ""
    trigram_model = store.load(artifact_name(f"trigram{suffix}"))
    preprocessed_dictionary = store.load(artifact_name(f"dictionary{suffix}"))
    return trigram_model, preprocessed_dictionary
