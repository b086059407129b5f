#!/usr/bin/env python3
"""
pseudolex - Pronounceable Non-English Word Generator
====================================================

Trains letter n-gram models on an English dictionary and samples new
words that sound plausible without being real English.

Quick Start
-----------
    from pseudolex import ModelStore, build_artifacts, load_words
    from pseudolex import GenerationSession, generate_words, load_generation_artifacts

    store = ModelStore("models")
    build_artifacts(load_words(), store)

    model, index = load_generation_artifacts(store)
    session = GenerationSession()
    for word in generate_words(10, model, index, session=session,
                               min_length=9, max_length=14):
        print(word)

Modules
-------
    markov_generator    - Normalization, n-gram training and sampling
    similarity_checker  - Edit distance to the nearest real word
    pseudolex.dictionary - Word sources and the length index
    pseudolex.quality    - Pronounceability and candidate filtering
    pseudolex.generation - Generation loop and sessions
    pseudolex.store      - Tagged JSON model store
    pseudolex.build      - Build pipeline for all artifacts

CLI Usage
---------
    python -m pseudolex build
    python -m pseudolex generate -n 99
    python -m pseudolex check plam
"""

__version__ = "0.1.0"

from markov_generator import (
    MarkovGenerator,
    MarkovModel,
    MarkovTrainer,
    normalize_dictionary,
    normalize_word,
    build_bigram_model,
    build_trigram_model,
    build_trigram_model_restricted,
)
from similarity_checker import (
    PreprocessedDictionary,
    SimilarityChecker,
    SimilarityResult,
    is_similar_to_real_word,
    levenshtein_distance,
    nearest_real_word,
)
from .dictionary import (
    allowed_letters,
    load_words,
    preprocess_dictionary,
    preprocess_dictionary_restricted,
)
from .quality import (
    CandidateFilter,
    FilterVerdict,
    Rejection,
    is_pronounceable,
)
from .generation import (
    GenerationExhausted,
    GenerationSession,
    NonEnglishWordGenerator,
    Phase,
    generate_better_word,
    generate_non_english_word,
    generate_words,
)
from .store import ModelStore
from .build import BuildReport, build_artifacts, load_generation_artifacts

__all__ = [
    '__version__',
    # Markov
    'MarkovGenerator',
    'MarkovModel',
    'MarkovTrainer',
    'normalize_dictionary',
    'normalize_word',
    'build_bigram_model',
    'build_trigram_model',
    'build_trigram_model_restricted',
    # Similarity
    'PreprocessedDictionary',
    'SimilarityChecker',
    'SimilarityResult',
    'is_similar_to_real_word',
    'levenshtein_distance',
    'nearest_real_word',
    # Dictionary
    'allowed_letters',
    'load_words',
    'preprocess_dictionary',
    'preprocess_dictionary_restricted',
    # Quality
    'CandidateFilter',
    'FilterVerdict',
    'Rejection',
    'is_pronounceable',
    # Generation
    'GenerationExhausted',
    'GenerationSession',
    'NonEnglishWordGenerator',
    'Phase',
    'generate_better_word',
    'generate_non_english_word',
    'generate_words',
    # Store & build
    'ModelStore',
    'BuildReport',
    'build_artifacts',
    'load_generation_artifacts',
]
