"""Pytest configuration and fixtures."""

import pytest
import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

CONSONANTS = "bdklmnprst"
VOWELS = "aeiou"


def all_syllable_words() -> list[str]:
    """Every consonant-vowel-consonant-vowel word, in a fixed order."""
    return [
        c1 + v1 + c2 + v2
        for c1 in CONSONANTS
        for v1 in VOWELS
        for c2 in CONSONANTS
        for v2 in VOWELS
    ]


@pytest.fixture
def toy_dictionary():
    """Three words whose model can only rebuild the words themselves."""
    return ["tin", "ton", "tan"]


@pytest.fixture
def syllable_dictionary():
    """Every seventh CVCV word: rich enough to generate many unseen words."""
    return all_syllable_words()[::7]


@pytest.fixture
def syllable_wordlist(tmp_path, syllable_dictionary):
    """The syllable dictionary written as a plain-text word list."""
    path = tmp_path / "words.txt"
    path.write_text("# syllable words\n" + "\n".join(syllable_dictionary) + "\n")
    return path
