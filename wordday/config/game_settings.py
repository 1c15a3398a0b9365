"""
Game Configuration Constants Module

This module defines all game configuration constants and the word list
loader. All game parameters are centralized here to enable easy modification.
"""

import os
import unicodedata
from typing import Dict, Final, List

# Core Game Configuration Constants
WORD_LENGTH: Final[int] = 5

MAX_ROUNDS: Final[int] = 6
"""
Maximum number of guess attempts allowed per daily puzzle.
Type: Final[int] - Immutable to prevent accidental modification
"""

DEFAULT_SEED: Final[int] = 14384982345
"""Seed for the deterministic answer ordering."""

# Locale -> base name of the word list files in words/
SUPPORTED_LOCALES: Final[Dict[str, str]] = {
    'en': 'en',
    'fr': 'fr',
}

# Word list kinds and their file suffixes
ANSWERS: Final[str] = 'answers'
GUESSES: Final[str] = 'guesses'
_KIND_SUFFIX = {ANSWERS: 'A', GUESSES: 'G'}

WORDS_DIR: Final[str] = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'words')


def word_list_path(locale: str, kind: str) -> str:
    """
    Resolve the resource file holding one word list.

    Raises:
        ValueError: If the locale or kind is unknown
    """
    if locale not in SUPPORTED_LOCALES:
        raise ValueError(f"Unsupported locale '{locale}'. Expected one of {sorted(SUPPORTED_LOCALES)}")
    if kind not in _KIND_SUFFIX:
        raise ValueError(f"Unknown word list kind '{kind}'")

    file_name = f"{SUPPORTED_LOCALES[locale]}_{_KIND_SUFFIX[kind]}.txt"
    return os.path.join(WORDS_DIR, file_name)


def load_word_list(locale: str, kind: str) -> List[str]:
    """
    Load a word list for a locale.

    Files hold one word per line. Blank lines are ignored, every other line
    is NFC-normalized and uppercased.

    Args:
        locale: Configured game locale (e.g. "en")
        kind: ANSWERS or GUESSES

    Returns:
        List[str]: Uppercase 5-letter words in file order

    Raises:
        FileNotFoundError: If the word list file is missing
        ValueError: If the list is empty or contains invalid words
    """
    path = word_list_path(locale, kind)

    try:
        with open(path, 'r', encoding='utf-8') as f:
            lines = f.read().splitlines()
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {path}")

    words = [unicodedata.normalize('NFC', line.strip()).upper() for line in lines if line.strip()]
    validate_word_list_integrity(words, name=os.path.basename(path))
    return words


def validate_word_list_integrity(words: List[str], name: str = "word list") -> bool:
    """
    Validates the integrity and consistency of a word list.

    This function performs validation to ensure:
    1. Length validation: All words must be exactly 5 characters
    2. Character validation: Only alphabetic characters allowed
    3. Format validation: Consistent uppercase formatting

    Duplicates are tolerated; the guess index collapses them.

    Returns:
        bool: True if word list passes all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    if not words:
        raise ValueError(f"{name} cannot be empty")

    for index, word in enumerate(words):
        if len(word) != WORD_LENGTH:
            raise ValueError(f"Word at index {index} '{word}' in {name} is not {WORD_LENGTH} characters long")

        if not word.isalpha():
            raise ValueError(f"Word at index {index} '{word}' in {name} contains non-alphabetic characters")

        if word != word.upper():
            raise ValueError(f"Word at index {index} '{word}' in {name} is not in uppercase format")

    return True
