"""
Helper Functions

Contains word normalization and message helpers used throughout the package.
"""

import unicodedata
from datetime import datetime, timezone


def normalize_word(raw: str) -> str:
    """Canonical display form of raw input: trimmed, NFC-composed, uppercased."""
    return unicodedata.normalize('NFC', (raw or '').strip()).upper()


def fold_letter(letter: str) -> str:
    """Accent-insensitive comparison key for a single letter (É -> E)."""
    decomposed = unicodedata.normalize('NFD', letter)
    base = ''.join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base.upper()


def fold_word(word: str) -> str:
    """Accent-insensitive comparison key for a word, one key letter per letter."""
    return ''.join(fold_letter(letter) for letter in normalize_word(word))


def ordinal(n: int) -> str:
    """English ordinal for a positive integer: 1st, 2nd, 3rd, 11th, 22nd."""
    if 10 <= n % 100 <= 20:
        suffix = 'th'
    else:
        suffix = {1: 'st', 2: 'nd', 3: 'rd'}.get(n % 10, 'th')
    return f"{n}{suffix}"


def letter_number_msg(index: int) -> str:
    """Human name of a zero-based letter position."""
    return f"{ordinal(index + 1)} letter"


def as_utc(instant: datetime) -> datetime:
    """Aware UTC copy of an instant. Naive datetimes are taken to be UTC."""
    if instant.tzinfo is None:
        return instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(timezone.utc)
