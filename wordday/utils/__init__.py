"""
Utilities Package

Contains word helpers and the game logger.
"""

from .helpers import normalize_word, fold_letter, fold_word, ordinal, letter_number_msg, as_utc
from .game_logger import game_logger

__all__ = ['normalize_word', 'fold_letter', 'fold_word', 'ordinal', 'letter_number_msg', 'as_utc', 'game_logger']
