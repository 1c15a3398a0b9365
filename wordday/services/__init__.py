"""
Services Package

Contains all puzzle logic and service classes.
"""

from .lexicon_service import Lexicon, GuessIndex, get_lexicon, initialize_lexicon
from .validation_service import GuessValidator, evaluate, get_validator, initialize_validator
from .pace_setter import (
    PaceSetter, CalendarDailyPaceSetter, BucketPaceSetter, create_pace_setter, parse_timezone, gregorian
)
from .session_service import PuzzleSession
from .daily_service import DailyService

__all__ = [
    'Lexicon', 'GuessIndex', 'get_lexicon', 'initialize_lexicon',
    'GuessValidator', 'evaluate', 'get_validator', 'initialize_validator',
    'PaceSetter', 'CalendarDailyPaceSetter', 'BucketPaceSetter', 'create_pace_setter',
    'parse_timezone', 'gregorian',
    'PuzzleSession',
    'DailyService'
]
