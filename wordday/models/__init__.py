"""
Data Models Package

Contains all data models and schemas used throughout the package.
"""

from .game import LetterFeedback, SessionStatus, Row, RowState, PersistedDailyState, SessionEvent
from .rejection import (
    RejectionReason, TooShort, StillLoading, NotRecognized, HardModeMismatch, HardModeMissingLetter
)
from .stats import Statistics

__all__ = [
    'LetterFeedback', 'SessionStatus', 'Row', 'RowState', 'PersistedDailyState', 'SessionEvent',
    'RejectionReason', 'TooShort', 'StillLoading', 'NotRecognized', 'HardModeMismatch',
    'HardModeMissingLetter', 'Statistics'
]
