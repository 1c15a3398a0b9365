"""
Game Data Models

Contains the puzzle data structures and enums.
"""

import json
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from ..config.game_settings import WORD_LENGTH
from ..exceptions import InvalidOperationError
from ..utils.helpers import normalize_word


class LetterFeedback(Enum):
    """Per-letter verdict of a submitted guess."""
    RIGHT_PLACE = "rightPlace"
    WRONG_PLACE = "wrongPlace"
    WRONG_LETTER = "wrongLetter"


class SessionStatus(Enum):
    """Lifecycle of one day's puzzle."""
    LOADING = "loading"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


@dataclass
class Row:
    """
    One attempt: the guessed word (possibly partial), the word it is judged
    against, and whether it was submitted. Submitted rows are frozen.
    """
    expected: str
    word: str = ""
    submitted: bool = False

    def insert(self, letter: str) -> bool:
        """Append a letter. Returns False when the row is already full."""
        self._ensure_editable()
        letter = normalize_word(letter)
        if len(letter) != 1:
            raise ValueError(f"Expected a single letter, got '{letter}'")
        if self.is_full:
            return False
        self.word += letter
        return True

    def delete(self) -> bool:
        """Remove the last letter. Returns False when the row is empty."""
        self._ensure_editable()
        if not self.word:
            return False
        self.word = self.word[:-1]
        return True

    def char_at(self, index: int) -> Optional[str]:
        if index < len(self.word):
            return self.word[index]
        return None

    @property
    def is_full(self) -> bool:
        return len(self.word) == WORD_LENGTH

    def feedback(self) -> Optional[List[LetterFeedback]]:
        """Feedback against the expected word, or None while unsubmitted."""
        if not self.submitted:
            return None
        from ..services.validation_service import evaluate
        return evaluate(self.word, self.expected)

    def _ensure_editable(self) -> None:
        if self.submitted:
            raise InvalidOperationError("Row has already been submitted")


@dataclass
class RowState:
    """Serializable form of a row; the expected word lives on the day."""
    word: str
    submitted: bool


@dataclass
class PersistedDailyState:
    """Snapshot of one day's play that the hosting app loads and saves."""
    expected: str
    date: datetime
    epoch: int = 0
    rows: List[RowState] = field(default_factory=list)
    tallied: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            'expected': self.expected,
            'date': self.date.isoformat(),
            'epoch': self.epoch,
            'rows': [{'word': row.word, 'submitted': row.submitted} for row in self.rows],
            'tallied': self.tallied,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PersistedDailyState":
        """
        Rebuild a snapshot from its dict form.

        Raises:
            ValueError: If required fields are missing or malformed
        """
        try:
            return cls(
                expected=normalize_word(data['expected']),
                date=datetime.fromisoformat(data['date']),
                epoch=int(data.get('epoch', 0)),
                rows=[RowState(word=normalize_word(row['word']), submitted=bool(row['submitted']))
                      for row in data.get('rows', [])],
                tallied=bool(data.get('tallied', False)),
            )
        except (KeyError, TypeError) as e:
            raise ValueError(f"Malformed daily state: {e}")

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False)

    @classmethod
    def from_json(cls, text: str) -> "PersistedDailyState":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in daily state: {e}")
        if not isinstance(data, dict):
            raise ValueError("Daily state must be a JSON object")
        return cls.from_dict(data)


@dataclass
class SessionEvent:
    """Change notification emitted by a puzzle session after each transition."""
    action: str
    status: SessionStatus
    row_index: Optional[int] = None
