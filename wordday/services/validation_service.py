"""
Validation Service

Contains the Wordle rules: per-letter feedback and the checks a guess must
pass before it can be submitted.
"""

from collections import Counter
from typing import Dict, List, Optional, Sequence, Tuple

from ..config.game_settings import WORD_LENGTH
from ..exceptions import InvalidOperationError
from ..models.game import LetterFeedback, Row
from ..models.rejection import (
    RejectionReason, TooShort, StillLoading, NotRecognized, HardModeMismatch, HardModeMissingLetter
)
from .lexicon_service import Lexicon
from ..utils.helpers import fold_letter, fold_word, normalize_word

# Keyboard hint priority: a better status is never downgraded
_HINT_RANK = {
    LetterFeedback.WRONG_LETTER: 0,
    LetterFeedback.WRONG_PLACE: 1,
    LetterFeedback.RIGHT_PLACE: 2,
}


def evaluate(candidate: str, target: str) -> List[LetterFeedback]:
    """
    Implements the authentic Wordle letter evaluation algorithm.

    Exact matches are reserved first so that a letter guessed more often
    than it occurs in the target is only marked as often as it occurs.
    Letters are compared accent-insensitively.

    Raises:
        InvalidOperationError: If either word is not exactly WORD_LENGTH letters
    """
    guess_keys = fold_word(candidate)
    target_keys = fold_word(target)
    if len(guess_keys) != WORD_LENGTH or len(target_keys) != WORD_LENGTH:
        raise InvalidOperationError(
            f"Cannot evaluate '{candidate}' against '{target}': both must be {WORD_LENGTH} letters"
        )

    result: List[Optional[LetterFeedback]] = [None] * WORD_LENGTH
    remaining = Counter(target_keys)

    # First pass: exact position matches
    for i in range(WORD_LENGTH):
        if guess_keys[i] == target_keys[i]:
            result[i] = LetterFeedback.RIGHT_PLACE
            remaining[guess_keys[i]] -= 1

    # Second pass: present letters consume what is left, left to right
    for i in range(WORD_LENGTH):
        if result[i] is not None:
            continue
        if remaining[guess_keys[i]] > 0:
            result[i] = LetterFeedback.WRONG_PLACE
            remaining[guess_keys[i]] -= 1
        else:
            result[i] = LetterFeedback.WRONG_LETTER

    return result


class GuessValidator:
    """
    Decides whether a word can be submitted for a puzzle.

    This class handles:
    - Length and word list membership checks
    - Hard mode constraints carried forward from earlier rows
    - Sanitizing accepted input to the word list's spelling
    """

    def __init__(self, lexicon: Lexicon):
        self.lexicon = lexicon

    @property
    def ready(self) -> bool:
        return self.lexicon.ready

    def evaluate(self, candidate: str, target: str) -> List[LetterFeedback]:
        return evaluate(candidate, target)

    def can_submit(self,
                   candidate: str,
                   target: str,
                   prior_rows: Optional[Sequence[Row]] = None,
                   hard_mode: bool = False) -> Tuple[Optional[str], Optional[RejectionReason]]:
        """
        Validates a guess against the word list and, in hard mode, the rows
        already played.

        Args:
            candidate: Raw input for the active row
            target: The day's word
            prior_rows: Rows played before this one; unsubmitted rows are ignored
            hard_mode: Whether revealed hints must be reused

        Returns:
            Tuple of (sanitized_word, None) on success or (None, reason)
        """
        word = normalize_word(candidate)

        if len(word) != WORD_LENGTH:
            return None, TooShort(len(word))

        guess_index = self.lexicon.guess_index
        if guess_index is None:
            return None, StillLoading()

        sanitized = guess_index.lookup(word)
        if sanitized is None:
            return None, NotRecognized(word)

        if hard_mode and prior_rows:
            reason = self._check_hard_mode(sanitized, normalize_word(target), prior_rows)
            if reason is not None:
                return None, reason

        return sanitized, None

    def _check_hard_mode(self, word: str, target: str, prior_rows: Sequence[Row]) -> Optional[RejectionReason]:
        """
        Right-place letters are checked across every row before any
        wrong-place letter, so a misplaced known letter is always the
        reported violation.
        """
        word_keys = fold_word(word)
        required: List[str] = []

        for row in prior_rows:
            if not row.submitted:
                continue
            # Recomputed against the current target, never read from a cache
            for ix, status in enumerate(evaluate(row.word, target)):
                if status == LetterFeedback.RIGHT_PLACE:
                    if word_keys[ix] != fold_letter(target[ix]):
                        return HardModeMismatch(ix, target[ix])
                elif status == LetterFeedback.WRONG_PLACE:
                    required.append(row.word[ix])

        for letter in required:
            if fold_letter(letter) not in word_keys:
                return HardModeMissingLetter(letter)

        return None

    def keyboard_hints(self, rows: Sequence[Row]) -> Dict[str, LetterFeedback]:
        """
        Best status seen for each letter over the submitted rows.
        """
        hints: Dict[str, LetterFeedback] = {}
        for row in rows:
            feedback = row.feedback()
            if feedback is None:
                continue
            for letter, status in zip(fold_word(row.word), feedback):
                current = hints.get(letter)
                if current is None or _HINT_RANK[status] > _HINT_RANK[current]:
                    hints[letter] = status
        return hints


# Global service instance
_validator = None


def get_validator() -> Optional[GuessValidator]:
    """Get the global validator instance."""
    return _validator


def initialize_validator(lexicon: Lexicon) -> GuessValidator:
    """Initialize the global validator instance."""
    global _validator
    _validator = GuessValidator(lexicon)
    return _validator
