"""
Session Service

One day's play: the target word, up to MAX_ROUNDS rows, completion and
tallying. Observers are notified after every transition.
"""

import uuid
from datetime import datetime
from typing import Callable, List, Optional

from ..config.game_settings import MAX_ROUNDS, WORD_LENGTH
from ..exceptions import InvalidOperationError
from ..models.game import PersistedDailyState, Row, RowState, SessionEvent, SessionStatus
from ..models.rejection import RejectionReason
from ..models.stats import Statistics
from ..utils.game_logger import game_logger
from ..utils.helpers import fold_word, normalize_word
from .pace_setter import PaceSetter
from .validation_service import GuessValidator

Observer = Callable[[SessionEvent], None]


class PuzzleSession:
    """
    State container for one daily puzzle.

    Lifecycle: LOADING (no target yet) -> IN_PROGRESS -> COMPLETED, where
    completed means won or all rows submitted. Nothing leaves COMPLETED.
    The active row is always the first unsubmitted one.
    """

    def __init__(self, validator: GuessValidator, hard_mode: bool = False):
        self.session_id = str(uuid.uuid4())
        self.validator = validator
        self.hard_mode = hard_mode
        self.expected: Optional[str] = None
        self.epoch: Optional[int] = None
        self.date: Optional[datetime] = None
        self.rows: List[Row] = []
        self.tallied = False
        self._observers: List[Observer] = []

    # ----- observation -----

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """Register a change callback. Returns a function that unsubscribes it."""
        self._observers.append(observer)

        def unsubscribe():
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def _notify(self, action: str, row_index: Optional[int] = None) -> None:
        event = SessionEvent(action=action, status=self.status, row_index=row_index)
        for observer in list(self._observers):
            observer(event)

    # ----- derived state -----

    @property
    def status(self) -> SessionStatus:
        if self.expected is None:
            return SessionStatus.LOADING
        if self.is_completed:
            return SessionStatus.COMPLETED
        return SessionStatus.IN_PROGRESS

    @property
    def is_won(self) -> bool:
        if self.expected is None:
            return False
        target = fold_word(self.expected)
        return any(row.submitted and fold_word(row.word) == target for row in self.rows)

    @property
    def is_exhausted(self) -> bool:
        return bool(self.rows) and all(row.submitted for row in self.rows)

    @property
    def is_completed(self) -> bool:
        return self.is_won or self.is_exhausted

    @property
    def submitted_rows(self) -> int:
        return sum(1 for row in self.rows if row.submitted)

    @property
    def active_row_index(self) -> Optional[int]:
        if self.status != SessionStatus.IN_PROGRESS:
            return None
        for ix, row in enumerate(self.rows):
            if not row.submitted:
                return ix
        return None

    @property
    def active_row(self) -> Optional[Row]:
        ix = self.active_row_index
        return None if ix is None else self.rows[ix]

    # ----- transitions -----

    def assign_target(self, word: str, epoch: int, date: datetime) -> None:
        """
        Start the day with its target word. Only valid while LOADING.
        """
        if self.status != SessionStatus.LOADING:
            raise InvalidOperationError("Session already has a target word")
        if len(normalize_word(word)) != WORD_LENGTH:
            raise InvalidOperationError(f"Target word '{word}' must be {WORD_LENGTH} letters")

        self.expected = normalize_word(word)
        self.epoch = epoch
        self.date = date
        self.rows = [Row(expected=self.expected) for _ in range(MAX_ROUNDS)]

        game_logger.log_game_event(self.session_id, 'target_assigned', epoch=epoch, date=date)
        self._notify('target_assigned')

    def insert_letter(self, letter: str) -> bool:
        ix = self._require_active_row('insert a letter')
        changed = self.rows[ix].insert(letter)
        if changed:
            self._notify('row_edited', ix)
        return changed

    def delete_letter(self) -> bool:
        ix = self._require_active_row('delete a letter')
        changed = self.rows[ix].delete()
        if changed:
            self._notify('row_edited', ix)
        return changed

    def submit_row(self, word: Optional[str] = None) -> Optional[RejectionReason]:
        """
        Submits the active row.

        Args:
            word: Replacement text for the active row; defaults to what was typed

        Returns:
            None when the row was submitted, otherwise the rejection reason.
            A rejected guess leaves the session unchanged.

        Raises:
            InvalidOperationError: If the session is loading or completed
        """
        ix = self._require_active_row('submit')
        row = self.rows[ix]
        candidate = row.word if word is None else word

        sanitized, reason = self.validator.can_submit(
            candidate, self.expected, self.rows[:ix], self.hard_mode
        )
        if reason is not None:
            game_logger.log_rejection(self.session_id, candidate, reason, row_index=ix)
            return reason

        row.word = sanitized
        row.submitted = True

        game_logger.log_game_event(self.session_id, 'row_submitted', row_index=ix, word=sanitized)
        self._notify('row_submitted', ix)

        if self.is_completed:
            game_logger.log_game_event(
                self.session_id, 'completed',
                won=self.is_won, guesses=self.submitted_rows, epoch=self.epoch
            )
            self._notify('completed', ix)

        return None

    def tally(self, statistics: Statistics, pace_setter: PaceSetter) -> Statistics:
        """
        Records this session into the statistics. Valid exactly once, after
        completion; it is the only way statistics change.

        Returns:
            The updated statistics

        Raises:
            InvalidOperationError: If the session is not completed or was already tallied
        """
        if not self.is_completed:
            raise InvalidOperationError("Cannot tally a session that is not completed")
        if self.tallied:
            raise InvalidOperationError("Session has already been tallied")

        won = self.is_won
        continues_streak = (
            won and statistics.last_won_date is not None
            and pace_setter.is_consecutive(statistics.last_won_date, self.date)
        )
        updated = statistics.updated(
            won=won,
            guesses=self._winning_row() + 1 if won else self.submitted_rows,
            date=self.date,
            continues_streak=continues_streak,
        )
        self.tallied = True

        game_logger.log_game_event(
            self.session_id, 'tallied',
            won=won, played=updated.played, current_streak=updated.current_streak
        )
        self._notify('tallied')
        return updated

    def _winning_row(self) -> int:
        target = fold_word(self.expected)
        for ix, row in enumerate(self.rows):
            if row.submitted and fold_word(row.word) == target:
                return ix
        raise InvalidOperationError("Session has no winning row")

    def _require_active_row(self, action: str) -> int:
        status = self.status
        if status == SessionStatus.LOADING:
            raise InvalidOperationError(f"Cannot {action}: no target word assigned yet")
        if status == SessionStatus.COMPLETED:
            raise InvalidOperationError(f"Cannot {action}: session is completed")
        return self.active_row_index

    # ----- persistence mapping -----

    def to_state(self) -> PersistedDailyState:
        if self.expected is None:
            raise InvalidOperationError("Cannot persist a session without a target word")
        return PersistedDailyState(
            expected=self.expected,
            date=self.date,
            epoch=self.epoch,
            rows=[RowState(word=row.word, submitted=row.submitted) for row in self.rows],
            tallied=self.tallied,
        )

    @classmethod
    def from_state(cls,
                   state: PersistedDailyState,
                   validator: GuessValidator,
                   hard_mode: bool = False) -> "PuzzleSession":
        """
        Restore a session from its snapshot.

        Raises:
            ValueError: If the snapshot breaks the row invariants
        """
        if len(fold_word(state.expected)) != WORD_LENGTH:
            raise ValueError(f"Daily state target '{state.expected}' is not {WORD_LENGTH} letters long")
        if len(state.rows) > MAX_ROUNDS:
            raise ValueError(f"Daily state has {len(state.rows)} rows, at most {MAX_ROUNDS} allowed")

        seen_unsubmitted = False
        seen_win = False
        for ix, row in enumerate(state.rows):
            if row.submitted and seen_unsubmitted:
                raise ValueError(f"Row {ix} is submitted after an unsubmitted row")
            if row.submitted and seen_win:
                raise ValueError(f"Row {ix} is submitted after the winning row")
            if row.submitted and len(row.word) != len(state.expected):
                raise ValueError(f"Submitted row {ix} has an incomplete word '{row.word}'")
            seen_unsubmitted = seen_unsubmitted or not row.submitted
            seen_win = seen_win or (row.submitted and fold_word(row.word) == fold_word(state.expected))

        session = cls(validator, hard_mode=hard_mode)
        session.expected = normalize_word(state.expected)
        session.epoch = state.epoch
        session.date = state.date
        session.rows = [Row(expected=session.expected, word=row.word, submitted=row.submitted)
                        for row in state.rows]
        session.rows += [Row(expected=session.expected) for _ in range(MAX_ROUNDS - len(state.rows))]
        session.tallied = state.tallied

        if session.tallied and not session.is_completed:
            raise ValueError("Daily state is tallied but not completed")

        return session
