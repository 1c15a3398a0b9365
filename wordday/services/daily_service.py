"""
Daily Service

Keeps the hosting app on today's puzzle: resumes saved play while it is
still fresh, rolls over to the next answer when it is not, and records
finished sessions into the statistics exactly once.
"""

from datetime import datetime, timedelta
from typing import Optional

from ..models.game import PersistedDailyState
from ..models.stats import Statistics
from ..utils.game_logger import game_logger
from .lexicon_service import Lexicon
from .pace_setter import PaceSetter
from .session_service import PuzzleSession
from .validation_service import GuessValidator


class DailyService:
    """
    Glue between the lexicon, the pace setter and puzzle sessions.
    """

    def __init__(self,
                 lexicon: Lexicon,
                 validator: GuessValidator,
                 pace_setter: PaceSetter,
                 hard_mode: bool = False):
        self.lexicon = lexicon
        self.validator = validator
        self.pace_setter = pace_setter
        self.hard_mode = hard_mode

    def today_index(self, now: datetime) -> int:
        return self.pace_setter.epoch_index(now)

    def todays_answer(self, now: datetime) -> Optional[str]:
        """Answer for the period containing ``now``, or None while words are loading."""
        return self.lexicon.answer(self.today_index(now))

    def remaining_ttl(self, now: datetime) -> timedelta:
        return self.pace_setter.remaining_ttl(now)

    def is_fresh(self, state: Optional[PersistedDailyState], now: datetime) -> bool:
        return state is not None and self.pace_setter.is_fresh(state.date, now)

    def new_session(self, now: datetime) -> PuzzleSession:
        """
        A session for today. It stays LOADING when the lexicon is not ready;
        call ``start`` on it once words are available.
        """
        session = PuzzleSession(self.validator, hard_mode=self.hard_mode)
        self.start(session, now)
        return session

    def start(self, session: PuzzleSession, now: datetime) -> bool:
        """Assign today's target to a LOADING session. Returns False while loading."""
        answer = self.todays_answer(now)
        if answer is None:
            return False
        session.assign_target(answer, self.today_index(now), now)
        return True

    def resume(self, state: Optional[PersistedDailyState], now: datetime) -> PuzzleSession:
        """
        Restore saved play if it belongs to the current period, otherwise
        roll over to a new session for today.

        Raises:
            ValueError: If a fresh saved state is corrupt
        """
        if self.is_fresh(state, now):
            return PuzzleSession.from_state(state, self.validator, hard_mode=self.hard_mode)

        if state is not None:
            game_logger.log_game_event(
                None, 'rollover',
                previous_epoch=state.epoch, epoch=self.today_index(now)
            )
        return self.new_session(now)

    def finish(self, session: PuzzleSession, statistics: Statistics) -> Statistics:
        """
        Tally a completed session that has not been tallied yet. Anything else
        returns the statistics unchanged.
        """
        if not session.is_completed or session.tallied:
            return statistics
        return session.tally(statistics, self.pace_setter)
