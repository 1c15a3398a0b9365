"""Tests for the puzzle session state machine."""

from datetime import timedelta

import pytest

from wordday.exceptions import InvalidOperationError
from wordday.models import (
    HardModeMismatch, NotRecognized, PersistedDailyState, RowState, SessionStatus, Statistics, StillLoading
)
from wordday.services.pace_setter import BucketPaceSetter, CalendarDailyPaceSetter
from wordday.services.session_service import PuzzleSession
from wordday.services.validation_service import GuessValidator

MISSES = ["CRANE", "SLATE", "BRICK", "STONE", "PLANT", "LIGHT"]


class TestLifecycle:
    def test_starts_loading(self, validator):
        session = PuzzleSession(validator)
        assert session.status == SessionStatus.LOADING
        assert session.active_row_index is None
        assert not session.is_completed

    def test_submit_while_loading_is_invalid(self, validator):
        session = PuzzleSession(validator)
        with pytest.raises(InvalidOperationError, match="no target"):
            session.submit_row("CRANE")

    def test_assign_target_starts_play(self, session, t0):
        assert session.status == SessionStatus.IN_PROGRESS
        assert session.expected == "TRACE"
        assert session.epoch == 0
        assert session.date == t0
        assert len(session.rows) == 6
        assert session.active_row_index == 0

    def test_assign_target_requires_five_letters(self, validator, t0):
        session = PuzzleSession(validator)
        with pytest.raises(InvalidOperationError, match="must be 5 letters"):
            session.assign_target("TRAC", epoch=0, date=t0)
        assert session.status == SessionStatus.LOADING

    def test_assign_target_twice_is_invalid(self, session, t0):
        with pytest.raises(InvalidOperationError):
            session.assign_target("CRANE", 1, t0)

    def test_win_completes_immediately(self, session):
        assert session.submit_row("CRANE") is None
        assert session.submit_row("TRACE") is None

        assert session.status == SessionStatus.COMPLETED
        assert session.is_won
        assert not session.is_exhausted
        assert session.submitted_rows == 2
        assert session.active_row_index is None

    def test_six_misses_exhaust_the_session(self, session):
        for word in MISSES:
            assert session.submit_row(word) is None

        assert session.status == SessionStatus.COMPLETED
        assert session.is_exhausted
        assert not session.is_won

    def test_win_on_last_row(self, session):
        for word in MISSES[:5]:
            session.submit_row(word)
        session.submit_row("TRACE")

        assert session.is_won
        assert session.is_exhausted

    def test_submit_after_completion_is_invalid(self, session):
        session.submit_row("TRACE")
        with pytest.raises(InvalidOperationError, match="completed"):
            session.submit_row("CRANE")

    def test_editing_after_completion_is_invalid(self, session):
        session.submit_row("TRACE")
        with pytest.raises(InvalidOperationError):
            session.insert_letter("A")


class TestRowEditing:
    def test_insert_and_delete(self, session):
        for letter in "cran":
            assert session.insert_letter(letter)
        assert session.active_row.word == "CRAN"

        assert session.delete_letter()
        assert session.active_row.word == "CRA"

    def test_insert_into_full_row_is_ignored(self, session):
        for letter in "CRANE":
            session.insert_letter(letter)
        assert not session.insert_letter("S")
        assert session.active_row.word == "CRANE"

    def test_delete_from_empty_row_is_ignored(self, session):
        assert not session.delete_letter()

    def test_submit_typed_row(self, session):
        for letter in "CRANE":
            session.insert_letter(letter)
        assert session.submit_row() is None
        assert session.rows[0].submitted
        assert session.active_row_index == 1

    def test_submitted_row_is_frozen(self, session):
        session.submit_row("CRANE")
        with pytest.raises(InvalidOperationError, match="submitted"):
            session.rows[0].insert("A")


class TestRejections:
    def test_rejection_leaves_state_unchanged(self, session):
        for letter in "ZZZZZ":
            session.insert_letter(letter)

        reason = session.submit_row()

        assert reason == NotRecognized("ZZZZZ")
        assert session.active_row_index == 0
        assert session.rows[0].word == "ZZZZZ"
        assert not session.rows[0].submitted

    def test_stores_sanitized_word(self, validator, t0):
        session = PuzzleSession(validator)
        session.assign_target("FORÊT", 0, t0)

        assert session.submit_row("foret") is None
        assert session.rows[0].word == "FORÊT"
        assert session.is_won

    def test_hard_mode(self, validator, t0):
        session = PuzzleSession(validator, hard_mode=True)
        session.assign_target("TRACE", 0, t0)
        session.submit_row("CRANE")

        assert session.submit_row("STONE") == HardModeMismatch(1, "R")
        assert session.submit_row("CRATE") is None

    def test_still_loading(self, unloaded_lexicon, t0):
        session = PuzzleSession(GuessValidator(unloaded_lexicon))
        session.assign_target("TRACE", 0, t0)

        assert isinstance(session.submit_row("CRANE"), StillLoading)
        assert session.submitted_rows == 0


class TestObservers:
    def test_events_follow_transitions(self, validator, t0):
        session = PuzzleSession(validator)
        events = []
        session.subscribe(events.append)

        session.assign_target("TRACE", 0, t0)
        session.insert_letter("T")
        session.submit_row("TRACE")

        assert [e.action for e in events] == ["target_assigned", "row_edited", "row_submitted", "completed"]
        assert events[-1].status == SessionStatus.COMPLETED
        assert events[-1].row_index == 0

    def test_rejection_emits_nothing(self, session):
        events = []
        session.subscribe(events.append)
        session.submit_row("ZZZZZ")
        assert events == []

    def test_unsubscribe(self, session):
        events = []
        unsubscribe = session.subscribe(events.append)
        unsubscribe()
        session.submit_row("CRANE")
        assert events == []


class TestTally:
    @pytest.fixture
    def pace_setter(self, t0):
        return CalendarDailyPaceSetter(start=t0)

    def test_tally_before_completion_is_invalid(self, session, pace_setter):
        with pytest.raises(InvalidOperationError, match="not completed"):
            session.tally(Statistics(), pace_setter)

    def test_tally_win(self, session, pace_setter):
        session.submit_row("CRANE")
        session.submit_row("TRACE")

        stats = session.tally(Statistics(), pace_setter)

        assert session.tallied
        assert stats.played == 1
        assert stats.won == 1
        assert stats.distribution == [0, 1, 0, 0, 0, 0]
        assert stats.current_streak == 1
        assert stats.last_won_date == session.date

    def test_tally_twice_is_invalid(self, session, pace_setter):
        session.submit_row("TRACE")
        stats = session.tally(Statistics(), pace_setter)
        with pytest.raises(InvalidOperationError, match="already"):
            session.tally(stats, pace_setter)

    def test_tally_loss_resets_streak(self, session, pace_setter):
        for word in MISSES:
            session.submit_row(word)

        stats = session.tally(Statistics(played=3, won=3, current_streak=3, max_streak=3), pace_setter)

        assert stats.played == 4
        assert stats.won == 3
        assert stats.current_streak == 0
        assert stats.max_streak == 3

    def test_streak_continues_on_consecutive_day(self, session, pace_setter, t0):
        previous = Statistics(played=1, won=1, current_streak=1, max_streak=1,
                              last_won_date=t0 - timedelta(hours=12))
        session.submit_row("TRACE")

        stats = session.tally(previous, pace_setter)

        assert stats.current_streak == 2
        assert stats.max_streak == 2

    def test_streak_restarts_after_a_gap(self, session, pace_setter, t0):
        previous = Statistics(played=1, won=1, current_streak=4, max_streak=4,
                              last_won_date=t0 - timedelta(days=2))
        session.submit_row("TRACE")

        stats = session.tally(previous, pace_setter)

        assert stats.current_streak == 1
        assert stats.max_streak == 4

    def test_streak_with_bucket_pace(self, validator, t0):
        pace_setter = BucketPaceSetter(start=t0, bucket=timedelta(seconds=10))
        session = PuzzleSession(validator)
        session.assign_target("TRACE", 1, t0 + timedelta(seconds=15))
        session.submit_row("TRACE")

        previous = Statistics(played=1, won=1, current_streak=1, max_streak=1,
                              last_won_date=t0 + timedelta(seconds=5))
        assert session.tally(previous, pace_setter).current_streak == 2


class TestPersistence:
    def test_round_trip(self, session):
        session.submit_row("CRANE")
        session.insert_letter("S")

        state = session.to_state()
        restored = PuzzleSession.from_state(state, session.validator)

        assert restored.expected == "TRACE"
        assert [(r.word, r.submitted) for r in restored.rows] == [(r.word, r.submitted) for r in session.rows]
        assert restored.active_row_index == 1
        assert restored.to_state() == state

    def test_restore_pads_missing_rows(self, validator, t0):
        state = PersistedDailyState(expected="TRACE", date=t0, rows=[RowState("CRANE", True)])
        restored = PuzzleSession.from_state(state, validator)
        assert len(restored.rows) == 6
        assert restored.active_row_index == 1

    def test_restore_completed_session(self, validator, t0):
        state = PersistedDailyState(expected="TRACE", date=t0, rows=[RowState("TRACE", True)], tallied=True)
        restored = PuzzleSession.from_state(state, validator)
        assert restored.status == SessionStatus.COMPLETED
        assert restored.tallied

    def test_rejects_gap_in_submitted_rows(self, validator, t0):
        state = PersistedDailyState(expected="TRACE", date=t0,
                                    rows=[RowState("", False), RowState("CRANE", True)])
        with pytest.raises(ValueError, match="after an unsubmitted row"):
            PuzzleSession.from_state(state, validator)

    def test_rejects_too_many_rows(self, validator, t0):
        state = PersistedDailyState(expected="TRACE", date=t0, rows=[RowState("CRANE", True)] * 7)
        with pytest.raises(ValueError, match="at most 6"):
            PuzzleSession.from_state(state, validator)

    def test_rejects_tallied_incomplete_session(self, validator, t0):
        state = PersistedDailyState(expected="TRACE", date=t0, rows=[RowState("CRANE", True)], tallied=True)
        with pytest.raises(ValueError, match="tallied"):
            PuzzleSession.from_state(state, validator)

    def test_loading_session_cannot_be_persisted(self, validator):
        with pytest.raises(InvalidOperationError):
            PuzzleSession(validator).to_state()

    def test_rejects_rows_after_win(self, validator, t0):
        state = PersistedDailyState(expected="TRACE", date=t0,
                                    rows=[RowState("TRACE", True), RowState("CRANE", True)])
        with pytest.raises(ValueError, match="after the winning row"):
            PuzzleSession.from_state(state, validator)

    def test_rejects_wrong_length_target(self, validator, t0):
        state = PersistedDailyState(expected="TRAC", date=t0, rows=[])
        with pytest.raises(ValueError, match="not 5 letters"):
            PuzzleSession.from_state(state, validator)
