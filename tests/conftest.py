"""Shared fixtures for the puzzle core tests."""

import os

# The module-level game logger is built from Config at import time; keep it off the filesystem
os.environ['LOG_DIR'] = ''
os.environ['STATE_DIR'] = ''

from datetime import datetime, timezone

import pytest

from wordday.config.game_settings import ANSWERS
from wordday.services.lexicon_service import Lexicon
from wordday.services.session_service import PuzzleSession
from wordday.services.validation_service import GuessValidator

ANSWER_WORDS = ["TRACE", "ERASE", "CRANE", "SLATE", "BRICK", "FORÊT"]

GUESS_WORDS = ANSWER_WORDS + [
    "SPEED", "GRATE", "TRACK", "CRATE", "ROATE", "AUDIO", "STONE",
    "PLANT", "LIGHT", "HEART", "BRAKE", "TRICK", "ABBEY", "KEBAB", "PRUNE",
]


def fake_loader(locale, kind):
    return list(ANSWER_WORDS if kind == ANSWERS else GUESS_WORDS)


@pytest.fixture
def lexicon():
    return Lexicon('en', seed=7, loader=fake_loader).load()


@pytest.fixture
def unloaded_lexicon():
    return Lexicon('en', seed=7, loader=fake_loader)


@pytest.fixture
def validator(lexicon):
    return GuessValidator(lexicon)


@pytest.fixture
def t0():
    return datetime(2022, 3, 22, 0, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def session(validator, t0):
    session = PuzzleSession(validator)
    session.assign_target("TRACE", 0, t0)
    return session
