"""
Wordday - Main Entry Point

Plays today's puzzle in the terminal. Saved play and statistics are kept as
JSON files in Config.STATE_DIR so a round can be resumed until it rolls over.
"""

import json
import os
import sys
import time
from datetime import datetime, timezone

from wordday import create_game
from wordday.config import Config
from wordday.models import LetterFeedback, PersistedDailyState, Statistics
from wordday.utils.game_logger import game_logger

TILES = {
    LetterFeedback.RIGHT_PLACE: '🟩',
    LetterFeedback.WRONG_PLACE: '🟨',
    LetterFeedback.WRONG_LETTER: '⬛',
}


def _state_path(name: str) -> str:
    return os.path.join(Config.STATE_DIR, f"{name}.{Config.LOCALE}.json")


def load_saved():
    """Load saved daily state and statistics; missing files mean a first run."""
    state, stats = None, Statistics()
    if not Config.STATE_DIR:
        return state, stats

    try:
        with open(_state_path('turnState'), 'r', encoding='utf-8') as f:
            state = PersistedDailyState.from_json(f.read())
    except FileNotFoundError:
        pass
    except ValueError as e:
        print(f"Ignoring unreadable saved game: {e}")
        game_logger.log_error(e, 'load_state')

    try:
        with open(_state_path('stats'), 'r', encoding='utf-8') as f:
            stats = Statistics.from_dict(json.load(f))
    except FileNotFoundError:
        pass
    except ValueError as e:
        print(f"Ignoring unreadable statistics: {e}")
        game_logger.log_error(e, 'load_stats')

    return state, stats


def save(session, stats):
    if not Config.STATE_DIR:
        return
    os.makedirs(Config.STATE_DIR, exist_ok=True)
    with open(_state_path('turnState'), 'w', encoding='utf-8') as f:
        f.write(session.to_state().to_json())
    with open(_state_path('stats'), 'w', encoding='utf-8') as f:
        json.dump(stats.to_dict(), f)


def render(session):
    for row in session.rows:
        feedback = row.feedback()
        if feedback is None:
            continue
        print(f"  {' '.join(row.word)}   {''.join(TILES[status] for status in feedback)}")


def main():
    """Main function to initialize services and play today's round."""
    print("Initializing services...")
    service = create_game(Config)

    loader = service.lexicon.load_in_background()
    print(f"✓ Loading {Config.LOCALE} word lists")

    now = datetime.now(timezone.utc)
    state, stats = load_saved()

    while loader.is_alive() and not service.lexicon.ready:
        time.sleep(0.05)
    if not service.lexicon.ready:
        print("✗ Word lists could not be loaded")
        sys.exit(1)

    try:
        session = service.resume(state, now)
    except ValueError as e:
        print(f"Saved game is corrupt, starting over: {e}")
        game_logger.log_error(e, 'resume')
        session = service.new_session(now)
    print(f"Puzzle #{session.epoch} (hard mode: {service.hard_mode})")
    print("=" * 50)

    try:
        while not session.is_completed:
            render(session)
            guess = input(f"Guess {session.active_row_index + 1}/{len(session.rows)}: ")
            reason = session.submit_row(guess)
            if reason is not None:
                print(f"  {reason.message}")
            save(session, stats)
    except (KeyboardInterrupt, EOFError):
        print("\nSaved. Come back before the day rolls over.")
        save(session, stats)
        return

    render(session)
    stats = service.finish(session, stats)
    save(session, stats)

    if session.is_won:
        print(f"Solved in {session.submitted_rows}!")
    else:
        print(f"The word was {session.expected}")

    ttl = int(service.remaining_ttl(datetime.now(timezone.utc)).total_seconds())
    print(f"Played {stats.played}, won {stats.win_percentage}%, streak {stats.current_streak}")
    print(f"Next puzzle in {ttl // 3600:02d}:{ttl % 3600 // 60:02d}:{ttl % 60:02d}")


if __name__ == '__main__':
    main()
