"""
Wordday Puzzle Core Package

The rules and scheduling behind a daily word-guessing puzzle: guess
validation and feedback, period pacing, session state and statistics.
Rendering, storage and navigation belong to the hosting app.
"""

from .config import Config


def create_game(config_class=Config):
    """
    Factory wiring the lexicon, validator and pace setter for a configuration.
    Also applies the configuration's log directory and level to game_logger.

    The lexicon is created but not loaded; call ``load()`` or
    ``load_in_background()`` on ``service.lexicon``.

    Args:
        config_class: Configuration class to use

    Returns:
        DailyService for the configured locale and pace
    """
    from .services.lexicon_service import initialize_lexicon
    from .services.validation_service import initialize_validator
    from .services.pace_setter import create_pace_setter
    from .services.daily_service import DailyService
    from .utils.game_logger import game_logger

    game_logger.configure(config_class.LOG_DIR, config_class.LOG_LEVEL)

    lexicon = initialize_lexicon(config_class.LOCALE, config_class.SEED)
    validator = initialize_validator(lexicon)
    pace_setter = create_pace_setter(config_class)

    return DailyService(lexicon, validator, pace_setter, hard_mode=config_class.HARD_MODE)
