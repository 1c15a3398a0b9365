"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: environment-based settings (locale, pace, logging)
- game_settings.py: game rules, constants and word list loading
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    WORD_LENGTH, MAX_ROUNDS, DEFAULT_SEED, SUPPORTED_LOCALES,
    ANSWERS, GUESSES, load_word_list, validate_word_list_integrity
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'WORD_LENGTH', 'MAX_ROUNDS', 'DEFAULT_SEED', 'SUPPORTED_LOCALES',
    'ANSWERS', 'GUESSES', 'load_word_list', 'validate_word_list_integrity'
]
