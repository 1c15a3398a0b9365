"""
Configuration Management Module

Centralized configuration management following the 12-factor app methodology.
All configuration is loaded from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

# Load environment variables from config.env next to this module
load_dotenv(os.path.join(os.path.dirname(os.path.abspath(__file__)), 'config.env'))


class Config:
    """Base configuration class with all settings."""

    # Word list Settings
    LOCALE = os.getenv('GAME_LOCALE', 'en')
    SEED = int(os.getenv('GAME_SEED', 14384982345))

    # Pace Settings
    EPOCH_START = os.getenv('EPOCH_START', '2022-03-22T16:20:02+00:00')
    PACE = os.getenv('PACE', 'daily')  # "daily" or "bucket"
    BUCKET_SECONDS = int(os.getenv('BUCKET_SECONDS', 86400))
    TIMEZONE = os.getenv('GAME_TIMEZONE', 'UTC')

    # Game Settings
    HARD_MODE = os.getenv('HARD_MODE', 'False').lower() == 'true'

    # Host storage for main.py (empty disables saving)
    STATE_DIR = os.getenv('STATE_DIR', '.wordday')

    # Logging Settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR', 'logs')


class DevelopmentConfig(Config):
    """Development configuration."""
    PACE = 'bucket'
    BUCKET_SECONDS = 60
    LOG_LEVEL = 'DEBUG'


class ProductionConfig(Config):
    """Production configuration."""
    PACE = 'daily'


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    LOG_DIR = ''
    STATE_DIR = ''
    TIMEZONE = 'UTC'


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': ProductionConfig
}
