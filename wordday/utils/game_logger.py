"""
Game Logger Module for Wordday

This module provides structured logging for puzzle sessions, guess
rejections, lexicon loading and errors.
"""

import logging
import json
from datetime import datetime
from typing import Dict, Any, Optional
from pathlib import Path

from ..config import Config


class GameLogger:
    """
    Centralized logging system for the puzzle core.

    Features:
    - Session transition logging (target assigned, row submitted, completed, tallied)
    - Rejected guess logging
    - Lexicon load timing
    - JSON structured logs for easy parsing
    """

    def __init__(self, log_dir: Optional[str] = "logs", level: str = "INFO"):
        self.configure(log_dir, level)

    def configure(self, log_dir: Optional[str], level: str = "INFO") -> None:
        """Point the logger at a new directory and level, replacing its handlers."""
        self.log_dir = Path(log_dir) if log_dir else None
        if self.log_dir is not None:
            self.log_dir.mkdir(exist_ok=True)

        self.level = logging.getLevelName(level.upper()) if isinstance(level, str) else level

        # Setup main game logger
        self.logger = self._setup_logger()

    def _setup_logger(self) -> logging.Logger:
        """Setup the main game logger with file and console handlers."""
        logger = logging.getLogger('wordday')
        logger.setLevel(self.level)

        # Prevent duplicate handlers
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)

        if self.log_dir is not None:
            # Create log file with date
            log_file = self.log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"

            # File handler for detailed logs
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setLevel(self.level)
            file_handler.setFormatter(logging.Formatter(
                '%(asctime)s | %(levelname)s | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            ))
            logger.addHandler(file_handler)

        # Console handler for only important messages (WARNING and above)
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
        logger.addHandler(console_handler)

        return logger

    def _create_log_entry(self,
                          event_type: str,
                          action: str,
                          details: Dict[str, Any]) -> str:
        """Create a structured log entry."""
        log_entry = {
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            'action': action,
            'details': details
        }
        return json.dumps(log_entry, ensure_ascii=False, default=str)

    def log_game_event(self,
                       session_id: str,
                       event: str,
                       **kwargs):
        """
        Log session transitions.

        Args:
            session_id: Session identifier
            event: Transition name (e.g. 'target_assigned', 'row_submitted', 'completed')
            **kwargs: Additional details
        """
        details = {
            'session_id': session_id,
            **kwargs
        }

        log_message = self._create_log_entry('GAME_EVENT', event, details)
        self.logger.info(log_message)

    def log_rejection(self,
                      session_id: Optional[str],
                      word: str,
                      reason: Any,
                      **kwargs):
        """Log a refused guess. Rejections are routine, so they go out at DEBUG."""
        details = {
            'session_id': session_id,
            'word': word,
            'reason': type(reason).__name__,
            'message': str(reason),
            **kwargs
        }

        log_message = self._create_log_entry('GUESS_REJECTED', 'submit_row', details)
        self.logger.debug(log_message)

    def log_lexicon_event(self,
                          locale: str,
                          event: str,
                          **kwargs):
        """Log word list loading progress."""
        details = {
            'locale': locale,
            **kwargs
        }

        log_message = self._create_log_entry('LEXICON_EVENT', event, details)
        self.logger.info(log_message)

    def log_error(self,
                  error: Exception,
                  action: str,
                  session_id: Optional[str] = None):
        """
        Log errors with full context.

        Args:
            error: Exception that occurred
            action: Action that was being performed
            session_id: Session identifier if applicable
        """
        details = {
            'session_id': session_id,
            'error_type': type(error).__name__,
            'error_message': str(error),
            'action': action
        }

        log_message = self._create_log_entry('ERROR', action, details)
        self.logger.error(log_message)


# Global logger instance
game_logger = GameLogger(Config.LOG_DIR, Config.LOG_LEVEL)
