"""
Game Logger Module

Structured logging for puzzle events, rejected guesses and caller errors.
Each record is one JSON object so log files are easy to parse.
"""

import logging
import json
from datetime import datetime
from typing import Dict, Any, Optional
from pathlib import Path

from ..config.app_config import Config


# Global logger instance, created by get_game_logger / configure_game_logger
game_logger: Optional['GameLogger'] = None


class GameLogger:
    """
    Centralized logging system for the puzzle engine.

    Features:
    - Game event logging (created, guess accepted, found, out of guesses)
    - Player action logging (rejected guesses)
    - Error logging for contract violations
    - JSON structured logs for easy parsing
    """

    def __init__(self, log_dir: str = "logs", level: str = "INFO", log_to_file: bool = True):
        self.log_dir = Path(log_dir)
        self.log_to_file = log_to_file
        if log_to_file:
            self.log_dir.mkdir(parents=True, exist_ok=True)

        self.logger = self._setup_logger(level)

    def _setup_logger(self, level: str) -> logging.Logger:
        """Setup the engine logger with file and console handlers."""
        logger = logging.getLogger('wordle_engine')
        logger.setLevel(getattr(logging, level.upper(), logging.INFO))

        # Prevent duplicate handlers
        if logger.handlers:
            logger.handlers.clear()

        if self.log_to_file:
            file_handler = logging.FileHandler(self._log_file(), encoding='utf-8')
            file_handler.setLevel(logging.INFO)
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

    def _log_file(self) -> Path:
        return self.log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"

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
        return json.dumps(log_entry, ensure_ascii=False)

    def log_game_event(self,
                       game_id: Optional[str],
                       event: str,
                       **kwargs):
        """
        Log puzzle lifecycle events.

        Args:
            game_id: Game identifier
            event: Type of event (e.g. 'game_created', 'guess_scored', 'game_won')
            **kwargs: Additional game details
        """
        details = {
            'game_id': game_id,
            **kwargs
        }
        self.logger.info(self._create_log_entry('GAME_EVENT', event, details))

    def log_user_action(self,
                        action: str,
                        game_id: Optional[str] = None,
                        **kwargs):
        """
        Log player input worth keeping, such as rejected guesses.

        Args:
            action: Type of action (e.g. 'guess_rejected')
            game_id: Game identifier if applicable
            **kwargs: Additional details to log
        """
        details = {
            'game_id': game_id,
            **kwargs
        }
        self.logger.info(self._create_log_entry('USER_ACTION', action, details))

    def log_error(self,
                  error: Exception,
                  action: str,
                  game_id: Optional[str] = None):
        """
        Log errors with full context.

        Args:
            error: Exception that occurred
            action: Action that was being performed
            game_id: Game identifier if applicable
        """
        details = {
            'game_id': game_id,
            'error_type': type(error).__name__,
            'error_message': str(error),
            'action': action
        }
        self.logger.error(self._create_log_entry('ERROR', action, details))

    def get_log_stats(self) -> Dict[str, Any]:
        """Get statistics about logged events (useful for monitoring)."""
        log_file = self._log_file()
        if not self.log_to_file or not log_file.exists():
            return {'error': 'No log file found for today'}

        stats = {
            'log_file': str(log_file),
            'file_size_mb': round(log_file.stat().st_size / (1024 * 1024), 2),
            'total_entries': 0,
            'user_actions': 0,
            'game_events': 0,
            'errors': 0
        }

        with open(log_file, 'r', encoding='utf-8') as f:
            for line in f:
                if line.strip():
                    stats['total_entries'] += 1
                    if 'USER_ACTION' in line:
                        stats['user_actions'] += 1
                    elif 'GAME_EVENT' in line:
                        stats['game_events'] += 1
                    elif 'ERROR' in line:
                        stats['errors'] += 1

        return stats


def configure_game_logger(config_class=Config) -> GameLogger:
    """Rebuild the global logger from a configuration class."""
    global game_logger
    game_logger = GameLogger(config_class.LOG_DIR, config_class.LOG_LEVEL, config_class.LOG_TO_FILE)
    return game_logger


def get_game_logger() -> GameLogger:
    """Get the global game logger instance, building it from Config on first use."""
    if game_logger is None:
        return configure_game_logger()
    return game_logger
