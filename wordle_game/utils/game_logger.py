"""
Game Logger Module

This module provides structured logging for player actions, results returned
to the terminal, and game events. Every entry is a single JSON line.
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

from ..config import Config


class GameLogger:
    """
    Centralized logging system for the game.

    Features:
    - Player action tracking (guesses, hint requests)
    - Result logging with the answer masked while the game is running
    - Game event logging (wins, losses)
    - JSON structured logs for easy parsing
    """

    def __init__(self, log_dir: Optional[str] = None, level: str = 'INFO', player: str = 'local'):
        self.player = player
        self.configure(log_dir, level)

    def configure(self, log_dir: Optional[str] = None, level: str = 'INFO'):
        """Point the logger at a log directory and level; replaces existing handlers."""
        self.log_dir = Path(log_dir) if log_dir else None
        if self.log_dir is not None:
            self.log_dir.mkdir(parents=True, exist_ok=True)

        self.level = self._resolve_level(level)
        self.logger = self._setup_logger()

    @staticmethod
    def _resolve_level(level) -> int:
        """Map a level name or number to a logging level; unknown names fall back to INFO."""
        if isinstance(level, int):
            return level
        resolved = logging.getLevelName(str(level).strip().upper())
        return resolved if isinstance(resolved, int) else logging.INFO

    def _setup_logger(self) -> logging.Logger:
        """Setup the game logger with an optional file handler and a quiet console handler."""
        logger = logging.getLogger('wordle_game')
        logger.setLevel(self.level)

        # Prevent duplicate handlers
        if logger.handlers:
            for handler in logger.handlers:
                handler.close()
            logger.handlers.clear()

        if self.log_dir is not None:
            log_file = self.log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setLevel(self.level)
            file_handler.setFormatter(logging.Formatter(
                '%(asctime)s | %(levelname)s | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            ))
            logger.addHandler(file_handler)

        # Console only shows warnings/errors so the game screen stays clean
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
            'player': self.player,
            'details': details
        }
        return json.dumps(log_entry, ensure_ascii=False, default=str)

    def log_user_action(self, action: str, game_id: Optional[str] = None, **kwargs):
        """
        Log player actions.

        Args:
            action: Type of action (e.g., 'new_game', 'submit_guess', 'request_hint')
            game_id: Game identifier if applicable
            **kwargs: Additional details to log
        """
        details = {'game_id': game_id, **kwargs}
        self.logger.info(self._create_log_entry('USER_ACTION', action, details))

    def log_result(self,
                   action: str,
                   success: bool,
                   result_data: Dict[str, Any],
                   game_id: Optional[str] = None,
                   **kwargs):
        """
        Log the result of an action as shown to the player.

        Validation failures are routine during play, so both outcomes go to
        INFO and are told apart by event_type.
        """
        details = {
            'game_id': game_id,
            'success': success,
            'result_data': self._sanitize_result_data(result_data),
            **kwargs
        }

        event_type = 'RESULT_SUCCESS' if success else 'RESULT_ERROR'
        self.logger.info(self._create_log_entry(event_type, action, details))

    def log_game_event(self, game_id: str, event: str, **kwargs):
        """
        Log game-specific events.

        Args:
            game_id: Game identifier
            event: Type of game event (e.g., 'game_won', 'game_lost', 'hint_revealed')
            **kwargs: Additional game details
        """
        details = {'game_id': game_id, **kwargs}
        self.logger.info(self._create_log_entry('GAME_EVENT', event, details))

    def log_error(self, error: Exception, action: str, game_id: Optional[str] = None):
        """Log errors with full context."""
        details = {
            'game_id': game_id,
            'error_type': type(error).__name__,
            'error_message': str(error),
            'action': action
        }
        self.logger.error(self._create_log_entry('ERROR', action, details))

    def _sanitize_result_data(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Keep the answer and bulky state out of the logs."""
        if not isinstance(data, dict):
            return {'data_type': type(data).__name__}

        sanitized = data.copy()

        if 'state' in sanitized and isinstance(sanitized['state'], dict):
            state = sanitized['state']
            sanitized['state'] = {
                'current_round': state.get('current_round'),
                'max_attempts': state.get('max_attempts'),
                'game_over': state.get('game_over'),
                'won': state.get('won'),
                'guesses_count': len(state.get('guesses', [])),
                'answer_revealed': state.get('answer') is not None
            }

        return sanitized


# Global logger instance
game_logger = GameLogger(Config.LOG_DIR, Config.LOG_LEVEL)
