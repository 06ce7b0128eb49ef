"""
Utilities Package

Contains utility functions and the game logger.
"""

from .helpers import normalize_word, is_alpha_word, parse_or_default
from .game_logger import GameLogger, game_logger

__all__ = ['normalize_word', 'is_alpha_word', 'parse_or_default', 'GameLogger', 'game_logger']
