"""
Services Package

Contains all game logic and service classes.
"""

from .puzzle_service import new_puzzle, choose_puzzle_word
from .hint_service import HintPool, new_hint_pool, reveal_hint, select_hint_letters
from .game_service import (
    GameService, GameSession, evaluate_guess, get_game_service, initialize_game_service
)

__all__ = [
    'new_puzzle', 'choose_puzzle_word',
    'HintPool', 'new_hint_pool', 'reveal_hint', 'select_hint_letters',
    'GameService', 'GameSession', 'evaluate_guess', 'get_game_service', 'initialize_game_service'
]
