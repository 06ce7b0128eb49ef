"""
Data Models Package

Contains all data models used throughout the game.
"""

from .game import GameState, GuessOutcome, LetterState, Outcome
from .keyboard import KeyboardFeedback
from .puzzle import Puzzle

__all__ = ['GameState', 'GuessOutcome', 'LetterState', 'Outcome', 'KeyboardFeedback', 'Puzzle']
