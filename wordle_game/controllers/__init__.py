"""
Controllers Package

Contains the interactive loop that drives a game session.
"""

from .game_controller import GameController

__all__ = ['GameController']
