"""
Views Package

Contains the terminal presentation of game state.
"""

from . import terminal

__all__ = ['terminal']
