"""
Helper Functions

Contains utility functions used throughout the game.
"""

import string
from typing import Optional


def normalize_word(word: str) -> str:
    """Trim whitespace and upper-case a word."""
    return word.strip().upper()


def is_alpha_word(word: str) -> bool:
    """True if word is non-empty and made of A-Z letters only."""
    return bool(word) and all(char in string.ascii_uppercase for char in word.upper())


def parse_or_default(value: Optional[str], default: int) -> int:
    """
    Convert a command line value to a positive int.

    Missing, non-numeric, zero or negative values fall back to default.
    """
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        return default
    return parsed if parsed > 0 else default
