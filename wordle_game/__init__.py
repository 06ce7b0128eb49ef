"""
Word Puzzle Game Package

A turn-based word-guessing puzzle: the player has a bounded number of attempts
to find a hidden word, receiving per-letter feedback after each guess and an
optional handful of letter hints.
"""

import random
from typing import Optional

from .config import Config
from .services.game_service import GameService, initialize_game_service


def create_game_service(config_class=Config,
                        word_file: Optional[str] = None,
                        seed: Optional[int] = None) -> GameService:
    """
    Factory for a ready-to-use game service.

    Args:
        config_class: Configuration class to use
        word_file: Dictionary path overriding the configured one
        seed: Random seed overriding the configured one

    Returns:
        GameService wired with the word file and a random source
    """
    rng = random.Random(seed if seed is not None else config_class.RANDOM_SEED)
    return initialize_game_service(word_file=word_file or config_class.WORD_FILE, rng=rng)
