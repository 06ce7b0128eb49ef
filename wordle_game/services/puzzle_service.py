"""
Puzzle Service

Builds validated puzzles and picks the session word from a dictionary.
"""

import random
from typing import Optional, Set

from ..exceptions import DictionaryError, InvalidWord
from ..models.puzzle import Puzzle
from ..utils.helpers import is_alpha_word, normalize_word


def new_puzzle(word: str, word_length: Optional[int] = None) -> Puzzle:
    """
    Create a puzzle from a candidate word.

    Args:
        word: Candidate word, any case
        word_length: Required length, if the caller enforces one

    Returns:
        Puzzle: Immutable puzzle holding the uppercase word

    Raises:
        InvalidWord: If the word is empty, not A-Z only, or the wrong length
    """
    if not isinstance(word, str):
        raise InvalidWord(word, "word must be a string")

    normalized = normalize_word(word)
    if not normalized:
        raise InvalidWord(word, "word cannot be empty")
    if not is_alpha_word(normalized):
        raise InvalidWord(word, "word must contain only letters A-Z")
    if word_length is not None and len(normalized) != word_length:
        raise InvalidWord(word, f"word must be exactly {word_length} letters")

    return Puzzle.from_word(normalized)


def is_forced_word_valid(word: Optional[str], word_length: int) -> bool:
    if not word:
        return False
    normalized = normalize_word(word)
    return len(normalized) == word_length and is_alpha_word(normalized)


def choose_puzzle_word(dictionary: Set[str],
                       word_length: int,
                       forced_word: Optional[str] = None,
                       rng: Optional[random.Random] = None) -> str:
    """
    Pick the session word.

    A forced word that fits the length wins and is added to the dictionary so
    the player can actually guess it. Otherwise a random dictionary word is used.

    Raises:
        DictionaryError: If no forced word applies and the dictionary is empty
    """
    if is_forced_word_valid(forced_word, word_length):
        chosen = normalize_word(forced_word)
        dictionary.add(chosen)
        return chosen

    if not dictionary:
        raise DictionaryError(f"No {word_length}-letter words in dictionary")

    rng = rng or random.Random()
    # sorted so a seeded rng picks the same word regardless of set ordering
    return rng.choice(sorted(dictionary))
