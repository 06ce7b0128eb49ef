"""
Game Configuration Constants Module

This module defines the game constants and the dictionary loading helpers.
All game parameters are centralized here to enable easy modification.
"""

import json
import os
import string
from typing import Final, Iterable, List, Optional, Set

from ..exceptions import DictionaryError

ALPHABET: Final[str] = string.ascii_uppercase
"""The fixed 26-letter alphabet every per-letter table is keyed by."""

VOWELS: Final[frozenset] = frozenset('AEIOU')
"""Letters treated as vowels when splitting hint candidates."""

HINT_RATIO: Final[float] = 0.40
"""Share of the word length that may be revealed as hints (floored)."""

DEFAULT_WORD_LENGTH: Final[int] = 5
DEFAULT_MAX_ATTEMPTS: Final[int] = 6

QWERTY_ROWS: Final[tuple] = ("QWERTYUIOP", "ASDFGHJKL", "ZXCVBNM")
"""Keyboard layout used when rendering letter feedback."""

BUNDLED_WORD_FILE: Final[str] = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'words.json')


def _read_raw_words(path: str) -> List[str]:
    """Read entries from a JSON array or a one-word-per-line text file."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            if path.lower().endswith('.json'):
                raw = json.load(f)
                if not isinstance(raw, list):
                    raise DictionaryError(f"JSON word file must contain an array of words: {path}")
                return [str(word) for word in raw]
            return [line.strip() for line in f if line.strip()]
    except FileNotFoundError:
        raise DictionaryError(f"Word list file not found: {path}")
    except json.JSONDecodeError as e:
        raise DictionaryError(f"Invalid JSON in {path}: {e}")


def filter_words(words: Iterable[str], word_length: int) -> Set[str]:
    """Upper-case the entries and keep alphabetic words of the requested length."""
    return {
        word.strip().upper()
        for word in words
        if len(word.strip()) == word_length and word.strip().isalpha() and word.strip().isascii()
    }


def load_word_list(path: Optional[str] = None, word_length: int = DEFAULT_WORD_LENGTH) -> Set[str]:
    """
    Load the dictionary for a given word length.

    Args:
        path: JSON array or plain text file; defaults to the bundled words.json
        word_length: Only words of exactly this many letters are kept

    Returns:
        Set[str]: De-duplicated uppercase words (may be empty)

    Raises:
        DictionaryError: If the file is missing or malformed
    """
    return filter_words(_read_raw_words(path or BUNDLED_WORD_FILE), word_length)

