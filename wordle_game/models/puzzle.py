"""
Puzzle Data Model

The hidden word of a session together with its per-letter frequency table.
"""

from dataclasses import dataclass
from typing import Tuple

from ..config.game_settings import ALPHABET


def letter_index(letter: str) -> int:
    """Slot of an uppercase letter in a 26-entry table."""
    return ord(letter) - ord('A')


def count_letters(word: str) -> Tuple[int, ...]:
    counts = [0] * len(ALPHABET)
    for letter in word:
        counts[letter_index(letter)] += 1
    return tuple(counts)


@dataclass(frozen=True)
class Puzzle:
    """
    Immutable puzzle word.

    Attributes:
        word: Uppercase A-Z letters
        letter_counts: Occurrences of each alphabet letter, indexed A=0 .. Z=25
    """
    word: str
    letter_counts: Tuple[int, ...]

    @classmethod
    def from_word(cls, word: str) -> "Puzzle":
        return cls(word=word, letter_counts=count_letters(word))

    def count(self, letter: str) -> int:
        return self.letter_counts[letter_index(letter)]

    @property
    def distinct_letters(self) -> Tuple[str, ...]:
        """Distinct letters of the word in order of first appearance."""
        return tuple(dict.fromkeys(self.word))

    def __len__(self) -> int:
        return len(self.word)
