"""
Hint Service

Chooses which puzzle letters may be disclosed as hints and serves them one at
a time. The candidates are shuffled once up front, so serving a hint is a pop
from the tail of a pre-randomized sequence.
"""

import math
import random
from typing import Iterable, List, Optional, Set

from ..config.game_settings import HINT_RATIO, VOWELS
from ..exceptions import NoHintsAvailable
from ..models.puzzle import Puzzle


def max_hints_for(word_length: int) -> int:
    """Hint budget for a word: 40% of its length, floored."""
    return math.floor(word_length * HINT_RATIO)


def select_hint_letters(word: str, rng: Optional[random.Random] = None) -> List[str]:
    """
    Choose a shuffled subset of the word's distinct letters as hint candidates.

    Vowels take up to half of the budget (integer division); consonants get the
    remainder, including any vowel shortfall. With an odd budget the extra slot
    therefore goes to consonants.

    Args:
        word: Uppercase puzzle word
        rng: Random source; a fresh unseeded one if omitted

    Returns:
        List[str]: Distinct letters in randomized order, possibly empty
    """
    rng = rng or random.Random()

    max_hints = max_hints_for(len(word))
    if max_hints == 0:
        return []

    distinct = list(dict.fromkeys(word))
    vowels = [letter for letter in distinct if letter in VOWELS]
    consonants = [letter for letter in distinct if letter not in VOWELS]

    rng.shuffle(vowels)
    rng.shuffle(consonants)

    vowels_needed = min(max_hints // 2, len(vowels))
    consonants_needed = min(max_hints - vowels_needed, len(consonants))

    selection = vowels[:vowels_needed] + consonants[:consonants_needed]
    rng.shuffle(selection)
    return selection


class HintPool:
    """
    Pre-shuffled stack of hint letters for one session.

    Attributes:
        remaining: Hints the player may still request
    """

    def __init__(self, candidates: Iterable[str]):
        self._available: List[str] = list(candidates)
        self.remaining: int = len(self._available)
        self._revealed: Set[str] = set()

    @property
    def revealed(self) -> List[str]:
        """Letters disclosed so far, sorted."""
        return sorted(self._revealed)

    @property
    def size(self) -> int:
        """Letters still waiting in the pool."""
        return len(self._available)

    @property
    def is_exhausted(self) -> bool:
        return self.remaining <= 0 or not self._available

    def reveal(self) -> str:
        """
        Disclose the next hint letter.

        Raises:
            NoHintsAvailable: If the pool is empty or no hints remain; state is unchanged
        """
        if self.is_exhausted:
            raise NoHintsAvailable()

        hint = self._available.pop()
        self.remaining -= 1
        self._revealed.add(hint)
        return hint

    def __len__(self) -> int:
        return self.size

    def __repr__(self) -> str:
        return f"HintPool(remaining={self.remaining}, revealed={self.revealed})"


def new_hint_pool(puzzle: Puzzle, rng: Optional[random.Random] = None) -> HintPool:
    """Build the hint pool for a puzzle."""
    return HintPool(select_hint_letters(puzzle.word, rng))


def reveal_hint(pool: HintPool) -> str:
    """Serve one hint from the pool, raising NoHintsAvailable when none are left."""
    return pool.reveal()
