"""
Keyboard Feedback Model

Cumulative per-letter indicator shown to the player.
"""

from typing import Dict, Iterator, Tuple

from ..config.game_settings import ALPHABET
from .game import LetterState
from .puzzle import letter_index


class KeyboardFeedback:
    """
    Maps each of the 26 letters to its strongest LetterState seen so far.

    States only move upward: Default < Miss < WrongPosition < Correct.
    """

    def __init__(self):
        self._states = [LetterState.DEFAULT] * len(ALPHABET)

    def __getitem__(self, letter: str) -> LetterState:
        return self._states[letter_index(letter)]

    def __iter__(self) -> Iterator[Tuple[str, LetterState]]:
        return iter(zip(ALPHABET, self._states))

    def upgrade(self, letter: str, new_state: LetterState) -> bool:
        """
        Record new_state for letter if it is strictly stronger than the current one.

        Returns:
            bool: True if the stored state changed
        """
        index = letter_index(letter)
        if new_state > self._states[index]:
            self._states[index] = new_state
            return True
        return False

    def as_dict(self) -> Dict[str, str]:
        return {letter: state.name for letter, state in self}

    def __repr__(self) -> str:
        seen = {letter: state.name for letter, state in self if state is not LetterState.DEFAULT}
        return f"KeyboardFeedback({seen})"
