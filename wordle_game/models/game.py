"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Dict, Iterator, List, Optional, Tuple


class LetterState(IntEnum):
    """Keyboard feedback for a letter, ordered by increasing specificity."""
    DEFAULT = 0
    MISS = 1
    WRONG_POSITION = 2
    CORRECT = 3


class Outcome(Enum):
    """Per-position result of a single guess."""
    CORRECT = "CORRECT"
    WRONG_POSITION = "WRONG_POSITION"
    MISS = "MISS"

    @property
    def letter_state(self) -> LetterState:
        """The keyboard state this outcome upgrades its letter to."""
        return LetterState[self.name]


@dataclass(frozen=True)
class GuessOutcome:
    """Scored guess: one outcome per position, in guess order."""
    guess: str
    outcomes: Tuple[Outcome, ...]

    def __len__(self) -> int:
        return len(self.outcomes)

    def __iter__(self) -> Iterator[Outcome]:
        return iter(self.outcomes)

    def __getitem__(self, index: int) -> Outcome:
        return self.outcomes[index]

    @property
    def is_win(self) -> bool:
        return bool(self.outcomes) and all(outcome is Outcome.CORRECT for outcome in self.outcomes)

    def as_pairs(self) -> List[Tuple[str, str]]:
        """Letter/outcome pairs as plain strings for rendering and logs."""
        return [(letter, outcome.value) for letter, outcome in zip(self.guess, self.outcomes)]


@dataclass
class GameState:
    """Read-only snapshot of a session handed to the renderer."""
    game_id: str
    word_length: int
    current_round: int
    max_attempts: int
    game_over: bool
    won: bool
    guesses: List[str]
    guess_results: List[List[Tuple[str, str]]]
    letter_status: Dict[str, str]
    revealed_hints: List[str] = field(default_factory=list)
    hints_remaining: int = 0
    answer: Optional[str] = None  # Only included when game is over
