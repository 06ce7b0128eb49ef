"""
Game Service

Contains the guess scoring algorithm and the session management built on it.
"""

import random
import uuid
from typing import Callable, Dict, List, Optional, Set, Tuple

from ..config import Config
from ..config.game_settings import load_word_list
from ..exceptions import GameNotFound
from ..models.game import GameState, GuessOutcome, Outcome
from ..models.keyboard import KeyboardFeedback
from ..models.puzzle import Puzzle, letter_index
from ..utils.helpers import is_alpha_word, normalize_word
from .hint_service import HintPool, new_hint_pool, reveal_hint
from .puzzle_service import choose_puzzle_word, new_puzzle


def evaluate_guess(puzzle: Puzzle, feedback: KeyboardFeedback, guess: str) -> GuessOutcome:
    """
    Score a guess against the puzzle and upgrade the keyboard feedback.

    Exact matches claim their letter's occurrences first; whatever is left is
    handed out left to right as WRONG_POSITION, everything else is a MISS.

    Args:
        puzzle: The session puzzle
        feedback: Keyboard feedback to upgrade in place
        guess: Uppercase guess of the puzzle's length, already validated

    Returns:
        GuessOutcome: One outcome per guess position
    """
    word = puzzle.word
    if len(guess) != len(word):
        raise ValueError(f"Guess length {len(guess)} does not match puzzle length {len(word)}")

    counts = list(puzzle.letter_counts)
    results: List[Optional[Outcome]] = [None] * len(word)

    # Pass 1: exact matches
    for i, letter in enumerate(guess):
        if letter == word[i]:
            results[i] = Outcome.CORRECT
            counts[letter_index(letter)] -= 1
            feedback.upgrade(letter, Outcome.CORRECT.letter_state)

    # Pass 2: present elsewhere, or a miss
    for i, letter in enumerate(guess):
        if results[i] is not None:
            continue

        index = letter_index(letter)
        if counts[index] > 0:
            results[i] = Outcome.WRONG_POSITION
            counts[index] -= 1
        else:
            results[i] = Outcome.MISS
        feedback.upgrade(letter, results[i].letter_state)

    return GuessOutcome(guess=guess, outcomes=tuple(results))


class GameSession:
    """
    State of one game: the puzzle, its hints, the keyboard and the guesses so far.

    Sessions are independent of each other; nothing here is module level.
    """

    def __init__(self,
                 puzzle: Puzzle,
                 hint_pool: HintPool,
                 dictionary: Set[str],
                 max_attempts: int,
                 game_id: Optional[str] = None):
        self.game_id = game_id or str(uuid.uuid4())
        self.puzzle = puzzle
        self.hint_pool = hint_pool
        self.dictionary = dictionary
        self.max_attempts = max_attempts
        self.feedback = KeyboardFeedback()
        self.current_round = 0
        self.guesses: List[str] = []
        self.outcomes: List[GuessOutcome] = []
        self.already_guessed: Set[str] = set()
        self.game_over = False
        self.won = False

    @property
    def word_length(self) -> int:
        return len(self.puzzle)

    def is_valid_guess(self, guess: str) -> Tuple[bool, str]:
        """
        Validates a guess for this session.

        Returns:
            Tuple of (is_valid, error_message)
        """
        if self.game_over:
            return False, "Game is already over."

        if not guess or not isinstance(guess, str):
            return False, "Guess must be a valid string."

        normalized_guess = normalize_word(guess)

        if len(normalized_guess) != self.word_length:
            return False, f"Word must be exactly {self.word_length} letters."

        if not is_alpha_word(normalized_guess):
            return False, "Word must contain only letters."

        if normalized_guess not in self.dictionary:
            return False, "Not a valid word."

        if normalized_guess in self.already_guessed:
            return False, "You already guessed that word."

        return True, ""

    def make_guess(self, guess: str) -> Optional[GuessOutcome]:
        """
        Processes a guess and updates the session.

        Returns:
            GuessOutcome, or None if the guess is invalid
        """
        is_valid, _ = self.is_valid_guess(guess)
        if not is_valid:
            return None

        normalized_guess = normalize_word(guess)
        outcome = evaluate_guess(self.puzzle, self.feedback, normalized_guess)

        self.current_round += 1
        self.guesses.append(normalized_guess)
        self.already_guessed.add(normalized_guess)
        self.outcomes.append(outcome)

        if outcome.is_win:
            self.won = True
            self.game_over = True
        elif self.current_round >= self.max_attempts:
            self.game_over = True

        return outcome

    def request_hint(self) -> str:
        """Reveal one hint letter; raises NoHintsAvailable when none are left."""
        return reveal_hint(self.hint_pool)

    def get_state(self) -> GameState:
        """Snapshot of the session; the answer is only exposed once the game is over."""
        return GameState(
            game_id=self.game_id,
            word_length=self.word_length,
            current_round=self.current_round,
            max_attempts=self.max_attempts,
            game_over=self.game_over,
            won=self.won,
            guesses=self.guesses.copy(),
            guess_results=[outcome.as_pairs() for outcome in self.outcomes],
            letter_status=self.feedback.as_dict(),
            revealed_hints=self.hint_pool.revealed,
            hints_remaining=self.hint_pool.remaining,
            answer=self.puzzle.word if self.game_over else None
        )


class GameService:
    """
    Manages multiple game sessions.

    This class handles:
    - Session management with unique game IDs
    - Dictionary loading per word length
    - Word selection and puzzle/hint setup
    - Guess validation and evaluation
    """

    def __init__(self,
                 word_file: Optional[str] = None,
                 rng: Optional[random.Random] = None,
                 word_loader: Callable[[Optional[str], int], Set[str]] = load_word_list):
        self.games: Dict[str, GameSession] = {}  # Store active games by game_id
        self.word_file = word_file
        self.rng = rng or random.Random()
        self._word_loader = word_loader
        self._dictionaries: Dict[int, Set[str]] = {}

    def get_dictionary(self, word_length: int) -> Set[str]:
        """Words of the given length, loaded once and cached."""
        if word_length not in self._dictionaries:
            self._dictionaries[word_length] = set(self._word_loader(self.word_file, word_length))
        return self._dictionaries[word_length]

    def create_new_game(self,
                        word_length: int = Config.DEFAULT_WORD_LENGTH,
                        max_attempts: int = Config.DEFAULT_MAX_ATTEMPTS,
                        forced_word: Optional[str] = None) -> str:
        """
        Creates a new game session.

        Args:
            word_length: Letters per word
            max_attempts: Guess budget
            forced_word: Word to use instead of a random pick, if it fits the length

        Returns:
            str: Unique game ID for this session

        Raises:
            DictionaryError: If no forced word applies and no word of that length exists
        """
        # Each session gets its own copy so a forced word stays local to it
        dictionary = set(self.get_dictionary(word_length))
        word = choose_puzzle_word(dictionary, word_length, forced_word, self.rng)

        puzzle = new_puzzle(word, word_length)
        session = GameSession(
            puzzle=puzzle,
            hint_pool=new_hint_pool(puzzle, self.rng),
            dictionary=dictionary,
            max_attempts=max_attempts
        )
        self.games[session.game_id] = session
        return session.game_id

    def get_session(self, game_id: str) -> GameSession:
        if game_id not in self.games:
            raise GameNotFound(game_id)
        return self.games[game_id]

    def get_game_state(self, game_id: str) -> GameState:
        return self.get_session(game_id).get_state()

    def is_valid_guess(self, game_id: str, guess: str) -> Tuple[bool, str]:
        if game_id not in self.games:
            return False, "Game not found"
        return self.games[game_id].is_valid_guess(guess)

    def make_guess(self, game_id: str, guess: str) -> Optional[GuessOutcome]:
        return self.get_session(game_id).make_guess(guess)

    def request_hint(self, game_id: str) -> str:
        return self.get_session(game_id).request_hint()

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Returns:
            bool: True if game was deleted, False if not found
        """
        if game_id in self.games:
            del self.games[game_id]
            return True
        return False


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(word_file: Optional[str] = None,
                            rng: Optional[random.Random] = None) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService(word_file=word_file, rng=rng)
    return _game_service
