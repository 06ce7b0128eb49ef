"""
Terminal View

Turns game state into text for an ANSI terminal. Nothing here reads input or
touches session state.
"""

import re
from typing import List

from ..config.game_settings import QWERTY_ROWS
from ..models.game import GameState, GuessOutcome, LetterState, Outcome
from ..models.keyboard import KeyboardFeedback


class Ansi:
    RESET = "\033[0m"
    BOLD = "\033[1m"
    RED_TEXT = "\033[31m"
    PURPLE_TEXT = "\033[1;95m"
    BLACK_TEXT = "\033[1;90m"
    GREEN_BACKGROUND = "\033[42m"
    YELLOW_BACKGROUND = "\033[43m"
    GRAY_BACKGROUND = "\033[100m"
    BLACK_BACKGROUND = "\033[40m"


STATE_COLORS = {
    LetterState.CORRECT: Ansi.GREEN_BACKGROUND,
    LetterState.WRONG_POSITION: Ansi.YELLOW_BACKGROUND,
    LetterState.MISS: Ansi.GRAY_BACKGROUND,
    LetterState.DEFAULT: Ansi.BLACK_BACKGROUND,
}

# brackets used when colour is off
PLAIN_TILES = {
    LetterState.CORRECT: "[{}]",
    LetterState.WRONG_POSITION: "({})",
    LetterState.MISS: " {} ",
    LetterState.DEFAULT: " {} ",
}

BORDER = "-" * 89
ANSI_PATTERN = re.compile(r"\x1b\[[;\d]*m")


def visible_length(text: str) -> int:
    """Length of text as displayed, ignoring ANSI escape sequences."""
    return len(ANSI_PATTERN.sub("", text))


def _tile(letter: str, state: LetterState, use_color: bool, text_color: str = "") -> str:
    if use_color:
        return f"{STATE_COLORS[state]}{text_color} {letter} {Ansi.RESET}"
    return PLAIN_TILES[state].format(letter)


def render_guess(outcome: GuessOutcome, use_color: bool = True) -> str:
    """One coloured tile per guessed letter."""
    tiles = [
        _tile(letter, result.letter_state, use_color, Ansi.BLACK_TEXT)
        for letter, result in zip(outcome.guess, outcome)
    ]
    return "".join(tiles)


def render_keyboard(feedback: KeyboardFeedback, use_color: bool = True) -> str:
    """QWERTY rows with each key coloured by its feedback, centred on the widest row."""
    rows: List[str] = []
    for row_letters in QWERTY_ROWS:
        rows.append(" ".join(_tile(letter, feedback[letter], use_color) for letter in row_letters) + " ")

    max_width = max(visible_length(row) for row in rows)
    lines = []
    for row in rows:
        padding = (max_width - visible_length(row)) // 2
        lines.append(" " * max(0, padding) + row)
    return "\n".join(lines)


def render_round_labels(state: GameState) -> str:
    """Header printed before each attempt."""
    attempt = min(state.current_round + 1, state.max_attempts)
    hints = "None" if not state.revealed_hints else "[" + ", ".join(state.revealed_hints) + "]"
    attempt_label = f"Attempt {attempt} of {state.max_attempts}"
    hints_label = f"Revealed Hints: {hints}"
    remaining_label = f"Hints Left: {state.hints_remaining} (Enter 'H')"
    columns = f"{attempt_label:<30}{hints_label:<30}{remaining_label:<30}"
    return f"\n{BORDER}\n{columns}\n{BORDER}\n"


def render_prompt(state: GameState, use_color: bool = True) -> str:
    hint_prompt = "" if state.hints_remaining <= 0 else " (or 'H' for a hint)"
    if use_color:
        return f"{Ansi.BOLD}Enter a real {state.word_length}-letter word{Ansi.RESET}{hint_prompt}: "
    return f"Enter a real {state.word_length}-letter word{hint_prompt}: "


def render_error(message: str, use_color: bool = True) -> str:
    if use_color:
        return f"{Ansi.RED_TEXT}Error: {message}{Ansi.RESET}"
    return f"Error: {message}"


def render_hint(letter: str, use_color: bool = True) -> str:
    if use_color:
        return (f"\n{Ansi.BLACK_BACKGROUND} Hint Revealed: The word contains the letter "
                f"{Ansi.PURPLE_TEXT}'{letter}' {Ansi.RESET}\n")
    return f"\nHint Revealed: The word contains the letter '{letter}'\n"


def render_win(attempts: int) -> str:
    return f"\nCongratulations! You guessed the word in {attempts} attempts.\n"


def render_loss(answer: str, use_color: bool = True) -> str:
    spaced = " ".join(answer)
    if use_color:
        return (f"\nBetter luck next time...\nThe word was: "
                f"{Ansi.BLACK_BACKGROUND}{Ansi.RED_TEXT}{Ansi.BOLD} {spaced} {Ansi.RESET}\n")
    return f"\nBetter luck next time...\nThe word was: {spaced}\n"


def outcome_symbols(outcome: GuessOutcome) -> str:
    """Compact one-character-per-position summary, e.g. 'GGGXG'."""
    symbols = {Outcome.CORRECT: "G", Outcome.WRONG_POSITION: "Y", Outcome.MISS: "X"}
    return "".join(symbols[result] for result in outcome)
