"""
Game Controller

Runs the interactive turn loop for one session: reads player input, routes it
to the game service, and prints the rendered result.
"""

from dataclasses import asdict
from typing import Callable, Optional

from ..exceptions import NoHintsAvailable
from ..models.game import GameState
from ..services.game_service import GameService
from ..utils.game_logger import game_logger
from ..views import terminal

HINT_COMMAND = "H"


class GameController:
    """Strictly turn based: each guess is fully scored before the next prompt."""

    def __init__(self,
                 game_service: GameService,
                 game_id: str,
                 input_func: Optional[Callable[[str], str]] = None,
                 output: Callable[[str], None] = print,
                 use_color: bool = True):
        self.game_service = game_service
        self.game_id = game_id
        self.input_func = input_func or input
        self.output = output
        self.use_color = use_color

    def play(self) -> GameState:
        """
        Play the session to the end.

        Returns:
            GameState: Final state (won, lost, or abandoned on end of input)
        """
        session = self.game_service.get_session(self.game_id)

        while not session.game_over:
            state = session.get_state()
            self.output(terminal.render_round_labels(state))
            self.output(terminal.render_keyboard(session.feedback, self.use_color) + "\n")

            guess = self._read_valid_guess()
            if guess is None:
                game_logger.log_game_event(self.game_id, 'game_abandoned', rounds_used=session.current_round)
                return session.get_state()

            outcome = self.game_service.make_guess(self.game_id, guess)
            self.output("\n" + terminal.render_guess(outcome, self.use_color))

            state = session.get_state()
            game_logger.log_result(
                'submit_guess', True, {'state': asdict(state)}, self.game_id,
                pattern=terminal.outcome_symbols(outcome), round=state.current_round
            )

        final_state = session.get_state()
        if final_state.won:
            self.output(terminal.render_win(final_state.current_round))
            game_logger.log_game_event(
                self.game_id, 'game_won',
                rounds_used=final_state.current_round, target_word=final_state.answer
            )
        else:
            self.output(terminal.render_loss(final_state.answer, self.use_color))
            game_logger.log_game_event(
                self.game_id, 'game_lost',
                rounds_used=final_state.current_round, target_word=final_state.answer
            )
        return final_state

    def _read_valid_guess(self):
        """Prompt until a valid guess arrives; hint requests are served in between."""
        while True:
            state = self.game_service.get_game_state(self.game_id)
            try:
                raw = self.input_func(terminal.render_prompt(state, self.use_color))
            except EOFError:
                return None

            guess = raw.strip().upper()

            if guess == HINT_COMMAND:
                self._reveal_hint()
                continue

            game_logger.log_user_action('submit_guess', self.game_id, guess_length=len(guess))

            is_valid, error = self.game_service.is_valid_guess(self.game_id, guess)
            if not is_valid:
                self.output(terminal.render_error(error, self.use_color))
                game_logger.log_result(
                    'submit_guess', False, {'error': error}, self.game_id, validation_error=error
                )
                continue

            return guess

    def _reveal_hint(self):
        game_logger.log_user_action('request_hint', self.game_id)
        try:
            hint = self.game_service.request_hint(self.game_id)
        except NoHintsAvailable as e:
            self.output(terminal.render_error(str(e), self.use_color))
            game_logger.log_result('request_hint', False, {'error': str(e)}, self.game_id)
            return

        self.output(terminal.render_hint(hint, self.use_color))
        game_logger.log_game_event(self.game_id, 'hint_revealed')
