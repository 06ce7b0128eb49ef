from wordle_game.models.game import LetterState, Outcome
from wordle_game.models.keyboard import KeyboardFeedback


def test_letter_states_are_ordered():
    assert LetterState.DEFAULT < LetterState.MISS < LetterState.WRONG_POSITION < LetterState.CORRECT


def test_outcomes_map_to_letter_states():
    assert Outcome.CORRECT.letter_state is LetterState.CORRECT
    assert Outcome.WRONG_POSITION.letter_state is LetterState.WRONG_POSITION
    assert Outcome.MISS.letter_state is LetterState.MISS


def test_feedback_starts_at_default():
    feedback = KeyboardFeedback()
    assert all(state is LetterState.DEFAULT for _, state in feedback)
    assert len(feedback.as_dict()) == 26


def test_upgrade_only_moves_up():
    feedback = KeyboardFeedback()
    assert feedback.upgrade("Q", LetterState.WRONG_POSITION)
    assert not feedback.upgrade("Q", LetterState.MISS)
    assert not feedback.upgrade("Q", LetterState.WRONG_POSITION)
    assert feedback["Q"] is LetterState.WRONG_POSITION
    assert feedback.upgrade("Q", LetterState.CORRECT)
    assert not feedback.upgrade("Q", LetterState.DEFAULT)
    assert feedback["Q"] is LetterState.CORRECT


def test_as_dict_uses_state_names():
    feedback = KeyboardFeedback()
    feedback.upgrade("A", LetterState.MISS)
    status = feedback.as_dict()
    assert status["A"] == "MISS"
    assert status["B"] == "DEFAULT"
