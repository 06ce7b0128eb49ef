import random

import pytest

from wordle_game.config.game_settings import filter_words
from wordle_game.services.game_service import GameService

WORDS = [
    "crate", "crane", "slate", "trace", "react", "allow", "llama", "eerie", "geese", "speed",
    "about", "adieu", "store", "stare", "tears", "radar", "level", "knoll", "kayak", "queen",
    "an", "at", "be", "fox", "owl", "rhythm", "elephant", "aardvark",
]


def word_loader(path, word_length):
    return filter_words(WORDS, word_length)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def game_service(rng):
    return GameService(rng=rng, word_loader=word_loader)


class ScriptedInput:
    """Feeds prepared lines to the controller, then signals end of input."""

    def __init__(self, lines):
        self.lines = list(lines)
        self.prompts = []

    def __call__(self, prompt):
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)


@pytest.fixture
def scripted_input():
    return ScriptedInput
