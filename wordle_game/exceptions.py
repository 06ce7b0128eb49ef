"""
Game Exceptions

Error kinds surfaced by the puzzle core and the session layer. None of them is
fatal: callers report the message and re-prompt the player.
"""


class WordleError(Exception):
    """Base class for every error raised by the game package."""


class InvalidWord(WordleError, ValueError):
    """A puzzle word violated the length or letters-only constraint."""

    def __init__(self, word, reason: str):
        self.word = word
        self.reason = reason
        super().__init__(f"Invalid word {word!r}: {reason}")


class NoHintsAvailable(WordleError):
    """A hint was requested from an empty or exhausted hint pool."""

    def __init__(self, message: str = "No hints remaining."):
        super().__init__(message)


class DictionaryError(WordleError):
    """The word list could not be loaded or holds no usable words."""


class GameNotFound(WordleError, KeyError):
    """No session is registered under the requested game id."""

    def __init__(self, game_id: str):
        self.game_id = game_id
        super().__init__(f"Game not found: {game_id}")

    def __str__(self) -> str:
        return self.args[0]
