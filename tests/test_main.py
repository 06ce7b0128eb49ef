import pytest

from wordle_game.main import main
from wordle_game.utils.helpers import parse_or_default


@pytest.mark.parametrize("value,expected", [("7", 7), ("0", 5), ("-3", 5), ("abc", 5), (None, 5), ("", 5)])
def test_parse_or_default(value, expected):
    assert parse_or_default(value, 5) == expected


@pytest.fixture
def word_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("crate\ncrane\nslate\n", encoding="utf-8")
    return str(path)


def test_main_plays_a_forced_game(monkeypatch, capsys, word_file):
    answers = iter(["crane", "crate"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))

    assert main(["5", "6", "crate", "--words", word_file, "--seed", "3", "--no-color"]) == 0
    assert "Congratulations! You guessed the word in 2 attempts." in capsys.readouterr().out


def test_main_reports_missing_words(capsys, word_file):
    assert main(["9", "6", "--words", word_file, "--no-color"]) == 1
    assert "Game crashed: No 9-letter words in dictionary" in capsys.readouterr().out


def test_main_stops_on_end_of_input(monkeypatch, word_file):
    def no_input(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", no_input)
    assert main(["x", "y", "--words", word_file, "--no-color"]) == 0
