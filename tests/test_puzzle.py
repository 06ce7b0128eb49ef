import dataclasses

import pytest

from wordle_game.exceptions import DictionaryError, InvalidWord
from wordle_game.services.puzzle_service import choose_puzzle_word, new_puzzle


def test_new_puzzle_normalizes_word():
    puzzle = new_puzzle("  crate ")
    assert puzzle.word == "CRATE"
    assert len(puzzle) == 5


def test_frequency_table_counts_duplicates():
    puzzle = new_puzzle("ALLOW")
    assert puzzle.count("L") == 2
    assert puzzle.count("A") == 1
    assert puzzle.count("Z") == 0
    assert len(puzzle.letter_counts) == 26


@pytest.mark.parametrize("word", ["CRATE", "EERIE", "AARDVARK", "A", "ZZZZZZ"])
def test_frequency_table_sums_to_word_length(word):
    assert sum(new_puzzle(word).letter_counts) == len(word)


def test_puzzle_is_immutable():
    puzzle = new_puzzle("CRATE")
    with pytest.raises(dataclasses.FrozenInstanceError):
        puzzle.word = "SLATE"


def test_distinct_letters_keep_first_appearance_order():
    assert new_puzzle("EERIE").distinct_letters == ("E", "R", "I")


@pytest.mark.parametrize("word", ["", "   ", "CR4TE", "CRA-E", "CRÄTE", None])
def test_invalid_words_are_rejected(word):
    with pytest.raises(InvalidWord):
        new_puzzle(word)


def test_wrong_length_is_rejected():
    with pytest.raises(InvalidWord) as excinfo:
        new_puzzle("CRATES", word_length=5)
    assert "exactly 5 letters" in str(excinfo.value)


def test_invalid_word_is_a_value_error():
    with pytest.raises(ValueError):
        new_puzzle("12345")


def test_forced_word_is_used_and_added_to_dictionary(rng):
    dictionary = {"SLATE"}
    assert choose_puzzle_word(dictionary, 5, "zesty", rng) == "ZESTY"
    assert "ZESTY" in dictionary


def test_forced_word_with_wrong_length_falls_back_to_dictionary(rng):
    dictionary = {"SLATE"}
    assert choose_puzzle_word(dictionary, 5, "toolong", rng) == "SLATE"
    assert dictionary == {"SLATE"}


def test_random_pick_is_reproducible_with_seed():
    import random

    dictionary = {"CRATE", "CRANE", "SLATE", "TRACE"}
    first = choose_puzzle_word(set(dictionary), 5, None, random.Random(9))
    second = choose_puzzle_word(set(dictionary), 5, None, random.Random(9))
    assert first == second
    assert first in dictionary


def test_empty_dictionary_raises(rng):
    with pytest.raises(DictionaryError, match="No 5-letter words"):
        choose_puzzle_word(set(), 5, None, rng)
