import random

import pytest

from wordle_game.config.game_settings import VOWELS
from wordle_game.exceptions import NoHintsAvailable
from wordle_game.services.hint_service import (
    HintPool, max_hints_for, new_hint_pool, reveal_hint, select_hint_letters
)
from wordle_game.services.puzzle_service import new_puzzle


@pytest.mark.parametrize("length,expected", [(1, 0), (2, 0), (3, 1), (5, 2), (6, 2), (8, 3), (10, 4)])
def test_hint_budget_is_forty_percent_floored(length, expected):
    assert max_hints_for(length) == expected


@pytest.mark.parametrize("word", ["AN", "OX", "A"])
def test_short_words_have_no_hints(word, rng):
    pool = new_hint_pool(new_puzzle(word), rng)
    assert pool.size == 0
    assert pool.is_exhausted
    with pytest.raises(NoHintsAvailable):
        reveal_hint(pool)


def test_five_letters_split_one_vowel_one_consonant():
    for seed in range(20):
        selection = select_hint_letters("CRANE", random.Random(seed))
        assert len(selection) == 2
        assert len([letter for letter in selection if letter in VOWELS]) == 1


def test_odd_budget_gives_extra_hint_to_consonants():
    for seed in range(20):
        selection = select_hint_letters("ELEPHANT", random.Random(seed))
        assert len(selection) == 3
        assert len([letter for letter in selection if letter in VOWELS]) == 1


def test_vowel_shortfall_goes_to_consonants():
    selection = select_hint_letters("RHYTHM", random.Random(3))
    assert len(selection) == 2
    assert not set(selection) & VOWELS


def test_selection_limited_by_distinct_letters():
    assert select_hint_letters("AAAAA", random.Random(1)) == ["A"]


def test_selection_uses_distinct_puzzle_letters():
    selection = select_hint_letters("AARDVARK", random.Random(5))
    assert len(selection) == len(set(selection)) == 3
    assert set(selection) <= set("AARDVARK")


def test_selection_is_reproducible_with_seed():
    assert select_hint_letters("ELEPHANT", random.Random(42)) == select_hint_letters("ELEPHANT", random.Random(42))


def test_pool_shrinks_by_one_per_reveal(rng):
    pool = new_hint_pool(new_puzzle("CRATE"), rng)
    initial = pool.size
    assert initial == pool.remaining == 2

    revealed = []
    for k in range(1, initial + 1):
        revealed.append(reveal_hint(pool))
        assert pool.size == initial - k
        assert pool.remaining == initial - k

    assert pool.revealed == sorted(revealed)
    assert set(revealed) <= set("CRATE")
    assert pool.is_exhausted


def test_reveal_beyond_pool_leaves_state_unchanged(rng):
    pool = new_hint_pool(new_puzzle("CRATE"), rng)
    reveal_hint(pool)
    reveal_hint(pool)
    before = (pool.size, pool.remaining, pool.revealed)

    with pytest.raises(NoHintsAvailable):
        reveal_hint(pool)

    assert (pool.size, pool.remaining, pool.revealed) == before


def test_zero_remaining_blocks_reveal_even_with_letters_left():
    pool = HintPool(["A", "B"])
    pool.remaining = 0
    with pytest.raises(NoHintsAvailable):
        pool.reveal()
    assert pool.size == 2
    assert pool.revealed == []


def test_reveal_pops_from_tail():
    pool = HintPool(["X", "Y", "Z"])
    assert [pool.reveal(), pool.reveal(), pool.reveal()] == ["Z", "Y", "X"]
    assert pool.revealed == ["X", "Y", "Z"]
