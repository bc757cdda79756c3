# src/e2e/test_occurrences.py

from collections import Counter
from math import prod

import pytest

from anagrams.occurrences import (
    combinations,
    is_occurrences,
    sentence_occurrences,
    subtract,
    word_occurrences,
)

ABBA = (("a", 2), ("b", 2))


def _counts(occ):
    return Counter(dict(occ))


def test_word_occurrences_abba():
    assert word_occurrences("abba") == ABBA


def test_word_occurrences_is_case_insensitive_and_sorted():
    occ = word_occurrences("Robert")
    assert occ == (("b", 1), ("e", 1), ("o", 1), ("r", 2), ("t", 1))
    assert is_occurrences(occ)


@pytest.mark.parametrize("word", ["", "a", "Mississippi", "Zulu", "don't"])
def test_word_occurrences_sorted_and_zero_free(word):
    occ = word_occurrences(word)
    chars = [c for c, _ in occ]
    assert chars == sorted(set(chars))
    assert all(n > 0 for _, n in occ)


def test_sentence_occurrences_ignores_word_order_and_case():
    a = sentence_occurrences(["abcd", "e"])
    b = sentence_occurrences(["E", "dcba"])
    assert a == b == (("a", 1), ("b", 1), ("c", 1), ("d", 1), ("e", 1))


def test_sentence_occurrences_of_empty_sentence():
    assert sentence_occurrences([]) == ()


def test_combinations_of_empty_occurrences():
    assert combinations(()) == [()]


def test_combinations_abba_has_nine_distinct_subsets():
    combs = combinations(ABBA)
    expected = {
        (),
        (("a", 1),),
        (("a", 2),),
        (("b", 1),),
        (("a", 1), ("b", 1)),
        (("a", 2), ("b", 1)),
        (("b", 2),),
        (("a", 1), ("b", 2)),
        (("a", 2), ("b", 2)),
    }
    assert len(combs) == 9
    assert set(combs) == expected


@pytest.mark.parametrize("word", ["a", "abba", "yesman", "banana", "lard"])
def test_combinations_count_is_product_of_counts_plus_one(word):
    occ = word_occurrences(word)
    combs = combinations(occ)
    assert len(combs) == prod(n + 1 for _, n in occ)
    assert len(set(combs)) == len(combs)
    assert () in combs and occ in combs
    assert all(is_occurrences(c) for c in combs)


def test_combinations_rejects_unsorted_input():
    with pytest.raises(ValueError):
        combinations((("b", 1), ("a", 1)))


def test_combinations_rejects_zero_counts():
    with pytest.raises(ValueError):
        combinations((("a", 0),))


def test_subtract_scenario():
    assert subtract(ABBA, (("a", 1),)) == (("a", 1), ("b", 2))


def test_subtract_drops_characters_that_reach_zero():
    lard = word_occurrences("lard")
    assert subtract(lard, (("r", 1),)) == (("a", 1), ("d", 1), ("l", 1))
    assert subtract(lard, lard) == ()
    assert subtract(lard, ()) == lard


def test_subtract_then_add_back_restores_counts():
    occ = word_occurrences("yesmanyes")
    for c in combinations(occ):
        rest = subtract(occ, c)
        assert is_occurrences(rest)
        assert _counts(rest) + _counts(c) == _counts(occ)


@pytest.mark.parametrize(
    "y",
    [
        (("c", 1),),          # character not present
        (("a", 3),),          # more than available
        (("a", 1), ("z", 1)),
    ],
)
def test_subtract_rejects_non_subset(y):
    with pytest.raises(ValueError):
        subtract(ABBA, y)


def test_is_occurrences_rules():
    assert is_occurrences(())
    assert is_occurrences(ABBA)
    assert not is_occurrences((("a", 1), ("a", 1)))
    assert not is_occurrences((("A", 1),))
    assert not is_occurrences((("ab", 1),))
    assert not is_occurrences((("a", -1),))
    assert not is_occurrences((("a", True),))
