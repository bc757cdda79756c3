"""
Character-occurrence multisets.

An occurrence list describes how often each character appears in a word or a
sentence. It is always in canonical form: sorted by character, lower-case,
without zero counts, so that two anagrams produce exactly the same value.

Key Functions:
    word_occurrences(word): occurrence list of a single word
    sentence_occurrences(sentence): occurrence list of all words together
    combinations(occurrences): every sub-multiset of an occurrence list
    subtract(x, y): remove the characters of y from x
"""

from __future__ import annotations
from collections import Counter
from typing import Any, Iterable, List

from .models import Occurrences, Word


def word_occurrences(word: Word) -> Occurrences:
    """
    Convert a word into its occurrence list.

    Upper and lower case are the same character and are reported lower-case.

    Example:
        >>> word_occurrences("Robert")
        (('b', 1), ('e', 1), ('o', 1), ('r', 2), ('t', 1))
    """
    counts = Counter(word.lower())
    return tuple(sorted(counts.items()))


def sentence_occurrences(sentence: Iterable[Word]) -> Occurrences:
    """Occurrence list of all words of the sentence taken together."""
    return word_occurrences("".join(sentence))


def is_occurrences(value: Any) -> bool:
    """True if value is a canonical occurrence list."""
    prev = None
    for item in value:
        if not isinstance(item, tuple) or len(item) != 2:
            return False
        ch, n = item
        if not isinstance(ch, str) or len(ch) != 1 or ch != ch.lower():
            return False
        if not isinstance(n, int) or isinstance(n, bool) or n <= 0:
            return False
        if prev is not None and ch <= prev:
            return False
        prev = ch
    return True


def _require_occurrences(value: Any, name: str) -> Occurrences:
    occ = tuple(value)
    if not is_occurrences(occ):
        raise ValueError(f"{name} is not a canonical occurrence list: {occ!r}")
    return occ


def _combinations(occurrences: Occurrences) -> List[Occurrences]:
    out: List[Occurrences] = [()]
    for i, (ch, n) in enumerate(occurrences):
        # characters after `ch`; the input is sorted so this is the tail
        rest = _combinations(occurrences[i + 1:])
        for k in range(1, n + 1):
            for comb in rest:
                out.append(((ch, k),) + comb)
    return out


def combinations(occurrences: Occurrences) -> List[Occurrences]:
    """
    Return every subset of the occurrence list, including the empty one and
    the occurrence list itself.

    Example: the subsets of (("a", 2), ("b", 2)) are

        (), (("a", 1),), (("a", 1), ("b", 1)), (("a", 1), ("b", 2)),
        (("a", 2),), (("a", 2), ("b", 1)), (("a", 2), ("b", 2)),
        (("b", 1),), (("b", 2),)

    The order of the result is not part of the contract.

    Raises:
        ValueError: if occurrences is not in canonical form. Uniqueness of the
            result relies on it.
    """
    occ = _require_occurrences(occurrences, "occurrences")
    return _combinations(occ)


def subtract(x: Occurrences, y: Occurrences) -> Occurrences:
    """
    Subtract occurrence list y from occurrence list x.

    y must be a subset of x: every character of y appears in x with at least
    the same frequency. The result is canonical (sorted, no zero entries).

    Raises:
        ValueError: if either argument is not canonical or y is not a subset
            of x.

    Example:
        >>> subtract((("a", 2), ("b", 2)), (("a", 1),))
        (('a', 1), ('b', 2))
    """
    x = _require_occurrences(x, "x")
    y = _require_occurrences(y, "y")
    counts = dict(x)
    for ch, n in y:
        have = counts.get(ch, 0)
        if n > have:
            raise ValueError(
                f"cannot subtract {n} x {ch!r}: only {have} available in {x!r}"
            )
        counts[ch] = have - n
    return tuple((ch, counts[ch]) for ch, _ in x if counts[ch] > 0)
