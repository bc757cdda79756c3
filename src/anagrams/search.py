"""
Sentence anagram search.

An anagram of a sentence uses all characters of all its words, rearranged into
dictionary words. The number of words may differ: ["I", "love", "you"] is an
anagram of ["You", "olive"]. Word order matters, so ["You", "olive"] and
["olive", "you"] are two different anagrams.

The search works on the residual occurrence list (characters not yet used):

  * an empty residual is finished and contributes one empty sentence;
  * otherwise every non-empty subset of the residual that spells at least one
    dictionary word is tried, with each of those words, and the search
    continues on what is left.

Subsets without dictionary words yield nothing, which is the only pruning.
"""

from __future__ import annotations
from itertools import islice
from typing import Iterable, Iterator, List, Optional

from .DB.index import DictionaryIndex
from .models import Occurrences, Sentence, Word
from .occurrences import combinations, sentence_occurrences, subtract


def iter_sentence_anagrams(occurrences: Occurrences, index: DictionaryIndex) -> Iterator[Sentence]:
    """Lazily yield every sentence whose occurrence list equals `occurrences`."""
    if not occurrences:
        yield []
        return
    for comb in combinations(occurrences):
        if not comb:
            # the empty subset would recurse on the same residual forever
            continue
        words = index.get(comb)
        if not words:
            continue
        rest = subtract(occurrences, comb)
        for w in words:
            for tail in iter_sentence_anagrams(rest, index):
                yield [w] + tail


def sentence_anagrams(
    sentence: Iterable[Word],
    index: DictionaryIndex,
    limit: Optional[int] = None,
) -> List[Sentence]:
    """
    Return all anagrams of `sentence` made of words from `index`.

    If every word of `sentence` is in the dictionary the sentence itself is
    part of the result. The empty sentence has exactly one anagram: [].
    `limit` stops the search after that many sentences.
    """
    found = iter_sentence_anagrams(sentence_occurrences(sentence), index)
    if limit is not None:
        if limit < 0:
            raise ValueError(f"limit must be >= 0, got {limit}")
        found = islice(found, limit)
    return list(found)
