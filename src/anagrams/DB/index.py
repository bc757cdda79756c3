"""
Dictionary index for anagram lookup.

The index groups the dictionary by occurrence list: every word is reduced to
its character multiset and words sharing a multiset end up in the same bucket.
All anagrams of a word are then a single lookup away.

For example "eat", "ate" and "tea" share the occurrence list

    (("a", 1), ("e", 1), ("t", 1))

so the index holds the entry

    (("a", 1), ("e", 1), ("t", 1)) -> ("eat", "ate", "tea")
"""

from __future__ import annotations
from collections import defaultdict
from typing import Dict, Iterable, Iterator, List, Tuple

from ..models import Occurrences, Word
from ..occurrences import word_occurrences


class DictionaryIndex:
    """
    Read-only mapping Occurrences -> words with that occurrence list.

    Looking up an occurrence list that no dictionary word has is not an
    error: get() returns an empty list, so the sentence search simply finds
    nothing down that branch.
    """

    def __init__(self, buckets: Dict[Occurrences, Tuple[Word, ...]] | None = None) -> None:
        self._buckets: Dict[Occurrences, Tuple[Word, ...]] = dict(buckets or {})
        self._word_count = sum(len(ws) for ws in self._buckets.values())

    # ---- Build (once) ----
    @classmethod
    def from_words(cls, words: Iterable[Word]) -> "DictionaryIndex":
        """
        Build the index from a word list.

        Words keep their first-seen order inside a bucket; an exact duplicate
        is stored once. Empty strings and entries containing whitespace are
        skipped: neither can be produced from a split sentence.
        """
        buckets: Dict[Occurrences, List[Word]] = defaultdict(list)
        seen = set()
        for w in words:
            if not w or w in seen or any(ch.isspace() for ch in w):
                continue
            seen.add(w)
            buckets[word_occurrences(w)].append(w)
        # freeze buckets; the index is never written after this point
        return cls({occ: tuple(ws) for occ, ws in buckets.items()})

    # ---- Query ----
    def get(self, occurrences: Occurrences) -> List[Word]:
        """All words with exactly these occurrences ([] when there are none)."""
        return list(self._buckets.get(tuple(occurrences), ()))

    def __contains__(self, occurrences: object) -> bool:
        return occurrences in self._buckets

    def __len__(self) -> int:
        return len(self._buckets)

    @property
    def word_count(self) -> int:
        return self._word_count

    def iter_items(self) -> Iterator[Tuple[Occurrences, Tuple[Word, ...]]]:
        return iter(self._buckets.items())
