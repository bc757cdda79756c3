# src/anagrams/models.py
"""
Type aliases for the anagram engine.

- Word: a dictionary word, kept with its original spelling.
- Sentence: an ordered list of words; two orderings are two different anagrams.
- Occurrences: the canonical character multiset of a word or sentence.

These are plain aliases, not classes: occurrence lists are ordinary tuples so
that they can be compared, hashed and used as dictionary keys directly.
"""

from typing import List, Tuple

Word = str
Sentence = List[Word]

# Sorted by character, lower-case characters, every count > 0, no duplicates.
# Example: "abba" -> (("a", 2), ("b", 2))
Occurrences = Tuple[Tuple[str, int], ...]
