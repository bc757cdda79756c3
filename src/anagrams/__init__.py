"""
Anagram Engine Module

This module finds anagrams of words and whole sentences against a word list.
Every word and sentence is reduced to its character-occurrence list (a sorted
multiset of characters); the dictionary is indexed by occurrence list, and
sentence anagrams are found by splitting the sentence's occurrence list into
subsets that spell dictionary words.

The module is designed with a clean separation of concerns:
- Occurrence lists, subsets and subtraction (occurrences)
- Dictionary loading (loader) and indexing (DB.index)
- Sentence search (search)
- Orchestration and caching (engine)

Main Functions:
    word_occurrences(word), sentence_occurrences(sentence)
    combinations(occurrences), subtract(x, y)
    word_anagrams(word), sentence_anagrams(sentence)

Example Usage:
    from anagrams import Engine

    eng = Engine()
    eng.build("/usr/share/dict/words")
    for sentence in eng.sentence_anagrams(["Yes", "man"]):
        print(" ".join(sentence))
"""

# src/anagrams/__init__.py
from .occurrences import word_occurrences, sentence_occurrences, combinations, subtract
from .engine import Engine, initialize, word_anagrams, sentence_anagrams  # re-export
from .DB.index import DictionaryIndex

__version__ = "1.0.0"
__all__ = [
    "Engine",
    "DictionaryIndex",
    "initialize",
    "word_occurrences",
    "sentence_occurrences",
    "combinations",
    "subtract",
    "word_anagrams",
    "sentence_anagrams",
]
