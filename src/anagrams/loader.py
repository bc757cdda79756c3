"""
Dictionary Loading Module

This module reads the word list the anagram engine works against. The
dictionary is a plain text file with one word per line; case is arbitrary and
kept as written, blank lines are ignored.

Key Functions:
    load_dictionary(path): read a word list from disk
    iter_words(lines): clean and de-duplicate raw lines

The loader does no indexing itself: the resulting list is handed to
DictionaryIndex.from_words(), see anagrams.DB.index.
"""

# src/anagrams/loader.py
from __future__ import annotations
import logging
import os
from typing import Iterable, Iterator, List, Optional

from . import config as CFG
from .models import Word
from .normalize import clean_word

log = logging.getLogger(__name__)


def _verbose() -> bool:
    return os.environ.get("ANAGRAMS_VERBOSE") == "1"


def iter_words(lines: Iterable[str]) -> Iterator[Word]:
    """
    Yield cleaned words from raw dictionary lines.

    Surrounding whitespace is stripped, blank and multi-word lines are
    skipped and a word that appears twice with the exact same spelling is
    yielded once, in the position of its first appearance.

    Example:
        >>> list(iter_words(["eat\\n", "\\n", "Tea\\n", "eat\\n"]))
        ['eat', 'Tea']
    """
    seen = set()
    for raw in lines:
        word = clean_word(raw)
        if not word or word in seen:
            continue
        seen.add(word)
        yield word


def load_dictionary(path: Optional[str] = None) -> List[Word]:
    """
    Load the word list at `path` (default: config.DICTIONARY_PATH).

    Args:
        path: Path to a UTF-8 text file, one word per line.

    Returns:
        List[Word]: Words in file order, without blanks or exact duplicates.

    Raises:
        FileNotFoundError: if the file does not exist.

    Note:
        Undecodable bytes are ignored rather than aborting the load.
    """
    path = str(path or CFG.DICTIONARY_PATH)
    log.info("Loading dictionary from %s", path)

    words: List[Word] = []
    with open(path, "r", encoding=CFG.ENCODING, errors="ignore") as f:
        for word in iter_words(f):
            words.append(word)
            if _verbose() and len(words) % CFG.PROGRESS_EVERY_WORDS == 0:
                print(f"[loaded] words={len(words):,}")

    if _verbose():
        print(f"[done] words={len(words):,}")
    log.info("Loaded %d words from %s", len(words), path)
    return words
