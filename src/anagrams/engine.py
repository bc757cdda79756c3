# anagrams/engine.py
from __future__ import annotations

import os
import logging
from typing import Iterable, Iterator, List, Optional

from . import config as CFG
from .models import Sentence, Word
from .loader import load_dictionary
from .occurrences import sentence_occurrences, word_occurrences
from .search import iter_sentence_anagrams, sentence_anagrams as _sentence_anagrams
from .DB.index import DictionaryIndex
from .DB.storage import save_index, load_index

log = logging.getLogger(__name__)


class Engine:
    """
    Thin orchestration layer that glues together:
      - dictionary loading (loader.load_dictionary),
      - the occurrence index (DictionaryIndex),
      - the sentence search (search.iter_sentence_anagrams).

    Public API (used by CLI/Flask/GUI):
      * build(path, ...): load word list -> index -> (optional) persist
      * load(cache=...):  restore a pickled index
      * word_anagrams(word), sentence_anagrams(sentence, limit=...)
      * shutdown():       drop the index
    """

    # ------------- lifecycle -------------

    def __init__(self) -> None:
        self.index: Optional[DictionaryIndex] = None

    # /* ~~~ Build an index from a word list file ~~~ */
    def build(
        self,
        path: Optional[str] = None,
        *,
        cache: Optional[str] = None,       # pickle path to persist the index
        verbose: bool = False,
    ) -> None:
        if verbose:
            logging.basicConfig(level=logging.INFO)
            os.environ["ANAGRAMS_VERBOSE"] = "1"

        words = load_dictionary(path)
        self.build_from_words(words)

        if cache:
            log.info("Saving pickle index to %s", cache)
            save_index(self.index, cache)

    def build_from_words(self, words: Iterable[Word]) -> None:
        """Index an in-memory word list (no file involved)."""
        log.info("Building dictionary index")
        idx = DictionaryIndex.from_words(words)
        self.index = idx
        log.info("Engine build() complete: words=%d groups=%d", idx.word_count, len(idx))

    # /* ~~~ Load an already-built index ~~~ */
    def load(self, *, cache: Optional[str] = None, verbose: bool = False) -> None:
        if verbose:
            logging.basicConfig(level=logging.INFO)
            os.environ["ANAGRAMS_VERBOSE"] = "1"

        if not cache:
            raise ValueError("load(): require --cache to load an index")
        if not os.path.exists(cache):
            raise FileNotFoundError(cache)
        log.info("Loading pickle index from %s", cache)
        self.index = load_index(cache)
        log.info("Engine load() complete: words=%d", self.index.word_count)

    # ------------- query -------------

    def word_anagrams(self, word: Word) -> List[Word]:
        """All dictionary words with the same letters as `word` (itself included)."""
        return self._require_index().get(word_occurrences(word))

    def iter_sentence_anagrams(self, sentence: Iterable[Word]) -> Iterator[Sentence]:
        return iter_sentence_anagrams(sentence_occurrences(sentence), self._require_index())

    def sentence_anagrams(self, sentence: Iterable[Word], *, limit: Optional[int] = None) -> List[Sentence]:
        return _sentence_anagrams(sentence, self._require_index(), limit=limit)

    # ------------- teardown -------------

    def shutdown(self) -> None:
        self.index = None
        log.info("Engine shutdown complete")

    # ------------- internals -------------

    def _require_index(self) -> DictionaryIndex:
        if self.index is None:
            raise RuntimeError("Engine not initialized. Call build() or load() first.")
        return self.index


# ---- module-level API over a shared default engine ----

_engine: Optional[Engine] = None


def initialize(path: Optional[str] = None, cache: Optional[str] = None, verbose: bool = False) -> Engine:
    """
    (Re)build the shared engine.
    With an existing `cache` file the pickled index is loaded; otherwise the
    word list at `path` (default: config.DICTIONARY_PATH) is indexed and,
    if `cache` is given, saved there.
    """
    global _engine
    eng = Engine()
    if cache and os.path.exists(cache):
        eng.load(cache=cache, verbose=verbose)
    else:
        eng.build(path, cache=cache, verbose=verbose)
    _engine = eng
    return eng


def _default_engine() -> Engine:
    if _engine is None:
        return initialize(CFG.DICTIONARY_PATH)
    return _engine


def word_anagrams(word: Word) -> List[Word]:
    """Anagrams of `word` in the default dictionary."""
    return _default_engine().word_anagrams(word)


def sentence_anagrams(sentence: Iterable[Word]) -> List[Sentence]:
    """Anagram sentences of `sentence` over the default dictionary."""
    return _default_engine().sentence_anagrams(sentence)
