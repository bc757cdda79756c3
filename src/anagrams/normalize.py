from __future__ import annotations
import unicodedata
from typing import List

from .models import Sentence


def _is_word_char(ch: str) -> bool:
    """Letters and digits are kept. Symbols/punctuation split words apart."""
    if ch.isalnum():
        return True
    cat = unicodedata.category(ch)
    return cat.startswith("L") or cat.startswith("N")


def split_sentence(text: str) -> Sentence:
    """
    Split free text into words for anagram lookup.
    Rules:
      * whitespace, punctuation and symbols separate words
      * letters and digits are kept verbatim (case is preserved; occurrence
        lists ignore it anyway)
    Example:
      "I love you!"  -> ["I", "love", "you"]
      "rock'n'roll"  -> ["rock", "n", "roll"]
    """
    words: List[str] = []
    cur: List[str] = []
    for ch in text:
        if _is_word_char(ch):
            cur.append(ch)
        elif cur:
            words.append("".join(cur))
            cur = []
    if cur:
        words.append("".join(cur))
    return words


def clean_word(raw: str) -> str:
    """
    A dictionary line with surrounding whitespace (incl. BOM / EOL) removed.
    Multi-word entries ("ice cream") come back as "": split_sentence never
    yields a space, so they could not be matched anyway.
    """
    word = raw.lstrip("\ufeff").strip()
    if any(ch.isspace() for ch in word):
        return ""
    return word
