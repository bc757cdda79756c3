from __future__ import annotations
import os
from pathlib import Path

# package root: src/anagrams/
PACKAGE_ROOT = Path(__file__).resolve().parent

# word list shipped with the package (one word per line)
DEFAULT_DICTIONARY = PACKAGE_ROOT / "data" / "words.txt"
DICTIONARY_PATH: str = os.environ.get("ANAGRAMS_DICTIONARY", str(DEFAULT_DICTIONARY))
ENCODING: str = "utf-8"

# default cap on sentences returned by the CLI / web front-ends
MAX_RESULTS: int = 100

# progress logging (set ANAGRAMS_VERBOSE=1 to enable)
PROGRESS_EVERY_WORDS: int = 10_000
