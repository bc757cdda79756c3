from __future__ import annotations
import os
import pickle

from .index import DictionaryIndex


def save_index(index: DictionaryIndex, path: str) -> None:
    """Pickle the index; written to a temp file first, then moved into place."""
    tmp = f"{path}.tmp"
    os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
    with open(tmp, "wb") as f:
        pickle.dump(index, f, protocol=pickle.HIGHEST_PROTOCOL)
    os.replace(tmp, path)


def load_index(path: str) -> DictionaryIndex:
    """Unpickle an index written by save_index()."""
    with open(path, "rb") as f:
        index = pickle.load(f)
    if not isinstance(index, DictionaryIndex):
        raise ValueError(f"{path} does not contain a DictionaryIndex")
    return index
