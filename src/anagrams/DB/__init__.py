from .index import DictionaryIndex
from .storage import save_index, load_index

__all__ = ["DictionaryIndex", "save_index", "load_index"]
