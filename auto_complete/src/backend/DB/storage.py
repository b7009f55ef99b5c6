from __future__ import annotations
import os
import pickle
from .index import PrefixIndex
from ..errors import DictionaryUnavailableError


def save_index(index: PrefixIndex, path: str) -> None:
    """Pickle the built index; written to a temp file first, then swapped in."""
    tmp = f"{path}.tmp"
    os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
    with open(tmp, "wb") as f:
        pickle.dump(index, f, protocol=pickle.HIGHEST_PROTOCOL)
    os.replace(tmp, path)


def load_index(path: str) -> PrefixIndex:
    try:
        with open(path, "rb") as f:
            idx = pickle.load(f)
    except FileNotFoundError as exc:
        raise DictionaryUnavailableError(f"index cache not found: {path}") from exc
    except Exception as exc:  # unpickling bad bytes can raise almost anything
        raise DictionaryUnavailableError(f"index cache is corrupt: {path}") from exc
    if not isinstance(idx, PrefixIndex):
        raise DictionaryUnavailableError(f"{path} does not hold a prefix index")
    return idx
