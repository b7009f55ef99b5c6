from __future__ import annotations
import logging
from pathlib import Path
from typing import Iterable, Iterator, List, Optional

from . import config as CFG
from .errors import DictionaryUnavailableError

log = logging.getLogger(__name__)

PROGRESS_EVERY_WORDS = 50_000


def _iter_word_files(paths: Iterable[str]) -> Iterator[Path]:
    """Yield word-list files; directories expand to their *.txt files in sorted order."""
    for raw in paths:
        p = Path(raw)
        if p.is_dir():
            yield from sorted(f for f in p.rglob(CFG.DICT_GLOB) if f.is_file())
        elif p.is_file():
            yield p
        else:
            raise DictionaryUnavailableError(f"dictionary source not found: {raw}")


def iter_dictionary_words(paths: Iterable[str]) -> Iterator[str]:
    """One term per line; blank lines and '#' comments are skipped."""
    for path in _iter_word_files(paths):
        log.info("Reading word list %s", path)
        try:
            with open(path, "r", encoding=CFG.ENCODING, errors="ignore") as f:
                for line in f:
                    word = line.strip()
                    if not word or word.startswith("#"):
                        continue
                    yield word
        except OSError as exc:
            raise DictionaryUnavailableError(f"cannot read dictionary {path}: {exc}") from exc


def load_dictionary(paths: Optional[Iterable[str]] = None) -> List[str]:
    """
    Read every configured word list into a list of distinct terms.

    Order of first appearance is kept. Raises DictionaryUnavailableError
    if a source is missing or unreadable, or if no terms were found.
    """
    sources = list(paths) if paths is not None else CFG.dictionary_paths()
    if not sources:
        raise DictionaryUnavailableError("no dictionary sources configured")

    seen: set[str] = set()
    words: List[str] = []
    for word in iter_dictionary_words(sources):
        if word in seen:
            continue
        seen.add(word)
        words.append(word)
        if len(words) % PROGRESS_EVERY_WORDS == 0:
            log.debug("[loaded] words=%d", len(words))

    if not words:
        raise DictionaryUnavailableError(f"no terms found in {sources}")
    log.info("Dictionary loaded: %d terms from %d source(s)", len(words), len(sources))
    return words
