# backend/engine.py
from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from . import config as CFG
from .errors import EmptyQueryError, EngineNotReadyError
from .loader import load_dictionary
from .search import get_suggestions as _run_pipeline, complete_query
from .DB.index import PrefixIndex
from .DB.storage import save_index, load_index

log = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    if not (verbose or CFG.verbose_enabled()):
        return
    logging.basicConfig(level=logging.INFO)
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger("backend").setLevel(logging.INFO)


def _require_query(query: str) -> None:
    if not query:
        raise EmptyQueryError("query must be a non-empty string")


class Engine:
    """
    Thin orchestration layer that glues together:
      - the dictionary loader (word lists on disk),
      - the prefix index (PrefixIndex), optionally cached as a pickle,
      - the suggestion pipeline (search.get_suggestions).

    Public API (used by CLI/Flask/GUI):
      * build(dictionaries, ...): read word lists -> index -> (optional) persist
      * load(cache=...):          load a previously persisted index
      * suggest(query):           full ranked list of suggestions
      * complete(query, top_k):   the first top_k suggestions
      * shutdown():               drop the index

    The index is read-only once attached, so one Engine may serve
    concurrent callers.
    """

    # ------------- lifecycle -------------

    def __init__(self, *, max_workers: Optional[int] = None) -> None:
        self.index: Optional[PrefixIndex] = None
        self.max_workers = max_workers

    # /* ~~~ Build an index from word lists ~~~ */
    def build(
        self,
        dictionaries: Optional[Iterable[str]] = None,
        *,
        cache: Optional[str] = None,           # path to pickle cache for the index
        verbose: bool = False,
    ) -> None:
        _configure_logging(verbose)

        sources = list(dictionaries) if dictionaries is not None else CFG.dictionary_paths()
        log.info("Loading dictionary from %s", sources)
        words = load_dictionary(sources)      # raises DictionaryUnavailableError

        log.info("Building prefix index")
        idx = PrefixIndex.from_words(words)

        if cache:
            log.info("Saving pickle index to %s", cache)
            save_index(idx, cache)

        self.index = idx
        log.info("Engine build() complete: terms=%d", len(idx))

    # /* ~~~ Load an already-built index ~~~ */
    def load(self, *, cache: str, verbose: bool = False) -> None:
        _configure_logging(verbose)

        log.info("Loading pickle index from %s", cache)
        self.index = load_index(cache)        # raises DictionaryUnavailableError
        log.info("Engine load() complete: terms=%d", len(self.index))

    # ------------- query -------------

    def _ready_index(self) -> PrefixIndex:
        if self.index is None:
            raise EngineNotReadyError("Engine not initialized. Call build() or load() first.")
        return self.index

    def suggest(self, query: str) -> List[str]:
        _require_query(query)
        return _run_pipeline(query, self._ready_index(), max_workers=self.max_workers)

    # /* ~~~ Run autocomplete for a user query and return the best top_k ~~~ */
    def complete(self, query: str, *, top_k: int = CFG.TOP_K) -> List[str]:
        _require_query(query)
        return complete_query(query, self._ready_index(), top_k=top_k, max_workers=self.max_workers)

    # ------------- teardown -------------

    def shutdown(self) -> None:
        self.index = None
        log.info("Engine shutdown complete")


def get_suggestions(query: str, dictionaries: Optional[Iterable[str]] = None) -> List[str]:
    """
    One-shot call: build the index from the dictionary source, then rank
    suggestions for `query`. Nothing is kept between calls.
    """
    _require_query(query)
    eng = Engine()
    try:
        eng.build(dictionaries)
        return eng.suggest(query)
    finally:
        eng.shutdown()
