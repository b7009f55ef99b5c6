"""Public API for the suggestion engine (explicit initialization, then queries)."""
from __future__ import annotations
import logging
import os
import time
from typing import Iterable, List, Optional
from backend.config import TOP_K
from backend.engine import Engine
from backend.errors import EngineNotReadyError

log = logging.getLogger(__name__)

_engine: Engine | None = None


def initialize(dictionaries: Optional[Iterable[str]] = None,
               cache: str | None = None,
               rebuild: bool = False,
               verbose: bool = False) -> Engine:
    """
    Init modes:
      1) Cached: if `cache` exists and not rebuilding, load the pickled index.
      2) Build: read the word lists (default: system dictionary) and, when
         `cache` is given, persist the index there for the next start.
    Raises DictionaryUnavailableError if neither path yields an index.
    """
    global _engine
    t0 = time.perf_counter()

    eng = Engine()
    if cache and not rebuild and os.path.exists(cache):
        eng.load(cache=cache, verbose=verbose)
    else:
        eng.build(dictionaries, cache=cache, verbose=verbose)

    _engine = eng
    log.info("[ready] init complete in %.2fs", time.perf_counter() - t0)
    return eng


def complete(query: str, top_k: int = TOP_K) -> List[str]:
    """Return the first top_k suggestions for query."""
    if _engine is None:
        raise EngineNotReadyError("Engine not initialized. Call initialize(...) first.")
    return _engine.complete(query, top_k=top_k)
