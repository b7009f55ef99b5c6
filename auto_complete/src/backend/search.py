from __future__ import annotations
import logging
from concurrent.futures import ThreadPoolExecutor, wait
from typing import Iterable, List, Optional

from . import config as CFG
from .distance import distance
from .models import Suggestion
from .DB.index import PrefixIndex

log = logging.getLogger(__name__)


def _admit_typo(term: str, dist: int) -> bool:
    # /* ~~~ short terms allow 1 edit, long terms 2; lengths in between never qualify ~~~ */
    if len(term) <= CFG.SHORT_TERM_MAX_LEN and dist <= CFG.SHORT_TERM_MAX_DISTANCE:
        return True
    if len(term) >= CFG.LONG_TERM_MIN_LEN and dist <= CFG.LONG_TERM_MAX_DISTANCE:
        return True
    return False


def gather_typo_suggestions(index: PrefixIndex, query: str) -> List[Suggestion]:
    """
    Scan the whole vocabulary for terms close enough to `query` to be
    treated as a corrected stem. Each admitted term is weighted by its
    edit distance from the query.
    """
    out: List[Suggestion] = []
    for term in index.all_terms():
        d = distance(query, term)
        if _admit_typo(term, d):
            out.append(Suggestion(weight=float(d), query=term, is_original_query=False))
    return out


def expand_stem(index: PrefixIndex, stem: Suggestion, query: str) -> List[Suggestion]:
    """
    Completions of one stem. Exact-prefix completions of the original query
    get a flat bonus; completions reached through a corrected stem are scaled
    by their own distance from the original query.
    """
    batch: List[Suggestion] = []
    for s in index.prefix_matches(stem.query):
        weight = stem.weight + CFG.PREFIX_BONUS
        if not stem.is_original_query:
            weight = weight * distance(query, s)
        batch.append(Suggestion(weight=weight, query=s, is_original_query=stem.is_original_query))
    return batch


def collect_suggestions(index: PrefixIndex,
                        stems: List[Suggestion],
                        query: str,
                        max_workers: Optional[int] = None) -> List[Suggestion]:
    """
    Expand every stem on its own worker and append all completions after
    the stems. Returns only once every worker has finished. A stem whose
    expansion raises contributes nothing.
    """
    if not stems:
        return []
    workers = max_workers or CFG.MAX_WORKERS or len(stems)

    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="expand") as ex:
        futures = [ex.submit(expand_stem, index, stem, query) for stem in stems]
        wait(futures)

    # single accumulation point; batches are merged in stem order
    merged: List[Suggestion] = list(stems)
    for stem, fut in zip(stems, futures):
        exc = fut.exception()
        if exc is not None:
            log.warning("Expansion failed for stem %r: %r", stem.query, exc)
            continue
        merged.extend(fut.result())
    return merged


def unique(suggestions: Iterable[Suggestion]) -> List[Suggestion]:
    """Keep the first suggestion seen for each lowercase text."""
    seen: set[str] = set()
    out: List[Suggestion] = []
    for s in suggestions:
        key = s.dedup_key
        if key in seen:
            continue
        seen.add(key)
        out.append(s)
    return out


def rank(suggestions: List[Suggestion]) -> List[Suggestion]:
    return sorted(suggestions, key=Suggestion.rank_key)


def to_strings(suggestions: Iterable[Suggestion]) -> List[str]:
    return [s.query for s in suggestions]


def get_suggestions(query: str, index: PrefixIndex, *, max_workers: Optional[int] = None) -> List[str]:
    """
    Full pipeline for a non-empty query: seed -> typo stems -> expansion
    (one level deep) -> dedup -> sort -> texts. Best match first.
    """
    stems = [Suggestion(weight=0.0, query=query, is_original_query=True)]
    stems.extend(gather_typo_suggestions(index, query))
    log.debug("query=%r typo stems=%d", query, len(stems) - 1)

    all_queries = collect_suggestions(index, stems, query, max_workers=max_workers)
    ranked = rank(unique(all_queries))
    log.debug("query=%r candidates=%d unique=%d", query, len(all_queries), len(ranked))
    return to_strings(ranked)


def complete_query(query: str, index: PrefixIndex, top_k: int = CFG.TOP_K,
                   *, max_workers: Optional[int] = None) -> List[str]:
    """get_suggestions() truncated to the first top_k entries."""
    return get_suggestions(query, index, max_workers=max_workers)[:max(0, top_k)]
