from __future__ import annotations
import bisect
import logging
from typing import Iterable, Iterator, List

log = logging.getLogger(__name__)

# sorts after any real character, closes a prefix range
_PREFIX_END = "\U0010ffff"


class PrefixIndex:
    """
    Read-only prefix index over the vocabulary.

    Terms are held in a sorted lexicon; a prefix query is a bisect range
    scan. Nothing mutates after build(), so one instance is shared by
    every expansion worker without locking.
    """
    def __init__(self) -> None:
        self._term_lex: List[str] = []

    @classmethod
    def from_words(cls, words: Iterable[str]) -> "PrefixIndex":
        idx = cls()
        idx.build(words)
        return idx

    # ---- Build (offline) ----
    def build(self, words: Iterable[str]) -> None:
        self._term_lex = sorted(set(words))
        log.info("Prefix index built: terms=%d", len(self._term_lex))

    # ---- Query ----
    def all_terms(self) -> Iterator[str]:
        return iter(self._term_lex)

    def prefix_matches(self, stem: str) -> List[str]:
        """All terms starting with stem (stem itself included when present)."""
        L = self._term_lex
        lo = bisect.bisect_left(L, stem)
        hi = bisect.bisect_right(L, stem + _PREFIX_END)
        return L[lo:hi]

    def __len__(self) -> int:
        return len(self._term_lex)

    def __contains__(self, term: object) -> bool:
        if not isinstance(term, str):
            return False
        i = bisect.bisect_left(self._term_lex, term)
        return i != len(self._term_lex) and self._term_lex[i] == term
