from __future__ import annotations
from rapidfuzz.distance import Levenshtein


def distance(a: str, b: str) -> int:
    """Edit distance (insert/delete/substitute, unit costs). distance(a, a) == 0."""
    return int(Levenshtein.distance(a, b))
