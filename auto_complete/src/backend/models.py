from __future__ import annotations
from dataclasses import dataclass
from functools import total_ordering


@total_ordering
@dataclass(frozen=True, slots=True, eq=False)
class Suggestion:
    """
    One candidate under consideration: a stem or a completion.

    weight             lower is better; never negative
    query              the candidate text
    is_original_query  True for the literal input and completions reached from it
    """
    weight: float
    query: str
    is_original_query: bool = False

    def rank_key(self) -> tuple[float, int, str]:
        # weight, then shorter text, then alphabetical
        return (self.weight, len(self.query), self.query)

    @property
    def dedup_key(self) -> str:
        return self.query.lower()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Suggestion):
            return NotImplemented
        return self.rank_key() == other.rank_key()

    def __lt__(self, other: "Suggestion") -> bool:
        if not isinstance(other, Suggestion):
            return NotImplemented
        return self.rank_key() < other.rank_key()

    def __hash__(self) -> int:
        return hash(self.rank_key())
