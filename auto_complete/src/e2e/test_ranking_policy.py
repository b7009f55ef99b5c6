from backend.models import Suggestion
from backend.search import unique, rank, to_strings


def test_weight_then_length_then_alphabetical():
    items = [
        Suggestion(1.0, "cats"),
        Suggestion(1.0, "car"),
        Suggestion(0.5, "zebra"),
        Suggestion(1.0, "cab"),
        Suggestion(3.0, "a"),
    ]
    assert to_strings(rank(items)) == ["zebra", "cab", "car", "cats", "a"]


def test_comparison_operators_follow_rank_key():
    a = Suggestion(0.5, "dog")
    b = Suggestion(0.5, "dogs")
    assert a < b
    assert sorted([b, a]) == [a, b]
    # identical (weight, length, text) compare equal regardless of flag
    assert Suggestion(1.0, "x", True) == Suggestion(1.0, "x", False)


def test_unique_keeps_first_seen_even_if_worse():
    items = [
        Suggestion(2.0, "Car"),
        Suggestion(0.5, "car"),
        Suggestion(1.0, "cart"),
        Suggestion(0.0, "CART"),
    ]
    out = unique(items)
    assert [(s.weight, s.query) for s in out] == [(2.0, "Car"), (1.0, "cart")]


def test_rank_is_stable_on_duplicates():
    first = Suggestion(1.0, "same", True)
    second = Suggestion(1.0, "same", False)
    ranked = rank([first, second])
    assert ranked[0] is first and ranked[1] is second
