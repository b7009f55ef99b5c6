from backend.DB.index import PrefixIndex
from backend.search import gather_typo_suggestions


def _stems(words, query):
    return {s.query: s.weight for s in gather_typo_suggestions(PrefixIndex.from_words(words), query)}


def test_length_four_distance_one_is_admitted():
    stems = _stems(["bolt"], "bolx")
    assert stems == {"bolt": 1.0}


def test_length_five_distance_one_is_not_admitted():
    assert _stems(["bolxs"], "bolx") == {}


def test_length_gap_five_to_seven():
    # 7 letters, one edit away: still rejected
    assert _stems(["elephan"], "elephant") == {}


def test_length_eight_distance_two_is_admitted():
    assert _stems(["elephxnx"], "elephant") == {"elephxnx": 2.0}


def test_length_seven_distance_two_is_not_admitted():
    assert _stems(["elephxn"], "elephant") == {}


def test_long_terms_allow_two_edits():
    stems = _stems(["elephxnty", "elephant", "elxphxnty"], "elephant")
    assert stems == {"elephxnty": 2.0, "elephant": 0.0}


def test_short_terms_reject_two_edits():
    assert _stems(["care"], "cat") == {}


def test_typo_stems_are_never_marked_original():
    out = gather_typo_suggestions(PrefixIndex.from_words(["cat", "car"]), "cat")
    assert out and all(not s.is_original_query for s in out)
