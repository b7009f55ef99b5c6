import json
from pathlib import Path
import pytest
from frontend.__main__ import main


def _seed(tmp: Path) -> str:
    path = tmp / "words.txt"
    path.write_text("cat\ncats\ncar\ncare\ndog\n", encoding="utf-8")
    return str(path)


def test_query_prints_top_n(tmp_path: Path, capsys):
    assert main(["--dict", _seed(tmp_path), "--query", "cat", "--num-results", "2"]) == 0
    assert capsys.readouterr().out.strip() == "[cat car]"


def test_json_output_default_count(tmp_path: Path, capsys):
    assert main(["--dict", _seed(tmp_path), "-q", "cat", "--json"]) == 0
    assert json.loads(capsys.readouterr().out) == ["cat", "car", "cats", "care"]


def test_missing_query_is_usage_error(tmp_path: Path):
    with pytest.raises(SystemExit) as exc:
        main(["--dict", _seed(tmp_path)])
    assert exc.value.code == 2


def test_missing_dictionary_exits_1(tmp_path: Path, capsys):
    assert main(["--dict", str(tmp_path / "nope.txt"), "-q", "cat"]) == 1
    assert "error:" in capsys.readouterr().err


def test_cache_is_reused(tmp_path: Path, capsys):
    words = tmp_path / "words.txt"
    words.write_text("cat\ncats\n", encoding="utf-8")
    cache = tmp_path / "words.pkl"
    assert main(["--dict", str(words), "--cache", str(cache), "-q", "cat"]) == 0
    words.unlink()
    # served from the cache even though the word list is gone
    assert main(["--dict", str(words), "--cache", str(cache), "-q", "cat"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["[cat cats]", "[cat cats]"]
