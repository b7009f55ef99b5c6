from pathlib import Path
from types import SimpleNamespace
import pytest

pytest.importorskip("customtkinter")

from app import AutocompleteApp  # noqa: E402
from backend.engine import Engine  # noqa: E402
from backend.errors import DictionaryUnavailableError  # noqa: E402


def _fake_app():
    scheduled, errors, loaded = [], [], []
    fake = SimpleNamespace(
        _engine=Engine(),
        after=lambda ms, fn: scheduled.append(fn),
        _on_load_error=errors.append,
        _on_load_ok=loaded.append,
    )
    return fake, scheduled, errors, loaded


def test_failed_load_reports_error_later(tmp_path: Path):
    fake, scheduled, errors, loaded = _fake_app()
    AutocompleteApp._load_worker(fake, [str(tmp_path / "missing.txt")])

    assert len(scheduled) == 1
    scheduled[0]()  # Tk runs the callback after the worker has returned
    assert len(errors) == 1 and isinstance(errors[0], DictionaryUnavailableError)
    assert loaded == []


def test_successful_load_reports_term_count(tmp_path: Path):
    words = tmp_path / "words.txt"
    words.write_text("cat\ncats\ncar\n", encoding="utf-8")
    fake, scheduled, errors, loaded = _fake_app()
    AutocompleteApp._load_worker(fake, [str(words)])

    scheduled[0]()
    assert loaded == [3] and errors == []
