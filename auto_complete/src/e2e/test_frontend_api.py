from pathlib import Path
import pytest
from backend.engine import Engine
from frontend.web import app as flask_app
import frontend.web as webmod


def _seed(tmp: Path) -> str:
    path = tmp / "words.txt"
    path.write_text("cat\ncats\ncar\ncare\ndog\n", encoding="utf-8")
    return str(path)


@pytest.fixture
def client(tmp_path: Path, monkeypatch):
    eng = Engine(); eng.build([_seed(tmp_path)])
    monkeypatch.setattr(webmod, "_engine", eng)
    yield flask_app.test_client()
    eng.shutdown()


@pytest.mark.e2e
def test_complete_api_json(client):
    rv = client.get("/api/complete?q=cat&k=3")
    assert rv.status_code == 200
    assert rv.get_json() == ["cat", "car", "cats"]


@pytest.mark.e2e
def test_complete_api_empty_query(client):
    rv = client.get("/api/complete?q=")
    assert rv.status_code == 200
    assert rv.get_json() == []


@pytest.mark.e2e
def test_health(client):
    rv = client.get("/api/health")
    assert rv.status_code == 200
    assert rv.get_json() == {"ok": True, "terms": 5}


@pytest.mark.e2e
def test_home_page_renders(client):
    r = client.get("/")
    assert r.status_code == 200
    html = r.data.decode("utf-8", errors="ignore").lower()
    assert "autocomplete" in html and "/api/complete" in html


@pytest.mark.e2e
def test_not_ready_is_503(monkeypatch):
    monkeypatch.setattr(webmod, "_engine", None)
    client = flask_app.test_client()
    assert client.get("/api/complete?q=cat").status_code == 503
    health = client.get("/api/health")
    assert health.status_code == 503
    assert health.get_json()["ok"] is False
