import pytest

from fuzzyline.engine import Engine
from fuzzyline_web.web import app as flask_app
import fuzzyline_web.web as webmod

LINES = [
    "To be, or not to be: that is the question.",
    "",
    "Whether 'tis nobler in the mind to suffer",
    "The slings and arrows of outrageous fortune,",
]


@pytest.fixture
def client(monkeypatch):
    eng = Engine()
    eng.load_lines(LINES, source="hamlet")
    monkeypatch.setattr(webmod, "_engine", eng)
    yield flask_app.test_client()
    eng.shutdown()


@pytest.mark.e2e
def test_find_api_json(client):
    rv = client.get("/api/find?q=slings%20arrows&k=2")
    assert rv.status_code == 200
    data = rv.get_json()
    assert isinstance(data, list) and len(data) == 2
    first = data[0]
    for key in ("index", "line", "score"):
        assert key in first
    assert first["index"] == 3
    assert first["line"] == LINES[3]


@pytest.mark.e2e
def test_find_api_empty_query(client):
    rv = client.get("/api/find?q=")
    assert rv.status_code == 200
    assert rv.get_json() == []


@pytest.mark.e2e
def test_health_and_home(client):
    rv = client.get("/health")
    assert rv.status_code == 200
    assert rv.get_json() == {"ok": True, "lines": 3}
    assert client.get("/").status_code == 200


@pytest.mark.e2e
def test_not_loaded(monkeypatch):
    monkeypatch.setattr(webmod, "_engine", None)
    c = flask_app.test_client()
    assert c.get("/health").status_code == 503
    assert c.get("/api/find?q=hello").status_code == 503


@pytest.mark.e2e
def test_main_exits_one_when_document_missing(tmp_path, capsys, monkeypatch):
    monkeypatch.setattr(webmod, "_engine", None)
    assert webmod.main(["-d", str(tmp_path / "missing.txt"), "--policy", "weighted"]) == 1
    assert "Could not open source file" in capsys.readouterr().out


@pytest.mark.e2e
def test_main_loads_document_and_runs_app(tmp_path, monkeypatch):
    doc = tmp_path / "hamlet.txt"
    doc.write_text("\n".join(LINES) + "\n", encoding="utf-8")
    seen = {}

    def fake_run(**kwargs):
        seen.update(kwargs)
        seen["policy"] = webmod._engine.policy.value
        seen["lines"] = len(webmod._engine.document)

    monkeypatch.setattr(webmod, "_engine", None)
    monkeypatch.setattr(flask_app, "run", fake_run)
    assert webmod.main(["-d", str(doc), "--policy", "weighted", "--port", "9123"]) == 0
    assert seen["policy"] == "weighted"
    assert seen["lines"] == 3
    assert seen["port"] == 9123
    assert not webmod._engine.loaded
