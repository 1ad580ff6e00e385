import pytest

from boyer_moore import config as CFG
from visualizer.web import app as flask_app


@pytest.fixture
def client():
    return flask_app.test_client()


@pytest.mark.e2e
def test_api_search_with_trace(client):
    rv = client.get("/api/search?pattern=AAA&text=AAAAA")
    assert rv.status_code == 200
    data = rv.get_json()
    assert data["matches"] == [0, 1, 2]
    assert len(data["steps"]) == 3
    assert data["tables"]["shift"] == [1, 1, 2, 3]
    assert data["tables"]["last_occurrence"] == {"A": 2}


@pytest.mark.e2e
def test_api_search_without_trace(client):
    rv = client.get("/api/search?pattern=ABC&text=ABCABC&trace=0")
    data = rv.get_json()
    assert data["matches"] == [0, 3]
    assert "steps" not in data


@pytest.mark.e2e
def test_api_search_post_json(client):
    rv = client.post("/api/search", json={"pattern": "TCTA", "text": "GCTAGCTCTACGAGTCTA", "trace": False})
    assert rv.status_code == 200
    assert rv.get_json()["matches"] == [6, 14]


@pytest.mark.e2e
def test_api_empty_pattern_is_400(client):
    rv = client.get("/api/search?pattern=&text=abc")
    assert rv.status_code == 400
    assert "empty" in rv.get_json()["error"]


@pytest.mark.e2e
def test_api_rejects_oversized_text(client, monkeypatch):
    monkeypatch.setattr(CFG, "MAX_TEXT_LENGTH", 5)
    rv = client.get("/api/search?pattern=a&text=aaaaaa")
    assert rv.status_code == 400


@pytest.mark.e2e
def test_api_rejects_non_string_fields(client):
    rv = client.post("/api/search", json={"pattern": 3, "text": "abc"})
    assert rv.status_code == 400


@pytest.mark.e2e
def test_health_and_home_page(client):
    r = client.get("/health")
    assert r.status_code == 200 and r.get_json() == {"ok": True}
    r = client.get("/")
    assert r.status_code == 200
    assert "boyer-moore" in r.data.decode("utf-8").lower()


@pytest.mark.e2e
@pytest.mark.parametrize("body", [["ABC", "ABCABC"], "ABC", 42])
def test_api_rejects_non_object_json_body(client, body):
    rv = client.post("/api/search", json=body)
    assert rv.status_code == 400
    assert "JSON object" in rv.get_json()["error"]


@pytest.mark.e2e
def test_api_null_trace_means_no_trace(client):
    rv = client.post("/api/search", json={"pattern": "ABC", "text": "ABCABC", "trace": None})
    assert rv.status_code == 200
    assert "steps" not in rv.get_json()
