# tests/test_session_api.py
import pytest
from fastapi.testclient import TestClient

from apps.api import sudoku_session_api as api
from sudoku_engine import EngineConfig


@pytest.fixture
def client():
    api.configure(EngineConfig(seed=42))
    yield TestClient(api.app)
    api.configure(EngineConfig())


def _new(client, **body):
    resp = client.post("/sessions", json=body)
    assert resp.status_code == 200
    return resp.json()


def _first(grid, empty=True):
    for r in range(9):
        for c in range(9):
            if (grid[r][c] == 0) == empty:
                return r, c
    raise AssertionError("no such cell")


def test_new_session_and_view(client):
    data = _new(client, difficulty="medium")
    sid = data["session_id"]
    assert data["state"] == "playing"
    assert data["elapsed"] == 0
    assert sum(v == 0 for row in data["grid"] for v in row) == 45
    assert client.get(f"/sessions/{sid}").json()["grid"] == data["grid"]


def test_select_place_clear_tick(client):
    data = _new(client, difficulty="easy", mode="anchored")
    sid = data["session_id"]
    gr, gc = _first(data["grid"], empty=False)
    assert client.post(f"/sessions/{sid}/select", json={"row": gr, "col": gc}).json()["result"] == "rejected"

    r, c = _first(data["grid"])
    assert client.post(f"/sessions/{sid}/select", json={"row": r, "col": c}).json() == {
        "result": "ok",
        "selected": [r, c],
    }
    hint = client.get(f"/sessions/{sid}/hint").json()
    assert hint["coordinate"] == [r, c]
    right = hint["digits"][0]
    wrong = right % 9 + 1

    res = client.post(f"/sessions/{sid}/place", json={"digit": wrong}).json()
    assert res["signal"] == "incorrect"
    assert res["errors"] == [[r, c]]
    res = client.post(f"/sessions/{sid}/clear").json()
    assert res["errors"] == []
    assert res["grid"][r][c] == 0

    assert client.post(f"/sessions/{sid}/tick").json() == {"elapsed": 1}


def test_reset_and_snapshot_restore(client):
    sid = _new(client, difficulty="easy")["session_id"]
    client.post(f"/sessions/{sid}/tick")
    view = client.post(f"/sessions/{sid}/reset", json={"difficulty": "expert"}).json()
    assert view["difficulty"] == "expert"
    assert view["elapsed"] == 0

    snap = client.get(f"/sessions/{sid}/snapshot").json()
    restored = client.post("/sessions/restore", json={"snapshot": snap}).json()
    assert restored["session_id"] != sid
    assert restored["grid"] == view["grid"]


def test_errors_map_to_http_codes(client):
    assert client.get("/sessions/nope").status_code == 404
    assert client.post("/sessions", json={"difficulty": "insane"}).status_code == 422
    assert client.post("/sessions/restore", json={"snapshot": {"grid": []}}).status_code == 422
    sid = _new(client)["session_id"]
    assert client.post(f"/sessions/{sid}/reset", json={"difficulty": "x"}).status_code == 422
    assert client.delete(f"/sessions/{sid}").status_code == 200
    assert client.post(f"/sessions/{sid}/tick").status_code == 404


def test_candidates_endpoint(client):
    grid = [[0] * 9 for _ in range(9)]
    grid[0] = [1, 2, 3, 4, 5, 6, 7, 8, 0]
    out = client.post("/candidates", json={"grid": grid}).json()["candidates"]
    assert out["r1c9"] == [9]
    assert len(out) == 73
    assert client.post("/candidates", json={"grid": [[0] * 9]}).status_code == 422
