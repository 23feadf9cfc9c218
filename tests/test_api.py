from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from api.main import create_app


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setenv("KALKULATOR_MAX_SESSIONS", "3")
    with TestClient(create_app()) as c:
        yield c


def _new_session(client) -> str:
    response = client.post("/sessions")
    assert response.status_code == 201
    return response.json()["session_id"]


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "version": "0.1.0", "sessions": 0}


def test_create_session_returns_initial_view(client):
    response = client.post("/sessions")
    body = response.json()

    assert body["state"] == {
        "current_operand": None,
        "previous_operand": None,
        "operation": None,
        "overwrite": False,
    }
    assert body["display"] == {"previous": " ", "current": None}


def test_post_events_follow_reducer(client):
    session_id = _new_session(client)

    for event in [
        {"type": "add-digit", "digit": "1"},
        {"type": "add-digit", "digit": "0"},
        {"type": "choose-operation", "operation": "/"},
        {"type": "add-digit", "digit": "4"},
    ]:
        response = client.post(f"/sessions/{session_id}/events", json={"event": event})
        assert response.status_code == 200

    assert response.json()["display"] == {"previous": "10 /", "current": "4"}

    response = client.post(f"/sessions/{session_id}/events", json={"event": {"type": "evaluate"}})
    state = response.json()["state"]

    assert state["current_operand"] == "2.5"
    assert state["overwrite"] is True
    assert client.get(f"/sessions/{session_id}").json()["state"] == state


def test_post_keys(client):
    session_id = _new_session(client)

    response = client.post(f"/sessions/{session_id}/keys", json={"keys": "999+1="})

    assert response.status_code == 200
    assert response.json()["display"]["current"] == "1,000"


def test_invalid_event_is_rejected(client):
    session_id = _new_session(client)

    response = client.post(
        f"/sessions/{session_id}/events",
        json={"event": {"type": "choose-operation", "operation": "%"}},
    )

    assert response.status_code == 422


def test_unknown_key_is_rejected(client):
    session_id = _new_session(client)

    response = client.post(f"/sessions/{session_id}/keys", json={"keys": "1^2"})

    assert response.status_code == 422
    assert client.get(f"/sessions/{session_id}").json()["state"]["current_operand"] is None


def test_unknown_session_returns_404(client):
    assert client.get("/sessions/missing").status_code == 404
    assert client.post("/sessions/missing/keys", json={"keys": "1"}).status_code == 404
    assert client.delete("/sessions/missing").status_code == 404


def test_list_and_delete_sessions(client):
    first = _new_session(client)
    second = _new_session(client)

    assert client.get("/sessions").json() == [first, second]
    assert client.delete(f"/sessions/{first}").status_code == 204
    assert client.get("/sessions").json() == [second]


def test_session_limit_comes_from_settings(client):
    ids = [_new_session(client) for _ in range(4)]

    assert client.get("/sessions").json() == ids[1:]


def test_evaluate_endpoint(client):
    response = client.post(
        "/evaluate",
        json={"previous_operand": "5", "current_operand": "3", "operation": "*"},
    )

    assert response.json() == {"result": "15"}


def test_evaluate_endpoint_returns_empty_result_for_non_numeric(client):
    response = client.post(
        "/evaluate",
        json={"previous_operand": "abc", "current_operand": "3", "operation": "+"},
    )

    assert response.json() == {"result": ""}


def test_evaluate_endpoint_rejects_unknown_operation(client):
    response = client.post(
        "/evaluate",
        json={"previous_operand": "1", "current_operand": "3", "operation": "^"},
    )

    assert response.status_code == 422
