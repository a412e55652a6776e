"""Pytest fixtures — a fresh in-memory store and notifier for every test."""
import pytest
from fastapi.testclient import TestClient

from eventboard.main import app
from eventboard.services.change_notifier import ChangeNotifier, get_notifier
from eventboard.store import EntityStore, get_store


@pytest.fixture(scope="function")
def store():
    """An empty entity store."""
    return EntityStore()


@pytest.fixture(scope="function")
def notifier():
    """A notifier with a small backlog so overflow is easy to reach."""
    n = ChangeNotifier(queue_size=5)
    yield n
    n.close()


@pytest.fixture(scope="function")
def client(store, notifier):
    """FastAPI TestClient wired to the per-test store and notifier."""
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_notifier] = lambda: notifier
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Helpers: create records via the API, return the JSON response dict
# ---------------------------------------------------------------------------
def create_test_user(client: TestClient, username: str = "alice", email: str = None) -> dict:
    """Helper — POST /api/users and return response JSON."""
    body = {"username": username}
    if email is not None:
        body["email"] = email
    resp = client.post("/api/users/", json=body)
    assert resp.status_code == 201, resp.text
    return resp.json()


def create_test_location(client: TestClient, name: str = "Hall", desc: str = "Main hall") -> dict:
    """Helper — POST /api/locations and return response JSON."""
    resp = client.post("/api/locations/", json={"name": name, "desc": desc})
    assert resp.status_code == 201, resp.text
    return resp.json()


def create_test_event(client: TestClient, title: str = "Meetup", **extra) -> dict:
    """Helper — POST /api/events and return response JSON."""
    body = {"title": title, "desc": "d", "date": "2024-01-01", **extra}
    resp = client.post("/api/events/", json=body)
    assert resp.status_code == 201, resp.text
    return resp.json()


def create_test_participant(client: TestClient, event_id: str, user_id: str) -> dict:
    """Helper — POST /api/participants and return response JSON."""
    resp = client.post("/api/participants/", json={"event_id": event_id, "user_id": user_id})
    assert resp.status_code == 201, resp.text
    return resp.json()
