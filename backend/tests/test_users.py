"""Tests for User endpoints."""
from tests.conftest import create_test_event, create_test_user


class TestUserCRUD:
    """User create / get / update / list / delete."""

    def test_create_user(self, client):
        data = create_test_user(client, username="alice")
        assert data["username"] == "alice"
        assert data["email"] is None
        assert data["id"]

    def test_create_user_with_email(self, client):
        data = create_test_user(client, username="bob", email="bob@example.com")
        assert data["email"] == "bob@example.com"

    def test_create_user_requires_username(self, client):
        resp = client.post("/api/users/", json={"email": "x@example.com"})
        assert resp.status_code == 422

    def test_get_user(self, client):
        user = create_test_user(client)
        resp = client.get(f"/api/users/{user['id']}")
        assert resp.status_code == 200
        assert resp.json() == user

    def test_get_user_not_found(self, client):
        resp = client.get("/api/users/does-not-exist")
        assert resp.status_code == 404

    def test_update_user_keeps_unsupplied_fields(self, client):
        user = create_test_user(client, username="alice", email="a@example.com")
        resp = client.patch(f"/api/users/{user['id']}", json={"username": "alicia"})
        assert resp.status_code == 200
        assert resp.json() == {"id": user["id"], "username": "alicia", "email": "a@example.com"}

    def test_update_user_explicit_null_clears_email(self, client):
        user = create_test_user(client, email="a@example.com")
        resp = client.patch(f"/api/users/{user['id']}", json={"email": None})
        assert resp.status_code == 200
        assert resp.json()["email"] is None

    def test_update_user_null_username_rejected(self, client):
        user = create_test_user(client)
        resp = client.patch(f"/api/users/{user['id']}", json={"username": None})
        assert resp.status_code == 422

    def test_update_user_cannot_change_id(self, client):
        user = create_test_user(client)
        resp = client.patch(f"/api/users/{user['id']}", json={"id": "other"})
        assert resp.status_code == 422

    def test_update_unknown_user(self, client):
        resp = client.patch("/api/users/nope", json={"username": "x"})
        assert resp.status_code == 404
        assert resp.json()["detail"] == "User not found"

    def test_list_users_in_insertion_order(self, client):
        create_test_user(client, username="alice")
        create_test_user(client, username="bob")
        create_test_user(client, username="carol")
        resp = client.get("/api/users/")
        assert resp.status_code == 200
        assert [u["username"] for u in resp.json()] == ["alice", "bob", "carol"]

    def test_update_preserves_position(self, client):
        a = create_test_user(client, username="alice")
        create_test_user(client, username="bob")
        client.patch(f"/api/users/{a['id']}", json={"username": "zed"})
        names = [u["username"] for u in client.get("/api/users/").json()]
        assert names == ["zed", "bob"]

    def test_delete_user(self, client):
        user = create_test_user(client)
        resp = client.delete(f"/api/users/{user['id']}")
        assert resp.status_code == 200
        assert resp.json() == user
        assert client.get(f"/api/users/{user['id']}").status_code == 404

    def test_delete_unknown_user(self, client):
        assert client.delete("/api/users/nope").status_code == 404

    def test_delete_all_users(self, client):
        create_test_user(client, username="alice")
        create_test_user(client, username="bob")
        resp = client.delete("/api/users/")
        assert resp.status_code == 200
        assert resp.json() == {"deleted": 2}
        assert client.get("/api/users/").json() == []

    def test_delete_all_users_when_empty(self, client):
        assert client.delete("/api/users/").json() == {"deleted": 0}


class TestUserEvents:
    """User → Events (organized)."""

    def test_user_events(self, client):
        user = create_test_user(client)
        other = create_test_user(client, username="bob")
        e1 = create_test_event(client, title="One", user_id=user["id"])
        create_test_event(client, title="Two", user_id=other["id"])
        e3 = create_test_event(client, title="Three", user_id=user["id"])

        resp = client.get(f"/api/users/{user['id']}/events")
        assert resp.status_code == 200
        assert [e["id"] for e in resp.json()] == [e1["id"], e3["id"]]

    def test_user_without_events(self, client):
        user = create_test_user(client)
        resp = client.get(f"/api/users/{user['id']}/events")
        assert resp.status_code == 200
        assert resp.json() == []

    def test_events_of_unknown_user(self, client):
        assert client.get("/api/users/nope/events").status_code == 404

    def test_deleting_user_keeps_organized_events(self, client):
        user = create_test_user(client)
        event = create_test_event(client, user_id=user["id"])
        client.delete(f"/api/users/{user['id']}")

        resp = client.get(f"/api/events/{event['id']}")
        assert resp.status_code == 200
        assert resp.json()["user_id"] == user["id"]
        assert client.get(f"/api/events/{event['id']}/user").json() is None
