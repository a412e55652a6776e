"""Tests for Location endpoints."""
from tests.conftest import create_test_location


class TestLocationCRUD:

    def test_create_location(self, client):
        data = create_test_location(client, name="Hall", desc="Main hall")
        assert data == {"id": data["id"], "name": "Hall", "desc": "Main hall", "lat": None, "lng": None}

    def test_create_location_with_coordinates(self, client):
        resp = client.post("/api/locations/", json={"name": "Pier", "desc": "d", "lat": 40.5, "lng": -73.25})
        assert resp.status_code == 201
        assert resp.json()["lat"] == 40.5
        assert resp.json()["lng"] == -73.25

    def test_update_coordinates_only(self, client):
        location = create_test_location(client)
        resp = client.patch(f"/api/locations/{location['id']}", json={"lat": 1.5})
        assert resp.status_code == 200
        data = resp.json()
        assert data["lat"] == 1.5
        assert data["lng"] is None
        assert data["name"] == "Hall"

    def test_update_rejects_non_numeric_lat(self, client):
        location = create_test_location(client)
        resp = client.patch(f"/api/locations/{location['id']}", json={"lat": "north"})
        assert resp.status_code == 422

    def test_get_location(self, client):
        location = create_test_location(client)
        assert client.get(f"/api/locations/{location['id']}").json() == location

    def test_get_unknown_location(self, client):
        assert client.get("/api/locations/nope").status_code == 404

    def test_delete_location(self, client):
        location = create_test_location(client)
        assert client.delete(f"/api/locations/{location['id']}").json() == location
        assert client.get("/api/locations/").json() == []

    def test_delete_unknown_location(self, client):
        resp = client.delete("/api/locations/nope")
        assert resp.status_code == 404
        assert resp.json()["id"] == "nope"

    def test_delete_all_locations(self, client):
        create_test_location(client, name="A")
        create_test_location(client, name="B")
        assert client.delete("/api/locations/").json() == {"deleted": 2}
