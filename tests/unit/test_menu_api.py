"""Unit tests for menu API endpoints."""
import pytest
from sqlalchemy.exc import OperationalError

from tableorder.core.dependencies import get_menu_repository


class TestMenuAPI:
    """Test menu API endpoints."""

    def test_get_menu_empty(self, test_client):
        """Test GET /api/menu with no items."""
        response = test_client.get("/api/menu")

        assert response.status_code == 200
        assert response.json() == []

    def test_seed_menu_success(self, test_client, admin_headers, sample_menu):
        """Test POST /api/admin/seed-menu replaces the menu."""
        response = test_client.post(
            "/api/admin/seed-menu", json={"items": sample_menu}, headers=admin_headers
        )

        assert response.status_code == 200
        assert response.json() == {"ok": True, "count": 5}

    def test_menu_lists_available_sorted(self, test_client, admin_headers, sample_menu):
        """Test that the menu holds only available items, by category then name."""
        test_client.post("/api/admin/seed-menu", json={"items": sample_menu}, headers=admin_headers)

        data = test_client.get("/api/menu").json()

        assert [(item["category"], item["name"]) for item in data] == [
            ("General", "Bread"),
            ("Mains", "Burger"),
            ("Starters", "Bruschetta"),
            ("Starters", "Soup"),
        ]

    def test_menu_item_shape(self, test_client, admin_headers):
        """Test menu item JSON fields and normalization."""
        test_client.post(
            "/api/admin/seed-menu",
            json={"items": [{"name": "  Tea ", "price": "2.5", "category": " "}]},
            headers=admin_headers,
        )

        item = test_client.get("/api/menu").json()[0]

        assert set(item) == {"id", "name", "price", "category", "isAvailable", "createdAt", "updatedAt"}
        assert item["name"] == "Tea"
        assert item["price"] == 2.5
        assert item["category"] == "General"
        assert item["isAvailable"] is True

    def test_seed_menu_replaces_previous(self, test_client, admin_headers, sample_menu):
        """Test that a second seed wipes the first."""
        test_client.post("/api/admin/seed-menu", json={"items": sample_menu}, headers=admin_headers)
        response = test_client.post(
            "/api/admin/seed-menu",
            json={"items": [{"name": "Water", "price": 1}]},
            headers=admin_headers,
        )

        assert response.json()["count"] == 1
        names = [item["name"] for item in test_client.get("/api/menu").json()]
        assert names == ["Water"]

    @pytest.mark.parametrize(
        "body",
        [
            {},
            {"items": []},
            {"items": "Soup"},
            {"items": {"name": "Soup"}},
            {"items": [{"name": "", "price": 1}]},
            {"items": ["Soup"]},
        ],
    )
    def test_seed_menu_invalid(self, test_client, admin_headers, body):
        """Test that bad input is a 400 and leaves the menu alone."""
        test_client.post(
            "/api/admin/seed-menu", json={"items": [{"name": "Soup"}]}, headers=admin_headers
        )

        response = test_client.post("/api/admin/seed-menu", json=body, headers=admin_headers)

        assert response.status_code == 400
        assert "error" in response.json()
        assert [item["name"] for item in test_client.get("/api/menu").json()] == ["Soup"]

    def test_seed_menu_malformed_json(self, test_client, admin_headers):
        """Test that an unparseable body is a 400, not a 422."""
        response = test_client.post(
            "/api/admin/seed-menu",
            content=b"{items:",
            headers={**admin_headers, "Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json() == {"error": "invalid request body"}


class TestPersistenceFailures:
    """Test that storage failures surface as a generic 500."""

    def test_menu_storage_error(self, test_client):
        class BrokenRepository:
            async def list_available(self):
                raise OperationalError("SELECT", {}, Exception("disk I/O error"))

        test_client.app.dependency_overrides[get_menu_repository] = lambda: BrokenRepository()
        try:
            response = test_client.get("/api/menu")
        finally:
            test_client.app.dependency_overrides.clear()

        assert response.status_code == 500
        assert response.json() == {"error": "internal server error"}
