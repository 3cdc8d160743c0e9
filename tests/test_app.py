"""
User Service Tests - HTTP endpoint tests.

Tests for the /api/users CRUD routes, health check and metrics.
"""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from user_service.app import create_app
from user_service.config import Settings
from user_service.core.results import SingleResult
from user_service.domain.exceptions import StoreFailureError
from user_service.repositories.user_repository import UserRepository

TEST_ID = "e2ac4fba-ce48-42fe-a0b9-c7555b65154f"
WOJTEK_ID = "10b86e02-109d-488a-8e25-8bb63a7c4f1c"
ADMIN_ID = "4ca315c0-e214-4b62-9c2a-71d78e29412e"


@pytest.fixture
def test_settings():
    """Settings for tests"""
    return Settings(LOG_JSON=False, LOG_LEVEL="WARNING", CACHE_NAME="testCache")


@pytest.fixture
def client(test_settings, store):
    """Create a test client over a seeded in-memory store"""
    app = create_app(settings=test_settings, store=store)
    with TestClient(app) as test_client:
        yield test_client


class TestUserRoutes:
    """Test user CRUD endpoints."""

    def test_get_all_users(self, client):
        """Test listing returns the seeded users."""
        response = client.get("/api/users")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/json")
        assert {user["id"] for user in response.json()} == {TEST_ID, WOJTEK_ID, ADMIN_ID}

    def test_get_one_user(self, client):
        """Test fetching a seeded user."""
        response = client.get(f"/api/users/{TEST_ID}")

        assert response.status_code == 200
        assert response.json() == {"id": TEST_ID, "login": "test", "age": 10}

    def test_get_missing_user(self, client):
        """Test unknown id returns 404."""
        response = client.get("/api/users/does-not-exist")
        assert response.status_code == 404

    def test_update_user(self, client):
        """Test PUT replaces login and age under the same id."""
        response = client.put(f"/api/users/{WOJTEK_ID}", json={"login": "update-login", "age": 40})

        assert response.status_code == 200
        assert response.json() == {"id": WOJTEK_ID, "login": "update-login", "age": 40}
        assert client.get(f"/api/users/{WOJTEK_ID}").json()["login"] == "update-login"

    def test_update_missing_user(self, client):
        """Test PUT on unknown id returns 404 and creates nothing."""
        response = client.put("/api/users/nope", json={"login": "x", "age": 1})

        assert response.status_code == 404
        assert len(client.get("/api/users").json()) == 3

    def test_create_user(self, client):
        """Test POST creates a user with a generated id."""
        response = client.post("/api/users", json={"login": "super-test", "age": 99})

        assert response.status_code == 201
        body = response.json()
        assert body["login"] == "super-test"
        assert body["age"] == 99
        assert response.headers["location"] == f"/api/users/{body['id']}"
        assert client.get(response.headers["location"]).status_code == 200

    def test_create_user_invalid_body(self, client):
        """Test invalid body is rejected."""
        response = client.post("/api/users", json={"login": "x"})
        assert response.status_code == 422

    def test_delete_user(self, client):
        """Test DELETE removes the user."""
        response = client.delete(f"/api/users/{ADMIN_ID}")

        assert response.status_code == 204
        assert response.content == b""
        assert client.get(f"/api/users/{ADMIN_ID}").status_code == 404

    def test_delete_missing_user(self, client):
        """Test DELETE on unknown id returns 404."""
        assert client.delete("/api/users/nope").status_code == 404


class TestStoreFailures:
    """Test store failures are reported to HTTP callers."""

    def test_store_failure_returns_503(self, test_settings, store):
        """Test a failing repository maps to 503."""
        failed: SingleResult = SingleResult("find_by_id")
        failed.error(StoreFailureError("get", ConnectionError("node unavailable")))
        repository = MagicMock(spec=UserRepository)
        repository.find_by_id.return_value = failed

        settings = test_settings.model_copy(update={"SEED_ON_STARTUP": False})
        app = create_app(settings=settings, store=store, repository=repository)

        with TestClient(app) as test_client:
            response = test_client.get(f"/api/users/{TEST_ID}")

        assert response.status_code == 503
        assert response.json()["operation"] == "get"


class TestHealth:
    """Test health and metrics endpoints."""

    def test_health(self, client):
        """Test health check reports entry count."""
        response = client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["service"] == "user-service"
        assert body["cache_entries"] == 3

    def test_metrics(self, client):
        """Test metrics expose repository counters."""
        client.get(f"/api/users/{TEST_ID}")

        response = client.get("/metrics")

        assert response.status_code == 200
        assert "user_repository_operations_total" in response.text
