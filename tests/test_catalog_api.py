"""HTTP tests for the catalog API (users, products, health)."""

from __future__ import annotations

from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from doc_agent_api.app.main import create_app
from doc_agent_api.app.services.catalog_store import CatalogStore


def _ts(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


# =============================================================================
# Health
# =============================================================================


def test_health(catalog_client: TestClient):
    response = catalog_client.get("/api/v1/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["version"] == "1.0.0"
    _ts(body["timestamp"])


def test_health_details(catalog_client: TestClient):
    body = catalog_client.get("/api/v1/health/details").json()
    assert body["status"] == "healthy"
    assert body["uptime"].endswith("s")
    assert set(body["system"]) == {"python_version", "num_cpu", "num_threads", "os", "arch"}
    assert body["system"]["num_cpu"] >= 1
    assert "fastapi" in body["dependencies"]
    assert body["dependencies"]["runtime"].startswith("python")


# =============================================================================
# Users
# =============================================================================


def test_list_sample_users(catalog_client: TestClient):
    response = catalog_client.get("/api/v1/users")
    assert response.status_code == 200
    body = response.json()
    assert body["count"] == 2
    assert {u["id"] for u in body["users"]} == {"usr_001", "usr_002"}


def test_get_user(catalog_client: TestClient):
    response = catalog_client.get("/api/v1/users/usr_001")
    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "Alice Johnson"
    assert body["role"] == "admin"
    assert body["created_at"] is not None


def test_get_missing_user(catalog_client: TestClient):
    response = catalog_client.get("/api/v1/users/usr_404")
    assert response.status_code == 404
    assert response.json() == {"error": "user not found"}


def test_create_user(catalog_client: TestClient):
    response = catalog_client.post(
        "/api/v1/users",
        json={"id": "usr_001", "name": "Carol", "email": "carol@example.com", "role": "user"},
    )
    assert response.status_code == 201
    body = response.json()
    assert body["id"] == "usr_1"
    assert body["name"] == "Carol"
    assert body["phone_number"] == ""
    assert body["created_at"] == body["updated_at"]

    assert catalog_client.get("/api/v1/users/usr_1").json() == body
    assert catalog_client.get("/api/v1/users/usr_001").json()["name"] == "Alice Johnson"
    assert catalog_client.get("/api/v1/users").json()["count"] == 3


@pytest.mark.parametrize(
    "content",
    [b"{not json", b"[1, 2, 3]", b'"just a string"', b'{"name": ["a list"]}'],
)
def test_create_user_rejects_malformed_body(catalog_client: TestClient, catalog: CatalogStore, content: bytes):
    response = catalog_client.post(
        "/api/v1/users", content=content, headers={"Content-Type": "application/json"}
    )
    assert response.status_code == 400
    assert response.json() == {"error": "invalid request body"}
    assert len(catalog.users) == 2


def test_update_user_replaces_fields(catalog_client: TestClient):
    before = catalog_client.get("/api/v1/users/usr_001").json()
    response = catalog_client.put("/api/v1/users/usr_001", json={"id": "usr_999", "name": "Alice J."})
    assert response.status_code == 200
    body = response.json()
    assert body["id"] == "usr_001"
    assert body["name"] == "Alice J."
    assert body["email"] == ""
    assert body["role"] == ""
    assert body["created_at"] == before["created_at"]
    assert _ts(body["updated_at"]) >= _ts(body["created_at"])
    assert catalog_client.get("/api/v1/users/usr_999").status_code == 404


def test_update_missing_user(catalog_client: TestClient, catalog: CatalogStore):
    response = catalog_client.put("/api/v1/users/usr_404", json={"name": "Nobody"})
    assert response.status_code == 404
    assert response.json() == {"error": "user not found"}
    assert len(catalog.users) == 2


def test_update_user_with_malformed_body(catalog_client: TestClient):
    response = catalog_client.put(
        "/api/v1/users/usr_001", content=b"oops", headers={"Content-Type": "application/json"}
    )
    assert response.status_code == 400
    assert catalog_client.get("/api/v1/users/usr_001").json()["name"] == "Alice Johnson"


def test_delete_user(catalog_client: TestClient):
    response = catalog_client.delete("/api/v1/users/usr_002")
    assert response.status_code == 200
    assert response.json() == {"message": "user deleted successfully"}
    assert catalog_client.get("/api/v1/users/usr_002").status_code == 404
    assert catalog_client.get("/api/v1/users").json()["count"] == 1

    again = catalog_client.delete("/api/v1/users/usr_002")
    assert again.status_code == 404
    assert again.json() == {"error": "user not found"}


def test_user_profile(catalog_client: TestClient):
    response = catalog_client.get("/api/v1/users/usr_001/profile")
    assert response.status_code == 200
    body = response.json()
    assert body["user"]["id"] == "usr_001"
    assert body["profile"] == {
        "has_avatar": False,
        "has_phone_number": False,
        "is_admin": True,
        "account_age_days": 1,
    }


def test_profile_of_new_user(catalog_client: TestClient):
    user = catalog_client.post(
        "/api/v1/users", json={"name": "Eve", "phone_number": "+1-555-0199", "avatar": "eve.png"}
    ).json()
    profile = catalog_client.get(f"/api/v1/users/{user['id']}/profile").json()["profile"]
    assert profile == {"has_avatar": True, "has_phone_number": True, "is_admin": False, "account_age_days": 0}


def test_profile_of_missing_user(catalog_client: TestClient):
    response = catalog_client.get("/api/v1/users/usr_404/profile")
    assert response.status_code == 404


# =============================================================================
# Products
# =============================================================================


def test_list_sample_products(catalog_client: TestClient):
    body = catalog_client.get("/api/v1/products").json()
    assert body["count"] == 2
    by_id = {p["id"]: p for p in body["products"]}
    assert by_id["prd_001"]["price"] == 999.99
    assert by_id["prd_002"]["stock"] == 50


def test_product_crud(catalog_client: TestClient):
    created = catalog_client.post(
        "/api/v1/products", json={"name": "Monitor", "description": "27 inch", "price": 249.5, "stock": 7}
    )
    assert created.status_code == 201
    product = created.json()
    assert product["id"] == "prd_1"

    updated = catalog_client.put(f"/api/v1/products/{product['id']}", json={"name": "Monitor", "price": 199.0})
    assert updated.status_code == 200
    assert updated.json()["description"] == ""
    assert updated.json()["stock"] == 0
    assert updated.json()["created_at"] == product["created_at"]

    deleted = catalog_client.delete(f"/api/v1/products/{product['id']}")
    assert deleted.status_code == 200
    assert deleted.json() == {"message": "product deleted successfully"}
    assert catalog_client.get(f"/api/v1/products/{product['id']}").json() == {"error": "product not found"}


def test_product_with_wrong_field_type(catalog_client: TestClient, catalog: CatalogStore):
    response = catalog_client.post("/api/v1/products", json={"name": "Pen", "price": "cheap"})
    assert response.status_code == 400
    assert response.json() == {"error": "invalid request body"}
    assert len(catalog.products) == 2


def test_missing_product_operations(catalog_client: TestClient):
    assert catalog_client.get("/api/v1/products/prd_404").status_code == 404
    assert catalog_client.put("/api/v1/products/prd_404", json={"name": "x"}).status_code == 404
    assert catalog_client.delete("/api/v1/products/prd_404").status_code == 404
    assert catalog_client.get("/api/v1/products").json()["count"] == 2


# =============================================================================
# Application factory
# =============================================================================


def test_apps_do_not_share_state(settings):
    first = TestClient(create_app(settings, CatalogStore()))
    second = TestClient(create_app(settings, CatalogStore()))
    first.post("/api/v1/users", json={"name": "Only here"})
    assert first.get("/api/v1/users").json()["count"] == 1
    assert second.get("/api/v1/users").json()["count"] == 0


def test_unseeded_catalog_from_settings(settings):
    settings.seed_sample_data = False
    client = TestClient(create_app(settings))
    assert client.get("/api/v1/users").json() == {"users": [], "count": 0}
    assert client.get("/api/v1/products").json() == {"products": [], "count": 0}


def test_count_policy_from_settings(settings):
    settings.seed_sample_data = False
    settings.id_policy = "count"
    client = TestClient(create_app(settings))
    assert client.post("/api/v1/users", json={"name": "A"}).json()["id"] == "usr_1"
    assert client.post("/api/v1/users", json={"name": "B"}).json()["id"] == "usr_2"


def test_unknown_route_uses_error_shape(catalog_client: TestClient):
    response = catalog_client.get("/api/v1/orders")
    assert response.status_code == 404
    assert "error" in response.json()
