"""HTTP tests for the category routes."""

from __future__ import annotations

from typing import Dict

from fastapi.testclient import TestClient


class TestCategoryRoutes:
    def test_admin_lifecycle(self, client: TestClient, admin_headers: Dict) -> None:
        created = client.post("/api/categories", json={"name": "Paint"}, headers=admin_headers)
        assert created.status_code == 201
        category_id = created.json()["id"]

        renamed = client.put(
            f"/api/categories/{category_id}",
            json={"id": category_id, "name": "Paints"},
            headers=admin_headers,
        )
        assert renamed.json() == {"id": category_id, "name": "Paints"}

        assert client.delete(f"/api/categories/{category_id}", headers=admin_headers).status_code == 204
        assert client.get(f"/api/categories/{category_id}", headers=admin_headers).status_code == 404

    def test_customer_reads_only(self, client: TestClient, customer_headers: Dict, make_category) -> None:
        make_category("Paint")

        assert client.get("/api/categories", headers=customer_headers).status_code == 200
        assert (
            client.post("/api/categories", json={"name": "X"}, headers=customer_headers).status_code
            == 403
        )

    def test_delete_with_products(
        self, client: TestClient, admin_headers: Dict, make_category, make_product
    ) -> None:
        category = make_category("Building materials")
        make_product(category)

        response = client.delete(f"/api/categories/{category.id}", headers=admin_headers)

        assert response.status_code == 400
        assert "still has products" in response.json()["error"]

    def test_id_mismatch(self, client: TestClient, admin_headers: Dict) -> None:
        response = client.put("/api/categories/1", json={"id": 5, "name": "X"}, headers=admin_headers)
        assert response.status_code == 400
