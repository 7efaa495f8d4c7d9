"""
Integration tests against running product and inventory services.

Start both services (and their databases), then run with
INTEGRATION_PRODUCTS_URL / INTEGRATION_INVENTORY_URL pointing at them.
Skipped when those variables are not set.
"""

import os
import time
import uuid

import httpx
import pytest

PRODUCTS_URL = os.getenv("INTEGRATION_PRODUCTS_URL")
INVENTORY_URL = os.getenv("INTEGRATION_INVENTORY_URL")
HEALTH_CHECK_RETRIES = 30
HEALTH_CHECK_DELAY = 2

pytestmark = pytest.mark.skipif(
    not (PRODUCTS_URL and INVENTORY_URL),
    reason="INTEGRATION_PRODUCTS_URL and INTEGRATION_INVENTORY_URL not set",
)


class TestPlatformIntegration:
    """End-to-end checks across both services"""

    @classmethod
    def setup_class(cls):
        cls.products = httpx.Client(base_url=PRODUCTS_URL, timeout=30.0)
        cls.inventory = httpx.Client(base_url=INVENTORY_URL, timeout=30.0)
        for client in (cls.products, cls.inventory):
            cls.wait_for_service(client)

    @classmethod
    def teardown_class(cls):
        cls.products.close()
        cls.inventory.close()

    @staticmethod
    def wait_for_service(client: httpx.Client):
        for attempt in range(HEALTH_CHECK_RETRIES):
            try:
                if client.get("/health").status_code == 200:
                    return
            except httpx.HTTPError as e:
                print(f"Attempt {attempt + 1}/{HEALTH_CHECK_RETRIES} on {client.base_url}: {e}")
            time.sleep(HEALTH_CHECK_DELAY)
        raise RuntimeError(f"{client.base_url} failed to start within timeout period")

    def test_health_endpoints(self):
        for client in (self.products, self.inventory):
            for endpoint in ("/health", "/health/live", "/health/ready"):
                response = client.get(endpoint)
                assert response.status_code in (200, 503)
                assert "status" in response.json()

    def test_products_crud(self):
        response = self.products.post("/api/products", json={
            "name": "Integration Product",
            "price": 12.5,
            "category": "Integration",
        })
        assert response.status_code == 201
        product_id = response.json()["id"]

        response = self.products.get(f"/api/products/{product_id}")
        assert response.status_code == 200

        assert self.products.delete(f"/api/products/{product_id}").status_code == 204
        assert self.products.get(f"/api/products/{product_id}").status_code == 404

    def test_stock_flow_across_services(self):
        code = f"IT-{uuid.uuid4().hex[:8]}"
        response = self.inventory.post("/api/inventory", json={
            "productCode": code,
            "quantity": 10,
            "warehouseLocation": "IT",
            "productId": 1,
        })
        assert response.status_code == 201
        item_id = response.json()["id"]

        try:
            response = self.inventory.patch(f"/api/inventory/quantity/{code}", json={"quantityChange": -15})
            assert response.status_code == 400
            assert self.inventory.get(f"/api/inventory/product-code/{code}").json()["quantity"] == 10

            response = self.inventory.patch(f"/api/inventory/quantity/{code}", json={"quantityChange": -10})
            assert response.status_code == 200
            assert response.json()["quantity"] == 0

            response = self.products.get(f"/api/products/availability/{code}")
            assert response.json() == {"productCode": code, "inStock": False}
        finally:
            self.inventory.delete(f"/api/inventory/{item_id}")

    def test_unknown_code_is_not_in_stock(self):
        response = self.products.get("/api/products/availability/NO-SUCH-CODE")
        assert response.status_code == 200
        assert response.json()["inStock"] is False
