"""Product service asking a real inventory app for stock, over an in-process HTTP client."""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("RUN_MIGRATIONS", "false")

import pytest
from fastapi.testclient import TestClient

import inventory_service.domain.models as inventory_models
from inventory_service.infrastructure.db import get_db as get_inventory_db
from inventory_service.main import app as inventory_app
from product_service.application.service import ProductService
from product_service.infrastructure.inventory_client import HttpInventoryClient
from product_service.infrastructure.repository import ProductRepository


@pytest.fixture
def inventory_http(session_factory):
    engine, TestingSession = session_factory()
    inventory_models.Base.metadata.create_all(engine)
    session = TestingSession()
    session.add(inventory_models.InventoryItem(
        product_code="PROD-001", quantity=10, warehouse_location="A", product_id=1,
    ))
    session.commit()

    def override_get_db():
        yield session

    inventory_app.dependency_overrides[get_inventory_db] = override_get_db
    try:
        yield TestClient(inventory_app)
    finally:
        inventory_app.dependency_overrides.pop(get_inventory_db, None)
        session.close()
        engine.dispose()


@pytest.fixture
def wired_product_service(db_session, inventory_http):
    checker = HttpInventoryClient("http://inventory", client=inventory_http)
    return ProductService(ProductRepository(db_session), checker)


def test_product_sees_inventory_stock(wired_product_service):
    assert wired_product_service.is_product_in_stock("PROD-001", 10) is True
    assert wired_product_service.is_product_in_stock("PROD-001", 11) is False


def test_unknown_code_on_inventory_side_is_not_in_stock(wired_product_service):
    assert wired_product_service.is_product_in_stock("DOES-NOT-EXIST", 1) is False
