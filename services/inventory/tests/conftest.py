import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("RUN_MIGRATIONS", "false")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from inventory_service.domain.models import Base, InventoryItem
from inventory_service.infrastructure.db import get_db
from inventory_service.infrastructure.repository import InventoryRepository
from inventory_service.application.service import InventoryService
from inventory_service.main import app


@pytest.fixture
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    TestingSession = sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def inventory_service(db_session):
    return InventoryService(InventoryRepository(db_session))


@pytest.fixture
def make_item(db_session):
    def _make_item(product_code="PROD-001", quantity=10, warehouse_location="Warehouse A", product_id=1):
        item = InventoryItem(
            product_code=product_code,
            quantity=quantity,
            warehouse_location=warehouse_location,
            product_id=product_id,
        )
        db_session.add(item)
        db_session.commit()
        db_session.refresh(item)
        return item
    return _make_item


@pytest.fixture
def client(db_session):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.pop(get_db, None)
