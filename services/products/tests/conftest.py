import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("RUN_MIGRATIONS", "false")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from product_service.domain.models import Base, Product
from product_service.infrastructure.db import get_db
from product_service.infrastructure.repository import ProductRepository
from product_service.application.service import ProductService
from product_service.api.routes import get_stock_checker
from product_service.main import app


class FakeStockChecker:
    """Answers stock checks from a dict of product code -> units and records each call"""

    def __init__(self, stock=None):
        self.stock = dict(stock or {})
        self.calls = []

    def check_stock(self, product_code, quantity=1):
        self.calls.append((product_code, quantity))
        return product_code in self.stock and self.stock[product_code] >= quantity


def sqlite_session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    return engine, sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False)


@pytest.fixture
def session_factory():
    return sqlite_session_factory


@pytest.fixture
def db_session():
    engine, TestingSession = sqlite_session_factory()
    Base.metadata.create_all(engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def stock_checker():
    return FakeStockChecker({"PROD-001": 10})


@pytest.fixture
def product_service(db_session, stock_checker):
    return ProductService(ProductRepository(db_session), stock_checker)


@pytest.fixture
def make_product(db_session):
    def _make_product(name="Test Product", price=19.99, category="Electronics", description=None, stock_quantity=None):
        product = Product(
            name=name,
            price=price,
            category=category,
            description=description,
            stock_quantity=stock_quantity,
        )
        db_session.add(product)
        db_session.commit()
        db_session.refresh(product)
        return product
    return _make_product


@pytest.fixture
def client(db_session, stock_checker):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_stock_checker] = lambda: stock_checker
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
