"""
Shared fixtures.

API tests run the real application (routers, services, repositories) against
an in-memory SQLite database that lives for a single test. Service tests get a
plain SQLAlchemy session bound to the same kind of database.
"""
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from eshop.api import create_app
from eshop.data.database import SessionLocal, create_schema, init_engine
from eshop.data.models.product import ProductModel
from eshop.data.models.user import UserModel
from eshop.utils.settings import Settings


@pytest.fixture
def settings() -> Settings:
    return Settings(database_url="sqlite://", db_connect_attempts=1)


@pytest.fixture
def test_client(settings: Settings):
    app = create_app(settings)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def db(settings: Settings):
    engine = init_engine(settings)
    create_schema(engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def make_product(db):
    def _make(name: str = "Gaming Mouse", price: str = "9.99", stock: int = 5) -> ProductModel:
        product = ProductModel(name=name, price=Decimal(price), stock=stock)
        db.add(product)
        db.commit()
        return product

    return _make


@pytest.fixture
def make_user(db):
    def _make(email: str = "jan@example.com") -> UserModel:
        user = UserModel(email=email, password_hash="not-a-real-hash")
        db.add(user)
        db.commit()
        return user

    return _make


@pytest.fixture
def api_user(test_client: TestClient) -> dict:
    response = test_client.post(
        "/users", json={"email": "anna@example.com", "password": "s3cret-pass"}
    )
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def api_product(test_client: TestClient):
    def _create(name: str = "Gaming Mouse", price: float = 9.99, stock: int = 5) -> dict:
        response = test_client.post(
            "/products", json={"name": name, "price": price, "stock": stock}
        )
        assert response.status_code == 201
        return response.json()

    return _create
