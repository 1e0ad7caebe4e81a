"""
Two add-to-cart calls racing for the same stock.

Both requests are held at a barrier after they have passed the stock check,
so each one has seen stock=5 before either writes. The conditional decrement
must let exactly one of them through.
"""
import threading
from decimal import Decimal

import pytest

from eshop.data.database import SessionLocal, create_schema, init_engine
from eshop.data.models.cart_product import CartProductModel
from eshop.data.models.product import ProductModel
from eshop.data.models.user import UserModel
from eshop.domain.errors import InsufficientStockError
from eshop.repos.cart_repo import CartRepo
from eshop.services.cart_service import CartService
from eshop.utils.settings import Settings


@pytest.fixture
def file_engine(tmp_path):
    settings = Settings(database_url=f"sqlite:///{tmp_path / 'race.db'}")
    engine = init_engine(settings)
    create_schema(engine)
    yield engine
    engine.dispose()


def test_only_one_of_two_concurrent_adds_succeeds(file_engine, monkeypatch):
    # Arrange
    with SessionLocal() as db:
        product = ProductModel(name="Gaming Mouse", price=Decimal("9.99"), stock=5)
        users = [
            UserModel(email="anna@example.com", password_hash="x"),
            UserModel(email="piotr@example.com", password_hash="x"),
        ]
        db.add_all([product, *users])
        db.commit()
        product_id = product.id
        user_ids = [u.id for u in users]

    barrier = threading.Barrier(2, timeout=10)
    original_get_cart = CartRepo.get_cart_by_user

    def get_cart_after_barrier(self, user_id):
        barrier.wait()
        return original_get_cart(self, user_id)

    monkeypatch.setattr(CartRepo, "get_cart_by_user", get_cart_after_barrier)

    results = {}

    def worker(user_id: int):
        with SessionLocal() as db:
            try:
                CartService(db).add_to_cart(user_id, product_id, 3)
                results[user_id] = "ok"
            except InsufficientStockError as e:
                results[user_id] = e
            except Exception as e:  # surfaced by the asserts below
                results[user_id] = e

    # Act
    threads = [threading.Thread(target=worker, args=(uid,)) for uid in user_ids]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=30)

    # Assert
    outcomes = list(results.values())
    assert len(outcomes) == 2
    assert outcomes.count("ok") == 1, outcomes
    failures = [o for o in outcomes if o != "ok"]
    assert isinstance(failures[0], InsufficientStockError), failures
    assert failures[0].available == 2

    with SessionLocal() as db:
        assert db.get(ProductModel, product_id).stock == 2
        lines = db.query(CartProductModel).all()
        assert [line.quantity for line in lines] == [3]
