# eshop/repos/cart_repo.py
from sqlalchemy import select, update
from sqlalchemy.orm import Session

from eshop.data.models.cart import CartModel
from eshop.data.models.cart_product import CartProductModel
from eshop.data.models.product import ProductModel


class CartRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_cart_by_user(self, user_id: int) -> CartModel | None:
        return self.db.execute(
            select(CartModel).where(CartModel.user_id == user_id)
        ).scalar_one_or_none()

    def create_cart(self, cart: CartModel) -> CartModel:
        self.db.add(cart)
        # flush zeby dostac cart.id przed dodaniem pozycji
        self.db.flush()
        return cart

    def get_cart_item(self, cart_id: int, product_id: int) -> CartProductModel | None:
        return self.db.get(CartProductModel, (cart_id, product_id))

    def add_cart_item(self, item: CartProductModel) -> CartProductModel:
        self.db.add(item)
        self.db.flush()
        return item

    def increment_quantity(self, cart_id: int, product_id: int, delta: int) -> int:
        # quantity = quantity + delta po stronie bazy, bez read-modify-write
        result = self.db.execute(
            update(CartProductModel)
            .where(
                CartProductModel.cart_id == cart_id,
                CartProductModel.product_id == product_id,
            )
            .values(quantity=CartProductModel.quantity + delta)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount

    def delete_cart_item(self, item: CartProductModel) -> None:
        self.db.delete(item)
        self.db.flush()

    def get_cart_lines(self, user_id: int) -> list:
        """Pozycje koszyka uzytkownika zlaczone z produktami (jawne zapytanie, bez lazy load)."""
        stmt = (
            select(
                CartProductModel.product_id,
                ProductModel.name,
                ProductModel.price,
                CartProductModel.quantity,
            )
            .join(CartModel, CartModel.id == CartProductModel.cart_id)
            .join(ProductModel, ProductModel.id == CartProductModel.product_id)
            .where(CartModel.user_id == user_id)
            .order_by(CartProductModel.product_id)
        )
        return list(self.db.execute(stmt).all())

    def commit(self) -> None:
        self.db.commit()

    def rollback(self) -> None:
        self.db.rollback()
