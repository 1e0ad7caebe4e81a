# eshop/services/cart_service.py
from decimal import Decimal
from typing import Any, Dict

from sqlalchemy.orm import Session

from eshop.data.database import store_errors
from eshop.data.models.cart import CartModel
from eshop.data.models.cart_product import CartProductModel
from eshop.domain.errors import InsufficientStockError, NotFoundError
from eshop.repos.cart_repo import CartRepo
from eshop.repos.product_repo import ProductRepo
from eshop.repos.user_repo import UserRepo
from eshop.utils.logging import get_logger

logger = get_logger(__name__)


class CartService:
    """
    Use case'y koszyka.
    commands (add, update, remove) zmieniaja stan w jednej transakcji,
    query (get) tylko odczyt.
    Wejscie jest juz zwalidowane przez warstwe API.

    Stan magazynu zmienia sie tylko przy add. update i remove go nie ruszaja
    (brak zwrotu towaru i brak ponownej walidacji stanu przy zwiekszeniu ilosci).
    """

    def __init__(self, db: Session):
        self.db = db
        self.repo = CartRepo(db)
        self.products = ProductRepo(db)
        self.users = UserRepo(db)

    #query - odczyt
    def get_cart(self, user_id: int) -> Dict[str, Any]:
        with store_errors(self.db, f"loading cart of user {user_id}"):
            lines = self.repo.get_cart_lines(user_id)

        if not lines:
            return {"message": "Cart is empty for this user.", "items": []}

        items = [
            {
                "product_id": line.product_id,
                "name": line.name,
                "price": line.price,
                "quantity": line.quantity,
                "total_price": Decimal(line.price) * line.quantity,
            }
            for line in lines
        ]
        return {"message": "Cart items retrieved successfully.", "items": items}

    #commands
    def add_to_cart(self, user_id: int, product_id: int, quantity: int) -> Dict[str, Any]:
        with store_errors(self.db, f"adding product {product_id} to cart of user {user_id}"):
            product = self.products.get_product(product_id)
            if not product:
                logger.warning(f"Add to cart refused, product {product_id} does not exist")
                raise NotFoundError(f"Product with ID {product_id} not found.")

            if not self.users.get_user(user_id):
                logger.warning(f"Add to cart refused, user {user_id} does not exist")
                raise NotFoundError(f"User with ID {user_id} not found.")

            if product.stock < quantity:
                logger.warning(
                    f"Refused adding {quantity} x product {product_id} for user {user_id}, "
                    f"stock is {product.stock}"
                )
                raise InsufficientStockError(product_id, product.stock, quantity)

            # koszyk tworzony leniwie przy pierwszym dodaniu
            cart = self.repo.get_cart_by_user(user_id)
            if cart is None:
                cart = self.repo.create_cart(CartModel(user_id=user_id))
                logger.info(f"Created cart {cart.id} for user {user_id}")

            # jedna pozycja na produkt, kolejne dodania zwiekszaja ilosc
            if self.repo.increment_quantity(cart.id, product_id, quantity) == 0:
                self.repo.add_cart_item(
                    CartProductModel(cart_id=cart.id, product_id=product_id, quantity=quantity)
                )

            # warunkowy UPDATE, stan mogl sie zmienic od sprawdzenia wyzej
            if self.products.decrement_stock(product_id, quantity) == 0:
                self.repo.rollback()
                available = self.products.get_stock(product_id) or 0
                logger.warning(
                    f"Stock of product {product_id} changed concurrently, "
                    f"requested {quantity}, available {available}"
                )
                raise InsufficientStockError(product_id, available, quantity)

            self.repo.commit()

        logger.info(f"Added {quantity} x product {product_id} to cart of user {user_id}")
        return {"message": "Product added to cart successfully."}

    def update_quantity(self, user_id: int, product_id: int, quantity: int) -> Dict[str, Any]:
        with store_errors(self.db, f"updating product {product_id} in cart of user {user_id}"):
            item = self._get_item(user_id, product_id)

            product = self.products.get_product(product_id)
            name = product.name if product else "Unknown Product"

            # podmiana ilosci, stan magazynu bez zmian
            item.quantity = quantity
            self.repo.commit()

        logger.info(f"Set quantity of product {product_id} in cart of user {user_id} to {quantity}")
        return {"message": f"Updated {name}'s quantity to {quantity}"}

    def remove_from_cart(self, user_id: int, product_id: int) -> Dict[str, Any]:
        with store_errors(self.db, f"removing product {product_id} from cart of user {user_id}"):
            item = self._get_item(user_id, product_id)

            product = self.products.get_product(product_id)
            name = product.name if product else "Unknown Product"

            self.repo.delete_cart_item(item)
            self.repo.commit()

        logger.info(f"Removed product {product_id} from cart of user {user_id}")
        return {"message": f"Item '{name}' removed from your cart successfully."}

    def _get_item(self, user_id: int, product_id: int) -> CartProductModel:
        cart = self.repo.get_cart_by_user(user_id)
        if cart is None:
            logger.warning(f"No cart for user {user_id}")
            raise NotFoundError("Cart not found for this user.")

        item = self.repo.get_cart_item(cart.id, product_id)
        if item is None:
            logger.warning(f"Product {product_id} not in cart {cart.id}")
            raise NotFoundError("Product not found in cart.")
        return item
