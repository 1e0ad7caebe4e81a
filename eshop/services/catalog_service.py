# eshop/services/catalog_service.py
from decimal import Decimal
from typing import Any, Dict, List

from sqlalchemy.orm import Session

from eshop.data.database import store_errors
from eshop.data.models.product import ProductModel
from eshop.domain.errors import NotFoundError
from eshop.repos.product_repo import ProductRepo
from eshop.utils.logging import get_logger

logger = get_logger(__name__)


def product_to_dict(product: ProductModel) -> Dict[str, Any]:
    return {
        "id": product.id,
        "name": product.name,
        "price": product.price,
        "stock": product.stock,
    }


class CatalogService:
    """
    Katalog produktow: odczyt, wyszukiwanie i zapis.
    Wejscie jest juz zwalidowane przez warstwe API.
    """

    def __init__(self, db: Session):
        self.db = db
        self.repo = ProductRepo(db)

    #query
    def list_products(self) -> List[Dict[str, Any]]:
        with store_errors(self.db, "listing products"):
            return [product_to_dict(p) for p in self.repo.list_products()]

    def get_product(self, product_id: int) -> Dict[str, Any]:
        with store_errors(self.db, f"loading product {product_id}"):
            product = self.repo.get_product(product_id)
            if not product:
                raise NotFoundError(f"Product with ID {product_id} not found.")
            return product_to_dict(product)

    def search_products(self, name: str) -> List[Dict[str, Any]]:
        with store_errors(self.db, "searching products"):
            products = self.repo.search_by_name(name)
            logger.info(f"Search '{name}' matched {len(products)} products")
            return [product_to_dict(p) for p in products]

    #commands
    def create_product(self, name: str, price: Decimal, stock: int) -> Dict[str, Any]:
        with store_errors(self.db, "creating product"):
            product = self.repo.add_product(ProductModel(name=name, price=price, stock=stock))
            self.repo.commit()
            self.repo.refresh(product)

            logger.info(f"Created product {product.id} '{product.name}' (stock {product.stock})")
            return product_to_dict(product)

    def update_product(self, product_id: int, name: str, price: Decimal, stock: int) -> Dict[str, Any]:
        with store_errors(self.db, f"updating product {product_id}"):
            product = self.repo.get_product(product_id)
            if not product:
                raise NotFoundError(f"Product with ID {product_id} not found.")

            # pelna podmiana pol
            product.name = name
            product.price = price
            product.stock = stock

            self.repo.commit()
            self.repo.refresh(product)

            logger.info(f"Updated product {product_id}")
            return product_to_dict(product)

    def delete_product(self, product_id: int) -> str:
        with store_errors(self.db, f"deleting product {product_id}"):
            product = self.repo.get_product(product_id)
            if not product:
                raise NotFoundError(f"Product with ID {product_id} not found.")

            name = product.name
            self.repo.delete_product(product)
            self.repo.commit()

            logger.info(f"Deleted product {product_id} '{name}'")
            return name
