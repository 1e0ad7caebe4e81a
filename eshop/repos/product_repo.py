# eshop/repos/product_repo.py
from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session

from eshop.data.models.cart_product import CartProductModel
from eshop.data.models.product import ProductModel


class ProductRepo:
    def __init__(self, db: Session):
        self.db = db

    def list_products(self) -> list[ProductModel]:
        return list(self.db.execute(select(ProductModel).order_by(ProductModel.id)).scalars().all())

    def get_product(self, product_id: int) -> ProductModel | None:
        return self.db.get(ProductModel, product_id)

    def get_stock(self, product_id: int) -> int | None:
        return self.db.execute(
            select(ProductModel.stock).where(ProductModel.id == product_id)
        ).scalar_one_or_none()

    def search_by_name(self, term: str) -> list[ProductModel]:
        # % i _ z frazy traktowane doslownie
        escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
        stmt = (
            select(ProductModel)
            .where(ProductModel.name.ilike(f"%{escaped}%", escape="\\"))
            .order_by(ProductModel.id)
        )
        return list(self.db.execute(stmt).scalars().all())

    def add_product(self, product: ProductModel) -> ProductModel:
        self.db.add(product)
        self.db.flush()
        return product

    def delete_product(self, product: ProductModel) -> None:
        # pozycje koszykow z tym produktem znikaja razem z nim
        self.db.execute(
            delete(CartProductModel).where(CartProductModel.product_id == product.id)
        )
        self.db.delete(product)
        self.db.flush()

    def decrement_stock(self, product_id: int, quantity: int) -> int:
        """
        Atomowe zmniejszenie stanu: UPDATE ... WHERE stock >= :q.
        Zwraca liczbe zmienionych wierszy (0 = za malo towaru w momencie zapisu).
        """
        result = self.db.execute(
            update(ProductModel)
            .where(ProductModel.id == product_id, ProductModel.stock >= quantity)
            .values(stock=ProductModel.stock - quantity)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount

    def commit(self) -> None:
        self.db.commit()

    def rollback(self) -> None:
        self.db.rollback()

    def refresh(self, product: ProductModel) -> None:
        self.db.refresh(product)
