from sqlalchemy import CheckConstraint, Column, Integer, Numeric, String

from eshop.data.database import Base


class ProductModel(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True)
    name = Column(String(50), nullable=False, index=True)
    price = Column(Numeric(10, 2), nullable=False)
    stock = Column(Integer, nullable=False, default=0)

    __table_args__ = (
        CheckConstraint("price > 0", name="ck_products_price_pos"),
        CheckConstraint("stock >= 0", name="ck_products_stock_nonneg"),
    )
