from sqlalchemy import CheckConstraint, Column, ForeignKey, Integer

from eshop.data.database import Base


class CartProductModel(Base):
    """Pozycja koszyka, max jedna na pare (cart, product)."""

    __tablename__ = "cart_products"

    cart_id = Column(Integer, ForeignKey("carts.id", ondelete="CASCADE"), primary_key=True)
    product_id = Column(Integer, ForeignKey("products.id", ondelete="CASCADE"), primary_key=True, index=True)

    quantity = Column(Integer, nullable=False)

    __table_args__ = (
        CheckConstraint("quantity > 0", name="ck_cart_products_quantity_pos"),
    )
