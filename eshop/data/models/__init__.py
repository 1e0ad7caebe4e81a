#import wszystkich modeli zeby SQLAlchemy je zarejestrowal w base metadata

from eshop.data.models.product import ProductModel
from eshop.data.models.user import UserModel
from eshop.data.models.cart import CartModel
from eshop.data.models.cart_product import CartProductModel

__all__ = ["ProductModel", "UserModel", "CartModel", "CartProductModel"]
