#import all models so SQLAlchemy registers them in Base.metadata

from app.data.models.user import UserModel
from app.data.models.product import ProductModel
from app.data.models.cart import CartModel
from app.data.models.cart_item import CartItemModel

__all__ = ["UserModel", "ProductModel", "CartModel", "CartItemModel"]
