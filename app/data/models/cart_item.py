from sqlalchemy import Column, Integer, ForeignKey, Numeric, String, UniqueConstraint
from sqlalchemy.orm import relationship

from app.data.database import Base


class CartItemModel(Base):
    """Product snapshot taken when the item lands in the cart, plus a quantity."""

    __tablename__ = "cart_items"

    id = Column(Integer, primary_key=True)
    cart_id = Column(Integer, ForeignKey("carts.id", ondelete="CASCADE"), nullable=False)
    product_id = Column(Integer, nullable=False)

    name = Column(String, nullable=False)
    category = Column(String, nullable=False)
    cost = Column(Numeric(10, 2), nullable=False)
    rating = Column(Integer, nullable=False, default=0)
    image = Column(String, nullable=False, default="")

    quantity = Column(Integer, nullable=False)

    cart = relationship("CartModel", back_populates="items")

    __table_args__ = (UniqueConstraint("cart_id", "product_id", name="u_cart_product"),)

    @property
    def product(self) -> dict:
        return {
            "id": self.product_id,
            "name": self.name,
            "category": self.category,
            "cost": self.cost,
            "rating": self.rating,
            "image": self.image,
        }
