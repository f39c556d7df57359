#app/data/models/cart.py
from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from app.data.database import Base
from app.utils.settings import DEFAULT_PAYMENT_OPTION


class CartModel(Base):
    __tablename__ = "carts"

    id = Column(Integer, primary_key=True)
    email = Column(String, nullable=False, unique=True, index=True)

    payment_option = Column(String, nullable=False, default=DEFAULT_PAYMENT_OPTION)

    items = relationship(
        "CartItemModel",
        back_populates="cart",
        cascade="all, delete-orphan",
        order_by="CartItemModel.id",
    )
