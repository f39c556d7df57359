# app/repos/cart_repo.py
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.data.models.cart import CartModel


class CartRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_cart_by_email(self, email: str) -> CartModel | None:
        return self.db.execute(
            select(CartModel).where(CartModel.email == email)
        ).scalar_one_or_none()

    def create_cart(self, cart: CartModel) -> CartModel | None:
        # unique on email, a parallel request may have created it first
        try:
            self.db.add(cart)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            return None
        self.db.refresh(cart)
        return cart

    def save_cart(self, cart: CartModel) -> CartModel:
        self.db.add(cart)
        self.db.commit()
        self.db.refresh(cart)
        return cart
