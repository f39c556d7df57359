# app/repos/product_repo.py
from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.data.models.product import ProductModel


class ProductRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_product(self, product_id: int) -> ProductModel | None:
        return self.db.get(ProductModel, product_id)

    def list_products(self) -> List[ProductModel]:
        return list(
            self.db.execute(select(ProductModel).order_by(ProductModel.id)).scalars().all()
        )

    def has_products(self) -> bool:
        return self.db.execute(select(ProductModel.id).limit(1)).first() is not None

    def add_products(self, products: List[ProductModel]) -> None:
        self.db.add_all(products)
        self.db.commit()
