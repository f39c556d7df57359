# app/services/product_service.py
from typing import List

from sqlalchemy.orm import Session

from app.data.models.product import ProductModel
from app.repos.product_repo import ProductRepo
from app.utils.errors import NotFoundError


class ProductService:
    def __init__(self, db: Session):
        self.repo = ProductRepo(db)

    def find_product(self, product_id: int) -> ProductModel | None:
        return self.repo.get_product(product_id)

    def get_product(self, product_id: int) -> ProductModel:
        product = self.repo.get_product(product_id)
        if not product:
            raise NotFoundError("Product not found")
        return product

    def list_products(self) -> List[ProductModel]:
        return self.repo.list_products()
