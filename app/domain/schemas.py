# app/domain/schemas.py
from pydantic import BaseModel, Field, ConfigDict
from typing import List
from decimal import Decimal
from datetime import datetime


class ProductOut(BaseModel):
    """Product as listed in the catalog and snapshotted into carts."""

    id: int
    name: str
    category: str
    cost: Decimal
    rating: int
    image: str

    model_config = ConfigDict(from_attributes=True)


class CartItemIn(BaseModel):
    """Body for adding a product to the cart."""

    product_id: int = Field(..., gt=0, description="Product id")
    quantity: int = Field(..., gt=0, description="Quantity (> 0)")


class CartItemUpdate(BaseModel):
    """Body for changing a quantity; 0 removes the product from the cart."""

    product_id: int = Field(..., gt=0, description="Product id")
    quantity: int = Field(..., ge=0, description="New quantity (0 removes the item)")


class CartItemOut(BaseModel):
    product: ProductOut
    quantity: int

    model_config = ConfigDict(from_attributes=True)


class CartOut(BaseModel):
    id: int
    email: str
    cart_items: List[CartItemOut] = Field(validation_alias="items")
    payment_option: str

    model_config = ConfigDict(from_attributes=True)


class UserOut(BaseModel):
    id: int
    name: str
    email: str
    wallet_money: Decimal
    address: str

    model_config = ConfigDict(from_attributes=True)


class AddressIn(BaseModel):
    address: str = Field(..., min_length=20, description="Shipping address")


class AddressOut(BaseModel):
    address: str


class RefreshTokenIn(BaseModel):
    refresh_token: str = Field(..., min_length=1)


class TokenOut(BaseModel):
    token: str
    expires: datetime


class AuthTokensOut(BaseModel):
    access: TokenOut
    refresh: TokenOut
