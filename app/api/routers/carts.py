#app/api/routers/carts.py
from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from app.api.security import get_current_user
from app.data.database import get_db
from app.data.models.user import UserModel
from app.domain.schemas import CartItemIn, CartItemUpdate, CartOut
from app.services.cart_service import CartService
from app.services.product_service import ProductService
from app.services.user_service import UserService

router = APIRouter(prefix="/cart", tags=["cart"])


def get_service(db: Session):
    return CartService(
        db=db,
        product_service=ProductService(db),
        user_service=UserService(db),
    )


@router.get("", response_model=CartOut)
def get_cart(
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    svc = get_service(db)
    return svc.get_cart_by_user(user)


@router.post("", response_model=CartOut, status_code=status.HTTP_201_CREATED)
def add_product(
    payload: CartItemIn,
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    svc = get_service(db)
    return svc.add_product_to_cart(user, payload.product_id, payload.quantity)


@router.put(
    "",
    response_model=CartOut,
    responses={204: {"description": "Quantity 0, product removed from the cart"}},
)
def update_product(
    payload: CartItemUpdate,
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    svc = get_service(db)
    if payload.quantity == 0:
        svc.delete_product_from_cart(user, payload.product_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return svc.update_product_in_cart(user, payload.product_id, payload.quantity)


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(
    product_id: int = Query(..., gt=0),
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    svc = get_service(db)
    svc.delete_product_from_cart(user, product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/checkout", status_code=status.HTTP_204_NO_CONTENT)
def checkout(
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    svc = get_service(db)
    svc.checkout(user)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
