from typing import Literal, Optional, Union

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.api.security import get_current_user
from app.data.database import get_db
from app.data.models.user import UserModel
from app.domain.schemas import AddressIn, AddressOut, UserOut
from app.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])


#user_id from the path is checked against the token by get_current_user (403 on mismatch)
@router.get("/{user_id}", response_model=Union[UserOut, AddressOut])
def get_user(
    user_id: int,
    q: Optional[Literal["address"]] = Query(None),
    user: UserModel = Depends(get_current_user),
):
    if q == "address":
        return AddressOut(address=user.address)
    return UserOut.model_validate(user)


@router.put("/{user_id}", response_model=AddressOut)
def set_address(
    user_id: int,
    payload: AddressIn,
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    address = UserService(db).set_address(user, payload.address)
    return AddressOut(address=address)
