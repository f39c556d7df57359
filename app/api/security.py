# app/api/security.py
"""
Bearer-token gate for protected routes.

``get_current_user`` verifies the token signature and expiry, insists on an
access token, resolves the user from ``sub`` and, when the route carries a
``user_id`` path parameter, checks that it belongs to the caller.
"""
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.data.database import get_db
from app.data.models.user import UserModel
from app.services.token_service import TokenType, resolve_user, verify_token
from app.utils.errors import ForbiddenError, UnauthorizedError
from app.utils.logging import get_logger

logger = get_logger(__name__)

# auto_error=False: missing header is reported through ApiError, not FastAPI's 403
bearer_scheme = HTTPBearer(auto_error=False)


def _same_user(path_user_id: str, user_id: int) -> bool:
    try:
        return int(path_user_id) == user_id
    except (TypeError, ValueError):
        return False


def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> UserModel:
    if not credentials or credentials.scheme.lower() != "bearer" or not credentials.credentials:
        raise UnauthorizedError("No token provided")

    payload = verify_token(credentials.credentials)

    if payload.get("type") != TokenType.ACCESS:
        raise UnauthorizedError("Not an access token")

    user = resolve_user(db, payload.get("sub"))
    if not user:
        raise UnauthorizedError("No valid user")

    path_user_id = request.path_params.get("user_id")
    if path_user_id is not None and not _same_user(path_user_id, user.id):
        logger.warning(f"User {user.id} tried to access user {path_user_id}")
        raise ForbiddenError("Incorrect userID")

    return user
