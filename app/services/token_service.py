# app/services/token_service.py
"""
JWT access/refresh tokens.

Tokens are HS256-signed and carry ``sub`` (user id), ``iat``, ``exp`` (unix
seconds) and ``type`` ("access" or "refresh"). Only access tokens open the
API; refresh tokens can only be traded for a new pair.
"""
from datetime import datetime, timedelta, timezone
from typing import Any, Dict

import jwt
from sqlalchemy.orm import Session

from app.data.models.user import UserModel
from app.repos.user_repo import UserRepo
from app.utils.errors import UnauthorizedError
from app.utils.logging import get_logger
from app.utils.settings import (
    JWT_ACCESS_EXPIRATION_MINUTES,
    JWT_ALGORITHM,
    JWT_REFRESH_EXPIRATION_DAYS,
    JWT_SECRET,
)

logger = get_logger(__name__)


class TokenType:
    ACCESS = "access"
    REFRESH = "refresh"


def generate_token(
    user_id: int,
    expires: datetime,
    token_type: str,
    secret: str = JWT_SECRET,
) -> str:
    payload = {
        "sub": str(user_id),
        "iat": int(datetime.now(timezone.utc).timestamp()),
        "exp": int(expires.timestamp()),
        "type": token_type,
    }
    return jwt.encode(payload, secret, algorithm=JWT_ALGORITHM)


def verify_token(token: str, secret: str = JWT_SECRET) -> Dict[str, Any]:
    """Check signature and expiry; returns the decoded payload."""
    try:
        return jwt.decode(
            token,
            secret,
            algorithms=[JWT_ALGORITHM],
            options={"require": ["exp", "sub", "type"]},
        )
    except jwt.ExpiredSignatureError:
        raise UnauthorizedError("Token expired")
    except jwt.InvalidTokenError as e:
        logger.warning(f"Rejected token: {e}")
        raise UnauthorizedError("Invalid token")


def generate_auth_tokens(user: UserModel) -> Dict[str, Dict[str, Any]]:
    now = datetime.now(timezone.utc)
    access_expires = now + timedelta(minutes=JWT_ACCESS_EXPIRATION_MINUTES)
    refresh_expires = now + timedelta(days=JWT_REFRESH_EXPIRATION_DAYS)

    return {
        "access": {
            "token": generate_token(user.id, access_expires, TokenType.ACCESS),
            "expires": access_expires,
        },
        "refresh": {
            "token": generate_token(user.id, refresh_expires, TokenType.REFRESH),
            "expires": refresh_expires,
        },
    }


def resolve_user(db: Session, subject: Any) -> UserModel | None:
    try:
        user_id = int(subject)
    except (TypeError, ValueError):
        return None
    return UserRepo(db).get_user(user_id)


def refresh_auth(db: Session, refresh_token: str) -> Dict[str, Dict[str, Any]]:
    payload = verify_token(refresh_token)

    if payload.get("type") != TokenType.REFRESH:
        raise UnauthorizedError("Not a refresh token")

    user = resolve_user(db, payload.get("sub"))
    if not user:
        raise UnauthorizedError("Please authenticate")

    logger.info(f"Issued new token pair for user {user.id}")
    return generate_auth_tokens(user)
