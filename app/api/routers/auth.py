# app/api/routers/auth.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.data.database import get_db
from app.domain.schemas import AuthTokensOut, RefreshTokenIn
from app.services.token_service import refresh_auth

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/refresh-tokens", response_model=AuthTokensOut)
def refresh_tokens(payload: RefreshTokenIn, db: Session = Depends(get_db)):
    """
    Trade a refresh token for a fresh access/refresh pair.
    """
    return refresh_auth(db, payload.refresh_token)
