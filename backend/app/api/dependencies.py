"""
Shared FastAPI dependencies: database session, settings and current user.
"""
from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session
from typing import Generator, Optional
import logging
from app.core.config import Settings
from app.core.security import decode_access_token
from app.models.user import User
from app.services.balance_service import BalanceStrategy, get_balance_strategy

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_db(request: Request) -> Generator[Session, None, None]:
    """Dependency for getting database session."""
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def get_strategy(settings: Settings = Depends(get_settings)) -> BalanceStrategy:
    return get_balance_strategy(settings.BALANCE_STRATEGY)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"}
    )


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    settings: Settings = Depends(get_settings),
    db: Session = Depends(get_db)
) -> User:
    """Resolve the bearer token to an active user or fail with 401."""
    if credentials is None or not credentials.credentials:
        raise _unauthorized("Not authenticated")

    payload = decode_access_token(credentials.credentials, settings)
    if payload is None:
        logger.warning("Rejected request with invalid or expired token")
        raise _unauthorized("Invalid token")

    user_id = payload.get("user_id")
    user = db.get(User, user_id) if isinstance(user_id, int) else None
    if user is None or not user.is_active:
        logger.warning(f"Rejected token for unknown or inactive user {user_id!r}")
        raise _unauthorized("User not found")

    return user
