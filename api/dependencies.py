"""
API dependencies for dependency injection
"""

from typing import Generator, Optional
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from app.exceptions import UnauthorizedError, ForbiddenError
from domain.models import AppUser, get_db_session
from services.auth_service import AuthService

bearer_scheme = HTTPBearer(auto_error=False)


def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI routes.

    Usage:
        @router.get("/example")
        def example(db: Session = Depends(get_db)):
            # Use db session here
            pass
    """
    yield from get_db_session()


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> AppUser:
    """Resolve the user behind the ``Authorization: Bearer <token>`` header."""
    if credentials is None or not credentials.credentials:
        raise UnauthorizedError("Missing bearer token", code="MISSING_TOKEN")
    return AuthService.get_user_for_token(db, credentials.credentials)


def require_admin(current_user: AppUser = Depends(get_current_user)) -> AppUser:
    if not current_user.is_admin:
        raise ForbiddenError("Admin privileges required")
    return current_user
