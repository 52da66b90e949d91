"""
Authentication: password hashing, login and JWT bearer tokens.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional
import base64
import hashlib
import hmac
import logging
import secrets

from jose import jwt, JWTError, ExpiredSignatureError
from sqlalchemy.orm import Session

from app.config import settings
from app.exceptions import UnauthorizedError
from domain.models import AppUser
from repositories import UserRepository

logger = logging.getLogger("mealbox.auth")

_HASH_ALGORITHM = "pbkdf2_sha256"
_HASH_ITERATIONS = 260_000


class AuthService:
    """Business logic for credentials and tokens"""

    @staticmethod
    def hash_password(password: str, salt: Optional[str] = None) -> str:
        """Hash a password as ``pbkdf2_sha256$<iterations>$<salt>$<digest>``."""
        salt = salt or secrets.token_hex(16)
        digest = hashlib.pbkdf2_hmac(
            "sha256", password.encode("utf-8"), salt.encode("utf-8"), _HASH_ITERATIONS
        )
        encoded = base64.b64encode(digest).decode("ascii")
        return f"{_HASH_ALGORITHM}${_HASH_ITERATIONS}${salt}${encoded}"

    @staticmethod
    def verify_password(password: str, password_hash: str) -> bool:
        try:
            algorithm, iterations, salt, expected = password_hash.split("$", 3)
        except ValueError:
            return False
        if algorithm != _HASH_ALGORITHM:
            return False
        digest = hashlib.pbkdf2_hmac(
            "sha256", password.encode("utf-8"), salt.encode("utf-8"), int(iterations)
        )
        actual = base64.b64encode(digest).decode("ascii")
        return hmac.compare_digest(actual, expected)

    @staticmethod
    def create_access_token(user: AppUser) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            "sub": str(user.id),
            "type": user.type.value if hasattr(user.type, "value") else str(user.type),
            "iat": now,
            "exp": now + timedelta(minutes=settings.jwt_expire_minutes),
        }
        return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)

    @staticmethod
    def decode_token(token: str) -> Dict[str, Any]:
        """Decode and verify a bearer token, raising UnauthorizedError on any problem."""
        try:
            payload = jwt.decode(
                token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
            )
        except ExpiredSignatureError:
            raise UnauthorizedError("Token has expired", code="TOKEN_EXPIRED")
        except JWTError:
            raise UnauthorizedError("Invalid token", code="INVALID_TOKEN")

        if not payload.get("sub"):
            raise UnauthorizedError("Invalid token", code="INVALID_TOKEN")
        return payload

    @staticmethod
    def authenticate(db: Session, email: str, password: str) -> AppUser:
        user = UserRepository(db).get_by_email(email)
        if not user or not AuthService.verify_password(password, user.password_hash):
            logger.warning(f"login_failed email={email}")
            raise UnauthorizedError("Invalid email or password", code="INVALID_CREDENTIALS")
        logger.info(f"login_succeeded user_id={user.id}")
        return user

    @staticmethod
    def get_user_for_token(db: Session, token: str) -> AppUser:
        payload = AuthService.decode_token(token)
        try:
            user_id = int(payload["sub"])
        except (TypeError, ValueError):
            raise UnauthorizedError("Invalid token", code="INVALID_TOKEN")

        user = UserRepository(db).get_by_id(user_id)
        if not user:
            raise UnauthorizedError("User for token no longer exists", code="INVALID_TOKEN")
        return user
