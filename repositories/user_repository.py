"""
User Repository - Data access layer for user-related operations
"""

from typing import Optional, List
from sqlalchemy import func
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from repositories.base import BaseRepository
from domain.models import AppUser
from app.exceptions import ConflictError


class UserRepository(BaseRepository[AppUser]):
    """Repository for user data access"""

    def __init__(self, db: Session):
        super().__init__(db, AppUser)

    def get_by_email(self, email: str) -> Optional[AppUser]:
        """Get user by email (case-insensitive)"""
        return (
            self.db.query(AppUser)
            .filter(func.lower(AppUser.email) == email.lower())
            .first()
        )

    def get_all(self, skip: int = 0, limit: int = 100) -> List[AppUser]:
        return (
            self.db.query(AppUser).order_by(AppUser.id).offset(skip).limit(limit).all()
        )

    def create_user(self, user: AppUser) -> AppUser:
        """Create a new user"""
        try:
            self.db.add(user)
            self.db.commit()
            self.db.refresh(user)
            return user
        except IntegrityError:
            self.db.rollback()
            raise ConflictError(f"User with email {user.email} already exists")
