from typing import List, Optional
from sqlalchemy.orm import Session
import logging

from domain.enums import UserType
from domain.models import AppUser
from domain.schemas.user_schemas import UserCreate, UserUpdate
from repositories import UserRepository
from services.auth_service import AuthService
from app.exceptions import NotFoundError, ConflictError, ForbiddenError

logger = logging.getLogger("mealbox.users")


class UserService:
    """Business logic for user accounts"""

    @staticmethod
    def create_user(
        db: Session, data: UserCreate, user_type: UserType = UserType.CUSTOMER
    ) -> AppUser:
        repo = UserRepository(db)
        if repo.get_by_email(data.email):
            raise ConflictError(f"User with email {data.email} already exists")

        fields = data.model_dump(exclude={"password"})
        user = AppUser(
            **fields,
            password_hash=AuthService.hash_password(data.password),
            type=user_type,
        )
        user = repo.create_user(user)
        logger.info(f"user_created user_id={user.id} type={user_type.value}")
        return user

    @staticmethod
    def get_all_users(db: Session) -> List[AppUser]:
        return UserRepository(db).get_all()

    @staticmethod
    def get_user(db: Session, user_id: int) -> Optional[AppUser]:
        user = UserRepository(db).get_by_id(user_id)
        if not user:
            logger.warning(f"user_not_found user_id={user_id}")
        return user

    @staticmethod
    def update_user(db: Session, user_id: int, data: UserUpdate) -> AppUser:
        repo = UserRepository(db)
        user = repo.get_by_id(user_id)
        if not user:
            raise NotFoundError(f"User {user_id} not found")

        changes = data.model_dump(exclude_unset=True)
        password = changes.pop("password", None)
        for key, value in changes.items():
            setattr(user, key, value)
        if password:
            user.password_hash = AuthService.hash_password(password)

        user = repo.update(user)
        logger.info(
            f"user_updated user_id={user_id} fields={sorted(changes)} "
            f"password_changed={bool(password)}"
        )
        return user

    @staticmethod
    def delete_user(db: Session, user_id: int) -> bool:
        deleted = UserRepository(db).delete(user_id)
        if deleted:
            logger.info(f"user_deleted user_id={user_id}")
        return deleted

    @staticmethod
    def ensure_self_or_admin(current_user: AppUser, user_id: int) -> None:
        """Raise ForbiddenError unless the caller is the target user or an admin."""
        if current_user.id != user_id and not current_user.is_admin:
            raise ForbiddenError("You can only access your own account")
