"""
User domain mappers.
Handles transformation between ORM models and DTOs for user-related entities.
"""

from domain.models import AppUser
from domain.schemas.user_schemas import UserResponse


class UserMapper:
    """Mapper for user-related transformations."""

    @staticmethod
    def to_response(user: AppUser) -> UserResponse:
        """
        Convert AppUser ORM model to UserResponse DTO.

        The password hash never leaves this layer.
        """
        return UserResponse(
            id=user.id,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            address=user.address,
            postal_code=user.postal_code,
            city=user.city,
            country=user.country,
            phone=user.phone,
            type=user.type,
            created_at=user.created_at,
        )
