"""
Domain mappers package.
Handles transformation between ORM models and DTOs (Data Transfer Objects).
"""

from domain.mappers.user_mapper import UserMapper
from domain.mappers.order_mapper import OrderMapper

__all__ = ["UserMapper", "OrderMapper"]
