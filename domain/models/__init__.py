"""
Domain models package - SQLAlchemy ORM models.
"""

from domain.models.database import (
    Base,
    engine,
    SessionLocal,
    init_database,
    get_db_session,
)
from domain.models.user import AppUser
from domain.models.meal import Meal
from domain.models.order import Order, OrderItem
from domain.models.newsletter import Newsletter

__all__ = [
    # Database
    "Base",
    "engine",
    "SessionLocal",
    "init_database",
    "get_db_session",
    # Models
    "AppUser",
    "Meal",
    "Order",
    "OrderItem",
    "Newsletter",
]
