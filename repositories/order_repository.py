"""
Order Repository - Data access layer for orders
"""

from typing import List
from sqlalchemy.orm import Session, selectinload

from repositories.base import BaseRepository
from domain.models import Order


class OrderRepository(BaseRepository[Order]):
    """Repository for order data access"""

    def __init__(self, db: Session):
        super().__init__(db, Order)

    def get_all(self, skip: int = 0, limit: int = 100) -> List[Order]:
        """All orders, newest first"""
        return (
            self.db.query(Order)
            .options(selectinload(Order.items))
            .order_by(Order.created_at.desc(), Order.id.desc())
            .offset(skip)
            .limit(limit)
            .all()
        )

    def get_by_user_id(self, user_id: int, limit: int = 100) -> List[Order]:
        """Orders placed by one user, newest first"""
        return (
            self.db.query(Order)
            .options(selectinload(Order.items))
            .filter(Order.user_id == user_id)
            .order_by(Order.created_at.desc(), Order.id.desc())
            .limit(limit)
            .all()
        )
