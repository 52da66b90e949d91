"""
Meal Repository - Data access layer for the meal package catalogue
"""

from typing import List, Iterable, Dict
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import Meal


class MealRepository(BaseRepository[Meal]):
    """Repository for meal data access"""

    def __init__(self, db: Session):
        super().__init__(db, Meal)

    def get_all(self, skip: int = 0, limit: int = 100) -> List[Meal]:
        return self.db.query(Meal).order_by(Meal.id).offset(skip).limit(limit).all()

    def get_by_ids(self, meal_ids: Iterable[int]) -> Dict[int, Meal]:
        """Fetch several meals in one query, keyed by id"""
        ids = set(meal_ids)
        if not ids:
            return {}
        meals = self.db.query(Meal).filter(Meal.id.in_(ids)).all()
        return {m.id: m for m in meals}
