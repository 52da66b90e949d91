from typing import List, Optional
from sqlalchemy.orm import Session
import logging

from domain.models import Meal
from domain.schemas.meal_schemas import MealCreate, MealUpdate
from repositories import MealRepository
from app.exceptions import NotFoundError

logger = logging.getLogger("mealbox.meals")


class MealService:
    """Business logic for the meal package catalogue"""

    @staticmethod
    def list_meals(db: Session) -> List[Meal]:
        return MealRepository(db).get_all(limit=1000)

    @staticmethod
    def get_meal(db: Session, meal_id: int) -> Optional[Meal]:
        return MealRepository(db).get_by_id(meal_id)

    @staticmethod
    def create_meal(db: Session, data: MealCreate) -> Meal:
        meal = MealRepository(db).create(Meal(**data.model_dump()))
        logger.info(f"meal_created meal_id={meal.id} price={meal.price}")
        return meal

    @staticmethod
    def update_meal(db: Session, meal_id: int, data: MealUpdate) -> Meal:
        repo = MealRepository(db)
        meal = repo.get_by_id(meal_id)
        if not meal:
            raise NotFoundError(f"Meal {meal_id} not found")
        changes = data.model_dump(exclude_unset=True)
        for key, value in changes.items():
            setattr(meal, key, value)
        meal = repo.update(meal)
        logger.info(f"meal_updated meal_id={meal_id} fields={sorted(changes)}")
        return meal

    @staticmethod
    def delete_meal(db: Session, meal_id: int) -> bool:
        deleted = MealRepository(db).delete(meal_id)
        if deleted:
            logger.info(f"meal_deleted meal_id={meal_id}")
        return deleted
