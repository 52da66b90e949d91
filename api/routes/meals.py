"""Meal package catalogue routes"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
import logging
from typing import List

from api.dependencies import get_db, require_admin
from domain.models import AppUser
from domain.schemas.meal_schemas import MealCreate, MealUpdate, MealResponse
from services.meal_service import MealService
from app.exceptions import NotFoundError

router = APIRouter(prefix="/meals", tags=["Meals"])
logger = logging.getLogger("mealbox.api.meals")


@router.get("", response_model=List[MealResponse])
def list_meals(db: Session = Depends(get_db)):
    """List every meal package in the shop"""
    return [MealResponse.model_validate(m) for m in MealService.list_meals(db)]


@router.get("/{meal_id}", response_model=MealResponse)
def get_meal(meal_id: int, db: Session = Depends(get_db)):
    meal = MealService.get_meal(db, meal_id)
    if not meal:
        raise NotFoundError(f"Meal {meal_id} not found")
    return MealResponse.model_validate(meal)


@router.post("", response_model=MealResponse, status_code=status.HTTP_201_CREATED)
def create_meal(
    payload: MealCreate,
    db: Session = Depends(get_db),
    _admin: AppUser = Depends(require_admin),
):
    return MealResponse.model_validate(MealService.create_meal(db, payload))


@router.put("/{meal_id}", response_model=MealResponse)
def update_meal(
    meal_id: int,
    payload: MealUpdate,
    db: Session = Depends(get_db),
    _admin: AppUser = Depends(require_admin),
):
    return MealResponse.model_validate(MealService.update_meal(db, meal_id, payload))


@router.delete("/{meal_id}")
def delete_meal(
    meal_id: int,
    db: Session = Depends(get_db),
    _admin: AppUser = Depends(require_admin),
):
    if not MealService.delete_meal(db, meal_id):
        raise NotFoundError(f"Meal {meal_id} not found")
    return {"status": "ok", "deleted": meal_id}
