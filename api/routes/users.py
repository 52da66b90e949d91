"""User management routes"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
import logging
from typing import List

from api.dependencies import get_db, get_current_user, require_admin
from domain.models import AppUser
from domain.schemas.user_schemas import UserCreate, UserUpdate, UserResponse
from domain.mappers import UserMapper
from services.user_service import UserService
from app.exceptions import NotFoundError

router = APIRouter(prefix="/users", tags=["Users"])
logger = logging.getLogger("mealbox.api.users")


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(user: UserCreate, db: Session = Depends(get_db)):
    """Register a new customer account"""
    new_user = UserService.create_user(db, user)
    return UserMapper.to_response(new_user)


@router.get("", response_model=List[UserResponse])
def get_all_users(
    db: Session = Depends(get_db), _admin: AppUser = Depends(require_admin)
):
    """Return all users (admin only)."""
    return [UserMapper.to_response(u) for u in UserService.get_all_users(db)]


@router.get("/{user_id}", response_model=UserResponse)
def get_user(
    user_id: int,
    db: Session = Depends(get_db),
    current_user: AppUser = Depends(get_current_user),
):
    UserService.ensure_self_or_admin(current_user, user_id)
    user = UserService.get_user(db, user_id)
    if not user:
        raise NotFoundError(f"User {user_id} not found")
    return UserMapper.to_response(user)


@router.put("/{user_id}", response_model=UserResponse)
def update_user(
    user_id: int,
    payload: UserUpdate,
    db: Session = Depends(get_db),
    current_user: AppUser = Depends(get_current_user),
):
    """Update profile fields; only fields present in the body change."""
    UserService.ensure_self_or_admin(current_user, user_id)
    user = UserService.update_user(db, user_id, payload)
    return UserMapper.to_response(user)


@router.delete("/{user_id}")
def delete_user(
    user_id: int,
    db: Session = Depends(get_db),
    current_user: AppUser = Depends(get_current_user),
):
    """Delete a user and their orders."""
    UserService.ensure_self_or_admin(current_user, user_id)
    if not UserService.delete_user(db, user_id):
        raise NotFoundError(f"User {user_id} not found")
    return {"status": "ok", "deleted": user_id}
