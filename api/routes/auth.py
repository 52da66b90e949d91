"""Login and token introspection routes"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
import logging

from api.dependencies import get_db, get_current_user
from domain.models import AppUser
from domain.schemas.user_schemas import LoginRequest, LoginResponse, TokenUserResponse
from domain.mappers import UserMapper
from services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["Auth"])
logger = logging.getLogger("mealbox.api.auth")


@router.post("/login", response_model=LoginResponse)
def login(credentials: LoginRequest, db: Session = Depends(get_db)):
    """Exchange email and password for a bearer token."""
    user = AuthService.authenticate(db, credentials.email, credentials.password)
    token = AuthService.create_access_token(user)
    return LoginResponse(
        message="Login successful", token=token, user=UserMapper.to_response(user)
    )


@router.get("/me", response_model=TokenUserResponse)
def get_user_by_token(current_user: AppUser = Depends(get_current_user)):
    """Return the user the bearer token belongs to."""
    return TokenUserResponse(
        message="Token is valid", user=UserMapper.to_response(current_user)
    )
