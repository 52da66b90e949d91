"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.user_schemas import (
    UserCreate,
    UserUpdate,
    UserResponse,
    LoginRequest,
    LoginResponse,
    TokenUserResponse,
)
from domain.schemas.meal_schemas import MealCreate, MealUpdate, MealResponse
from domain.schemas.order_schemas import (
    CartItem,
    OrderCreate,
    OrderStatusUpdate,
    OrderItemResponse,
    OrderResponse,
)
from domain.schemas.newsletter_schemas import NewsletterCreate, NewsletterResponse
from domain.schemas.klarna_schemas import (
    KlarnaCartItem,
    KlarnaCustomer,
    KlarnaOrderRequest,
    KlarnaOrderResponse,
)

__all__ = [
    # User schemas
    "UserCreate",
    "UserUpdate",
    "UserResponse",
    "LoginRequest",
    "LoginResponse",
    "TokenUserResponse",
    # Meal schemas
    "MealCreate",
    "MealUpdate",
    "MealResponse",
    # Order schemas
    "CartItem",
    "OrderCreate",
    "OrderStatusUpdate",
    "OrderItemResponse",
    "OrderResponse",
    # Newsletter schemas
    "NewsletterCreate",
    "NewsletterResponse",
    # Klarna schemas
    "KlarnaCartItem",
    "KlarnaCustomer",
    "KlarnaOrderRequest",
    "KlarnaOrderResponse",
]
