"""Services package - Business logic layer"""

from services.auth_service import AuthService
from services.user_service import UserService
from services.meal_service import MealService
from services.order_service import OrderService
from services.newsletter_service import NewsletterService
from services.klarna_service import KlarnaService

__all__ = [
    "AuthService",
    "UserService",
    "MealService",
    "OrderService",
    "NewsletterService",
    "KlarnaService",
]
