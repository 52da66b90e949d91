"""
Storefront package - client-side shop flows.

Cart store, checkout flow, user session and the admin profile tabs. Talks
to the Mealbox REST API over HTTP the same way the browser client does.
"""

from storefront.cart import Cart, CartItem
from storefront.customer import CustomerInfo, REQUIRED_FIELDS
from storefront.session import UserSession, protected_route
from storefront.api_client import MealboxApiClient
from storefront.checkout import CheckoutFlow, CheckoutView, PaymentMethod
from storefront.admin import AdminTab, ProfileView
from storefront.errors import StorefrontError, ApiError, CheckoutError, KlarnaResponseError

__all__ = [
    "Cart",
    "CartItem",
    "CustomerInfo",
    "REQUIRED_FIELDS",
    "UserSession",
    "protected_route",
    "MealboxApiClient",
    "CheckoutFlow",
    "CheckoutView",
    "PaymentMethod",
    "AdminTab",
    "ProfileView",
    "StorefrontError",
    "ApiError",
    "CheckoutError",
    "KlarnaResponseError",
]
