"""API routes package"""

from . import health, auth, users, meals, orders, newsletter, klarna

__all__ = ["health", "auth", "users", "meals", "orders", "newsletter", "klarna"]
