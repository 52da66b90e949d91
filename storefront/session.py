"""
User session: the logged-in user and the bearer token used for API calls.
"""

from typing import Any, Dict, Optional
import logging

from storefront.api_client import MealboxApiClient

logger = logging.getLogger("mealbox.storefront.session")

LOGIN_PATH = "/login"


class UserSession:
    def __init__(self, token: Optional[str] = None, user: Optional[Dict[str, Any]] = None):
        self.token = token
        self.user = user

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token) and self.user is not None

    @property
    def is_admin(self) -> bool:
        return bool(self.user) and self.user.get("type") == "admin"

    def login(self, api: MealboxApiClient, email: str, password: str) -> Dict[str, Any]:
        result = api.login(email, password)
        self.token = result["token"]
        self.user = result["user"]
        logger.info("session_started user_id=%s", self.user.get("id"))
        return self.user

    def refresh_user(self, api: MealboxApiClient) -> Dict[str, Any]:
        """Reload the user behind the current token."""
        self.user = api.get_user_by_token(self.token)["user"]
        return self.user

    def logout(self) -> None:
        self.token = None
        self.user = None


def protected_route(session: UserSession, target: str) -> str:
    """Where navigation to ``target`` actually lands: the login page for guests."""
    return target if session.user else LOGIN_PATH
