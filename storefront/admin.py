"""
Profile page controller.

Admins get three exclusive tabs (meal packages, order tracking, newsletter);
everyone else gets their own profile panel. Meals and newsletters are
fetched on load and refreshed on demand after admin actions.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional
import logging

from storefront.api_client import MealboxApiClient
from storefront.errors import ApiError
from storefront.session import UserSession

logger = logging.getLogger("mealbox.storefront.admin")

USER_PROFILE_PANEL = "userProfile"


class AdminTab(str, Enum):
    MEAL_PACKAGES = "mealPackages"
    ORDER_TRACKING = "orderTracking"
    NEWSLETTER = "newsletter"


@dataclass
class Panel:
    name: str
    data: Dict[str, Any] = field(default_factory=dict)


class ProfileView:
    def __init__(self, api: MealboxApiClient, session: UserSession):
        self.api = api
        self.session = session

        self.active_tab = AdminTab.MEAL_PACKAGES
        self.meals: List[Dict[str, Any]] = []
        self.is_loading = True
        self.error: Optional[str] = None
        self.newsletters: List[Dict[str, Any]] = []
        self.orders: List[Dict[str, Any]] = []
        self.orders_error: Optional[str] = None
        self.action_error: Optional[str] = None

    @property
    def is_admin(self) -> bool:
        return self.session.is_admin

    def load(self) -> None:
        self.fetch_meals()
        if self.is_admin:
            self.fetch_newsletters()

    # ------------------ Tabs ------------------
    def select_tab(self, tab: str) -> AdminTab:
        self.active_tab = AdminTab(tab)
        if self.active_tab == AdminTab.ORDER_TRACKING and self.is_admin:
            self.fetch_orders()
        return self.active_tab

    def render(self) -> Panel:
        """The one panel that is visible right now."""
        if not self.is_admin:
            return Panel(USER_PROFILE_PANEL, {"user": self.session.user})

        if self.active_tab == AdminTab.MEAL_PACKAGES:
            return Panel(
                AdminTab.MEAL_PACKAGES.value,
                {"meals": self.meals, "is_loading": self.is_loading, "error": self.error},
            )
        if self.active_tab == AdminTab.ORDER_TRACKING:
            return Panel(
                AdminTab.ORDER_TRACKING.value,
                {"orders": self.orders, "error": self.orders_error},
            )
        return Panel(AdminTab.NEWSLETTER.value, {"newsletters": self.newsletters})

    # ------------------ Data ------------------
    def fetch_meals(self) -> None:
        try:
            self.meals = self.api.get_meals()
            self.error = None
        except ApiError as exc:
            self.error = str(exc)
        finally:
            self.is_loading = False

    def fetch_newsletters(self) -> None:
        try:
            self.newsletters = self.api.get_newsletters(self.session.token)
        except ApiError as exc:
            logger.error("Error fetching newsletters: %s", exc)

    def fetch_orders(self) -> None:
        try:
            self.orders = self.api.get_orders(self.session.token)
            self.orders_error = None
        except ApiError as exc:
            self.orders_error = str(exc)

    # ------------------ Admin actions ------------------
    def add_meal(self, meal: Dict[str, Any]) -> bool:
        try:
            self.api.create_meal(meal, self.session.token)
        except ApiError as exc:
            self.action_error = str(exc)
            return False
        self.handle_meal_added()
        return True

    def delete_meal(self, meal_id: int) -> bool:
        try:
            self.api.delete_meal(meal_id, self.session.token)
        except ApiError as exc:
            self.action_error = str(exc)
            return False
        self.handle_meal_deleted(meal_id)
        return True

    def add_newsletter(self, title: str, content: str) -> bool:
        try:
            self.api.create_newsletter(title, content, self.session.token)
        except ApiError as exc:
            self.action_error = str(exc)
            return False
        self.handle_newsletter_added()
        return True

    def update_order_status(self, order_id: int, status: str) -> bool:
        try:
            updated = self.api.update_order_status(order_id, status, self.session.token)
        except ApiError as exc:
            self.action_error = str(exc)
            return False
        self.orders = [updated if o.get("id") == order_id else o for o in self.orders]
        return True

    def handle_meal_added(self) -> None:
        self.fetch_meals()

    def handle_meal_deleted(self, meal_id: int) -> None:
        self.meals = [meal for meal in self.meals if meal.get("id") != meal_id]

    def handle_newsletter_added(self) -> None:
        self.fetch_newsletters()
