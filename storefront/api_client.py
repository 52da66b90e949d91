"""
HTTP client for the Mealbox REST API.

Every non-success response becomes an ``ApiError``; callers decide what to
show the user. Nothing is retried.
"""

from typing import Any, Dict, List, Optional
import logging

import httpx

from storefront.config import storefront_settings
from storefront.errors import ApiError

logger = logging.getLogger("mealbox.storefront.api")


class MealboxApiClient:
    """
    Thin wrapper over ``httpx.Client``.

    Example:
        >>> with MealboxApiClient() as api:
        ...     meals = api.get_meals()
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self._client = httpx.Client(
            base_url=(base_url or storefront_settings.api_url).rstrip("/"),
            timeout=httpx.Timeout(timeout or storefront_settings.request_timeout_sec),
            headers={"Content-Type": "application/json"},
            transport=transport,
        )

    def __enter__(self) -> "MealboxApiClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def _request(
        self,
        method: str,
        path: str,
        token: Optional[str] = None,
        json: Any = None,
    ) -> Any:
        headers = {"Authorization": f"Bearer {token}"} if token else None
        try:
            response = self._client.request(method, path, json=json, headers=headers)
        except httpx.HTTPError as exc:
            logger.error("%s %s failed: %s", method, path, exc)
            raise ApiError(f"Network error: {exc}") from exc

        if not response.is_success:
            raise ApiError(self._error_message(response), status_code=response.status_code)

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            logger.error("%s %s returned a non-JSON body", method, path)
            raise ApiError(
                "Invalid response from server", status_code=response.status_code
            ) from exc

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            return f"HTTP {response.status_code}"
        error = body.get("error") if isinstance(body, dict) else None
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
        if isinstance(error, str):
            return error
        return f"HTTP {response.status_code}"

    # ------------------ Auth & users ------------------
    def login(self, email: str, password: str) -> Dict[str, Any]:
        return self._request("POST", "/auth/login", json={"email": email, "password": password})

    def get_user_by_token(self, token: Optional[str]) -> Dict[str, Any]:
        return self._request("GET", "/auth/me", token=token)

    def register(self, user: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", "/users", json=user)

    # ------------------ Meals ------------------
    def get_meals(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/meals")

    def create_meal(self, meal: Dict[str, Any], token: Optional[str]) -> Dict[str, Any]:
        return self._request("POST", "/meals", token=token, json=meal)

    def delete_meal(self, meal_id: int, token: Optional[str]) -> Dict[str, Any]:
        return self._request("DELETE", f"/meals/{meal_id}", token=token)

    # ------------------ Orders ------------------
    def create_order(self, items: List[Dict[str, Any]], token: Optional[str]) -> Dict[str, Any]:
        return self._request("POST", "/orders", token=token, json={"meals": items})

    def get_orders(self, token: Optional[str]) -> List[Dict[str, Any]]:
        return self._request("GET", "/orders", token=token)

    def update_order_status(
        self, order_id: int, status: str, token: Optional[str]
    ) -> Dict[str, Any]:
        return self._request(
            "PUT", f"/orders/{order_id}/status", token=token, json={"status": status}
        )

    # ------------------ Newsletters ------------------
    def get_newsletters(self, token: Optional[str]) -> List[Dict[str, Any]]:
        return self._request("GET", "/newsletter", token=token)

    def create_newsletter(
        self, title: str, content: str, token: Optional[str]
    ) -> Dict[str, Any]:
        return self._request(
            "POST", "/newsletter", token=token, json={"title": title, "content": content}
        )

    # ------------------ Klarna ------------------
    def create_klarna_order(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", "/klarna/orders", json=payload)
