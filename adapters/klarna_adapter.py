"""Klarna Checkout (v3) adapter.

Thin HTTP wrapper around the Klarna order endpoints. Connection state is
module-level, opened in the application lifespan and closed on shutdown.
"""

from typing import Any, Dict, Optional
import logging

import httpx

from app.config import settings
from app.exceptions import PaymentProviderError

logger = logging.getLogger("mealbox.klarna")

ORDERS_PATH = "/checkout/v3/orders"

_client: Optional[httpx.Client] = None


# ------------------ Connection ------------------
def connect(
    base_url: str,
    username: str,
    password: str,
    timeout: float = 10.0,
    transport: Optional[httpx.BaseTransport] = None,
) -> None:
    """Create the shared HTTP client used for Klarna calls."""
    global _client
    close()
    _client = httpx.Client(
        base_url=base_url,
        auth=(username, password),
        timeout=httpx.Timeout(timeout),
        headers={"Content-Type": "application/json"},
        transport=transport,
    )
    logger.info("Klarna client configured for %s", base_url)


def close() -> None:
    """Close the Klarna HTTP client."""
    global _client
    try:
        if _client is not None:
            _client.close()
            logger.info("Klarna client closed")
    finally:
        _client = None


def _get_client() -> httpx.Client:
    """Lazy init from settings when the lifespan hook did not run (scripts, tests)."""
    if _client is None:
        connect(
            settings.klarna_api_url,
            settings.klarna_username,
            settings.klarna_password,
            settings.klarna_timeout_sec,
        )
    return _client


def _request(method: str, path: str, **kwargs) -> Dict[str, Any]:
    client = _get_client()
    try:
        response = client.request(method, path, **kwargs)
    except httpx.HTTPError as exc:
        logger.error("Klarna %s %s failed: %s", method, path, exc)
        raise PaymentProviderError(
            "Could not reach Klarna", details={"reason": str(exc)}
        ) from exc

    if response.status_code >= 400:
        try:
            body = response.json()
        except ValueError:
            body = {"raw": response.text[:500]}
        if not isinstance(body, dict):
            body = {"raw": body}
        logger.error(
            "Klarna %s %s returned %s: %s", method, path, response.status_code, body
        )
        raise PaymentProviderError(
            f"Klarna responded with HTTP {response.status_code}",
            details={
                "status_code": response.status_code,
                "error_code": body.get("error_code"),
                "error_messages": body.get("error_messages"),
            },
        )

    try:
        return response.json()
    except ValueError as exc:
        raise PaymentProviderError("Klarna returned a non-JSON response") from exc


# ------------------ Orders ------------------
def create_order(order: Dict[str, Any]) -> Dict[str, Any]:
    """Create a Klarna checkout order and return Klarna's order document."""
    logger.debug(
        "Creating Klarna order amount=%s lines=%d",
        order.get("order_amount"),
        len(order.get("order_lines", [])),
    )
    return _request("POST", ORDERS_PATH, json=order)


def get_order(order_id: str) -> Dict[str, Any]:
    """Fetch an existing Klarna checkout order."""
    return _request("GET", f"{ORDERS_PATH}/{order_id}")
