"""
Klarna client utility: asks the API to open a Klarna Checkout session.
"""

from decimal import Decimal
from typing import Any, Dict, List, Optional
import logging

from pydantic import BaseModel, ValidationError

from storefront.api_client import MealboxApiClient
from storefront.errors import KlarnaResponseError

logger = logging.getLogger("mealbox.storefront.klarna")


class KlarnaSession(BaseModel):
    order_id: Optional[str] = None
    html_snippet: Optional[str] = None
    redirect_url: Optional[str] = None

    @property
    def is_usable(self) -> bool:
        return bool(self.html_snippet or self.redirect_url)


def create_klarna_order(
    api: MealboxApiClient,
    items: List[Dict[str, Any]],
    total: Decimal,
    customer: Dict[str, Any],
) -> KlarnaSession:
    """POST ``{items, total, customer}`` and return whatever Klarna handed back."""
    payload = {"items": items, "total": str(total), "customer": customer}
    logger.info("klarna_order_requested lines=%d total=%s", len(items), total)
    data = api.create_klarna_order(payload) or {}
    try:
        return KlarnaSession.model_validate(data)
    except ValidationError as exc:
        logger.error("klarna_response_invalid error=%s", exc)
        raise KlarnaResponseError("Unexpected response from Klarna") from exc
