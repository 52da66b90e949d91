"""
Klarna checkout: turns a storefront cart into a Klarna Checkout order.

Klarna works in minor units (cents) and expresses tax rates as
percent * 100, so 14 % is ``1400``.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, List
import logging

from adapters import klarna_adapter
from app.config import settings
from app.exceptions import ServiceValidationError, PaymentProviderError
from domain.schemas.klarna_schemas import (
    KlarnaCartItem,
    KlarnaCustomer,
    KlarnaOrderRequest,
    KlarnaOrderResponse,
)

logger = logging.getLogger("mealbox.klarna_service")

COUNTRY_CODES = {
    "finland": "FI",
    "suomi": "FI",
    "sweden": "SE",
    "norway": "NO",
    "denmark": "DK",
}


def to_minor_units(amount: Decimal) -> int:
    return int((Decimal(amount) * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def tax_amount(total_amount: int, tax_rate: int) -> int:
    """Tax included in ``total_amount`` using Klarna's formula."""
    if tax_rate == 0:
        return 0
    net = Decimal(total_amount) * 10000 / (10000 + tax_rate)
    return int((Decimal(total_amount) - net).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def country_code(country: str) -> str:
    value = country.strip()
    if len(value) == 2 and value.isalpha():
        return value.upper()
    code = COUNTRY_CODES.get(value.lower())
    if not code:
        raise ServiceValidationError(
            f"Unsupported country: {country}", details={"field": "country"}
        )
    return code


class KlarnaService:
    """Builds Klarna orders and maps Klarna responses for the storefront"""

    @staticmethod
    def build_order_lines(items: List[KlarnaCartItem], tax_rate: int) -> List[Dict[str, Any]]:
        lines = []
        for item in items:
            unit_price = to_minor_units(item.price)
            total = unit_price * item.quantity
            line = {
                "type": "physical",
                "name": item.name,
                "quantity": item.quantity,
                "unit_price": unit_price,
                "tax_rate": tax_rate,
                "total_amount": total,
                "total_discount_amount": 0,
                "total_tax_amount": tax_amount(total, tax_rate),
            }
            if item.id is not None:
                line["reference"] = str(item.id)
            lines.append(line)
        return lines

    @staticmethod
    def build_billing_address(customer: KlarnaCustomer) -> Dict[str, Any]:
        address = {
            "given_name": customer.first_name,
            "family_name": customer.last_name,
            "email": customer.email,
            "street_address": customer.address,
            "postal_code": customer.postal_code,
            "city": customer.city,
            "country": country_code(customer.country),
        }
        if customer.phone:
            address["phone"] = customer.phone
        return address

    @staticmethod
    def build_order(request: KlarnaOrderRequest) -> Dict[str, Any]:
        tax_rate = settings.klarna_tax_rate
        lines = KlarnaService.build_order_lines(request.items, tax_rate)
        order_amount = sum(line["total_amount"] for line in lines)

        if to_minor_units(request.total) != order_amount:
            raise ServiceValidationError(
                "Cart total does not match the sum of the items",
                details={"total": str(request.total), "items_total": order_amount / 100},
            )

        return {
            "purchase_country": settings.klarna_purchase_country,
            "purchase_currency": settings.klarna_purchase_currency,
            "locale": settings.klarna_locale,
            "order_amount": order_amount,
            "order_tax_amount": sum(line["total_tax_amount"] for line in lines),
            "order_lines": lines,
            "billing_address": KlarnaService.build_billing_address(request.customer),
            "merchant_urls": {
                "terms": settings.klarna_terms_url,
                "checkout": settings.klarna_checkout_url,
                "confirmation": settings.klarna_confirmation_url,
                "push": settings.klarna_push_url,
            },
        }

    @staticmethod
    def _to_response(klarna_order: Dict[str, Any]) -> KlarnaOrderResponse:
        order_id = klarna_order.get("order_id")
        if not order_id:
            raise PaymentProviderError("Klarna response did not include an order id")
        return KlarnaOrderResponse(
            order_id=order_id,
            status=klarna_order.get("status"),
            html_snippet=klarna_order.get("html_snippet"),
            redirect_url=klarna_order.get("redirect_url"),
        )

    @staticmethod
    def create_checkout(request: KlarnaOrderRequest) -> KlarnaOrderResponse:
        order = KlarnaService.build_order(request)
        result = KlarnaService._to_response(klarna_adapter.create_order(order))
        logger.info(
            f"klarna_order_created order_id={result.order_id} "
            f"amount={order['order_amount']} lines={len(order['order_lines'])}"
        )
        return result

    @staticmethod
    def get_checkout(order_id: str) -> KlarnaOrderResponse:
        return KlarnaService._to_response(klarna_adapter.get_order(order_id))
