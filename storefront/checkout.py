"""
Checkout flow.

Collects customer details, validates the required fields and hands the cart
to one of three payment strategies:

- ``klarna``: opens a Klarna Checkout session and keeps the returned HTML
  snippet for inline rendering;
- ``paypal``: not available yet, shows a blocking message;
- ``dummy``: development path that posts the cart straight to ``/orders``
  and navigates to the confirmation page.

All failures end up in ``error`` as one user-visible string.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, List, Optional
import logging

from pydantic import ValidationError

from storefront.api_client import MealboxApiClient
from storefront.cart import Cart
from storefront.config import StorefrontSettings, storefront_settings
from storefront.customer import CustomerInfo
from storefront.errors import ApiError, CheckoutError, KlarnaResponseError, StorefrontError
from storefront.klarna import create_klarna_order
from storefront.session import UserSession

logger = logging.getLogger("mealbox.storefront.checkout")

CONFIRMATION_PATH = "/confirmation"
SHOP_PATH = "/shop"

MISSING_FIELDS_MESSAGE = "Missing fields: {fields}"
PAYMENT_ERROR_MESSAGE = "Payment error: {reason}"
ORDER_NOT_SUBMITTED_MESSAGE = "The order could not be submitted."
PAYPAL_UNAVAILABLE_MESSAGE = "PayPal payment is not implemented yet."
EMPTY_CART_MESSAGE = "Your cart is empty."
SHIPPING_COST = Decimal("0.00")


class PaymentMethod(str, Enum):
    KLARNA = "klarna"
    PAYPAL = "paypal"
    DUMMY = "dummy"


class CheckoutView(str, Enum):
    EMPTY_CART = "empty_cart"
    FORM = "form"
    KLARNA = "klarna"


@dataclass
class SummaryLine:
    id: int
    name: str
    image_url: str
    quantity: int
    line_total: Decimal


@dataclass
class OrderSummary:
    lines: List[SummaryLine] = field(default_factory=list)
    subtotal: Decimal = Decimal("0.00")
    shipping: Decimal = SHIPPING_COST
    total: Decimal = Decimal("0.00")


def format_eur(amount: Decimal) -> str:
    return f"€{Decimal(amount):.2f}"


class CheckoutFlow:
    """State and actions of the checkout page."""

    def __init__(
        self,
        cart: Cart,
        session: UserSession,
        api: MealboxApiClient,
        settings: Optional[StorefrontSettings] = None,
    ):
        self.cart = cart
        self.session = session
        self.api = api
        self.settings = settings or storefront_settings

        self.customer_info = CustomerInfo()
        self.payment_method = PaymentMethod.KLARNA
        self.is_processing = False
        self.error: Optional[str] = None
        self.notice: Optional[str] = None
        self.klarna_snippet = ""
        self.redirect_to: Optional[str] = None

        self.user: Optional[Dict[str, Any]] = None
        self.loading_user = False
        self.user_error: Optional[str] = None

    # ------------------ View state ------------------
    def view(self) -> CheckoutView:
        if self.cart.is_empty:
            return CheckoutView.EMPTY_CART
        if self.klarna_snippet:
            return CheckoutView.KLARNA
        return CheckoutView.FORM

    def order_summary(self) -> OrderSummary:
        lines = [
            SummaryLine(
                id=item.id,
                name=item.name,
                image_url=self.settings.image_url(item.image),
                quantity=item.quantity,
                line_total=item.line_total,
            )
            for item in self.cart.items
        ]
        subtotal = self.cart.total
        return OrderSummary(
            lines=lines,
            subtotal=subtotal,
            shipping=SHIPPING_COST,
            total=subtotal + SHIPPING_COST,
        )

    # ------------------ Form input ------------------
    def handle_input_change(self, name: str, value: str) -> None:
        self.customer_info.update(name, value)

    def select_payment_method(self, method: str) -> None:
        try:
            self.payment_method = PaymentMethod(method)
        except ValueError:
            raise CheckoutError(f"Invalid payment method selected: {method}") from None

    def fill_from_user(self) -> None:
        """Pre-fill the form from the logged-in user's profile."""
        self.loading_user = True
        self.user_error = None
        try:
            data = self.api.get_user_by_token(self.session.token)
            self.user = data["user"]
            self.customer_info = CustomerInfo.from_user(self.user)
        except (StorefrontError, ValidationError, AttributeError, KeyError, TypeError) as exc:
            self.user_error = str(exc) or "Failed to fetch user data"
            logger.warning("checkout_prefill_failed error=%s", exc)
        finally:
            self.loading_user = False

    # ------------------ Submission ------------------
    def submit(self) -> bool:
        """
        Validate the form and run the selected payment method.

        Returns True when the payment step succeeded (Klarna snippet received
        or dummy order created). Validation never touches the network.
        """
        if self.is_processing:
            return False

        self.is_processing = True
        self.error = None
        self.notice = None
        try:
            if self.cart.is_empty:
                self.error = EMPTY_CART_MESSAGE
                self.redirect_to = SHOP_PATH
                return False

            missing = self.customer_info.missing_fields()
            if missing:
                self.error = MISSING_FIELDS_MESSAGE.format(fields=", ".join(missing))
                return False

            logger.info(
                "payment_started method=%s lines=%d total=%s",
                self.payment_method.value,
                len(self.cart),
                self.cart.total,
            )
            try:
                return self._pay()
            except StorefrontError as exc:
                self.error = PAYMENT_ERROR_MESSAGE.format(reason=exc)
                logger.error("payment_failed method=%s error=%s", self.payment_method.value, exc)
                return False
        finally:
            self.is_processing = False

    def _pay(self) -> bool:
        if self.payment_method == PaymentMethod.KLARNA:
            return self._pay_with_klarna()
        if self.payment_method == PaymentMethod.PAYPAL:
            self.notice = PAYPAL_UNAVAILABLE_MESSAGE
            return False
        if self.payment_method == PaymentMethod.DUMMY:
            return self._pay_with_dummy()
        raise CheckoutError("Invalid payment method selected")

    def _pay_with_klarna(self) -> bool:
        session = create_klarna_order(
            self.api,
            items=self.cart.to_payload(),
            total=self.cart.total,
            customer=self.customer_info.to_payload(),
        )
        if not session.is_usable:
            raise KlarnaResponseError("No valid payment URL received from Klarna")

        self.klarna_snippet = session.html_snippet or ""
        if not self.klarna_snippet:
            # Hosted page instead of an embedded snippet
            self.redirect_to = session.redirect_url
        return True

    def _pay_with_dummy(self) -> bool:
        try:
            order = self.api.create_order(self.cart.to_payload(), self.session.token)
        except ApiError as exc:
            logger.warning("dummy_order_rejected status=%s error=%s", exc.status_code, exc)
            raise CheckoutError(ORDER_NOT_SUBMITTED_MESSAGE) from exc

        logger.info("dummy_order_created order_id=%s", (order or {}).get("id"))
        self.cart.clear()
        self.redirect_to = CONFIRMATION_PATH
        return True
