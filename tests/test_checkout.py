"""
Tests for the storefront checkout flow.

The REST API is replaced with an httpx MockTransport, so every request the
flow makes is recorded and can be asserted on.
"""

from decimal import Decimal

import pytest

from storefront.api_client import MealboxApiClient
from storefront.cart import Cart
from storefront.checkout import CheckoutFlow, CheckoutView, PaymentMethod
from storefront.config import StorefrontSettings
from storefront.errors import CheckoutError
from storefront.session import UserSession
from test_fixtures import RecordingTransport

BASE = "http://api.test/api/v1"

PROFILE = {
    "id": 4,
    "email": "aino@example.com",
    "firstName": "Aino",
    "lastName": "Virtanen",
    "address": "Mannerheimintie 1",
    "postalCode": "00100",
    "city": "Helsinki",
    "country": "Finland",
    "phone": None,
    "type": "customer",
}


def build_flow(routes=None, items=((1, "Family week box", "89.90", 1),), token="tok-123"):
    transport = RecordingTransport(routes or {})
    api = MealboxApiClient(base_url=BASE, transport=transport)
    cart = Cart()
    for meal_id, name, price, qty in items:
        cart.add_item({"id": meal_id, "name": name, "image": f"{meal_id}.jpg", "price": price}, qty)
    settings = StorefrontSettings(api_url=BASE, img_serve_url="http://img.test/")
    flow = CheckoutFlow(cart, UserSession(token=token, user=PROFILE), api, settings=settings)
    return flow, transport


def fill_form(flow):
    for name, value in {
        "firstName": "Aino",
        "lastName": "Virtanen",
        "email": "aino@example.com",
        "address": "Mannerheimintie 1",
        "postalCode": "00100",
        "city": "Helsinki",
    }.items():
        flow.handle_input_change(name, value)


# =============================================================================
# VIEW STATE
# =============================================================================


def test_empty_cart_renders_empty_state():
    flow, _ = build_flow(items=())
    assert flow.view() == CheckoutView.EMPTY_CART


def test_non_empty_cart_renders_form_with_klarna_default():
    flow, _ = build_flow()
    assert flow.view() == CheckoutView.FORM
    assert flow.payment_method == PaymentMethod.KLARNA


def test_submit_with_empty_cart_sends_to_shop_without_network():
    flow, transport = build_flow(items=())
    fill_form(flow)
    assert flow.submit() is False
    assert flow.redirect_to == "/shop"
    assert transport.requests == []


def test_order_summary_totals_and_images():
    flow, _ = build_flow(items=((1, "Family week box", "89.90", 2), (2, "Lunch box", "10.05", 1)))
    summary = flow.order_summary()

    assert [line.line_total for line in summary.lines] == [Decimal("179.80"), Decimal("10.05")]
    assert summary.lines[0].image_url == "http://img.test/1.jpg"
    assert summary.subtotal == Decimal("189.85")
    assert summary.shipping == Decimal("0.00")
    assert summary.total == Decimal("189.85")


# =============================================================================
# VALIDATION
# =============================================================================


@pytest.mark.parametrize("method", ["klarna", "paypal", "dummy"])
def test_missing_fields_never_hit_the_network(method):
    flow, transport = build_flow()
    flow.select_payment_method(method)
    flow.handle_input_change("firstName", "Aino")
    flow.handle_input_change("city", "Helsinki")

    assert flow.submit() is False
    assert flow.error == "Missing fields: lastName, email, address, postalCode"
    assert transport.requests == []
    assert flow.is_processing is False


def test_select_unknown_payment_method_is_rejected():
    flow, _ = build_flow()
    with pytest.raises(CheckoutError) as excinfo:
        flow.select_payment_method("bitcoin")
    assert flow.payment_method == PaymentMethod.KLARNA
    assert excinfo.value.__suppress_context__


# =============================================================================
# KLARNA
# =============================================================================


def test_klarna_snippet_is_rendered_inline():
    flow, transport = build_flow(
        {"POST /api/v1/klarna/orders": (201, {"order_id": "k-1", "html_snippet": "<div>klarna</div>"})}
    )
    fill_form(flow)

    assert flow.submit() is True
    assert flow.error is None
    assert flow.klarna_snippet == "<div>klarna</div>"
    assert flow.view() == CheckoutView.KLARNA

    body = transport.json_body()
    assert body["total"] == "89.90"
    assert body["items"][0]["id"] == 1
    assert body["customer"]["firstName"] == "Aino"
    assert body["customer"]["country"] == "Finland"
    # Klarna session is not tied to the user token
    assert "authorization" not in transport.requests[0].headers


def test_klarna_redirect_only_response_is_accepted():
    flow, _ = build_flow(
        {"POST /api/v1/klarna/orders": (201, {"order_id": "k-2", "redirect_url": "https://pay.klarna.test/k-2"})}
    )
    fill_form(flow)

    assert flow.submit() is True
    assert flow.redirect_to == "https://pay.klarna.test/k-2"
    assert flow.view() == CheckoutView.FORM


def test_klarna_response_without_snippet_or_url_is_an_error():
    flow, _ = build_flow({"POST /api/v1/klarna/orders": (201, {"order_id": "k-3"})})
    fill_form(flow)

    assert flow.submit() is False
    assert flow.error == "Payment error: No valid payment URL received from Klarna"
    assert flow.klarna_snippet == ""


def test_klarna_api_failure_is_reported():
    flow, _ = build_flow(
        {"POST /api/v1/klarna/orders": (502, {"success": False, "error": {"code": "PAYMENT_PROVIDER_ERROR", "message": "Could not reach Klarna"}})}
    )
    fill_form(flow)

    assert flow.submit() is False
    assert flow.error == "Payment error: Could not reach Klarna"


def test_klarna_malformed_response_is_reported():
    flow, _ = build_flow({"POST /api/v1/klarna/orders": (201, {"html_snippet": 123})})
    fill_form(flow)

    assert flow.submit() is False
    assert flow.error == "Payment error: Unexpected response from Klarna"
    assert flow.klarna_snippet == ""
    assert flow.is_processing is False


def test_klarna_non_json_response_is_reported():
    flow, _ = build_flow({"POST /api/v1/klarna/orders": (201, "<html>ok</html>")})
    fill_form(flow)

    assert flow.submit() is False
    assert flow.error == "Payment error: Invalid response from server"


# =============================================================================
# PAYPAL
# =============================================================================


def test_paypal_shows_blocking_message():
    flow, transport = build_flow()
    fill_form(flow)
    flow.select_payment_method("paypal")

    assert flow.submit() is False
    assert flow.notice == "PayPal payment is not implemented yet."
    assert flow.error is None
    assert transport.requests == []


# =============================================================================
# DUMMY
# =============================================================================


def test_dummy_order_posts_cart_and_navigates_to_confirmation():
    flow, transport = build_flow({"POST /api/v1/orders": (201, {"id": 77})})
    fill_form(flow)
    flow.select_payment_method(PaymentMethod.DUMMY)

    assert flow.submit() is True
    assert flow.redirect_to == "/confirmation"
    assert flow.cart.is_empty

    request = transport.requests[0]
    assert request.headers["authorization"] == "Bearer tok-123"
    assert transport.json_body()["meals"][0] == {
        "id": 1,
        "name": "Family week box",
        "image": "1.jpg",
        "price": "89.90",
        "quantity": 1,
    }


def test_dummy_order_failure_uses_generic_message_and_keeps_cart():
    flow, _ = build_flow({"POST /api/v1/orders": (401, {"error": {"message": "Missing bearer token"}})})
    fill_form(flow)
    flow.select_payment_method("dummy")

    assert flow.submit() is False
    assert flow.error == "Payment error: The order could not be submitted."
    assert flow.redirect_to is None
    assert not flow.cart.is_empty


def test_dummy_order_with_non_json_success_body_keeps_cart():
    flow, _ = build_flow({"POST /api/v1/orders": (201, "<html>ok</html>")})
    fill_form(flow)
    flow.select_payment_method("dummy")

    assert flow.submit() is False
    assert flow.error == "Payment error: The order could not be submitted."
    assert flow.redirect_to is None
    assert not flow.cart.is_empty


# =============================================================================
# PRE-FILL FROM PROFILE
# =============================================================================


def test_fill_from_user_populates_form():
    flow, transport = build_flow({"GET /api/v1/auth/me": (200, {"message": "ok", "user": PROFILE})})
    flow.fill_from_user()

    assert flow.user_error is None
    assert flow.loading_user is False
    assert flow.customer_info.first_name == "Aino"
    assert flow.customer_info.phone == ""
    assert flow.customer_info.missing_fields() == []
    assert transport.requests[0].headers["authorization"] == "Bearer tok-123"


def test_fill_from_user_failure_sets_user_error():
    flow, _ = build_flow({"GET /api/v1/auth/me": (401, {"error": {"message": "Invalid token"}})})
    flow.fill_from_user()

    assert flow.user_error == "Invalid token"
    assert flow.customer_info.first_name == ""


def test_fill_from_user_converts_non_string_values():
    profile = dict(PROFILE, phone=401234567)
    flow, _ = build_flow({"GET /api/v1/auth/me": (200, {"message": "ok", "user": profile})})
    flow.fill_from_user()

    assert flow.user_error is None
    assert flow.customer_info.phone == "401234567"


def test_fill_from_user_non_json_body_sets_user_error():
    flow, _ = build_flow({"GET /api/v1/auth/me": (200, "oops")})
    flow.fill_from_user()

    assert flow.user_error == "Invalid response from server"
    assert flow.loading_user is False
    assert flow.customer_info.first_name == ""
