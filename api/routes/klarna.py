"""Klarna checkout routes"""

from fastapi import APIRouter, status
import logging

from domain.schemas.klarna_schemas import KlarnaOrderRequest, KlarnaOrderResponse
from services.klarna_service import KlarnaService

router = APIRouter(prefix="/klarna", tags=["Klarna"])
logger = logging.getLogger("mealbox.api.klarna")


@router.post(
    "/orders", response_model=KlarnaOrderResponse, status_code=status.HTTP_201_CREATED
)
def create_klarna_order(payload: KlarnaOrderRequest):
    """
    Create a Klarna Checkout session for the cart.

    The response carries Klarna's ``html_snippet`` (embedded checkout) and,
    when Klarna provides one, a ``redirect_url``.
    """
    return KlarnaService.create_checkout(payload)


@router.get("/orders/{order_id}", response_model=KlarnaOrderResponse)
def get_klarna_order(order_id: str):
    """Re-fetch a Klarna order, e.g. to render the confirmation snippet."""
    return KlarnaService.get_checkout(order_id)
