"""
Schemas for the Klarna checkout endpoint.

The request mirrors what the storefront sends: the cart lines, the cart
total and the customer details typed into the checkout form.
"""

from pydantic import BaseModel, EmailStr, Field
from typing import Optional, List
from decimal import Decimal

from domain.schemas.user_schemas import CamelModel


class KlarnaCartItem(BaseModel):
    id: Optional[int] = None
    name: str = Field(..., min_length=1)
    image: Optional[str] = None
    price: Decimal = Field(..., ge=0)
    quantity: int = Field(..., ge=1)


class KlarnaCustomer(CamelModel):
    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    email: EmailStr
    address: str = Field(..., min_length=1)
    postal_code: str = Field(..., min_length=1)
    city: str = Field(..., min_length=1)
    country: str = Field(..., min_length=1)
    phone: Optional[str] = None


class KlarnaOrderRequest(BaseModel):
    items: List[KlarnaCartItem] = Field(..., min_length=1)
    total: Decimal = Field(..., ge=0)
    customer: KlarnaCustomer


class KlarnaOrderResponse(BaseModel):
    order_id: str
    status: Optional[str] = None
    html_snippet: Optional[str] = None
    redirect_url: Optional[str] = None
