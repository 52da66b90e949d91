from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime
from decimal import Decimal

from domain.enums import OrderStatus


class CartItem(BaseModel):
    """A cart line as sent by the client.

    Only ``id`` and ``quantity`` are trusted; name and price are taken from
    the meal catalogue when the order is created.
    """

    id: int
    name: Optional[str] = None
    image: Optional[str] = None
    price: Optional[Decimal] = Field(None, ge=0)
    quantity: int = Field(..., ge=1, le=100)


class OrderCreate(BaseModel):
    meals: List[CartItem] = Field(..., min_length=1)


class OrderStatusUpdate(BaseModel):
    status: OrderStatus


class OrderItemResponse(BaseModel):
    meal_id: Optional[int]
    name: str
    price: float
    quantity: int

    model_config = {"from_attributes": True}


class OrderResponse(BaseModel):
    id: int
    user_id: int
    status: OrderStatus
    total: float
    created_at: Optional[datetime] = None
    items: List[OrderItemResponse]

    model_config = {"from_attributes": True}
