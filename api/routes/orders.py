"""Order routes: checkout submission and admin order tracking"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
import logging
from typing import List

from api.dependencies import get_db, get_current_user, require_admin
from domain.models import AppUser
from domain.schemas.order_schemas import OrderCreate, OrderStatusUpdate, OrderResponse
from domain.mappers import OrderMapper
from services.order_service import OrderService
from app.exceptions import NotFoundError

router = APIRouter(prefix="/orders", tags=["Orders"])
logger = logging.getLogger("mealbox.api.orders")


@router.post("", response_model=OrderResponse, status_code=status.HTTP_201_CREATED)
def create_order(
    payload: OrderCreate,
    db: Session = Depends(get_db),
    current_user: AppUser = Depends(get_current_user),
):
    """Create an order for the caller from the cart lines in ``meals``."""
    order = OrderService.create_order(db, current_user, payload.meals)
    return OrderMapper.to_response(order)


@router.get("", response_model=List[OrderResponse])
def list_orders(
    db: Session = Depends(get_db), _admin: AppUser = Depends(require_admin)
):
    """All orders, newest first (admin order tracking)."""
    return [OrderMapper.to_response(o) for o in OrderService.list_orders(db)]


@router.get("/mine", response_model=List[OrderResponse])
def list_my_orders(
    db: Session = Depends(get_db), current_user: AppUser = Depends(get_current_user)
):
    return [
        OrderMapper.to_response(o)
        for o in OrderService.list_user_orders(db, current_user.id)
    ]


@router.get("/{order_id}", response_model=OrderResponse)
def get_order(
    order_id: int,
    db: Session = Depends(get_db),
    current_user: AppUser = Depends(get_current_user),
):
    return OrderMapper.to_response(OrderService.get_order(db, order_id, current_user))


@router.put("/{order_id}/status", response_model=OrderResponse)
def update_order_status(
    order_id: int,
    payload: OrderStatusUpdate,
    db: Session = Depends(get_db),
    _admin: AppUser = Depends(require_admin),
):
    """
    Move an order along its lifecycle.

    pending -> processing -> shipped -> delivered; pending and processing
    orders may also be cancelled.
    """
    order = OrderService.update_status(db, order_id, payload.status)
    return OrderMapper.to_response(order)


@router.delete("/{order_id}")
def delete_order(
    order_id: int,
    db: Session = Depends(get_db),
    _admin: AppUser = Depends(require_admin),
):
    if not OrderService.delete_order(db, order_id):
        raise NotFoundError(f"Order {order_id} not found")
    return {"status": "ok", "deleted": order_id}
