from collections import OrderedDict
from decimal import Decimal
from typing import List
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
import logging

from domain.enums import OrderStatus, ORDER_STATUS_TRANSITIONS
from domain.models import AppUser, Order, OrderItem
from domain.schemas.order_schemas import CartItem
from repositories import MealRepository, OrderRepository
from app.exceptions import ServiceValidationError, NotFoundError, ForbiddenError

logger = logging.getLogger("mealbox.orders")

_CENT = Decimal("0.01")


class OrderService:
    """Business logic for creating and tracking orders"""

    @staticmethod
    def create_order(db: Session, user: AppUser, cart_items: List[CartItem]) -> Order:
        """
        Create an order from the cart lines sent by the client.

        Lines with the same meal id are merged. Names and prices are
        snapshotted from the catalogue; client-side prices are ignored.
        """
        if not cart_items:
            raise ServiceValidationError("Order must contain at least one meal")

        quantities: "OrderedDict[int, int]" = OrderedDict()
        for item in cart_items:
            quantities[item.id] = quantities.get(item.id, 0) + item.quantity

        meals = MealRepository(db).get_by_ids(quantities.keys())
        missing = [meal_id for meal_id in quantities if meal_id not in meals]
        if missing:
            raise ServiceValidationError(
                "Order references unknown meals",
                details={"missing_meal_ids": missing},
            )

        order = Order(user_id=user.id, status=OrderStatus.PENDING)
        total = Decimal("0")
        for meal_id, quantity in quantities.items():
            meal = meals[meal_id]
            price = Decimal(meal.price).quantize(_CENT)
            order.items.append(
                OrderItem(meal_id=meal.id, name=meal.name, price=price, quantity=quantity)
            )
            total += price * quantity
        order.total = total.quantize(_CENT)

        try:
            db.add(order)
            db.commit()
            db.refresh(order)
        except IntegrityError as e:
            db.rollback()
            logger.error(f"order_create_failed user_id={user.id} error={str(e)}")
            raise ServiceValidationError("Database integrity error during order creation")

        logger.info(
            f"order_created order_id={order.id} user_id={user.id} "
            f"lines={len(order.items)} total={order.total}"
        )
        return order

    @staticmethod
    def list_orders(db: Session) -> List[Order]:
        return OrderRepository(db).get_all(limit=500)

    @staticmethod
    def list_user_orders(db: Session, user_id: int) -> List[Order]:
        return OrderRepository(db).get_by_user_id(user_id)

    @staticmethod
    def get_order(db: Session, order_id: int, current_user: AppUser) -> Order:
        order = OrderRepository(db).get_by_id(order_id)
        if not order:
            raise NotFoundError(f"Order {order_id} not found")
        if order.user_id != current_user.id and not current_user.is_admin:
            raise ForbiddenError("You can only view your own orders")
        return order

    @staticmethod
    def update_status(db: Session, order_id: int, new_status: OrderStatus) -> Order:
        repo = OrderRepository(db)
        order = repo.get_by_id(order_id)
        if not order:
            raise NotFoundError(f"Order {order_id} not found")

        current = OrderStatus(order.status)
        if new_status == current:
            return order
        if new_status not in ORDER_STATUS_TRANSITIONS[current]:
            raise ServiceValidationError(
                f"Cannot move order from {current.value} to {new_status.value}",
                details={"from": current.value, "to": new_status.value},
            )

        order.status = new_status
        order = repo.update(order)
        logger.info(
            f"order_status_changed order_id={order_id} "
            f"from={current.value} to={new_status.value}"
        )
        return order

    @staticmethod
    def delete_order(db: Session, order_id: int) -> bool:
        deleted = OrderRepository(db).delete(order_id)
        if deleted:
            logger.info(f"order_deleted order_id={order_id}")
        return deleted
