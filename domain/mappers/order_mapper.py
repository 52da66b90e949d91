"""
Order domain mappers.
"""

from domain.models import Order
from domain.schemas.order_schemas import OrderResponse, OrderItemResponse


class OrderMapper:
    """Mapper for order transformations."""

    @staticmethod
    def to_response(order: Order) -> OrderResponse:
        return OrderResponse(
            id=order.id,
            user_id=order.user_id,
            status=order.status,
            total=float(order.total or 0),
            created_at=order.created_at,
            items=[
                OrderItemResponse(
                    meal_id=item.meal_id,
                    name=item.name,
                    price=float(item.price),
                    quantity=item.quantity,
                )
                for item in order.items
            ],
        )
