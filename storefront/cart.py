"""
Cart store.

Holds the meals a shopper has picked and their quantities. Lines are kept
in insertion order and keyed by meal id.
"""

from collections import OrderedDict
from decimal import Decimal
from typing import Any, Dict, List, Optional
import logging

from pydantic import BaseModel, Field

logger = logging.getLogger("mealbox.storefront.cart")

_CENT = Decimal("0.01")


class CartItem(BaseModel):
    id: int
    name: str
    image: Optional[str] = None
    price: Decimal = Field(..., ge=0)
    quantity: int = Field(1, ge=1)

    @property
    def line_total(self) -> Decimal:
        return (self.price * self.quantity).quantize(_CENT)


class Cart:
    def __init__(self):
        self._items: "OrderedDict[int, CartItem]" = OrderedDict()

    @property
    def items(self) -> List[CartItem]:
        return list(self._items.values())

    @property
    def is_empty(self) -> bool:
        return not self._items

    @property
    def item_count(self) -> int:
        return sum(item.quantity for item in self._items.values())

    @property
    def total(self) -> Decimal:
        return sum(
            (item.line_total for item in self._items.values()), Decimal("0")
        ).quantize(_CENT)

    def add_item(self, item: Any, quantity: int = 1) -> CartItem:
        """Add a meal (a CartItem or a meal dict from ``GET /meals``).

        Adding a meal that is already in the cart bumps its quantity.
        """
        if quantity < 1:
            raise ValueError("quantity must be at least 1")
        if not isinstance(item, CartItem):
            data = dict(item)
            data["quantity"] = quantity
            item = CartItem.model_validate(data)
        else:
            item = item.model_copy(update={"quantity": quantity})

        existing = self._items.get(item.id)
        if existing:
            existing.quantity += item.quantity
            logger.debug("cart_item_incremented id=%s quantity=%s", item.id, existing.quantity)
            return existing

        self._items[item.id] = item
        logger.debug("cart_item_added id=%s quantity=%s", item.id, item.quantity)
        return item

    def remove_item(self, item_id: int) -> None:
        self._items.pop(item_id, None)

    def update_quantity(self, item_id: int, quantity: int) -> None:
        """Set a line's quantity; zero or less removes the line."""
        if quantity <= 0:
            self.remove_item(item_id)
            return
        item = self._items.get(item_id)
        if item:
            item.quantity = quantity

    def clear(self) -> None:
        self._items.clear()

    def to_payload(self) -> List[Dict[str, Any]]:
        """JSON-ready cart lines as the API expects them"""
        return [item.model_dump(mode="json") for item in self._items.values()]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self):
        return iter(self.items)
