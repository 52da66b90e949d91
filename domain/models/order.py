"""
Order and order line models.
"""

from sqlalchemy import (
    Column,
    Integer,
    String,
    Numeric,
    TIMESTAMP,
    ForeignKey,
    CheckConstraint,
    Enum as SQLEnum,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from domain.models.database import Base
from domain.enums import OrderStatus


class Order(Base):
    """Customer order created from the contents of a cart"""

    __tablename__ = "customer_order"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        Integer, ForeignKey("app_user.id", ondelete="CASCADE"), nullable=False
    )
    status = Column(
        SQLEnum(OrderStatus, values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=OrderStatus.PENDING,
    )
    total = Column(Numeric(10, 2), nullable=False, default=0)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(
        TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    # Relationships
    user = relationship("AppUser", back_populates="orders")
    items = relationship(
        "OrderItem",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderItem.id",
    )


class OrderItem(Base):
    """One meal line in an order; name and price are snapshotted at order time"""

    __tablename__ = "order_item"
    __table_args__ = (CheckConstraint("quantity > 0", name="ck_order_item_quantity"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    order_id = Column(
        Integer, ForeignKey("customer_order.id", ondelete="CASCADE"), nullable=False
    )
    meal_id = Column(Integer, ForeignKey("meal.id", ondelete="SET NULL"))
    name = Column(String(200), nullable=False)
    price = Column(Numeric(10, 2), nullable=False)
    quantity = Column(Integer, nullable=False)

    order = relationship("Order", back_populates="items")
