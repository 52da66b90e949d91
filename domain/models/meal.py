"""
Meal package catalogue model.
"""

from sqlalchemy import Column, Integer, String, Text, Numeric, TIMESTAMP, CheckConstraint
from sqlalchemy.sql import func

from domain.models.database import Base


class Meal(Base):
    """A purchasable meal package"""

    __tablename__ = "meal"
    __table_args__ = (CheckConstraint("price >= 0", name="ck_meal_price_non_negative"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False)
    description = Column(Text)
    price = Column(Numeric(10, 2), nullable=False)
    image = Column(String(500))  # path relative to the image host
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(
        TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()
    )
