"""
User account database model.
"""

from sqlalchemy import Column, Integer, String, Text, TIMESTAMP, Enum as SQLEnum
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from domain.models.database import Base
from domain.enums import UserType


class AppUser(Base):
    """User account with the delivery details used to pre-fill checkout"""

    __tablename__ = "app_user"

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    first_name = Column(String(100))
    last_name = Column(String(100))
    address = Column(Text)
    postal_code = Column(String(20))
    city = Column(String(100))
    country = Column(String(100))
    phone = Column(String(50))
    type = Column(
        SQLEnum(UserType, values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=UserType.CUSTOMER,
    )
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(
        TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    # Relationships
    orders = relationship("Order", back_populates="user", cascade="all, delete-orphan")

    @property
    def is_admin(self) -> bool:
        return self.type == UserType.ADMIN
