"""
Newsletter model.
"""

from sqlalchemy import Column, Integer, String, Text, TIMESTAMP
from sqlalchemy.sql import func

from domain.models.database import Base


class Newsletter(Base):
    """Newsletter issue written by an admin"""

    __tablename__ = "newsletter"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(200), nullable=False)
    content = Column(Text, nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
