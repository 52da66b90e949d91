"""
Newsletter Repository - Data access layer for newsletters
"""

from typing import List
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import Newsletter


class NewsletterRepository(BaseRepository[Newsletter]):
    """Repository for newsletter data access"""

    def __init__(self, db: Session):
        super().__init__(db, Newsletter)

    def get_all(self, skip: int = 0, limit: int = 100) -> List[Newsletter]:
        """Newsletters, newest first"""
        return (
            self.db.query(Newsletter)
            .order_by(Newsletter.created_at.desc(), Newsletter.id.desc())
            .offset(skip)
            .limit(limit)
            .all()
        )
