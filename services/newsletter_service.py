from typing import List
from sqlalchemy.orm import Session
import logging

from domain.models import Newsletter
from domain.schemas.newsletter_schemas import NewsletterCreate
from repositories import NewsletterRepository

logger = logging.getLogger("mealbox.newsletter")


class NewsletterService:
    @staticmethod
    def list_newsletters(db: Session) -> List[Newsletter]:
        return NewsletterRepository(db).get_all()

    @staticmethod
    def create_newsletter(db: Session, data: NewsletterCreate) -> Newsletter:
        newsletter = NewsletterRepository(db).create(Newsletter(**data.model_dump()))
        logger.info(f"newsletter_created newsletter_id={newsletter.id}")
        return newsletter

    @staticmethod
    def delete_newsletter(db: Session, newsletter_id: int) -> bool:
        return NewsletterRepository(db).delete(newsletter_id)
