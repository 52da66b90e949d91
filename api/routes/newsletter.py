"""Newsletter routes (admin panel)"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
import logging
from typing import List

from api.dependencies import get_db, require_admin
from domain.models import AppUser
from domain.schemas.newsletter_schemas import NewsletterCreate, NewsletterResponse
from services.newsletter_service import NewsletterService
from app.exceptions import NotFoundError

router = APIRouter(prefix="/newsletter", tags=["Newsletter"])
logger = logging.getLogger("mealbox.api.newsletter")


@router.get("", response_model=List[NewsletterResponse])
def list_newsletters(
    db: Session = Depends(get_db), _admin: AppUser = Depends(require_admin)
):
    return [
        NewsletterResponse.model_validate(n)
        for n in NewsletterService.list_newsletters(db)
    ]


@router.post("", response_model=NewsletterResponse, status_code=status.HTTP_201_CREATED)
def create_newsletter(
    payload: NewsletterCreate,
    db: Session = Depends(get_db),
    _admin: AppUser = Depends(require_admin),
):
    return NewsletterResponse.model_validate(
        NewsletterService.create_newsletter(db, payload)
    )


@router.delete("/{newsletter_id}")
def delete_newsletter(
    newsletter_id: int,
    db: Session = Depends(get_db),
    _admin: AppUser = Depends(require_admin),
):
    if not NewsletterService.delete_newsletter(db, newsletter_id):
        raise NotFoundError(f"Newsletter {newsletter_id} not found")
    return {"status": "ok", "deleted": newsletter_id}
