from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class NewsletterCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    content: str = Field(..., min_length=1)


class NewsletterResponse(BaseModel):
    id: int
    title: str
    content: str
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
