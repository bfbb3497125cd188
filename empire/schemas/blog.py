from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from empire.models.enums import ModerationStatus


class BlogPostCreate(BaseModel):
    title: Optional[str] = None
    content: Optional[str] = None
    category: Optional[str] = None


class BlogPostOut(BaseModel):
    id: int
    title: str
    content: str
    category: str
    author_id: int
    status: ModerationStatus
    feedback: Optional[str]
    views: int
    processed_at: Optional[datetime]
    created_at: datetime

    class Config:
        from_attributes = True
