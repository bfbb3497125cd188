from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel

from empire.models.enums import AdType


class AdCreate(BaseModel):
    title: str
    brand: str
    duration: int
    reward: Decimal
    category: str
    type: AdType
    url: str
    thumbnail: str
    max_views: int
    is_active: bool = True


class AdUpdate(BaseModel):
    title: Optional[str] = None
    brand: Optional[str] = None
    duration: Optional[int] = None
    reward: Optional[Decimal] = None
    category: Optional[str] = None
    type: Optional[AdType] = None
    url: Optional[str] = None
    thumbnail: Optional[str] = None
    max_views: Optional[int] = None
    is_active: Optional[bool] = None


class AdOut(BaseModel):
    id: int
    title: str
    brand: str
    duration: int
    reward: Decimal
    category: str
    type: AdType
    url: str
    thumbnail: str
    max_views: int
    current_views: int
    is_active: bool
    created_at: datetime

    class Config:
        from_attributes = True


class WatchResponse(BaseModel):
    message: str
    reward: Decimal
    new_balance: Decimal
    views_left: int
