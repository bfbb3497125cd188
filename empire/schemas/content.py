from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel

from empire.models.enums import Confidence, CourseLevel, SignalStatus, SignalType


class BettingTipIn(BaseModel):
    match: str
    league: str
    time: str
    prediction: str
    odds: str
    confidence: Confidence
    analysis: str
    date: str
    is_active: bool = True


class BettingTipOut(BettingTipIn):
    id: int
    created_at: datetime

    class Config:
        from_attributes = True


class TradingSignalIn(BaseModel):
    pair: str
    signal_type: SignalType
    entry_price: float
    tp1: float
    tp2: float
    stop_loss: float
    pips: float = 0
    status: SignalStatus = SignalStatus.ACTIVE
    is_active: bool = True


class TradingSignalOut(TradingSignalIn):
    id: int
    created_at: datetime

    class Config:
        from_attributes = True


class Lesson(BaseModel):
    title: str
    description: str
    type: str  # video, text, exam
    content: Optional[str] = None
    video_url: Optional[str] = None
    exam_questions: List[Any] = []
    order: int


class TradingCourseIn(BaseModel):
    title: str
    description: str
    level: CourseLevel
    duration: str
    lessons: List[Lesson] = []
    is_active: bool = True


class TradingCourseOut(TradingCourseIn):
    id: int
    created_at: datetime

    class Config:
        from_attributes = True


class MarketNewsIn(BaseModel):
    title: str
    summary: str
    impact: Confidence
    is_active: bool = True


class MarketNewsOut(MarketNewsIn):
    id: int
    created_at: datetime

    class Config:
        from_attributes = True


class MarketAnalysisIn(BaseModel):
    title: str
    pair: Optional[str] = None
    timeframe: Optional[str] = None
    analysis: str
    is_active: bool = True


class MarketAnalysisOut(MarketAnalysisIn):
    id: int
    created_at: datetime

    class Config:
        from_attributes = True
