"""
Premium content for activated members, managed by admins
"""
from tortoise import fields
from tortoise.models import Model

from empire.models.enums import Confidence, CourseLevel, SignalStatus, SignalType


class BettingTip(Model):
    id = fields.IntField(pk=True)
    match = fields.CharField(255)
    league = fields.CharField(255)
    time = fields.CharField(50)
    prediction = fields.CharField(255)
    odds = fields.CharField(50)
    confidence = fields.CharEnumField(Confidence)
    analysis = fields.TextField()
    date = fields.CharField(50)
    is_active = fields.BooleanField(default=True)

    created_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField(auto_now=True)

    class Meta:
        table = "betting_tips"


class TradingSignal(Model):
    id = fields.IntField(pk=True)
    pair = fields.CharField(50)
    signal_type = fields.CharEnumField(SignalType)
    entry_price = fields.FloatField()
    tp1 = fields.FloatField()
    tp2 = fields.FloatField()
    stop_loss = fields.FloatField()
    pips = fields.FloatField(default=0)
    status = fields.CharEnumField(SignalStatus, default=SignalStatus.ACTIVE)
    is_active = fields.BooleanField(default=True)

    created_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField(auto_now=True)

    class Meta:
        table = "trading_signals"


class TradingCourse(Model):
    id = fields.IntField(pk=True)
    title = fields.CharField(255)
    description = fields.TextField()
    level = fields.CharEnumField(CourseLevel)
    duration = fields.CharField(100)
    # [{title, description, type: video|text|exam, content, video_url, exam_questions, order}]
    lessons = fields.JSONField(default=list)
    is_active = fields.BooleanField(default=True)

    created_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField(auto_now=True)

    class Meta:
        table = "trading_courses"


class MarketNews(Model):
    id = fields.IntField(pk=True)
    title = fields.CharField(255)
    summary = fields.TextField()
    impact = fields.CharEnumField(Confidence)
    is_active = fields.BooleanField(default=True)

    created_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField(auto_now=True)

    class Meta:
        table = "market_news"


class MarketAnalysis(Model):
    id = fields.IntField(pk=True)
    title = fields.CharField(255)
    pair = fields.CharField(50, null=True)
    timeframe = fields.CharField(50, null=True)
    analysis = fields.TextField()
    is_active = fields.BooleanField(default=True)

    created_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField(auto_now=True)

    class Meta:
        table = "market_analysis"
