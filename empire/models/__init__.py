from .account import Account
from .financial import DepositRequest, WithdrawalRequest
from .task import Task, TaskSubmission
from .advertisement import Advertisement
from .blog import BlogPost
from .referral import ReferralBonus
from .content import BettingTip, TradingSignal, TradingCourse, MarketNews, MarketAnalysis
from .enums import (
    Role, ModerationStatus, ModerationAction, WithdrawalMethod,
    TaskType, Difficulty, AdType, Confidence, SignalType, SignalStatus, CourseLevel
)

__all__ = [
    "Account",
    "DepositRequest",
    "WithdrawalRequest",
    "Task",
    "TaskSubmission",
    "Advertisement",
    "BlogPost",
    "ReferralBonus",
    "BettingTip",
    "TradingSignal",
    "TradingCourse",
    "MarketNews",
    "MarketAnalysis",
    "Role",
    "ModerationStatus",
    "ModerationAction",
    "WithdrawalMethod",
    "TaskType",
    "Difficulty",
    "AdType",
    "Confidence",
    "SignalType",
    "SignalStatus",
    "CourseLevel",
]
