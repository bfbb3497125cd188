from enum import Enum


class Role(str, Enum):
    MEMBER = "member"
    ADMINISTRATOR = "administrator"


class ModerationStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    PUBLISHED = "published"
    REJECTED = "rejected"


class ModerationAction(str, Enum):
    APPROVE = "approve"
    REJECT = "reject"


class WithdrawalMethod(str, Enum):
    MPESA = "mpesa"
    BANK = "bank"


class TaskType(str, Enum):
    SURVEY = "survey"
    TASK = "task"
    BIDDING = "bidding"
    TRANSCRIPTION = "transcription"


class Difficulty(str, Enum):
    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"


class AdType(str, Enum):
    VIDEO = "video"
    IMAGE = "image"


class Confidence(str, Enum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class SignalType(str, Enum):
    BUY = "BUY"
    SELL = "SELL"


class SignalStatus(str, Enum):
    ACTIVE = "active"
    HIT_TP1 = "hit_tp1"
    HIT_TP2 = "hit_tp2"
    STOPPED = "stopped"


class CourseLevel(str, Enum):
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"
