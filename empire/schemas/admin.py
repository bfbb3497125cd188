from decimal import Decimal
from typing import List

from pydantic import BaseModel

from empire.schemas.blog import BlogPostOut
from empire.schemas.financial import DepositOut, WithdrawalOut
from empire.schemas.task import SubmissionDetailOut


class StatsOut(BaseModel):
    """Counters for the admin dashboard"""
    total_users: int
    total_revenue: Decimal
    pending_activations: int
    pending_deposits: int
    pending_withdrawals: int
    pending_tasks: int
    pending_blogs: int
    active_ads: int
    active_tasks: int
    active_signals: int


class PendingOut(BaseModel):
    deposits: List[DepositOut]
    withdrawals: List[WithdrawalOut]
    tasks: List[SubmissionDetailOut]
    blogs: List[BlogPostOut]
