from datetime import datetime
from decimal import Decimal
from typing import Any, List, Optional

from pydantic import BaseModel

from empire.models.enums import ModerationStatus, WithdrawalMethod


class DepositCreate(BaseModel):
    amount: Optional[Decimal] = None
    mpesa_message: Optional[str] = None


class WithdrawalCreate(BaseModel):
    amount: Optional[Decimal] = None
    method: Optional[str] = None
    details: Any = None


class RejectRequest(BaseModel):
    """Rejection reason, accepted under either name"""
    feedback: Optional[str] = None
    reason: Optional[str] = None

    @property
    def comment(self) -> Optional[str]:
        text = self.feedback or self.reason
        return text.strip() if text and text.strip() else None


class DepositOut(BaseModel):
    id: int
    account_id: int
    amount: Decimal
    mpesa_message: str
    status: ModerationStatus
    feedback: Optional[str]
    processed_by_id: Optional[int]
    processed_at: Optional[datetime]
    created_at: datetime

    class Config:
        from_attributes = True


class WithdrawalOut(BaseModel):
    id: int
    account_id: int
    amount: Decimal
    method: WithdrawalMethod
    details: Any
    status: ModerationStatus
    feedback: Optional[str]
    processed_by_id: Optional[int]
    processed_at: Optional[datetime]
    created_at: datetime

    class Config:
        from_attributes = True


class MyRequestsOut(BaseModel):
    deposits: List[DepositOut]
    withdrawals: List[WithdrawalOut]
