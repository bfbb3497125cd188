from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel

from empire.models.enums import Role


class RegisterRequest(BaseModel):
    """Fields are checked by core.validation, not here"""
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    referral_code: Optional[str] = None


class LoginRequest(BaseModel):
    email: str
    password: str


class CheckReferralRequest(BaseModel):
    referral_code: Optional[str] = None


class CheckReferralResponse(BaseModel):
    valid: bool


class AccountOut(BaseModel):
    """Public projection of an account, never carries the password hash"""
    id: int
    name: str
    email: str
    role: Role
    is_activated: bool
    is_banned: bool
    ban_reason: Optional[str]
    balance: Decimal
    total_earnings: Decimal
    referral_code: str
    referral_link: str
    referred_by_code: Optional[str]
    referral_count: int
    activated_at: Optional[datetime]
    created_at: datetime

    class Config:
        from_attributes = True


class AuthResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: AccountOut


class UserEnvelope(BaseModel):
    user: AccountOut


class ReferralPayoutOut(BaseModel):
    level: int
    referrer_id: int
    amount: Decimal


class ActivationResponse(BaseModel):
    message: str
    user: AccountOut
    referral_payouts: List[ReferralPayoutOut]


class BanRequest(BaseModel):
    reason: Optional[str] = None


class ReferredAccountOut(BaseModel):
    id: int
    name: str
    is_activated: bool
    activated_at: Optional[datetime]
    created_at: datetime

    class Config:
        from_attributes = True


class ReferralBonusOut(BaseModel):
    id: int
    referred_id: int
    level: int
    amount: Decimal
    created_at: datetime

    class Config:
        from_attributes = True


class ReferralNetworkOut(BaseModel):
    referral_code: str
    referral_link: str
    referral_count: int
    referrals: List[ReferredAccountOut]
    bonuses: List[ReferralBonusOut]
    total_bonus: Decimal
