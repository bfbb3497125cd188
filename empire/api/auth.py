from fastapi import APIRouter, Depends, status

from empire.api.deps import get_request_context
from empire.core.context import RequestContext
from empire.core.security import create_access_token
from empire.schemas.account import (
    AccountOut,
    AuthResponse,
    CheckReferralRequest,
    CheckReferralResponse,
    LoginRequest,
    RegisterRequest,
    UserEnvelope,
)
from empire.services.account_service import AccountService

router = APIRouter(prefix="/auth", tags=["Auth"])


def _auth_response(account) -> AuthResponse:
    return AuthResponse(
        access_token=create_access_token(account.id),
        user=AccountOut.model_validate(account),
    )


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(data: RegisterRequest):
    """Create a member account, optionally under a referrer's code"""
    account = await AccountService.register(data)
    return _auth_response(account)


@router.post("/login", response_model=AuthResponse)
async def login(data: LoginRequest):
    account = await AccountService.authenticate(data.email, data.password)
    return _auth_response(account)


@router.post("/check-referral", response_model=CheckReferralResponse)
async def check_referral(data: CheckReferralRequest):
    return CheckReferralResponse(valid=await AccountService.check_referral_code(data.referral_code))


@router.get("/me", response_model=UserEnvelope)
async def me(ctx: RequestContext = Depends(get_request_context)):
    return UserEnvelope(user=AccountOut.model_validate(ctx.account))
