from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from empire.api.deps import get_request_context, require_admin, require_member
from empire.core.context import RequestContext
from empire.schemas.account import (
    AccountOut,
    ActivationResponse,
    BanRequest,
    ReferralNetworkOut,
    ReferralPayoutOut,
)
from empire.services.account_service import AccountService
from empire.services.activation_service import ActivationService
from empire.services.referral_service import ReferralService

router = APIRouter(prefix="/users", tags=["Users"])


@router.put("/activate", response_model=ActivationResponse)
async def activate(ctx: RequestContext = Depends(get_request_context)):
    """Pay the activation fee from the balance; referrers up to three levels are paid"""
    account, payouts = await ActivationService.activate(ctx)
    return ActivationResponse(
        message="Account activated successfully",
        user=AccountOut.model_validate(account),
        referral_payouts=[
            ReferralPayoutOut(level=p.level, referrer_id=p.referrer_id, amount=p.amount) for p in payouts
        ],
    )


@router.get("/referrals", response_model=ReferralNetworkOut)
async def referrals(ctx: RequestContext = Depends(require_member)):
    return await ReferralService.get_network(ctx)


@router.get("", response_model=List[AccountOut])
async def list_users(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    search: Optional[str] = None,
    _: RequestContext = Depends(require_admin),
):
    return await AccountService.list_accounts(skip=skip, limit=limit, search=search)


@router.put("/{account_id}/ban", response_model=AccountOut)
async def ban_user(
    account_id: int,
    data: Optional[BanRequest] = None,
    _: RequestContext = Depends(require_admin),
):
    return await AccountService.set_banned(account_id, True, data.reason if data else None)


@router.put("/{account_id}/unban", response_model=AccountOut)
async def unban_user(account_id: int, _: RequestContext = Depends(require_admin)):
    return await AccountService.set_banned(account_id, False)
