from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from empire.api.deps import require_admin, require_member
from empire.core.context import RequestContext
from empire.models.enums import ModerationAction, ModerationStatus
from empire.schemas.financial import (
    DepositCreate,
    DepositOut,
    MyRequestsOut,
    RejectRequest,
    WithdrawalCreate,
    WithdrawalOut,
)
from empire.services.financial_service import FinancialService
from empire.services.moderation_service import ModerationService

router = APIRouter(prefix="/financial", tags=["Financial"])


@router.post("/deposit", response_model=DepositOut, status_code=status.HTTP_201_CREATED)
async def create_deposit(data: DepositCreate, ctx: RequestContext = Depends(require_member)):
    """Claim a deposit; the balance is credited when an admin approves it"""
    return await FinancialService.create_deposit(ctx, data)


@router.post("/withdraw", response_model=WithdrawalOut, status_code=status.HTTP_201_CREATED)
async def create_withdrawal(data: WithdrawalCreate, ctx: RequestContext = Depends(require_member)):
    return await FinancialService.create_withdrawal(ctx, data)


@router.get("/my-requests", response_model=MyRequestsOut)
async def my_requests(ctx: RequestContext = Depends(require_member)):
    return await FinancialService.get_my_requests(ctx)


@router.get("/admin/deposits", response_model=List[DepositOut])
async def admin_deposits(
    status_filter: Optional[ModerationStatus] = Query(None, alias="status"),
    _: RequestContext = Depends(require_admin),
):
    return await FinancialService.list_deposits(status_filter)


@router.get("/admin/withdrawals", response_model=List[WithdrawalOut])
async def admin_withdrawals(
    status_filter: Optional[ModerationStatus] = Query(None, alias="status"),
    _: RequestContext = Depends(require_admin),
):
    return await FinancialService.list_withdrawals(status_filter)


@router.put("/deposit/{deposit_id}/approve", response_model=DepositOut)
async def approve_deposit(deposit_id: int, ctx: RequestContext = Depends(require_admin)):
    return await ModerationService.resolve_deposit(ctx, deposit_id, ModerationAction.APPROVE)


@router.put("/deposit/{deposit_id}/reject", response_model=DepositOut)
async def reject_deposit(
    deposit_id: int,
    data: Optional[RejectRequest] = None,
    ctx: RequestContext = Depends(require_admin),
):
    return await ModerationService.resolve_deposit(
        ctx, deposit_id, ModerationAction.REJECT, data.comment if data else None
    )


@router.put("/withdraw/{withdrawal_id}/approve", response_model=WithdrawalOut)
async def approve_withdrawal(withdrawal_id: int, ctx: RequestContext = Depends(require_admin)):
    return await ModerationService.resolve_withdrawal(ctx, withdrawal_id, ModerationAction.APPROVE)


@router.put("/withdraw/{withdrawal_id}/reject", response_model=WithdrawalOut)
async def reject_withdrawal(
    withdrawal_id: int,
    data: Optional[RejectRequest] = None,
    ctx: RequestContext = Depends(require_admin),
):
    return await ModerationService.resolve_withdrawal(
        ctx, withdrawal_id, ModerationAction.REJECT, data.comment if data else None
    )
