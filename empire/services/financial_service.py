import logging
from typing import List, Optional

from empire.core.context import RequestContext
from empire.core.errors import InsufficientFunds
from empire.core.validation import validate_deposit, validate_withdrawal
from empire.models.enums import ModerationStatus
from empire.models.financial import DepositRequest, WithdrawalRequest
from empire.schemas.financial import DepositCreate, WithdrawalCreate
from empire.services.ledger_service import to_money

logger = logging.getLogger(__name__)


class FinancialService:
    """Member deposit and withdrawal requests. Balances move only on approval."""

    @staticmethod
    async def create_deposit(ctx: RequestContext, data: DepositCreate) -> DepositRequest:
        deposit = validate_deposit(data.amount, data.mpesa_message).unwrap()
        request = await DepositRequest.create(
            account_id=ctx.account_id,
            amount=deposit.amount,
            mpesa_message=deposit.mpesa_message,
        )
        logger.info(f"[create_deposit] account={ctx.account_id} amount={deposit.amount} request={request.id}")
        return request

    @staticmethod
    async def create_withdrawal(ctx: RequestContext, data: WithdrawalCreate) -> WithdrawalRequest:
        withdrawal = validate_withdrawal(data.amount, data.method, data.details).unwrap()

        if to_money(ctx.account.balance) < withdrawal.amount:
            raise InsufficientFunds("Insufficient balance")

        request = await WithdrawalRequest.create(
            account_id=ctx.account_id,
            amount=withdrawal.amount,
            method=withdrawal.method,
            **WithdrawalRequest.details_columns(withdrawal.details),
        )
        logger.info(
            f"[create_withdrawal] account={ctx.account_id} amount={withdrawal.amount} "
            f"method={withdrawal.method.value} request={request.id}"
        )
        return request

    @staticmethod
    async def get_my_requests(ctx: RequestContext) -> dict:
        deposits = await DepositRequest.filter(account_id=ctx.account_id).order_by("-created_at")
        withdrawals = await WithdrawalRequest.filter(account_id=ctx.account_id).order_by("-created_at")
        return {"deposits": deposits, "withdrawals": withdrawals}

    @staticmethod
    async def list_deposits(status: Optional[ModerationStatus] = None) -> List[DepositRequest]:
        query = DepositRequest.all()
        if status:
            query = query.filter(status=status)
        return await query.order_by("-created_at")

    @staticmethod
    async def list_withdrawals(status: Optional[ModerationStatus] = None) -> List[WithdrawalRequest]:
        query = WithdrawalRequest.all()
        if status:
            query = query.filter(status=status)
        return await query.order_by("-created_at")
