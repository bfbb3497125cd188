import logging
from datetime import datetime, timezone
from typing import List, Tuple

from tortoise.transactions import in_transaction

from empire.core.config import ACTIVATION_FEE
from empire.core.context import RequestContext
from empire.core.errors import AccountBanned, AlreadyActivated, InsufficientBalance
from empire.models.account import Account
from empire.services.ledger_service import LedgerService, to_money
from empire.services.referral_service import ReferralPayout, ReferralService

logger = logging.getLogger(__name__)


class ActivationService:

    @staticmethod
    async def activate(ctx: RequestContext) -> Tuple[Account, List[ReferralPayout]]:
        """
        Pay the activation fee from the balance and run the referral cascade.

        Checks, first failure wins: account exists, not banned, not yet
        activated, balance covers the fee. Debit, flag and cascade commit
        together or not at all.
        """
        async with in_transaction() as conn:
            account = await LedgerService.lock_account(ctx.account_id, conn)

            if account.is_banned:
                raise AccountBanned(account.ban_reason)
            if account.is_activated:
                raise AlreadyActivated()
            if to_money(account.balance) < ACTIVATION_FEE:
                logger.info(f"[activate] account={account.id} balance={account.balance} below fee {ACTIVATION_FEE}")
                raise InsufficientBalance()

            await LedgerService.debit(account, ACTIVATION_FEE, conn, reason="activation fee")
            account.is_activated = True
            account.activated_at = datetime.now(timezone.utc)
            await account.save(using_db=conn, update_fields=["is_activated", "activated_at"])

            payouts = await ReferralService.pay_cascade(account, conn)

        logger.info(f"[activate] account={account.id} activated, {len(payouts)} referral level(s) paid")
        return account, payouts
