import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import List

from empire.core.config import REFERRAL_BONUSES
from empire.core.context import RequestContext
from empire.models.account import Account
from empire.models.referral import ReferralBonus
from empire.services.ledger_service import LedgerService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReferralPayout:
    level: int
    referrer_id: int
    amount: Decimal


class ReferralService:
    """Upward bonus payout along ``referred_by_code`` pointers"""

    @staticmethod
    async def pay_cascade(activated: Account, conn) -> List[ReferralPayout]:
        """
        Credit up to three referrers above ``activated``: level 1 gets 200 and
        one more on its referral count, level 2 gets 150, level 3 gets 50.

        An unknown code ends the chain at that level. Must run in the
        activation transaction so that a failure leaves no partial payout.
        """
        payouts = []
        code = activated.referred_by_code

        for level, bonus in enumerate(REFERRAL_BONUSES, start=1):
            if not code:
                break

            referrer = await LedgerService.lock_account_by_code(code, conn)
            if referrer is None:
                logger.info(f"[pay_cascade] Level {level} code {code} not found, chain stops")
                break

            await LedgerService.credit(
                referrer, bonus, conn, earning=True,
                reason=f"level {level} referral bonus for account {activated.id}",
            )
            if level == 1:
                referrer.referral_count += 1
                await referrer.save(using_db=conn, update_fields=["referral_count"])

            await ReferralBonus.create(
                referrer=referrer, referred=activated, level=level, amount=bonus, using_db=conn
            )
            payouts.append(ReferralPayout(level=level, referrer_id=referrer.id, amount=bonus))

            code = referrer.referred_by_code

        return payouts

    @staticmethod
    async def code_exists(code: str) -> bool:
        return await Account.filter(referral_code=code).exists()

    @staticmethod
    async def get_network(ctx: RequestContext) -> dict:
        """Direct referrals of the caller and the bonuses they produced"""
        account = ctx.account
        referrals = await Account.filter(referred_by_code=account.referral_code).order_by("-created_at")
        bonuses = await ReferralBonus.filter(referrer_id=account.id).order_by("-created_at")

        return {
            "referral_code": account.referral_code,
            "referral_link": account.referral_link,
            "referral_count": account.referral_count,
            "referrals": referrals,
            "bonuses": bonuses,
            "total_bonus": sum((b.amount for b in bonuses), Decimal("0")),
        }
