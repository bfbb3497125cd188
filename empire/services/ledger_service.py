import logging
from decimal import Decimal

from empire.core.errors import AccountNotFound, InsufficientBalance, ValidationError
from empire.core.validation import ValidationIssue
from empire.models.account import Account

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")


def to_money(value) -> Decimal:
    return Decimal(str(value)).quantize(CENT)


class LedgerService:
    """
    Balance and lifetime-earnings mutations.

    Every method expects to run inside ``in_transaction()`` on an account row
    obtained from ``lock_account`` (or another ``select_for_update`` read), and
    writes only the counters it changes.
    """

    @staticmethod
    async def lock_account(account_id: int, conn) -> Account:
        account = await Account.filter(id=account_id).select_for_update().using_db(conn).first()
        if account is None:
            raise AccountNotFound()
        return account

    @staticmethod
    async def lock_account_by_code(referral_code: str, conn):
        return await Account.filter(referral_code=referral_code).select_for_update().using_db(conn).first()

    @staticmethod
    async def credit(account: Account, amount, conn, *, earning: bool, reason: str) -> Account:
        """Add to balance; earnings also grow when the credit is income, not a deposit"""
        amount = to_money(amount)
        if amount < 0:
            logger.error(f"[credit] account={account.id} negative amount {amount} ({reason})")
            raise ValidationError(ValidationIssue.INVALID_AMOUNT)
        if amount == 0:
            logger.info(f"[credit] account={account.id} zero amount ({reason}), nothing to credit")
            return account

        old_balance = to_money(account.balance)
        account.balance = old_balance + amount
        update_fields = ["balance"]
        if earning:
            account.total_earnings = to_money(account.total_earnings) + amount
            update_fields.append("total_earnings")
        await account.save(using_db=conn, update_fields=update_fields)

        logger.info(
            f"[credit] account={account.id} +{amount} ({reason}): balance {old_balance} -> {account.balance}"
        )
        return account

    @staticmethod
    async def debit(account: Account, amount, conn, *, reason: str, allow_overdraft: bool = False) -> Account:
        amount = to_money(amount)
        old_balance = to_money(account.balance)
        if old_balance < amount and not allow_overdraft:
            logger.warning(f"[debit] account={account.id} balance={old_balance} < {amount} ({reason})")
            raise InsufficientBalance()

        account.balance = old_balance - amount
        await account.save(using_db=conn, update_fields=["balance"])

        if account.balance < 0:
            logger.warning(
                f"[debit] account={account.id} overdrawn by {reason}: balance {old_balance} -> {account.balance}"
            )
        else:
            logger.info(
                f"[debit] account={account.id} -{amount} ({reason}): balance {old_balance} -> {account.balance}"
            )
        return account
