"""
Tests for account activation and the referral payout cascade

Tests cover:
1. Cascade depth (no referrer up to four ancestors)
2. Fee boundary
3. Repeated activation
4. Rollback when storage fails mid-cascade
5. Concurrent activation of one account
"""
import asyncio
from decimal import Decimal

import pytest
from tortoise.exceptions import OperationalError

from empire.core.errors import AccountBanned, AlreadyActivated, InsufficientBalance
from empire.models import Account, ReferralBonus
from empire.services.activation_service import ActivationService
from empire.services.ledger_service import LedgerService


async def _reload(account: Account) -> Account:
    return await Account.get(id=account.id)


async def _chain(make_account, depth: int):
    """Ancestors from the top down, then the account to activate (balance 500)"""
    ancestors = []
    parent = None
    for _ in range(depth):
        parent = await make_account(referred_by=parent)
        ancestors.append(parent)
    member = await make_account(balance="500", referred_by=parent)
    return ancestors, member


class TestReferralCascade:
    """Cascade pays min(depth, 3) referrers 200/150/50."""

    @pytest.mark.parametrize("depth", [0, 1, 2, 3, 4])
    async def test_pays_up_to_three_levels(self, make_account, ctx, depth):
        ancestors, member = await _chain(make_account, depth)

        account, payouts = await ActivationService.activate(ctx(member))

        assert account.is_activated
        assert account.activated_at is not None
        assert (await _reload(member)).balance == Decimal("0")

        expected = [Decimal("200"), Decimal("150"), Decimal("50")][:min(depth, 3)]
        assert [p.amount for p in payouts] == expected
        assert [p.level for p in payouts] == list(range(1, len(expected) + 1))

        # nearest referrer first
        for paid, ancestor in zip(expected, reversed(ancestors)):
            fresh = await _reload(ancestor)
            assert fresh.balance == paid
            assert fresh.total_earnings == paid

        if depth == 4:
            top = await _reload(ancestors[0])
            assert top.balance == Decimal("0")
            assert top.total_earnings == Decimal("0")

        assert await ReferralBonus.all().count() == len(expected)

    async def test_only_direct_referrer_count_grows(self, make_account, ctx):
        ancestors, member = await _chain(make_account, 2)

        await ActivationService.activate(ctx(member))

        grand, parent = ancestors
        assert (await _reload(parent)).referral_count == 1
        assert (await _reload(grand)).referral_count == 0

    async def test_unknown_code_stops_cascade(self, make_account, ctx):
        parent = await make_account()
        parent.referred_by_code = "EMGHOST1"
        await parent.save()
        member = await make_account(balance="500", referred_by=parent)

        _, payouts = await ActivationService.activate(ctx(member))

        assert len(payouts) == 1
        assert (await _reload(parent)).balance == Decimal("200")

    async def test_fee_paid_from_existing_balance_only(self, make_account, ctx):
        """Activation fee is not counted as earnings for anybody"""
        member = await make_account(balance="750")

        await ActivationService.activate(ctx(member))

        fresh = await _reload(member)
        assert fresh.balance == Decimal("250")
        assert fresh.total_earnings == Decimal("0")


class TestActivationPreconditions:

    async def test_balance_below_fee_rejected(self, make_account, ctx):
        member = await make_account(balance="499")

        with pytest.raises(InsufficientBalance) as exc:
            await ActivationService.activate(ctx(member))

        assert exc.value.message == "Insufficient balance for activation"
        fresh = await _reload(member)
        assert fresh.balance == Decimal("499")
        assert not fresh.is_activated

    async def test_exact_fee_leaves_zero(self, make_account, ctx):
        member = await make_account(balance="500")

        await ActivationService.activate(ctx(member))

        assert (await _reload(member)).balance == Decimal("0")

    async def test_second_activation_conflicts(self, make_account, ctx):
        parent = await make_account()
        member = await make_account(balance="1000", referred_by=parent)
        await ActivationService.activate(ctx(member))

        with pytest.raises(AlreadyActivated):
            await ActivationService.activate(ctx(member))

        assert (await _reload(member)).balance == Decimal("500")
        assert (await _reload(parent)).balance == Decimal("200")
        assert await ReferralBonus.all().count() == 1

    async def test_banned_account_refused(self, make_account, ctx):
        member = await make_account(balance="500", banned=True)

        with pytest.raises(AccountBanned):
            await ActivationService.activate(ctx(member))

        assert (await _reload(member)).balance == Decimal("500")


class TestActivationAtomicity:

    async def test_concurrent_activation_charges_once(self, make_account, ctx):
        """Two activations of one account at once: one fee, one cascade"""
        parent = await make_account()
        member = await make_account(balance="1000", referred_by=parent)

        results = await asyncio.gather(
            ActivationService.activate(ctx(member)),
            ActivationService.activate(ctx(member)),
            return_exceptions=True,
        )

        assert sum(isinstance(r, tuple) for r in results) == 1
        assert sum(isinstance(r, AlreadyActivated) for r in results) == 1
        fresh = await _reload(member)
        assert fresh.balance == Decimal("500")
        assert fresh.is_activated
        referrer = await _reload(parent)
        assert referrer.balance == Decimal("200")
        assert referrer.total_earnings == Decimal("200")
        assert referrer.referral_count == 1
        assert await ReferralBonus.all().count() == 1


    async def test_storage_failure_mid_cascade_rolls_back(self, make_account, ctx, monkeypatch):
        """A failure while paying level 2 leaves no trace of the activation"""
        ancestors, member = await _chain(make_account, 3)
        real_credit = LedgerService.credit
        calls = []

        async def failing_credit(account, amount, conn, **kwargs):
            calls.append(account.id)
            if len(calls) == 2:
                raise OperationalError("disk I/O error")
            return await real_credit(account, amount, conn, **kwargs)

        monkeypatch.setattr(LedgerService, "credit", staticmethod(failing_credit))

        with pytest.raises(OperationalError):
            await ActivationService.activate(ctx(member))

        fresh = await _reload(member)
        assert fresh.balance == Decimal("500")
        assert not fresh.is_activated
        assert fresh.activated_at is None
        for ancestor in ancestors:
            untouched = await _reload(ancestor)
            assert untouched.balance == Decimal("0")
            assert untouched.referral_count == 0
        assert await ReferralBonus.all().count() == 0
