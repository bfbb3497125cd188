"""
Tests for the admin approve/reject handlers
"""
from decimal import Decimal

import pytest

from empire.core.errors import AdminRequired, AlreadyProcessed, NotFound
from empire.core.moderation import APPROVAL_FLOW, PUBLISHING_FLOW
from empire.models import (
    Account,
    BlogPost,
    Difficulty,
    DepositRequest,
    ModerationAction,
    ModerationStatus,
    Task,
    TaskSubmission,
    TaskType,
    WithdrawalMethod,
    WithdrawalRequest,
)
from empire.services.moderation_service import ModerationService

APPROVE = ModerationAction.APPROVE
REJECT = ModerationAction.REJECT


async def _balance(account: Account):
    fresh = await Account.get(id=account.id)
    return fresh.balance, fresh.total_earnings


async def _task(reward="50") -> Task:
    return await Task.create(
        title="Survey", description="Quick survey", category="Surveys", type=TaskType.SURVEY,
        reward=Decimal(reward), duration="5 min", difficulty=Difficulty.EASY, requirements="None",
    )


class TestModerationFlow:

    def test_only_pending_can_move(self):
        assert APPROVAL_FLOW.can_transition(ModerationStatus.PENDING)
        assert not APPROVAL_FLOW.can_transition(ModerationStatus.APPROVED)
        assert not APPROVAL_FLOW.can_transition(ModerationStatus.REJECTED)

    def test_targets(self):
        assert APPROVAL_FLOW.transition(ModerationStatus.PENDING, APPROVE) == ModerationStatus.APPROVED
        assert PUBLISHING_FLOW.transition(ModerationStatus.PENDING, APPROVE) == ModerationStatus.PUBLISHED
        assert PUBLISHING_FLOW.transition(ModerationStatus.PENDING, REJECT) == ModerationStatus.REJECTED

    def test_terminal_state_raises(self):
        with pytest.raises(AlreadyProcessed) as exc:
            APPROVAL_FLOW.transition(ModerationStatus.REJECTED, APPROVE, "Deposit request")
        assert "rejected" in exc.value.message


class TestDepositModeration:

    async def test_approve_credits_balance_not_earnings(self, make_account, admin, ctx):
        member = await make_account()
        deposit = await DepositRequest.create(account=member, amount=Decimal("500"), mpesa_message="QX1 confirmed")

        result = await ModerationService.resolve_deposit(ctx(admin), deposit.id, APPROVE)

        assert result.status == ModerationStatus.APPROVED
        assert result.processed_by_id == admin.id
        assert result.processed_at is not None
        assert await _balance(member) == (Decimal("500"), Decimal("0"))

    async def test_double_approve_conflicts_without_double_credit(self, make_account, admin, ctx):
        member = await make_account()
        deposit = await DepositRequest.create(account=member, amount=Decimal("300"), mpesa_message="QX2")
        await ModerationService.resolve_deposit(ctx(admin), deposit.id, APPROVE)

        with pytest.raises(AlreadyProcessed):
            await ModerationService.resolve_deposit(ctx(admin), deposit.id, APPROVE)

        assert (await _balance(member))[0] == Decimal("300")

    async def test_reject_stores_feedback(self, make_account, admin, ctx):
        member = await make_account()
        deposit = await DepositRequest.create(account=member, amount=Decimal("300"), mpesa_message="QX3")

        result = await ModerationService.resolve_deposit(ctx(admin), deposit.id, REJECT, "No such transaction")

        assert result.status == ModerationStatus.REJECTED
        assert result.feedback == "No such transaction"
        assert (await _balance(member))[0] == Decimal("0")

    async def test_approve_after_reject_conflicts(self, make_account, admin, ctx):
        member = await make_account()
        deposit = await DepositRequest.create(account=member, amount=Decimal("300"), mpesa_message="QX4")
        await ModerationService.resolve_deposit(ctx(admin), deposit.id, REJECT)

        with pytest.raises(AlreadyProcessed):
            await ModerationService.resolve_deposit(ctx(admin), deposit.id, APPROVE)

        fresh = await DepositRequest.get(id=deposit.id)
        assert fresh.status == ModerationStatus.REJECTED
        assert (await _balance(member))[0] == Decimal("0")

    async def test_missing_deposit(self, admin, ctx):
        with pytest.raises(NotFound) as exc:
            await ModerationService.resolve_deposit(ctx(admin), 999, APPROVE)
        assert exc.value.message == "Deposit request not found"

    async def test_member_cannot_moderate(self, make_account, ctx):
        member = await make_account()
        deposit = await DepositRequest.create(account=member, amount=Decimal("300"), mpesa_message="QX5")

        with pytest.raises(AdminRequired):
            await ModerationService.resolve_deposit(ctx(member), deposit.id, APPROVE)


class TestWithdrawalModeration:

    async def test_approve_debits_balance(self, make_account, admin, ctx):
        member = await make_account(balance="800")
        withdrawal = await WithdrawalRequest.create(
            account=member, amount=Decimal("300"), method=WithdrawalMethod.MPESA,
            **WithdrawalRequest.details_columns("0712345678"),
        )

        await ModerationService.resolve_withdrawal(ctx(admin), withdrawal.id, APPROVE)

        assert (await _balance(member))[0] == Decimal("500")

    async def test_approve_can_overdraw(self, make_account, admin, ctx):
        """Balance is not re-checked on approval"""
        member = await make_account(balance="100")
        withdrawal = await WithdrawalRequest.create(
            account=member, amount=Decimal("300"), method=WithdrawalMethod.BANK,
            **WithdrawalRequest.details_columns({"bank": "KCB", "account": "123"}),
        )

        await ModerationService.resolve_withdrawal(ctx(admin), withdrawal.id, APPROVE)

        assert (await _balance(member))[0] == Decimal("-200")

    async def test_reject_leaves_balance(self, make_account, admin, ctx):
        member = await make_account(balance="800")
        withdrawal = await WithdrawalRequest.create(
            account=member, amount=Decimal("300"), method=WithdrawalMethod.MPESA,
            **WithdrawalRequest.details_columns("0712345678"),
        )

        await ModerationService.resolve_withdrawal(ctx(admin), withdrawal.id, REJECT, "Wrong number")

        assert (await _balance(member))[0] == Decimal("800")


class TestSubmissionModeration:

    async def test_reward_read_at_approval(self, make_account, admin, ctx):
        member = await make_account(activated=True)
        task = await _task(reward="50")
        submission = await TaskSubmission.create(task=task, account=member, response="done")
        task.reward = Decimal("80")
        await task.save()

        await ModerationService.resolve_submission(ctx(admin), submission.id, APPROVE)

        assert await _balance(member) == (Decimal("80"), Decimal("80"))

    async def test_approval_leaves_capacity_counters(self, make_account, admin, ctx):
        member = await make_account(activated=True)
        task = await _task()
        task.current_responses = 1
        await task.save()
        submission = await TaskSubmission.create(task=task, account=member, response="done")

        await ModerationService.resolve_submission(ctx(admin), submission.id, APPROVE)

        assert (await Task.get(id=task.id)).current_responses == 1

    async def test_reject_pays_nothing(self, make_account, admin, ctx):
        member = await make_account(activated=True)
        task = await _task()
        submission = await TaskSubmission.create(task=task, account=member, response="done")

        result = await ModerationService.resolve_submission(ctx(admin), submission.id, REJECT, "Incomplete")

        assert result.feedback == "Incomplete"
        assert await _balance(member) == (Decimal("0"), Decimal("0"))


class TestBlogModeration:

    async def test_approve_publishes(self, make_account, admin, ctx):
        author = await make_account()
        post = await BlogPost.create(title="Saving", content="x" * 500, category="Finance", author=author)

        result = await ModerationService.resolve_blog_post(ctx(admin), post.id, APPROVE)

        assert result.status == ModerationStatus.PUBLISHED

    async def test_published_post_cannot_be_rejected(self, make_account, admin, ctx):
        author = await make_account()
        post = await BlogPost.create(title="Saving", content="x" * 500, category="Finance", author=author)
        await ModerationService.resolve_blog_post(ctx(admin), post.id, APPROVE)

        with pytest.raises(AlreadyProcessed):
            await ModerationService.resolve_blog_post(ctx(admin), post.id, REJECT)
