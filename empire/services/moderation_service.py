import logging
from datetime import datetime, timezone
from typing import Awaitable, Callable, Optional, Type

from tortoise.models import Model
from tortoise.transactions import in_transaction

from empire.core.context import RequestContext
from empire.core.errors import AdminRequired, NotFound
from empire.core.moderation import APPROVAL_FLOW, PUBLISHING_FLOW, ModerationFlow
from empire.models.blog import BlogPost
from empire.models.enums import ModerationAction
from empire.models.financial import DepositRequest, WithdrawalRequest
from empire.models.task import Task, TaskSubmission
from empire.services.ledger_service import LedgerService

logger = logging.getLogger(__name__)

ApproveEffect = Callable[[Model, object], Awaitable[None]]


async def _credit_deposit(deposit: DepositRequest, conn):
    account = await LedgerService.lock_account(deposit.account_id, conn)
    await LedgerService.credit(account, deposit.amount, conn, earning=False, reason=f"deposit #{deposit.id}")


async def _debit_withdrawal(withdrawal: WithdrawalRequest, conn):
    account = await LedgerService.lock_account(withdrawal.account_id, conn)
    # Balance is checked when the request is made, not here
    await LedgerService.debit(
        account, withdrawal.amount, conn, reason=f"withdrawal #{withdrawal.id}", allow_overdraft=True
    )


async def _reward_submission(submission: TaskSubmission, conn):
    task = await Task.filter(id=submission.task_id).using_db(conn).first()
    if task is None:
        raise NotFound("Task not found")
    account = await LedgerService.lock_account(submission.account_id, conn)
    await LedgerService.credit(
        account, task.reward, conn, earning=True, reason=f"task submission #{submission.id}"
    )


class ModerationService:
    """
    Admin approve/reject for every moderation queue. Each call is one
    transaction covering the entity and, on approval, the owning account.
    """

    @staticmethod
    async def resolve(
        ctx: RequestContext,
        model: Type[Model],
        entity_id: int,
        action: ModerationAction,
        *,
        flow: ModerationFlow = APPROVAL_FLOW,
        label: str,
        feedback: Optional[str] = None,
        on_approve: Optional[ApproveEffect] = None,
    ):
        if not ctx.is_admin:
            raise AdminRequired()

        async with in_transaction() as conn:
            entity = await model.filter(id=entity_id).select_for_update().using_db(conn).first()
            if entity is None:
                raise NotFound(f"{label} not found")

            entity.status = flow.transition(entity.status, action, label)
            entity.processed_by_id = ctx.account_id
            entity.processed_at = datetime.now(timezone.utc)
            update_fields = ["status", "processed_by_id", "processed_at"]
            if action == ModerationAction.REJECT and feedback:
                entity.feedback = feedback
                update_fields.append("feedback")
            await entity.save(using_db=conn, update_fields=update_fields)

            if action == ModerationAction.APPROVE and on_approve is not None:
                await on_approve(entity, conn)

        logger.info(f"[resolve] {label} #{entity_id} -> {entity.status.value} by admin={ctx.account_id}")
        return entity

    @staticmethod
    async def resolve_deposit(ctx: RequestContext, deposit_id: int, action: ModerationAction,
                              feedback: Optional[str] = None) -> DepositRequest:
        return await ModerationService.resolve(
            ctx, DepositRequest, deposit_id, action,
            label="Deposit request", feedback=feedback, on_approve=_credit_deposit,
        )

    @staticmethod
    async def resolve_withdrawal(ctx: RequestContext, withdrawal_id: int, action: ModerationAction,
                                 feedback: Optional[str] = None) -> WithdrawalRequest:
        return await ModerationService.resolve(
            ctx, WithdrawalRequest, withdrawal_id, action,
            label="Withdrawal request", feedback=feedback, on_approve=_debit_withdrawal,
        )

    @staticmethod
    async def resolve_submission(ctx: RequestContext, submission_id: int, action: ModerationAction,
                                 feedback: Optional[str] = None) -> TaskSubmission:
        return await ModerationService.resolve(
            ctx, TaskSubmission, submission_id, action,
            label="Submission", feedback=feedback, on_approve=_reward_submission,
        )

    @staticmethod
    async def resolve_blog_post(ctx: RequestContext, post_id: int, action: ModerationAction,
                                feedback: Optional[str] = None) -> BlogPost:
        return await ModerationService.resolve(
            ctx, BlogPost, post_id, action,
            flow=PUBLISHING_FLOW, label="Blog post", feedback=feedback,
        )
