import logging
from typing import List, Optional

from tortoise.exceptions import IntegrityError
from tortoise.transactions import in_transaction

from empire.core.context import RequestContext
from empire.core.errors import (
    CapacityExceeded,
    DuplicateSubmission,
    NotFound,
    ResourceInactive,
    TaskHasSubmissions,
)
from empire.core.validation import (
    check_limit_above_usage,
    validate_capacity,
    validate_reward,
    validate_task_response,
)
from empire.models.enums import ModerationStatus
from empire.models.task import Task, TaskSubmission
from empire.schemas.task import SubmissionDetailOut, TaskCreate, TaskUpdate

logger = logging.getLogger(__name__)


class TaskService:

    @staticmethod
    async def get_task(task_id: int) -> Task:
        task = await Task.get_or_none(id=task_id)
        if not task:
            raise NotFound("Task not found")
        return task

    @staticmethod
    async def list_active() -> List[Task]:
        return await Task.filter(is_active=True).order_by("-created_at")

    @staticmethod
    async def list_all() -> List[Task]:
        return await Task.all().order_by("-created_at")

    @staticmethod
    async def create_task(data: TaskCreate) -> Task:
        validate_capacity(data.max_responses, data.max_bidders).unwrap()
        validate_reward(data.reward).unwrap()
        task = await Task.create(**data.model_dump())
        logger.info(f"[create_task] Task #{task.id} '{task.title}' created, reward={task.reward}")
        return task

    @staticmethod
    async def update_task(task_id: int, data: TaskUpdate) -> Task:
        changes = data.model_dump(exclude_unset=True)
        validate_capacity(changes.get("max_responses"), changes.get("max_bidders")).unwrap()
        validate_reward(changes.get("reward")).unwrap()

        async with in_transaction() as conn:
            task = await Task.filter(id=task_id).select_for_update().using_db(conn).first()
            if task is None:
                raise NotFound("Task not found")
            check_limit_above_usage(changes.get("max_responses"), task.current_responses).unwrap()
            check_limit_above_usage(changes.get("max_bidders"), task.current_bidders).unwrap()
            if changes:
                task.update_from_dict(changes)
                await task.save(using_db=conn)
        logger.info(f"[update_task] Task #{task.id} updated: {sorted(changes)}")
        return task

    @staticmethod
    async def delete_task(task_id: int):
        task = await TaskService.get_task(task_id)
        if await TaskSubmission.filter(task_id=task.id).exists():
            logger.warning(f"[delete_task] Task #{task_id} has submissions, not deleted")
            raise TaskHasSubmissions()
        await task.delete()
        logger.info(f"[delete_task] Task #{task_id} deleted")

    @staticmethod
    async def submit(ctx: RequestContext, task_id: int, response) -> TaskSubmission:
        """
        Record a pending submission and take one capacity slot.

        No money moves here; the reward is paid when an admin approves.
        """
        response = validate_task_response(response).unwrap()

        try:
            async with in_transaction() as conn:
                task = await Task.filter(id=task_id).select_for_update().using_db(conn).first()
                if task is None:
                    raise NotFound("Task not found")
                if not task.is_active:
                    raise ResourceInactive("Task is not active")
                if await TaskSubmission.filter(task_id=task.id, account_id=ctx.account_id).using_db(conn).exists():
                    raise DuplicateSubmission()
                if not task.has_capacity():
                    raise CapacityExceeded("Task has reached its maximum number of submissions")

                submission = await TaskSubmission.create(
                    task_id=task.id, account_id=ctx.account_id, response=response, using_db=conn
                )
                if task.counts_bidders:
                    task.current_bidders += 1
                    await task.save(using_db=conn, update_fields=["current_bidders"])
                else:
                    task.current_responses += 1
                    await task.save(using_db=conn, update_fields=["current_responses"])
        except IntegrityError:
            raise DuplicateSubmission()

        logger.info(f"[submit] account={ctx.account_id} submitted task #{task_id} (submission #{submission.id})")
        return submission

    @staticmethod
    async def my_submissions(ctx: RequestContext) -> List[TaskSubmission]:
        return await TaskSubmission.filter(account_id=ctx.account_id).order_by("-created_at")

    @staticmethod
    async def list_submissions(status: Optional[ModerationStatus] = None) -> List[SubmissionDetailOut]:
        query = TaskSubmission.all().prefetch_related("task", "account")
        if status:
            query = query.filter(status=status)
        submissions = await query.order_by("-created_at")

        return [
            SubmissionDetailOut(
                id=s.id,
                task_id=s.task_id,
                account_id=s.account_id,
                response=s.response,
                status=s.status,
                feedback=s.feedback,
                processed_by_id=s.processed_by_id,
                processed_at=s.processed_at,
                created_at=s.created_at,
                task_title=s.task.title,
                task_reward=s.task.reward,
                account_name=s.account.name,
                account_email=s.account.email,
            )
            for s in submissions
        ]
