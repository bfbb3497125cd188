from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from empire.api.deps import require_activated, require_admin, require_member
from empire.core.context import RequestContext
from empire.models.enums import ModerationAction, ModerationStatus
from empire.schemas.financial import RejectRequest
from empire.schemas.task import (
    SubmissionDetailOut,
    SubmissionOut,
    TaskCreate,
    TaskOut,
    TaskSubmitRequest,
    TaskUpdate,
)
from empire.services.moderation_service import ModerationService
from empire.services.task_service import TaskService

router = APIRouter(prefix="/tasks", tags=["Tasks"])


@router.get("", response_model=List[TaskOut])
async def list_tasks(_: RequestContext = Depends(require_activated)):
    return await TaskService.list_active()


@router.post("/{task_id}/submit", response_model=SubmissionOut, status_code=status.HTTP_201_CREATED)
async def submit_task(
    task_id: int,
    data: TaskSubmitRequest,
    ctx: RequestContext = Depends(require_activated),
):
    """Submit a response; the reward is paid on approval"""
    return await TaskService.submit(ctx, task_id, data.response)


@router.get("/my-submissions", response_model=List[SubmissionOut])
async def my_submissions(ctx: RequestContext = Depends(require_member)):
    return await TaskService.my_submissions(ctx)


@router.get("/admin/all", response_model=List[TaskOut])
async def admin_list_tasks(_: RequestContext = Depends(require_admin)):
    return await TaskService.list_all()


@router.get("/admin/submissions", response_model=List[SubmissionDetailOut])
async def admin_list_submissions(
    status_filter: Optional[ModerationStatus] = Query(None, alias="status"),
    _: RequestContext = Depends(require_admin),
):
    return await TaskService.list_submissions(status_filter)


@router.post("", response_model=TaskOut, status_code=status.HTTP_201_CREATED)
async def create_task(data: TaskCreate, _: RequestContext = Depends(require_admin)):
    return await TaskService.create_task(data)


@router.put("/{task_id}", response_model=TaskOut)
async def update_task(task_id: int, data: TaskUpdate, _: RequestContext = Depends(require_admin)):
    return await TaskService.update_task(task_id, data)


@router.delete("/{task_id}")
async def delete_task(task_id: int, _: RequestContext = Depends(require_admin)):
    await TaskService.delete_task(task_id)
    return {"message": "Task deleted successfully"}


@router.put("/submissions/{submission_id}/approve", response_model=SubmissionOut)
async def approve_submission(submission_id: int, ctx: RequestContext = Depends(require_admin)):
    return await ModerationService.resolve_submission(ctx, submission_id, ModerationAction.APPROVE)


@router.put("/submissions/{submission_id}/reject", response_model=SubmissionOut)
async def reject_submission(
    submission_id: int,
    data: Optional[RejectRequest] = None,
    ctx: RequestContext = Depends(require_admin),
):
    return await ModerationService.resolve_submission(
        ctx, submission_id, ModerationAction.REJECT, data.comment if data else None
    )
