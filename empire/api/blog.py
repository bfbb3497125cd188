from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from empire.api.deps import require_admin, require_member
from empire.core.context import RequestContext
from empire.models.enums import ModerationAction, ModerationStatus
from empire.schemas.blog import BlogPostCreate, BlogPostOut
from empire.schemas.financial import RejectRequest
from empire.services.blog_service import BlogService
from empire.services.moderation_service import ModerationService

router = APIRouter(prefix="/blog", tags=["Blog"])


@router.get("/posts", response_model=List[BlogPostOut])
async def list_posts(category: Optional[str] = None, _: RequestContext = Depends(require_member)):
    return await BlogService.list_published(category)


@router.get("/my-posts", response_model=List[BlogPostOut])
async def my_posts(ctx: RequestContext = Depends(require_member)):
    return await BlogService.my_posts(ctx)


@router.get("/admin/all", response_model=List[BlogPostOut])
async def admin_list_posts(
    status_filter: Optional[ModerationStatus] = Query(None, alias="status"),
    _: RequestContext = Depends(require_admin),
):
    return await BlogService.list_all(status_filter)


@router.get("/posts/{post_id}", response_model=BlogPostOut)
async def read_post(post_id: int, ctx: RequestContext = Depends(require_member)):
    return await BlogService.read_post(ctx, post_id)


@router.post("/posts", response_model=BlogPostOut, status_code=status.HTTP_201_CREATED)
async def create_post(data: BlogPostCreate, ctx: RequestContext = Depends(require_member)):
    """Submit a post for review; it is listed once an admin publishes it"""
    return await BlogService.create_post(ctx, data)


@router.put("/posts/{post_id}/approve", response_model=BlogPostOut)
async def approve_post(post_id: int, ctx: RequestContext = Depends(require_admin)):
    return await ModerationService.resolve_blog_post(ctx, post_id, ModerationAction.APPROVE)


@router.put("/posts/{post_id}/reject", response_model=BlogPostOut)
async def reject_post(
    post_id: int,
    data: Optional[RejectRequest] = None,
    ctx: RequestContext = Depends(require_admin),
):
    return await ModerationService.resolve_blog_post(
        ctx, post_id, ModerationAction.REJECT, data.comment if data else None
    )
