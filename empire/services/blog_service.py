import logging
from typing import List, Optional

from tortoise.expressions import F

from empire.core.context import RequestContext
from empire.core.errors import NotFound
from empire.core.validation import validate_blog_post
from empire.models.blog import BlogPost
from empire.models.enums import ModerationStatus
from empire.schemas.blog import BlogPostCreate

logger = logging.getLogger(__name__)


class BlogService:

    @staticmethod
    async def create_post(ctx: RequestContext, data: BlogPostCreate) -> BlogPost:
        post = validate_blog_post(data.title, data.content, data.category).unwrap()
        blog_post = await BlogPost.create(
            title=post.title, content=post.content, category=post.category, author_id=ctx.account_id
        )
        logger.info(f"[create_post] account={ctx.account_id} submitted post #{blog_post.id}")
        return blog_post

    @staticmethod
    async def list_published(category: Optional[str] = None) -> List[BlogPost]:
        query = BlogPost.filter(status=ModerationStatus.PUBLISHED)
        if category:
            query = query.filter(category=category)
        return await query.order_by("-created_at")

    @staticmethod
    async def list_all(status: Optional[ModerationStatus] = None) -> List[BlogPost]:
        query = BlogPost.all()
        if status:
            query = query.filter(status=status)
        return await query.order_by("-created_at")

    @staticmethod
    async def my_posts(ctx: RequestContext) -> List[BlogPost]:
        return await BlogPost.filter(author_id=ctx.account_id).order_by("-created_at")

    @staticmethod
    async def read_post(ctx: RequestContext, post_id: int) -> BlogPost:
        """
        Published posts are readable by everyone, unpublished ones only by
        their author and admins. Each read counts one view.
        """
        post = await BlogPost.get_or_none(id=post_id)
        visible = post is not None and (
            post.status == ModerationStatus.PUBLISHED or ctx.is_admin or post.author_id == ctx.account_id
        )
        if not visible:
            raise NotFound("Blog post not found")

        await BlogPost.filter(id=post.id).update(views=F("views") + 1)
        await post.refresh_from_db(fields=["views"])
        return post
