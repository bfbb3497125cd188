from tortoise import fields
from tortoise.models import Model

from empire.models.enums import ModerationStatus


class BlogPost(Model):
    """
    Member-written post, visible to others once an admin publishes it
    """
    id = fields.IntField(pk=True)
    title = fields.CharField(255)
    content = fields.TextField()
    category = fields.CharField(100)
    author = fields.ForeignKeyField("models.Account", related_name="blog_posts")

    status = fields.CharEnumField(ModerationStatus, default=ModerationStatus.PENDING)
    feedback = fields.TextField(null=True)
    processed_by = fields.ForeignKeyField("models.Account", null=True, related_name="processed_posts")
    processed_at = fields.DatetimeField(null=True)
    views = fields.IntField(default=0)

    created_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField(auto_now=True)

    class Meta:
        table = "blog_posts"
