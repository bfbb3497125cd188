from tortoise import fields
from tortoise.models import Model

from empire.models.enums import Difficulty, ModerationStatus, TaskType


class Task(Model):
    """
    Microtask. Bidding and transcription tasks count bidders, the rest count responses.
    """
    id = fields.IntField(pk=True)
    title = fields.CharField(255)
    description = fields.TextField()
    category = fields.CharField(100)
    type = fields.CharEnumField(TaskType)
    reward = fields.DecimalField(max_digits=14, decimal_places=2)
    duration = fields.CharField(100)
    difficulty = fields.CharEnumField(Difficulty)
    requirements = fields.TextField()

    max_responses = fields.IntField(null=True)
    current_responses = fields.IntField(default=0)
    max_bidders = fields.IntField(null=True)
    current_bidders = fields.IntField(default=0)

    deadline = fields.CharField(100, null=True)
    can_redo = fields.BooleanField(default=False)
    questions = fields.JSONField(default=list)
    instructions = fields.TextField(null=True)
    audio_url = fields.CharField(500, null=True)
    is_active = fields.BooleanField(default=True)

    created_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField(auto_now=True)

    class Meta:
        table = "tasks"

    @property
    def counts_bidders(self) -> bool:
        return self.type in (TaskType.BIDDING, TaskType.TRANSCRIPTION)

    def has_capacity(self) -> bool:
        if self.counts_bidders:
            return self.max_bidders is None or self.current_bidders < self.max_bidders
        return self.max_responses is None or self.current_responses < self.max_responses


class TaskSubmission(Model):
    id = fields.IntField(pk=True)
    task = fields.ForeignKeyField("models.Task", related_name="submissions")
    account = fields.ForeignKeyField("models.Account", related_name="task_submissions")
    response = fields.TextField()

    status = fields.CharEnumField(ModerationStatus, default=ModerationStatus.PENDING)
    feedback = fields.TextField(null=True)
    processed_by = fields.ForeignKeyField("models.Account", null=True, related_name="processed_submissions")
    processed_at = fields.DatetimeField(null=True)

    created_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        table = "task_submissions"
        unique_together = (("task", "account"),)
