from tortoise import fields
from tortoise.models import Model

from empire.models.enums import AdType


class Advertisement(Model):
    id = fields.IntField(pk=True)
    title = fields.CharField(255)
    brand = fields.CharField(255)
    duration = fields.IntField()  # seconds
    reward = fields.DecimalField(max_digits=14, decimal_places=2)
    category = fields.CharField(100)
    type = fields.CharEnumField(AdType)
    url = fields.CharField(500)
    thumbnail = fields.CharField(500)

    max_views = fields.IntField()
    current_views = fields.IntField(default=0)
    is_active = fields.BooleanField(default=True)

    created_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField(auto_now=True)

    class Meta:
        table = "advertisements"

    def has_capacity(self) -> bool:
        return self.current_views < self.max_views
