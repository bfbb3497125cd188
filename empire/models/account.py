from decimal import Decimal

from tortoise import fields
from tortoise.models import Model

from empire.core.config import FRONTEND_URL
from empire.models.enums import Role


class Account(Model):
    """
    Platform account, both members and administrators
    """
    id = fields.IntField(pk=True)
    name = fields.CharField(255)
    email = fields.CharField(255, unique=True, index=True)
    password_hash = fields.CharField(255)
    role = fields.CharEnumField(Role, default=Role.MEMBER)

    is_activated = fields.BooleanField(default=False)
    is_banned = fields.BooleanField(default=False)
    ban_reason = fields.TextField(null=True)

    balance = fields.DecimalField(max_digits=14, decimal_places=2, default=Decimal("0"))
    total_earnings = fields.DecimalField(max_digits=14, decimal_places=2, default=Decimal("0"))

    referral_code = fields.CharField(32, unique=True, index=True)
    # Code of the account that referred this one, not a foreign key
    referred_by_code = fields.CharField(32, null=True, index=True)
    referral_count = fields.IntField(default=0)

    activated_at = fields.DatetimeField(null=True)
    created_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField(auto_now=True)

    class Meta:
        table = "accounts"

    def __str__(self):
        return f"Account {self.id} <{self.email}>"

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMINISTRATOR

    @property
    def referral_link(self) -> str:
        return f"{FRONTEND_URL}/register?ref={self.referral_code}"
