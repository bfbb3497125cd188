from tortoise import fields
from tortoise.models import Model


class ReferralBonus(Model):
    """
    One row per referrer paid when a referred account activates
    """
    id = fields.IntField(pk=True)
    referrer = fields.ForeignKeyField("models.Account", related_name="referral_bonuses")
    referred = fields.ForeignKeyField("models.Account", related_name="bonuses_paid_upline")

    level = fields.SmallIntField()  # 1..3
    amount = fields.DecimalField(max_digits=14, decimal_places=2)

    created_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        table = "referral_bonuses"
