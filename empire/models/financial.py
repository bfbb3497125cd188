from tortoise import fields
from tortoise.models import Model

from empire.models.enums import ModerationStatus, WithdrawalMethod


class DepositRequest(Model):
    """
    Deposit claims, reconciled by an admin against the pasted M-Pesa message
    """
    id = fields.IntField(pk=True)
    account = fields.ForeignKeyField("models.Account", related_name="deposits")
    amount = fields.DecimalField(max_digits=14, decimal_places=2)
    mpesa_message = fields.TextField()

    status = fields.CharEnumField(ModerationStatus, default=ModerationStatus.PENDING)
    feedback = fields.TextField(null=True)
    processed_by = fields.ForeignKeyField("models.Account", null=True, related_name="processed_deposits")
    processed_at = fields.DatetimeField(null=True)

    created_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        table = "deposit_requests"


class WithdrawalRequest(Model):
    """
    Payout requests. Funds stay in the balance until an admin approves.
    """
    id = fields.IntField(pk=True)
    account = fields.ForeignKeyField("models.Account", related_name="withdrawals")
    amount = fields.DecimalField(max_digits=14, decimal_places=2)
    method = fields.CharEnumField(WithdrawalMethod)
    # Payout target: free text (M-Pesa number) or a bank details object
    details_text = fields.TextField(null=True)
    details_data = fields.JSONField(null=True)

    status = fields.CharEnumField(ModerationStatus, default=ModerationStatus.PENDING)
    feedback = fields.TextField(null=True)
    processed_by = fields.ForeignKeyField("models.Account", null=True, related_name="processed_withdrawals")
    processed_at = fields.DatetimeField(null=True)

    created_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        table = "withdrawal_requests"

    @property
    def details(self):
        return self.details_text if self.details_text is not None else self.details_data

    @staticmethod
    def details_columns(details) -> dict:
        """Text goes to the text column, objects to the JSON column"""
        if isinstance(details, str):
            return {"details_text": details}
        return {"details_data": details}
