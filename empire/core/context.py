from dataclasses import dataclass

from empire.models.account import Account


@dataclass(frozen=True)
class RequestContext:
    """
    Who is making the current request. Built once per request from the bearer
    token and handed to every service call that acts on behalf of someone.
    """
    account: Account

    @property
    def account_id(self) -> int:
        return self.account.id

    @property
    def is_admin(self) -> bool:
        return self.account.is_admin
