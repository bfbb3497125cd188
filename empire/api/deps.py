from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from empire.core.context import RequestContext
from empire.core.errors import AccountBanned, ActivationRequired, AdminRequired, InvalidToken
from empire.core.security import decode_access_token
from empire.models.account import Account

security = HTTPBearer()


async def get_request_context(
    credentials: HTTPAuthorizationCredentials = Depends(security)
) -> RequestContext:
    """Any authenticated account, banned ones included"""
    account_id = decode_access_token(credentials.credentials)
    if account_id is None:
        raise InvalidToken()

    account = await Account.get_or_none(id=account_id)
    if account is None:
        raise InvalidToken()

    return RequestContext(account=account)


async def require_member(
    ctx: RequestContext = Depends(get_request_context)
) -> RequestContext:
    if ctx.account.is_banned:
        raise AccountBanned(ctx.account.ban_reason)
    return ctx


async def require_activated(
    ctx: RequestContext = Depends(require_member)
) -> RequestContext:
    if not ctx.account.is_activated and not ctx.is_admin:
        raise ActivationRequired()
    return ctx


async def require_admin(
    ctx: RequestContext = Depends(require_member)
) -> RequestContext:
    if not ctx.is_admin:
        raise AdminRequired()
    return ctx
