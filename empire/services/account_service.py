import logging
import secrets
import string
from typing import List, Optional

from tortoise.exceptions import IntegrityError
from tortoise.expressions import Q

from empire.core.config import REFERRAL_CODE_ATTEMPTS, REFERRAL_CODE_PREFIX
from empire.core.errors import AccountNotFound, EmailTaken, InvalidCredentials, ValidationError
from empire.core.security import hash_password, verify_password
from empire.core.validation import (
    ValidationIssue,
    check_self_referral,
    validate_referral_code,
    validate_registration,
)
from empire.models.account import Account
from empire.models.enums import Role
from empire.schemas.account import RegisterRequest
from empire.services.referral_service import ReferralService

logger = logging.getLogger(__name__)

CODE_ALPHABET = string.ascii_uppercase + string.digits


class AccountService:
    """Registration, login and admin account management"""

    @staticmethod
    async def generate_referral_code() -> str:
        for _ in range(REFERRAL_CODE_ATTEMPTS):
            code = REFERRAL_CODE_PREFIX + "".join(secrets.choice(CODE_ALPHABET) for _ in range(6))
            if not await Account.filter(referral_code=code).exists():
                return code
        raise RuntimeError("Failed to generate unique referral code after multiple attempts")

    @staticmethod
    async def register(data: RegisterRequest, role: Role = Role.MEMBER) -> Account:
        registration = validate_registration(
            data.name, data.email, data.password, data.referral_code
        ).unwrap()

        if await Account.filter(email=registration.email).exists():
            raise EmailTaken()

        referred_by = registration.referral_code
        if referred_by and not await ReferralService.code_exists(referred_by):
            raise ValidationError(ValidationIssue.INVALID_REFERRAL_CODE)

        referral_code = await AccountService.generate_referral_code()
        check_self_referral(referral_code, referred_by).unwrap()

        try:
            account = await Account.create(
                name=registration.name,
                email=registration.email,
                password_hash=hash_password(registration.password),
                role=role,
                referral_code=referral_code,
                referred_by_code=referred_by,
            )
        except IntegrityError:
            # lost a race on the unique email
            raise EmailTaken()

        logger.info(f"[register] account={account.id} role={role.value} referred_by={referred_by}")
        return account

    @staticmethod
    async def authenticate(email: str, password: str) -> Account:
        account = await Account.get_or_none(email=(email or "").strip().lower())
        if not account or not verify_password(password, account.password_hash):
            raise InvalidCredentials()
        return account

    @staticmethod
    async def check_referral_code(code: Optional[str]) -> bool:
        """Blank codes are accepted, registration treats them as "no referrer"."""
        code = validate_referral_code(code).unwrap()
        if code is None:
            return True
        return await ReferralService.code_exists(code)

    @staticmethod
    async def get_account(account_id: int) -> Account:
        account = await Account.get_or_none(id=account_id)
        if not account:
            raise AccountNotFound()
        return account

    @staticmethod
    async def list_accounts(skip: int = 0, limit: int = 100, search: Optional[str] = None) -> List[Account]:
        query = Account.all()
        if search:
            query = query.filter(Q(email__icontains=search) | Q(name__icontains=search))
        return await query.order_by("-created_at").offset(skip).limit(limit)

    @staticmethod
    async def set_banned(account_id: int, banned: bool, reason: Optional[str] = None) -> Account:
        account = await AccountService.get_account(account_id)
        account.is_banned = banned
        account.ban_reason = (reason or None) if banned else None
        await account.save(update_fields=["is_banned", "ban_reason"])

        logger.info(f"[set_banned] account={account.id} banned={banned} reason={account.ban_reason}")
        return account
