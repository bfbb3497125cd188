"""
Input validation.

Every function returns a ``Validated`` result holding either the cleaned value
or the ``ValidationIssue`` that rejected it. Services call ``unwrap()`` before
building any entity, which raises ``ValidationError`` for a rejected input.
"""
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Generic, Optional, TypeVar

from email_validator import EmailNotValidError, validate_email

from empire.core.config import MIN_BLOG_CONTENT_LENGTH, MIN_PASSWORD_LENGTH
from empire.core.errors import ValidationError
from empire.models.enums import WithdrawalMethod

T = TypeVar("T")

CENT = Decimal("0.01")
# DecimalField(max_digits=14, decimal_places=2)
MAX_AMOUNT = Decimal("999999999999.99")


class ValidationIssue(str, Enum):
    MISSING_NAME = "Name is required"
    INVALID_EMAIL = "A valid email address is required"
    PASSWORD_TOO_SHORT = f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
    INVALID_REFERRAL_CODE = "Invalid referral code"
    SELF_REFERRAL = "You cannot use your own referral code"
    INVALID_AMOUNT = "Amount must be a number greater than zero"
    MISSING_PAYMENT_MESSAGE = "Payment confirmation message is required"
    INVALID_WITHDRAWAL_METHOD = "Withdrawal method must be one of: mpesa, bank"
    MISSING_PAYOUT_DETAILS = "Payout details are required"
    EMPTY_RESPONSE = "Task response is required"
    MISSING_TITLE = "Title is required"
    MISSING_CATEGORY = "Category is required"
    CONTENT_TOO_SHORT = f"Content must be at least {MIN_BLOG_CONTENT_LENGTH} characters"
    NEGATIVE_CAPACITY = "Capacity limits cannot be negative"
    LIMIT_BELOW_USAGE = "Capacity limit cannot be lower than the current count"
    INVALID_REWARD = "Reward must be a non-negative amount"


@dataclass(frozen=True)
class Validated(Generic[T]):
    value: Optional[T] = None
    issue: Optional[ValidationIssue] = None

    @property
    def ok(self) -> bool:
        return self.issue is None

    def unwrap(self) -> T:
        if self.issue is not None:
            raise ValidationError(self.issue)
        return self.value


def valid(value: T) -> Validated[T]:
    return Validated(value=value)


def invalid(issue: ValidationIssue) -> Validated:
    return Validated(issue=issue)


@dataclass(frozen=True)
class Registration:
    name: str
    email: str
    password: str
    referral_code: Optional[str]


@dataclass(frozen=True)
class DepositInput:
    amount: Decimal
    mpesa_message: str


@dataclass(frozen=True)
class WithdrawalInput:
    amount: Decimal
    method: WithdrawalMethod
    details: Any


@dataclass(frozen=True)
class BlogPostInput:
    title: str
    content: str
    category: str


def _text(value) -> str:
    return value.strip() if isinstance(value, str) else ""


def validate_name(name) -> Validated[str]:
    name = _text(name)
    return valid(name) if name else invalid(ValidationIssue.MISSING_NAME)


def validate_email_address(email) -> Validated[str]:
    email = _text(email)
    if not email:
        return invalid(ValidationIssue.INVALID_EMAIL)
    try:
        result = validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        return invalid(ValidationIssue.INVALID_EMAIL)
    return valid(result.normalized.lower())


def validate_password(password) -> Validated[str]:
    if not isinstance(password, str) or len(password) < MIN_PASSWORD_LENGTH:
        return invalid(ValidationIssue.PASSWORD_TOO_SHORT)
    return valid(password)


def validate_referral_code(code) -> Validated[Optional[str]]:
    """Blank codes mean "no referrer"."""
    code = _text(code)
    return valid(code.upper() if code else None)


def validate_registration(name, email, password, referral_code=None) -> Validated[Registration]:
    checks = (
        validate_name(name),
        validate_email_address(email),
        validate_password(password),
        validate_referral_code(referral_code),
    )
    for check in checks:
        if not check.ok:
            return invalid(check.issue)
    return valid(Registration(*(check.value for check in checks)))


def check_self_referral(own_code: str, referred_by_code: Optional[str]) -> Validated[Optional[str]]:
    if referred_by_code is not None and referred_by_code == own_code:
        return invalid(ValidationIssue.SELF_REFERRAL)
    return valid(referred_by_code)


def validate_amount(amount) -> Validated[Decimal]:
    if isinstance(amount, bool) or amount is None:
        return invalid(ValidationIssue.INVALID_AMOUNT)
    try:
        value = Decimal(str(amount))
        if not value.is_finite() or value <= 0 or value > MAX_AMOUNT:
            return invalid(ValidationIssue.INVALID_AMOUNT)
        return valid(value.quantize(CENT))
    except (InvalidOperation, ValueError):
        return invalid(ValidationIssue.INVALID_AMOUNT)


def validate_reward(reward) -> Validated[Optional[Decimal]]:
    """None leaves the reward unchanged on updates. Zero is allowed."""
    if reward is None:
        return valid(None)
    if isinstance(reward, bool):
        return invalid(ValidationIssue.INVALID_REWARD)
    try:
        value = Decimal(str(reward))
        if not value.is_finite() or value < 0 or value > MAX_AMOUNT:
            return invalid(ValidationIssue.INVALID_REWARD)
        return valid(value.quantize(CENT))
    except (InvalidOperation, ValueError):
        return invalid(ValidationIssue.INVALID_REWARD)


def validate_deposit(amount, mpesa_message) -> Validated[DepositInput]:
    checked = validate_amount(amount)
    if not checked.ok:
        return checked
    message = _text(mpesa_message)
    if not message:
        return invalid(ValidationIssue.MISSING_PAYMENT_MESSAGE)
    return valid(DepositInput(amount=checked.value, mpesa_message=message))


def validate_withdrawal(amount, method, details) -> Validated[WithdrawalInput]:
    checked = validate_amount(amount)
    if not checked.ok:
        return checked
    try:
        method = WithdrawalMethod(_text(method).lower())
    except ValueError:
        return invalid(ValidationIssue.INVALID_WITHDRAWAL_METHOD)
    if isinstance(details, (int, float)) and not isinstance(details, bool):
        details = str(details)
    if isinstance(details, str):
        details = details.strip()
    elif not isinstance(details, dict):
        return invalid(ValidationIssue.MISSING_PAYOUT_DETAILS)
    if not details:
        return invalid(ValidationIssue.MISSING_PAYOUT_DETAILS)
    return valid(WithdrawalInput(amount=checked.value, method=method, details=details))


def validate_task_response(response) -> Validated[str]:
    response = _text(response)
    return valid(response) if response else invalid(ValidationIssue.EMPTY_RESPONSE)


def validate_blog_post(title, content, category) -> Validated[BlogPostInput]:
    title = _text(title)
    if not title:
        return invalid(ValidationIssue.MISSING_TITLE)
    category = _text(category)
    if not category:
        return invalid(ValidationIssue.MISSING_CATEGORY)
    content = _text(content)
    if len(content) < MIN_BLOG_CONTENT_LENGTH:
        return invalid(ValidationIssue.CONTENT_TOO_SHORT)
    return valid(BlogPostInput(title=title, content=content, category=category))


def validate_capacity(*limits) -> Validated[tuple]:
    if any(limit is not None and limit < 0 for limit in limits):
        return invalid(ValidationIssue.NEGATIVE_CAPACITY)
    return valid(limits)


def check_limit_above_usage(limit, used: int) -> Validated[Optional[int]]:
    if limit is not None and limit < used:
        return invalid(ValidationIssue.LIMIT_BELOW_USAGE)
    return valid(limit)
