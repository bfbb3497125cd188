import itertools
import os
from decimal import Decimal

os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["DATABASE_URL"] = "sqlite://:memory:"
os.environ.setdefault("ENVIRONMENT", "test")

import pytest
from httpx import ASGITransport, AsyncClient
from tortoise import Tortoise, connections

from empire.app import create_app
from empire.core.context import RequestContext
from empire.core.security import create_access_token, hash_password
from empire.models import Account, Role

_sequence = itertools.count(1)


@pytest.fixture(autouse=True)
async def db():
    """Fresh in-memory database for every test"""
    await Tortoise.init(db_url="sqlite://:memory:", modules={"models": ["empire.models"]})
    await Tortoise.generate_schemas()
    yield
    await connections.close_all(discard=True)


@pytest.fixture
def make_account():
    async def factory(
        name: str = None,
        balance="0",
        activated: bool = False,
        referred_by: Account = None,
        role: Role = Role.MEMBER,
        banned: bool = False,
        password: str = "secret123",
    ) -> Account:
        n = next(_sequence)
        return await Account.create(
            name=name or f"User {n}",
            email=f"user{n}@example.com",
            password_hash=hash_password(password),
            role=role,
            is_activated=activated,
            is_banned=banned,
            balance=Decimal(balance),
            referral_code=f"EMT{n:04d}",
            referred_by_code=referred_by.referral_code if referred_by else None,
        )

    return factory


@pytest.fixture
async def admin(make_account):
    return await make_account(name="Admin", role=Role.ADMINISTRATOR)


@pytest.fixture
def ctx():
    def build(account: Account) -> RequestContext:
        return RequestContext(account=account)

    return build


@pytest.fixture
def auth():
    def headers(account: Account) -> dict:
        return {"Authorization": f"Bearer {create_access_token(account.id)}"}

    return headers


@pytest.fixture
async def client():
    transport = ASGITransport(app=create_app())
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
