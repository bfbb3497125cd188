"""
Create an administrator account from the command line
"""
import asyncio
import sys
from getpass import getpass

from tortoise import Tortoise, connections

from empire.core.db import TORTOISE_ORM
from empire.core.errors import DomainError
from empire.models.enums import Role
from empire.schemas.account import RegisterRequest
from empire.services.account_service import AccountService


async def create_administrator():
    await Tortoise.init(config=TORTOISE_ORM)
    await Tortoise.generate_schemas(safe=True)

    try:
        print("=== Create administrator ===\n")

        name = input("Name: ").strip()
        email = input("Email: ").strip()
        password = getpass("Password: ")
        password_confirm = getpass("Confirm password: ")

        if password != password_confirm:
            print("Passwords do not match")
            return 1

        try:
            admin = await AccountService.register(
                RegisterRequest(name=name, email=email, password=password),
                role=Role.ADMINISTRATOR,
            )
        except DomainError as e:
            print(f"Could not create administrator: {e.message}")
            return 1

        print("\nAdministrator created")
        print(f"   ID: {admin.id}")
        print(f"   Name: {admin.name}")
        print(f"   Email: {admin.email}")
        return 0
    finally:
        await connections.close_all()


if __name__ == "__main__":
    try:
        sys.exit(asyncio.run(create_administrator()))
    except KeyboardInterrupt:
        print("\n\nCancelled")
        sys.exit(1)
