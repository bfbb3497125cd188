from decimal import Decimal

from empire.models.account import Account
from empire.models.advertisement import Advertisement
from empire.models.blog import BlogPost
from empire.models.content import TradingSignal
from empire.models.enums import ModerationStatus
from empire.models.financial import DepositRequest, WithdrawalRequest
from empire.models.task import Task, TaskSubmission
from empire.services.ledger_service import to_money
from empire.services.task_service import TaskService

PENDING = ModerationStatus.PENDING


class StatsService:

    @staticmethod
    async def get_stats() -> dict:
        # Summed here rather than in SQL, SQLite stores decimals as text
        approved = await DepositRequest.filter(status=ModerationStatus.APPROVED).values_list("amount", flat=True)
        revenue = sum((to_money(amount) for amount in approved), Decimal("0.00"))

        return {
            "total_users": await Account.all().count(),
            "total_revenue": revenue,
            "pending_activations": await Account.filter(is_activated=False).count(),
            "pending_deposits": await DepositRequest.filter(status=PENDING).count(),
            "pending_withdrawals": await WithdrawalRequest.filter(status=PENDING).count(),
            "pending_tasks": await TaskSubmission.filter(status=PENDING).count(),
            "pending_blogs": await BlogPost.filter(status=PENDING).count(),
            "active_ads": await Advertisement.filter(is_active=True).count(),
            "active_tasks": await Task.filter(is_active=True).count(),
            "active_signals": await TradingSignal.filter(is_active=True).count(),
        }

    @staticmethod
    async def get_pending() -> dict:
        """Everything waiting on an admin, oldest first"""
        return {
            "deposits": await DepositRequest.filter(status=PENDING).order_by("created_at"),
            "withdrawals": await WithdrawalRequest.filter(status=PENDING).order_by("created_at"),
            "tasks": list(reversed(await TaskService.list_submissions(PENDING))),
            "blogs": await BlogPost.filter(status=PENDING).order_by("created_at"),
        }
