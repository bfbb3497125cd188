import logging
from typing import List

from tortoise.transactions import in_transaction

from empire.core.context import RequestContext
from empire.core.errors import CapacityExceeded, NotFound, ResourceInactive
from empire.core.validation import check_limit_above_usage, validate_capacity, validate_reward
from empire.models.advertisement import Advertisement
from empire.schemas.ad import AdCreate, AdUpdate
from empire.services.ledger_service import LedgerService

logger = logging.getLogger(__name__)


class AdService:

    @staticmethod
    async def get_ad(ad_id: int) -> Advertisement:
        ad = await Advertisement.get_or_none(id=ad_id)
        if not ad:
            raise NotFound("Advertisement not found")
        return ad

    @staticmethod
    async def list_active() -> List[Advertisement]:
        return await Advertisement.filter(is_active=True).order_by("-created_at")

    @staticmethod
    async def list_all() -> List[Advertisement]:
        return await Advertisement.all().order_by("-created_at")

    @staticmethod
    async def create_ad(data: AdCreate) -> Advertisement:
        validate_capacity(data.max_views).unwrap()
        validate_reward(data.reward).unwrap()
        ad = await Advertisement.create(**data.model_dump())
        logger.info(f"[create_ad] Ad #{ad.id} '{ad.title}' created, {ad.max_views} views at {ad.reward}")
        return ad

    @staticmethod
    async def update_ad(ad_id: int, data: AdUpdate) -> Advertisement:
        changes = data.model_dump(exclude_unset=True)
        validate_capacity(changes.get("max_views")).unwrap()
        validate_reward(changes.get("reward")).unwrap()

        async with in_transaction() as conn:
            ad = await Advertisement.filter(id=ad_id).select_for_update().using_db(conn).first()
            if ad is None:
                raise NotFound("Advertisement not found")
            check_limit_above_usage(changes.get("max_views"), ad.current_views).unwrap()
            if changes:
                ad.update_from_dict(changes)
                await ad.save(using_db=conn)
        logger.info(f"[update_ad] Ad #{ad.id} updated: {sorted(changes)}")
        return ad

    @staticmethod
    async def watch(ctx: RequestContext, ad_id: int) -> dict:
        """Count one view and pay its reward, both or neither"""
        async with in_transaction() as conn:
            ad = await Advertisement.filter(id=ad_id).select_for_update().using_db(conn).first()
            if ad is None:
                raise NotFound("Advertisement not found")
            if not ad.is_active:
                raise ResourceInactive("Advertisement is not active")
            if not ad.has_capacity():
                raise CapacityExceeded("Advertisement has reached maximum views")

            ad.current_views += 1
            await ad.save(using_db=conn, update_fields=["current_views"])

            account = await LedgerService.lock_account(ctx.account_id, conn)
            await LedgerService.credit(account, ad.reward, conn, earning=True, reason=f"ad #{ad.id} view")

        return {
            "message": "Ad watched successfully",
            "reward": ad.reward,
            "new_balance": account.balance,
            "views_left": ad.max_views - ad.current_views,
        }
