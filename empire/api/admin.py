from fastapi import APIRouter, Depends

from empire.api.deps import require_admin
from empire.core.context import RequestContext
from empire.schemas.admin import PendingOut, StatsOut
from empire.services.stats_service import StatsService

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.get("/stats", response_model=StatsOut)
async def get_stats(_: RequestContext = Depends(require_admin)):
    """Dashboard counters; revenue is the sum of approved deposits"""
    return await StatsService.get_stats()


@router.get("/pending", response_model=PendingOut)
async def get_pending(_: RequestContext = Depends(require_admin)):
    return await StatsService.get_pending()
