"""
Premium content routes. Every collection gets the same endpoints:
activated members list active items, admins list all items, create, update
and delete.
"""
from typing import List, Type

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel
from tortoise.models import Model

from empire.api.deps import require_activated, require_admin
from empire.core.context import RequestContext
from empire.models.content import BettingTip, MarketAnalysis, MarketNews, TradingCourse, TradingSignal
from empire.schemas.content import (
    BettingTipIn,
    BettingTipOut,
    MarketAnalysisIn,
    MarketAnalysisOut,
    MarketNewsIn,
    MarketNewsOut,
    TradingCourseIn,
    TradingCourseOut,
    TradingSignalIn,
    TradingSignalOut,
)
from empire.services.content_service import ContentService


def mount_collection(
    router: APIRouter,
    path: str,
    model: Type[Model],
    schema_in: Type[BaseModel],
    schema_out: Type[BaseModel],
):
    name = model.__name__

    @router.get(path, response_model=List[schema_out], name=f"list_{name}")
    async def list_items(_: RequestContext = Depends(require_activated)):
        return await ContentService.list_active(model)

    @router.get(path + "/admin/all", response_model=List[schema_out], name=f"admin_list_{name}")
    async def list_all_items(_: RequestContext = Depends(require_admin)):
        return await ContentService.list_all(model)

    @router.post(path, response_model=schema_out, status_code=status.HTTP_201_CREATED, name=f"create_{name}")
    async def create_item(data: schema_in, _: RequestContext = Depends(require_admin)):
        return await ContentService.create(model, data)

    @router.put(path + "/{item_id}", response_model=schema_out, name=f"update_{name}")
    async def update_item(item_id: int, data: schema_in, _: RequestContext = Depends(require_admin)):
        return await ContentService.update(model, item_id, data)

    @router.delete(path + "/{item_id}", name=f"delete_{name}")
    async def delete_item(item_id: int, _: RequestContext = Depends(require_admin)):
        await ContentService.delete(model, item_id)
        return {"message": f"{name} deleted successfully"}


betting_router = APIRouter(prefix="/betting", tags=["Betting"])
mount_collection(betting_router, "/tips", BettingTip, BettingTipIn, BettingTipOut)

trading_router = APIRouter(prefix="/trading", tags=["Trading"])
mount_collection(trading_router, "/signals", TradingSignal, TradingSignalIn, TradingSignalOut)
mount_collection(trading_router, "/courses", TradingCourse, TradingCourseIn, TradingCourseOut)
mount_collection(trading_router, "/news", MarketNews, MarketNewsIn, MarketNewsOut)
mount_collection(trading_router, "/analysis", MarketAnalysis, MarketAnalysisIn, MarketAnalysisOut)
