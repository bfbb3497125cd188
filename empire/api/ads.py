from typing import List

from fastapi import APIRouter, Depends, status

from empire.api.deps import require_activated, require_admin
from empire.core.context import RequestContext
from empire.schemas.ad import AdCreate, AdOut, AdUpdate, WatchResponse
from empire.services.ad_service import AdService

router = APIRouter(prefix="/ads", tags=["Ads"])


@router.get("", response_model=List[AdOut])
async def list_ads(_: RequestContext = Depends(require_activated)):
    return await AdService.list_active()


@router.post("/{ad_id}/watch", response_model=WatchResponse)
async def watch_ad(ad_id: int, ctx: RequestContext = Depends(require_activated)):
    return await AdService.watch(ctx, ad_id)


@router.get("/admin/all", response_model=List[AdOut])
async def admin_list_ads(_: RequestContext = Depends(require_admin)):
    return await AdService.list_all()


@router.post("", response_model=AdOut, status_code=status.HTTP_201_CREATED)
async def create_ad(data: AdCreate, _: RequestContext = Depends(require_admin)):
    return await AdService.create_ad(data)


@router.put("/{ad_id}", response_model=AdOut)
async def update_ad(ad_id: int, data: AdUpdate, _: RequestContext = Depends(require_admin)):
    return await AdService.update_ad(ad_id, data)
