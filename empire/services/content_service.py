import logging
from typing import List, Type

from pydantic import BaseModel
from tortoise.models import Model

from empire.core.errors import NotFound

logger = logging.getLogger(__name__)


class ContentService:
    """
    CRUD over the premium content collections (betting tips, trading signals,
    courses, market news and analysis). Members only ever see active items;
    admins can list everything.
    """

    @staticmethod
    async def list_active(model: Type[Model]) -> List[Model]:
        return await model.filter(is_active=True).order_by("-created_at")

    @staticmethod
    async def list_all(model: Type[Model]) -> List[Model]:
        """Admin view, inactive items included"""
        return await model.all().order_by("-created_at")

    @staticmethod
    async def get(model: Type[Model], item_id: int) -> Model:
        item = await model.get_or_none(id=item_id)
        if not item:
            raise NotFound(f"{model.__name__} not found")
        return item

    @staticmethod
    async def create(model: Type[Model], data: BaseModel) -> Model:
        item = await model.create(**data.model_dump())
        logger.info(f"[create] {model.__name__} #{item.id} created")
        return item

    @staticmethod
    async def update(model: Type[Model], item_id: int, data: BaseModel) -> Model:
        item = await ContentService.get(model, item_id)
        item.update_from_dict(data.model_dump())
        await item.save()
        logger.info(f"[update] {model.__name__} #{item.id} updated")
        return item

    @staticmethod
    async def delete(model: Type[Model], item_id: int):
        item = await ContentService.get(model, item_id)
        await item.delete()
        logger.info(f"[delete] {model.__name__} #{item_id} deleted")
