import logging
import os

from tortoise import Tortoise, connections

from empire.core.config import DATABASE_URL

logger = logging.getLogger(__name__)

TORTOISE_ORM = {
    "connections": {
        "default": DATABASE_URL
    },
    "apps": {
        "models": {
            "models": ["empire.models"],
            "default_connection": "default",
        }
    },
}


def _ensure_sqlite_dir(url: str):
    if not url.startswith("sqlite://") or ":memory:" in url:
        return
    directory = os.path.dirname(url[len("sqlite://"):])
    if directory:
        os.makedirs(directory, exist_ok=True)


async def init_db():
    """Connect to the store and create missing tables"""
    _ensure_sqlite_dir(DATABASE_URL)
    await Tortoise.init(config=TORTOISE_ORM)
    await Tortoise.generate_schemas(safe=True)
    logger.info("[init_db] Database ready")


async def close_db():
    await connections.close_all()
