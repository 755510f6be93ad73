# inventory/db/database.py
import logging
import threading
from typing import Optional

from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.ext.asyncio.session import AsyncSession
from sqlalchemy.orm import sessionmaker

from inventory.core.config import settings
from inventory.db.base import SCHEMA_VERSION, Base
from inventory.db.dao.items import ItemDao
from inventory.db.invalidation import InvalidationTracker

logger = logging.getLogger(__name__)


class InventoryDatabase:
    """Local item database: engine, sessions, change tracking and the DAO."""

    def __init__(self, db_url: str, echo: bool = False):
        self.engine = create_async_engine(db_url, future=True, echo=echo)
        self.session_factory = sessionmaker(
            bind=self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
        self.invalidation_tracker = InvalidationTracker()
        self._item_dao: Optional[ItemDao] = None

    def item_dao(self) -> ItemDao:
        if self._item_dao is None:
            self._item_dao = ItemDao(self.session_factory, self.invalidation_tracker)
        return self._item_dao

    async def create_all(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
            if conn.dialect.name == "sqlite":
                await conn.exec_driver_sql(f"PRAGMA user_version = {SCHEMA_VERSION}")
        logger.info("Database ready at %s (schema version %s)", self.engine.url, SCHEMA_VERSION)

    async def dispose(self) -> None:
        await self.engine.dispose()
        logger.info("Database at %s closed", self.engine.url)


_instance: Optional[InventoryDatabase] = None
_lock = threading.Lock()


def get_database() -> InventoryDatabase:
    global _instance
    if _instance is None:
        with _lock:
            if _instance is None:
                _instance = InventoryDatabase(settings.DB_URL, echo=settings.DB_ECHO)
    return _instance
