# inventory/db/dao/items.py
import logging
from typing import AsyncIterator, Awaitable, Callable, List, Optional, TypeVar

from sqlalchemy.dialects.sqlite import insert
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import sessionmaker
from sqlalchemy.sql import delete, select, update

from inventory.db.invalidation import InvalidationTracker
from inventory.db.models.items import Item

logger = logging.getLogger(__name__)

T = TypeVar("T")

ITEMS = Item.__tablename__


class ItemDao:
    """SQL access for the ``items`` table.

    Writes are awaitable and commit immediately. Reads are async streams: they
    yield the current result straight away and yield again after every write
    that changed the table.
    """

    def __init__(self, session_factory: sessionmaker, tracker: InvalidationTracker):
        self._session_factory = session_factory
        self._tracker = tracker

    async def insert(self, item: Item) -> Optional[int]:
        """Insert ``item``, ignoring it if its id is already taken.

        Returns the stored id, or None when the row was ignored.
        """
        values = {"name": item.name, "price": item.price, "quantity": item.quantity}
        if item.id:
            values["id"] = item.id

        async with self._session_factory() as db:
            result = await db.execute(
                insert(Item).values(**values).on_conflict_do_nothing().returning(Item.id)
            )
            item_id = result.scalar_one_or_none()
            await db.commit()

        if item_id is None:
            logger.info("Ignored insert of item with conflicting id %s", item.id)
            return None
        logger.debug("Inserted item %s", item_id)
        self._tracker.notify(ITEMS)
        return item_id

    async def update(self, item: Item) -> int:
        async with self._session_factory() as db:
            result = await db.execute(
                update(Item)
                .where(Item.id == item.id)
                .values(name=item.name, price=item.price, quantity=item.quantity)
            )
            await db.commit()
        return await self._written(result.rowcount, "Updated", item.id)

    async def delete(self, item: Item) -> int:
        async with self._session_factory() as db:
            result = await db.execute(delete(Item).where(Item.id == item.id))
            await db.commit()
        return await self._written(result.rowcount, "Deleted", item.id)

    def get_item(self, item_id: int) -> AsyncIterator[Optional[Item]]:
        async def query(db: AsyncSession) -> Optional[Item]:
            result = await db.execute(select(Item).where(Item.id == item_id))
            return result.scalar_one_or_none()

        return self._observe(query)

    def get_all_items(self) -> AsyncIterator[List[Item]]:
        async def query(db: AsyncSession) -> List[Item]:
            result = await db.execute(select(Item).order_by(Item.name.asc()))
            return list(result.scalars().all())

        return self._observe(query)

    async def _written(self, rowcount: int, action: str, item_id: int) -> int:
        if not rowcount:
            logger.info("%s nothing: no item with id %s", action, item_id)
            return 0
        logger.debug("%s item %s", action, item_id)
        self._tracker.notify(ITEMS)
        return rowcount

    async def _observe(
        self, query: Callable[[AsyncSession], Awaitable[T]]
    ) -> AsyncIterator[T]:
        while True:
            # versioned before the query: a write during it skips the wait
            version = self._tracker.version(ITEMS)
            async with self._session_factory() as db:
                value = await query(db)
            yield value
            await self._tracker.wait_for_change(ITEMS, version)
