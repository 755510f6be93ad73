# inventory/db/repositories/items.py
import abc
from typing import AsyncIterator, List, Optional

from inventory.db.dao.items import ItemDao
from inventory.db.models.items import Item


class ItemsRepository(abc.ABC):
    """Where view-models read and write items.

    Reads are async streams that emit again whenever the stored items change.
    """

    @abc.abstractmethod
    def get_all_items_stream(self) -> AsyncIterator[List[Item]]:
        """All items, ordered by name."""

    @abc.abstractmethod
    def get_item_stream(self, item_id: int) -> AsyncIterator[Optional[Item]]:
        """The item with ``item_id``, or None while it does not exist."""

    @abc.abstractmethod
    async def insert_item(self, item: Item) -> Optional[int]:
        ...

    @abc.abstractmethod
    async def delete_item(self, item: Item) -> None:
        ...

    @abc.abstractmethod
    async def update_item(self, item: Item) -> None:
        ...


class OfflineItemsRepository(ItemsRepository):
    """Items kept in the local database only."""

    def __init__(self, item_dao: ItemDao):
        self._item_dao = item_dao

    def get_all_items_stream(self) -> AsyncIterator[List[Item]]:
        return self._item_dao.get_all_items()

    def get_item_stream(self, item_id: int) -> AsyncIterator[Optional[Item]]:
        return self._item_dao.get_item(item_id)

    async def insert_item(self, item: Item) -> Optional[int]:
        return await self._item_dao.insert(item)

    async def delete_item(self, item: Item) -> None:
        await self._item_dao.delete(item)

    async def update_item(self, item: Item) -> None:
        await self._item_dao.update(item)
