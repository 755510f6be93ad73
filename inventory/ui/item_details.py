# inventory/ui/item_details.py
from contextlib import aclosing
from typing import AsyncIterator

from inventory.core.errors import NotFoundError
from inventory.core.streams import first
from inventory.db.models.items import Item
from inventory.db.repositories.items import ItemsRepository
from inventory.domain.items.schemas import ItemDetailsUiState, item_to_details


class ItemDetailsViewModel:
    """State and actions of the single-item screen."""

    def __init__(self, items_repository: ItemsRepository, item_id: int):
        self._items_repository = items_repository
        self.item_id = item_id

    async def ui_state(self) -> AsyncIterator[ItemDetailsUiState]:
        """Emit the item's state on every change.

        Emissions are skipped while the item does not exist; the stream ends
        when an item that was already emitted gets deleted.
        """
        seen = False
        async with aclosing(self._items_repository.get_item_stream(self.item_id)) as stream:
            async for item in stream:
                if item is None:
                    if seen:
                        return
                    continue
                seen = True
                yield _details_state(item)

    async def current(self) -> ItemDetailsUiState:
        return _details_state(await self._current_item())

    async def reduce_quantity_by_one(self) -> ItemDetailsUiState:
        item = await self._current_item()
        if item.quantity > 0:
            item = Item(id=item.id, name=item.name, price=item.price, quantity=item.quantity - 1)
            await self._items_repository.update_item(item)
        return _details_state(item)

    async def delete_item(self) -> None:
        await self._items_repository.delete_item(await self._current_item())

    async def _current_item(self) -> Item:
        item = await first(self._items_repository.get_item_stream(self.item_id))
        if item is None:
            raise NotFoundError(f"Item {self.item_id} not found")
        return item


def _details_state(item: Item) -> ItemDetailsUiState:
    return ItemDetailsUiState(out_of_stock=item.quantity <= 0, item_details=item_to_details(item))
