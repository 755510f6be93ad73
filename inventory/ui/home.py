# inventory/ui/home.py
from contextlib import aclosing
from typing import AsyncIterator

from inventory.db.repositories.items import ItemsRepository
from inventory.domain.items.schemas import HomeUiState, ItemOut


class HomeViewModel:
    """State of the item list screen."""

    def __init__(self, items_repository: ItemsRepository):
        self._items_repository = items_repository

    async def home_ui_state(self) -> AsyncIterator[HomeUiState]:
        async with aclosing(self._items_repository.get_all_items_stream()) as stream:
            async for items in stream:
                yield HomeUiState(item_list=[ItemOut.model_validate(item) for item in items])
