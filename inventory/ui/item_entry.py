# inventory/ui/item_entry.py
from typing import Optional

from inventory.db.repositories.items import ItemsRepository
from inventory.domain.items.schemas import ItemDetails, ItemUiState
from inventory.ui.validation import validate_input


class ItemEntryViewModel:
    """Holds the add-item form and stores it once every field is filled in."""

    def __init__(self, items_repository: ItemsRepository):
        self._items_repository = items_repository
        self.item_ui_state = ItemUiState()

    def update_ui_state(self, item_details: ItemDetails) -> None:
        self.item_ui_state = ItemUiState(
            item_details=item_details,
            is_entry_valid=validate_input(item_details),
        )

    async def save_item(self) -> Optional[int]:
        """Insert the form as a new item. Returns its id, or None if nothing was saved."""
        if not validate_input(self.item_ui_state.item_details):
            return None
        return await self._items_repository.insert_item(self.item_ui_state.item_details.to_item())
