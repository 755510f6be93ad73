# inventory/ui/item_edit.py
from inventory.core.errors import NotFoundError
from inventory.core.streams import first
from inventory.db.repositories.items import ItemsRepository
from inventory.domain.items.schemas import ItemDetails, ItemUiState, item_to_ui_state
from inventory.ui.validation import validate_input


class ItemEditViewModel:

    def __init__(self, items_repository: ItemsRepository, item_id: int):
        self._items_repository = items_repository
        self.item_id = item_id
        self.item_ui_state = ItemUiState()

    async def load(self) -> ItemUiState:
        """Fill the form from the stored item. A stored item is always a valid entry."""
        item = await first(self._items_repository.get_item_stream(self.item_id))
        if item is None:
            raise NotFoundError(f"Item {self.item_id} not found")
        self.item_ui_state = item_to_ui_state(item, is_entry_valid=True)
        return self.item_ui_state

    def update_ui_state(self, item_details: ItemDetails) -> None:
        self.item_ui_state = ItemUiState(
            item_details=item_details,
            is_entry_valid=validate_input(item_details),
        )

    async def update_item(self) -> bool:
        if not validate_input(self.item_ui_state.item_details):
            return False
        await self._items_repository.update_item(self.item_ui_state.item_details.to_item())
        return True
