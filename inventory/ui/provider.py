"""FastAPI dependencies that hand out view-models.

Screens with an item get the id from the ``item_id`` path parameter.
"""
from fastapi import Depends

from inventory.core.container import AppDataContainer
from inventory.db.repositories.items import ItemsRepository
from inventory.ui.home import HomeViewModel
from inventory.ui.item_details import ItemDetailsViewModel
from inventory.ui.item_edit import ItemEditViewModel
from inventory.ui.item_entry import ItemEntryViewModel

_container = AppDataContainer()


def get_container() -> AppDataContainer:
    return _container


def get_items_repository(
    container: AppDataContainer = Depends(get_container),
) -> ItemsRepository:
    return container.items_repository


def home_view_model(
    items_repository: ItemsRepository = Depends(get_items_repository),
) -> HomeViewModel:
    return HomeViewModel(items_repository)


def item_entry_view_model(
    items_repository: ItemsRepository = Depends(get_items_repository),
) -> ItemEntryViewModel:
    return ItemEntryViewModel(items_repository)


def item_details_view_model(
    item_id: int,
    items_repository: ItemsRepository = Depends(get_items_repository),
) -> ItemDetailsViewModel:
    return ItemDetailsViewModel(items_repository, item_id)


def item_edit_view_model(
    item_id: int,
    items_repository: ItemsRepository = Depends(get_items_repository),
) -> ItemEditViewModel:
    return ItemEditViewModel(items_repository, item_id)
