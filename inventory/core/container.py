import abc
from functools import cached_property

from inventory.db.database import InventoryDatabase, get_database
from inventory.db.repositories.items import ItemsRepository, OfflineItemsRepository


class AppContainer(abc.ABC):

    @property
    @abc.abstractmethod
    def items_repository(self) -> ItemsRepository:
        ...


class AppDataContainer(AppContainer):
    """Wires the repository to the process-wide local database."""

    @cached_property
    def database(self) -> InventoryDatabase:
        return get_database()

    @cached_property
    def items_repository(self) -> ItemsRepository:
        return OfflineItemsRepository(self.database.item_dao())
