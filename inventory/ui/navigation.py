"""Screens of the app and how a route string maps onto them.

Routes follow the ``name`` / ``name/{itemId}`` form; ``itemId`` must be an
integer. Each destination also names the API path serving its state.
"""
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from inventory.core.errors import NotFoundError

ITEMS_API = "/api/v1/items"


@dataclass(frozen=True)
class NavigationDestination:
    route: str
    title: str
    api_path: str
    item_id_arg: Optional[str] = None

    @property
    def route_with_args(self) -> str:
        if self.item_id_arg is None:
            return self.route
        return f"{self.route}/{{{self.item_id_arg}}}"

    def path(self, item_id: Optional[int] = None) -> str:
        if self.item_id_arg is None:
            return self.route
        return f"{self.route}/{item_id}"

    def api_url(self, item_id: Optional[int] = None) -> str:
        return self.api_path.format(item_id=item_id)


HomeDestination = NavigationDestination("home", "Inventory", ITEMS_API)
ItemEntryDestination = NavigationDestination("item_entry", "Add Item", ITEMS_API + "/entry")
ItemDetailsDestination = NavigationDestination(
    "item_details", "Item Details", ITEMS_API + "/{item_id}", item_id_arg="itemId"
)
ItemEditDestination = NavigationDestination(
    "item_edit", "Edit Item", ITEMS_API + "/{item_id}/edit", item_id_arg="itemId"
)

START_DESTINATION = HomeDestination
DESTINATIONS: List[NavigationDestination] = [
    HomeDestination,
    ItemEntryDestination,
    ItemDetailsDestination,
    ItemEditDestination,
]


def resolve(route: str) -> Tuple[NavigationDestination, Dict[str, int]]:
    """Find the destination for ``route`` and parse its arguments."""
    name, _, arg = route.strip("/").partition("/")
    for destination in DESTINATIONS:
        if destination.route != name:
            continue
        if destination.item_id_arg is None:
            if arg:
                break
            return destination, {}
        try:
            return destination, {destination.item_id_arg: int(arg)}
        except ValueError:
            raise NotFoundError(f"Route {route!r} needs an integer {destination.item_id_arg}") from None
    raise NotFoundError(f"Unknown route {route!r}")
