import pytest

from inventory.core.errors import NotFoundError
from inventory.ui.navigation import (
    DESTINATIONS,
    START_DESTINATION,
    HomeDestination,
    ItemDetailsDestination,
    ItemEditDestination,
    ItemEntryDestination,
    resolve,
)


def test_four_destinations_starting_at_home():
    assert [d.route for d in DESTINATIONS] == ["home", "item_entry", "item_details", "item_edit"]
    assert START_DESTINATION is HomeDestination


def test_routes_with_args():
    assert HomeDestination.route_with_args == "home"
    assert ItemDetailsDestination.route_with_args == "item_details/{itemId}"
    assert ItemEditDestination.path(5) == "item_edit/5"
    assert ItemEditDestination.api_url(5) == "/api/v1/items/5/edit"


@pytest.mark.parametrize(
    "route, destination, args",
    [
        ("home", HomeDestination, {}),
        ("/item_entry", ItemEntryDestination, {}),
        ("item_details/12", ItemDetailsDestination, {"itemId": 12}),
        ("item_edit/3/", ItemEditDestination, {"itemId": 3}),
    ],
)
def test_resolve(route, destination, args):
    assert resolve(route) == (destination, args)


@pytest.mark.parametrize("route", ["settings", "home/1", "item_details", "item_details/abc", ""])
def test_resolve_rejects_unknown_routes(route):
    with pytest.raises(NotFoundError):
        resolve(route)
