from inventory.domain.items.schemas import ItemDetails


def validate_input(details: ItemDetails) -> bool:
    """An item can be saved only when name, price and quantity are all filled in."""
    return bool(details.name.strip() and details.price.strip() and details.quantity.strip())
