# inventory/domain/items/schemas.py
import math
import re
from typing import List

from pydantic import BaseModel, Field, computed_field, field_validator

from inventory.core.config import settings
from inventory.db.models.items import Item

# quantities are 32-bit signed integers
INT_MIN = -(2 ** 31)
INT_MAX = 2 ** 31 - 1

_INT_TEXT = re.compile(r"[+-]?[0-9]+")


def format_price(price: float) -> str:
    sign = "-" if price < 0 else ""
    return f"{sign}{settings.CURRENCY_SYMBOL}{abs(price):,.2f}"


class ItemDetails(BaseModel):
    """Item form contents, kept as the raw text the user typed."""

    id: int = 0
    name: str = ""
    price: str = ""
    quantity: str = ""

    @field_validator("name", "price", "quantity", mode="before")
    @classmethod
    def _as_text(cls, value):
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    def to_item(self) -> Item:
        return Item(
            id=self.id,
            name=self.name,
            price=_to_float(self.price),
            quantity=_to_int(self.quantity),
        )


def _to_float(text: str) -> float:
    try:
        value = float(text)
    except ValueError:
        return 0.0
    # SQLite stores NaN as NULL
    return value if math.isfinite(value) else 0.0


def _to_int(text: str) -> int:
    if not _INT_TEXT.fullmatch(text):
        return 0
    value = int(text)
    return value if INT_MIN <= value <= INT_MAX else 0


class ItemUiState(BaseModel):
    item_details: ItemDetails = Field(default_factory=ItemDetails)
    is_entry_valid: bool = False


class ItemOut(BaseModel):
    id: int
    name: str
    price: float
    quantity: int

    @computed_field
    @property
    def formatted_price(self) -> str:
        return format_price(self.price)

    class Config:
        from_attributes = True


class HomeUiState(BaseModel):
    item_list: List[ItemOut] = Field(default_factory=list)


class ItemDetailsUiState(BaseModel):
    out_of_stock: bool = True
    item_details: ItemDetails = Field(default_factory=ItemDetails)


def item_to_details(item: Item) -> ItemDetails:
    return ItemDetails(
        id=item.id,
        name=item.name,
        price=str(item.price),
        quantity=str(item.quantity),
    )


def item_to_ui_state(item: Item, is_entry_valid: bool = False) -> ItemUiState:
    return ItemUiState(item_details=item_to_details(item), is_entry_valid=is_entry_valid)
