# inventory/core/errors.py
from typing import Optional


class NotFoundError(Exception):
    """Raised when an item id or a navigation route does not resolve."""


class InvalidItemError(ValueError):
    """Raised when an item form has a blank required field."""

    def __init__(self, message: str, item_ui_state: Optional[dict] = None):
        super().__init__(message)
        self.item_ui_state = item_ui_state
