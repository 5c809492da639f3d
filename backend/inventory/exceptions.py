"""
Custom exceptions for menu stock handling.
"""


class InventoryError(ValueError):
    """Base exception for stock-related errors."""
    pass


class InsufficientStockError(InventoryError):
    """Raised when a decrement would take an item's stock below zero."""

    def __init__(self, menu_item, requested, available=None, message=None):
        self.menu_item = menu_item
        self.requested = requested
        self.available = available
        if message is None:
            name = getattr(menu_item, 'name', menu_item)
            available_info = f" Available: {available}." if available is not None else ""
            message = f"Insufficient stock for {name}. Requested: {requested}.{available_info}"
        super().__init__(message)


class ItemUnavailableError(InventoryError):
    """Raised when an item has been switched off by staff."""

    def __init__(self, menu_item, message=None):
        self.menu_item = menu_item
        if message is None:
            message = f"{getattr(menu_item, 'name', menu_item)} is not available"
        super().__init__(message)


class MenuItemInUseError(InventoryError):
    """Raised when deleting an item that historical orders still reference."""

    def __init__(self, menu_item, message=None):
        self.menu_item = menu_item
        if message is None:
            message = (
                f"Cannot delete {menu_item.name} because existing orders reference it. "
                f"Mark it unavailable instead."
            )
        super().__init__(message)
