"""
Custom exceptions for student cart operations.
"""


class CartError(ValueError):
    """Base exception for cart errors."""
    pass


class EmptyCartError(CartError):
    def __init__(self, student=None, message=None):
        self.student = student
        super().__init__(message or "Cart is empty")


class CartQuantityError(CartError):
    """
    Raised when a requested cart quantity is invalid or exceeds stock.

    ``available`` and ``in_cart`` are kept so callers can tell the student
    how much they can still add.
    """

    def __init__(self, menu_item=None, available=None, in_cart=None, message=None):
        self.menu_item = menu_item
        self.available = available
        self.in_cart = in_cart
        if message is None:
            message = f"Cannot add item. Available stock: {available}. You have {in_cart} in cart."
        super().__init__(message)
