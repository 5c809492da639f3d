"""
Custom exceptions for the order ledger and status machine.
"""


class OrderError(ValueError):
    """Base exception for order errors."""
    pass


class OrderNotFoundError(OrderError):
    def __init__(self, order_id, message=None):
        self.order_id = order_id
        super().__init__(message or "Order not found")


class InvalidOrderStatusError(OrderError):
    """Raised for a status value outside the known set."""

    def __init__(self, status, message=None):
        self.status = status
        super().__init__(message or f"Invalid status: {status}")


class InvalidStatusTransitionError(OrderError):
    """Raised when the requested status is not reachable from the current one."""

    def __init__(self, order, new_status, message=None):
        self.order = order
        self.current_status = order.status
        self.new_status = new_status
        if message is None:
            message = f"Cannot change order #{order.id} from {order.status} to {new_status}"
        super().__init__(message)
