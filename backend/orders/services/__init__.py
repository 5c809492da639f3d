"""
Orders services package.

- CheckoutService: slot admission and atomic cart-to-order conversion
- OrderStatusService: fulfilment status machine
- OrderLedgerService: receipts, histories, revenue and spending figures
"""

from .checkout_service import CheckoutService
from .status_service import OrderStatusService
from .ledger_service import OrderLedgerService

__all__ = [
    'CheckoutService',
    'OrderStatusService',
    'OrderLedgerService',
]
