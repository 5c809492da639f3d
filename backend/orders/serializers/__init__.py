"""
Orders serializers package.
"""

from .order_serializers import (
    OrderItemSerializer,
    OrderSerializer,
    CheckoutSerializer,
    CompleteOrderSerializer,
    CancelReservationSerializer,
)
from .status_serializers import UpdateOrderStatusSerializer

__all__ = [
    'OrderItemSerializer',
    'OrderSerializer',
    'CheckoutSerializer',
    'CompleteOrderSerializer',
    'CancelReservationSerializer',
    'UpdateOrderStatusSerializer',
]
