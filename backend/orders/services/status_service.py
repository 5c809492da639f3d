"""
Order fulfilment status machine.

PAID -> PREPARING -> READY -> COMPLETED, moving forward only (steps may be
skipped). CANCELLED is reachable from any non-terminal status. COMPLETED
and CANCELLED are terminal.
"""
from functools import partial
from django.db import transaction
import logging

from notifications.services import NotificationService
from timeslots.services import TimeSlotService
from orders.exceptions import (
    InvalidOrderStatusError,
    InvalidStatusTransitionError,
    OrderNotFoundError,
)
from orders.models import Order

logger = logging.getLogger(__name__)

S = Order.OrderStatus

FULFILMENT_SEQUENCE = [S.PAID, S.PREPARING, S.READY, S.COMPLETED]


class OrderStatusService:

    @staticmethod
    def can_transition(current: str, new: str) -> bool:
        if current in Order.TERMINAL_STATUSES or current == new:
            return False
        if new == S.CANCELLED:
            return True
        if new not in FULFILMENT_SEQUENCE or current not in FULFILMENT_SEQUENCE:
            return False
        return FULFILMENT_SEQUENCE.index(new) > FULFILMENT_SEQUENCE.index(current)

    @staticmethod
    @transaction.atomic
    def set_status(order_id, new_status: str) -> Order:
        """
        Move an order to ``new_status``.

        The order row is locked for the duration. Cancelling gives the slot
        seat back in the same transaction. The student notification is sent
        after commit.
        """
        if new_status not in S.values:
            raise InvalidOrderStatusError(new_status)

        order = Order.objects.select_for_update().filter(pk=order_id).first()
        if order is None:
            raise OrderNotFoundError(order_id)

        previous = order.status
        if not OrderStatusService.can_transition(previous, new_status):
            raise InvalidStatusTransitionError(order, new_status)

        order.status = new_status
        order.save(update_fields=["status", "updated_at"])

        if new_status == S.CANCELLED:
            TimeSlotService.release(order.slot_id)

        transaction.on_commit(
            partial(NotificationService.notify_status_change, order.id, new_status)
        )
        logger.info(f"[OrderStatusService.set_status] Order {order.id}: {previous} -> {new_status}")
        return order
