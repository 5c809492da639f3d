"""
Checkout: turns a student's cart into a paid order against a pickup slot.

``complete_order`` runs as one database transaction. The slot seat is taken
first with an atomic conditional UPDATE so every later step is gated on a
successful reservation; any failure afterwards rolls the whole unit back,
the reservation included. Notifications are queued with ``on_commit`` and
never run inside the transaction.
"""
from decimal import Decimal
from functools import partial
from django.db import transaction
from typing import Optional
import logging

from cart.exceptions import EmptyCartError
from cart.models import CartItem
from cart.services import CartService
from inventory.exceptions import InsufficientStockError, ItemUnavailableError
from inventory.services import InventoryService
from notifications.services import NotificationService
from timeslots.exceptions import SlotUnavailableError
from timeslots.services import TimeSlotService
from orders.models import Order, OrderItem

logger = logging.getLogger(__name__)


class CheckoutService:
    """Slot admission and cart-to-order conversion."""

    @staticmethod
    def validate_checkout(slot_id) -> dict:
        """
        Advisory pre-check shown before payment.

        Never relied on for correctness: the seat is only taken by
        ``complete_order``.

        Raises:
            SlotUnavailableError: with ``reason`` not_found, inactive or full
        """
        availability = TimeSlotService.check_availability(slot_id)
        if not availability["exists"]:
            raise SlotUnavailableError(slot_id, SlotUnavailableError.NOT_FOUND)
        if not availability["is_active"]:
            raise SlotUnavailableError(slot_id, SlotUnavailableError.INACTIVE)
        if not availability["has_capacity"]:
            raise SlotUnavailableError(slot_id, SlotUnavailableError.FULL)
        return {"success": True, "message": "Slot available, proceeding to payment"}

    @staticmethod
    def complete_order(student, slot_id, order_notes: Optional[str] = None) -> Order:
        """
        Atomically place an order for everything in the student's cart.

        Steps, in order, inside one transaction:
        reserve a seat, read the cart with fresh prices, re-check availability
        and stock, write the header and lines, decrement stock (guarded),
        clear the cart. Student and staff notifications are queued to run
        after commit.

        Raises:
            SlotUnavailableError: the slot is missing, inactive or full
            EmptyCartError: nothing to order
            ItemUnavailableError, InsufficientStockError: the cart no longer
                matches the menu
        """
        with transaction.atomic():
            if not TimeSlotService.try_reserve(slot_id):
                raise SlotUnavailableError(slot_id)

            # Lock the cart rows so a concurrent edit waits until the cart is cleared
            cart_items = list(
                CartItem.objects.select_for_update(of=("self",))
                .filter(student=student)
                .select_related("menu_item")
                .order_by("menu_item_id")
            )
            if not cart_items:
                raise EmptyCartError(student)

            # Re-validate against the menu as it is now, before touching stock
            for cart_item in cart_items:
                menu_item = cart_item.menu_item
                if not menu_item.is_available:
                    raise ItemUnavailableError(menu_item)
                if cart_item.quantity > menu_item.quantity:
                    raise InsufficientStockError(
                        menu_item, cart_item.quantity, menu_item.quantity
                    )

            total_amount = sum(
                (item.menu_item.price * item.quantity for item in cart_items),
                Decimal("0.00"),
            )

            order = Order.objects.create(
                student=student,
                slot_id=slot_id,
                total_amount=total_amount,
                order_notes=order_notes or None,
                status=Order.OrderStatus.PAID,
            )
            OrderItem.objects.bulk_create(
                [
                    OrderItem(
                        order=order,
                        menu_item=item.menu_item,
                        quantity=item.quantity,
                        price_at_order=item.menu_item.price,
                    )
                    for item in cart_items
                ]
            )

            for item in cart_items:
                InventoryService.decrement_stock(item.menu_item_id, item.quantity)

            # Only the rows that were ordered; anything added since stays in the cart
            CartService.clear_cart(student, cart_item_ids=[item.id for item in cart_items])

            transaction.on_commit(partial(NotificationService.notify_order_placed, order.id))

        logger.info(
            f"[CheckoutService.complete_order] Order {order.id} placed by student {student.id} "
            f"in slot {slot_id}: {len(cart_items)} lines, total {total_amount}"
        )
        return order

    @staticmethod
    def cancel_reservation(slot_id) -> bool:
        """
        Release one seat in a slot without touching any order.

        Kept for callers that abandon checkout after ``validate_checkout``.
        Cancelling a placed order goes through ``OrderStatusService`` instead,
        which releases the seat in the same transaction as the status change.
        """
        released = TimeSlotService.release(slot_id)
        if not released:
            logger.info(f"[CheckoutService.cancel_reservation] Nothing released for slot {slot_id}")
        return released
