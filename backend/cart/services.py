"""
Cart service layer for student cart operations.

This service handles:
- Adding items (merging with an existing entry for the same item)
- Updating and removing entries
- Reading the cart with line and cart totals
- Clearing the cart after checkout
"""

from decimal import Decimal
from django.db import transaction
from django.shortcuts import get_object_or_404
import logging

from inventory.exceptions import ItemUnavailableError
from inventory.models import MenuItem
from .exceptions import CartQuantityError
from .models import CartItem

logger = logging.getLogger(__name__)


class CartService:
    """Service for managing cart operations."""

    @staticmethod
    @transaction.atomic
    def add_item(student, menu_item_id: int, quantity: int) -> CartItem:
        """
        Add an item to the student's cart.

        Adding an item that is already in the cart increases the existing
        entry's quantity. The merged quantity may not exceed current stock.

        Raises:
            Http404: If the menu item does not exist
            ItemUnavailableError: If staff have switched the item off
            CartQuantityError: If quantity is not positive or exceeds stock
        """
        if quantity is None or quantity <= 0:
            raise CartQuantityError(message="Menu item ID and valid quantity are required")

        menu_item = get_object_or_404(MenuItem, pk=menu_item_id)
        if not menu_item.is_available:
            raise ItemUnavailableError(menu_item, "Item is not available")

        cart_item = (
            CartItem.objects.select_for_update()
            .filter(student=student, menu_item=menu_item)
            .first()
        )
        in_cart = cart_item.quantity if cart_item else 0
        new_total = in_cart + quantity

        if new_total > menu_item.quantity:
            raise CartQuantityError(menu_item, available=menu_item.quantity, in_cart=in_cart)

        if cart_item:
            cart_item.quantity = new_total
            cart_item.save(update_fields=["quantity", "updated_at"])
        else:
            cart_item = CartItem.objects.create(
                student=student, menu_item=menu_item, quantity=quantity
            )

        logger.info(
            f"[CartService.add_item] Student {student.id} cart: menu item {menu_item.id} -> {new_total}"
        )
        return cart_item

    @staticmethod
    @transaction.atomic
    def update_item(student, menu_item_id: int, quantity: int):
        """
        Set the quantity of a cart entry. A quantity of zero or less removes
        the entry and returns None.
        """
        if quantity <= 0:
            CartService.remove_item(student, menu_item_id)
            return None

        menu_item = get_object_or_404(MenuItem, pk=menu_item_id)
        if quantity > menu_item.quantity:
            raise CartQuantityError(
                menu_item,
                available=menu_item.quantity,
                message=f"Cannot update quantity. Available stock: {menu_item.quantity}",
            )

        cart_item, _ = CartItem.objects.update_or_create(
            student=student,
            menu_item=menu_item,
            defaults={"quantity": quantity},
        )
        logger.info(
            f"[CartService.update_item] Student {student.id} cart: menu item {menu_item.id} -> {quantity}"
        )
        return cart_item

    @staticmethod
    def remove_item(student, menu_item_id: int) -> int:
        deleted, _ = CartItem.objects.filter(student=student, menu_item_id=menu_item_id).delete()
        return deleted

    @staticmethod
    def clear_cart(student, cart_item_ids=None) -> int:
        """
        Empty the student's cart. With ``cart_item_ids`` only those entries
        are removed, which is how checkout clears exactly what it ordered.
        """
        entries = CartItem.objects.filter(student=student)
        if cart_item_ids is not None:
            entries = entries.filter(pk__in=cart_item_ids)
        deleted, _ = entries.delete()
        if deleted:
            logger.debug(f"[CartService.clear_cart] Removed {deleted} entries for student {student.id}")
        return deleted

    @staticmethod
    def get_cart(student) -> dict:
        """
        The student's cart with current prices.

        Returns:
            dict with ``items`` (CartItem instances, menu item preloaded),
            ``total`` and ``item_count``
        """
        items = list(
            CartItem.objects.filter(student=student)
            .select_related("menu_item")
            .order_by("created_at", "id")
        )
        total = sum((item.line_total for item in items), Decimal("0.00"))
        return {
            "items": items,
            "total": total,
            "item_count": sum(item.quantity for item in items),
        }
