"""
Menu stock service.

Stock is shared by every concurrent checkout, so the only write path that
lowers it is a single conditional UPDATE: the availability check and the
decrement happen in one statement at the storage layer.
"""
from django.db import transaction
from django.db.models import F
from django.shortcuts import get_object_or_404
import logging

from .exceptions import InsufficientStockError, MenuItemInUseError
from .models import Favourite, MenuItem

logger = logging.getLogger(__name__)


class InventoryService:
    """Reads and writes menu item stock."""

    @staticmethod
    def decrement_stock(menu_item_id: int, quantity: int) -> None:
        """
        Atomically removes ``quantity`` units from a menu item.

        Issues ``UPDATE ... SET quantity = quantity - q WHERE id = ? AND
        quantity >= q``. When no row is affected the item is either gone or
        would go negative, and InsufficientStockError is raised so the
        caller's transaction rolls back.
        """
        if quantity <= 0:
            raise ValueError("Quantity to decrement must be greater than 0")

        updated = MenuItem.objects.filter(
            pk=menu_item_id, quantity__gte=quantity
        ).update(quantity=F('quantity') - quantity)

        if updated == 0:
            item = MenuItem.objects.filter(pk=menu_item_id).first()
            available = item.quantity if item else 0
            logger.warning(
                f"[InventoryService.decrement_stock] Guard rejected decrement for menu item "
                f"{menu_item_id}: requested {quantity}, available {available}"
            )
            raise InsufficientStockError(item or menu_item_id, quantity, available)

        logger.debug(f"[InventoryService.decrement_stock] Menu item {menu_item_id} -{quantity}")

    @staticmethod
    def get_stock_level(menu_item_id: int) -> int:
        return MenuItem.objects.values_list('quantity', flat=True).get(pk=menu_item_id)

    @staticmethod
    @transaction.atomic
    def delete_menu_item(menu_item: MenuItem) -> None:
        """
        Hard-deletes a menu item unless an order line still references it.
        Carts holding the item are cleared by the cascade.
        """
        if menu_item.order_lines.exists():
            raise MenuItemInUseError(menu_item)

        logger.info(f"Deleting menu item {menu_item.id} ({menu_item.name})")
        menu_item.delete()


class FavouriteService:
    """A student's starred menu items."""

    @staticmethod
    @transaction.atomic
    def toggle(student, menu_item_id: int) -> bool:
        """
        Star the item, or unstar it if it is already starred.

        Returns:
            True when the item is now a favourite

        Raises:
            Http404: If the menu item does not exist
        """
        menu_item = get_object_or_404(MenuItem, pk=menu_item_id)
        favourite, created = Favourite.objects.get_or_create(student=student, menu_item=menu_item)
        if not created:
            favourite.delete()

        logger.info(
            f"[FavouriteService.toggle] Student {student.id} "
            f"{'added' if created else 'removed'} menu item {menu_item.id}"
        )
        return created

    @staticmethod
    def list_for_student(student):
        return MenuItem.objects.filter(favourited_by__student=student).order_by("category", "name")
