from decimal import Decimal
from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models
from django.utils.translation import gettext_lazy as _


class MenuItem(models.Model):
    """
    A sellable canteen item together with its on-hand stock.

    ``quantity`` is only ever lowered by order completion (see
    ``InventoryService.decrement_stock``) and raised by staff edits.
    ``is_available`` is an independent switch: an item can be in stock
    but hidden, or available with zero stock (shown as out of stock).
    """

    class StockStatus(models.TextChoices):
        IN_STOCK = "IN_STOCK", _("In Stock")
        LIMITED_STOCK = "LIMITED_STOCK", _("Limited Stock")
        OUT_OF_STOCK = "OUT_OF_STOCK", _("Out of Stock")

    name = models.CharField(max_length=150)
    description = models.TextField(blank=True)
    category = models.CharField(max_length=100, blank=True, db_index=True)
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
    )
    quantity = models.PositiveIntegerField(
        default=0, help_text=_("Units currently in stock.")
    )
    low_stock_threshold = models.PositiveIntegerField(
        default=10,
        help_text=_("Stock below this level is reported as limited."),
    )
    is_available = models.BooleanField(default=True, db_index=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Menu Item")
        verbose_name_plural = _("Menu Items")
        ordering = ["category", "name"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(quantity__gte=0),
                name="menu_item_quantity_non_negative",
            ),
        ]

    def __str__(self):
        return self.name

    @property
    def stock_status(self):
        if self.quantity == 0:
            return self.StockStatus.OUT_OF_STOCK
        if self.quantity < self.low_stock_threshold:
            return self.StockStatus.LIMITED_STOCK
        return self.StockStatus.IN_STOCK


class Favourite(models.Model):
    """A menu item a student has starred."""

    student = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="favourites",
    )
    menu_item = models.ForeignKey(
        MenuItem,
        on_delete=models.CASCADE,
        related_name="favourited_by",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = _("Favourite")
        verbose_name_plural = _("Favourites")
        constraints = [
            models.UniqueConstraint(
                fields=["student", "menu_item"], name="unique_favourite_per_student"
            ),
        ]

    def __str__(self):
        return f"{self.student_id} -> {self.menu_item_id}"
