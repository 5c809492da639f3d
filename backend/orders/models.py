from decimal import Decimal
from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models
from django.utils.translation import gettext_lazy as _


class Order(models.Model):
    """
    An order header.

    Written once by ``CheckoutService.complete_order`` together with its
    lines; afterwards only ``status`` (via ``OrderStatusService``) and
    ``is_student_hidden`` change.
    """

    class OrderStatus(models.TextChoices):
        PAID = "PAID", _("Paid")
        PREPARING = "PREPARING", _("Preparing")
        READY = "READY", _("Ready")
        COMPLETED = "COMPLETED", _("Completed")
        CANCELLED = "CANCELLED", _("Cancelled")

    # Statuses counted as sales in revenue and spending figures
    REVENUE_STATUSES = (
        OrderStatus.PAID,
        OrderStatus.PREPARING,
        OrderStatus.READY,
        OrderStatus.COMPLETED,
    )
    TERMINAL_STATUSES = (OrderStatus.COMPLETED, OrderStatus.CANCELLED)

    student = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="orders",
    )
    slot = models.ForeignKey(
        "timeslots.TimeSlot",
        on_delete=models.PROTECT,
        related_name="orders",
    )
    total_amount = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=Decimal("0.00"),
        validators=[MinValueValidator(Decimal("0.00"))],
    )
    status = models.CharField(
        max_length=20,
        choices=OrderStatus.choices,
        default=OrderStatus.PAID,
        db_index=True,
    )
    order_notes = models.TextField(blank=True, null=True)
    is_student_hidden = models.BooleanField(
        default=False,
        help_text=_("Hidden from the student's own order history; staff still see it."),
    )

    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Order")
        verbose_name_plural = _("Orders")
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["student", "is_student_hidden"], name="order_student_hidden_idx"),
            models.Index(fields=["status", "created_at"], name="order_status_created_idx"),
        ]

    def __str__(self):
        return f"Order #{self.id} ({self.status})"

    @property
    def is_terminal(self):
        return self.status in self.TERMINAL_STATUSES


class OrderItem(models.Model):
    """
    One order line. ``price_at_order`` is the unit price captured at
    checkout and is never recomputed from the menu.
    """

    order = models.ForeignKey(Order, on_delete=models.CASCADE, related_name="items")
    menu_item = models.ForeignKey(
        "inventory.MenuItem",
        on_delete=models.PROTECT,
        related_name="order_lines",
    )
    quantity = models.PositiveIntegerField()
    price_at_order = models.DecimalField(max_digits=10, decimal_places=2)

    class Meta:
        verbose_name = _("Order Item")
        verbose_name_plural = _("Order Items")
        ordering = ["id"]

    def __str__(self):
        return f"{self.quantity} x {self.menu_item.name} @ {self.price_at_order}"

    @property
    def subtotal(self):
        return self.price_at_order * self.quantity
