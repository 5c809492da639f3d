from django.conf import settings
from django.db import models
from django.utils.translation import gettext_lazy as _


class CartItem(models.Model):
    """
    One menu item in a student's cart.

    The quantity is checked against stock when written but not kept in
    sync afterwards; checkout re-validates it against current stock.
    """

    student = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="cart_items",
    )
    menu_item = models.ForeignKey(
        "inventory.MenuItem",
        on_delete=models.CASCADE,
        related_name="cart_entries",
    )
    quantity = models.PositiveIntegerField(default=1)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Cart Item")
        verbose_name_plural = _("Cart Items")
        ordering = ["created_at", "id"]
        constraints = [
            models.UniqueConstraint(
                fields=["student", "menu_item"], name="unique_cart_item_per_student"
            ),
        ]

    def __str__(self):
        return f"{self.quantity} x {self.menu_item.name}"

    @property
    def line_total(self):
        return self.menu_item.price * self.quantity
