from django.db import models
from django.utils.translation import gettext_lazy as _


class TimeSlot(models.Model):
    """
    A daily pickup window with a bounded number of orders.

    ``current_orders`` is a reservation counter owned by
    ``TimeSlotService``; it is only ever changed through conditional
    UPDATE statements so that ``0 <= current_orders <= max_orders`` holds
    under concurrent checkouts.
    """

    start_time = models.TimeField(help_text=_("Start of the pickup window (inclusive)"))
    end_time = models.TimeField(help_text=_("End of the pickup window (exclusive)"))
    max_orders = models.PositiveIntegerField(help_text=_("Maximum orders accepted for this slot"))
    current_orders = models.PositiveIntegerField(
        default=0, help_text=_("Orders currently booked against this slot")
    )
    is_active = models.BooleanField(default=True, db_index=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Time Slot")
        verbose_name_plural = _("Time Slots")
        ordering = ["start_time"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(start_time__lt=models.F("end_time")),
                name="timeslot_start_before_end",
            ),
            models.CheckConstraint(
                condition=models.Q(current_orders__gte=0),
                name="timeslot_current_orders_non_negative",
            ),
        ]
        indexes = [
            models.Index(fields=["is_active", "start_time"], name="timeslot_active_start_idx"),
        ]

    def __str__(self):
        return f"{self.start_time.strftime('%H:%M')} - {self.end_time.strftime('%H:%M')}"

    @property
    def remaining_capacity(self):
        return max(self.max_orders - self.current_orders, 0)

    @property
    def is_full(self):
        return self.current_orders >= self.max_orders
