from django.conf import settings
from django.db import models
from django.utils.translation import gettext_lazy as _


class Notification(models.Model):
    """
    An in-app message for one recipient.

    Staff-wide events are fanned out to one row per active staff account so
    read state is tracked per person.
    """

    class RecipientType(models.TextChoices):
        STUDENT = "student", _("Student")
        STAFF = "staff", _("Staff")

    class NotificationType(models.TextChoices):
        ORDER = "ORDER", _("Order")
        FEEDBACK = "FEEDBACK", _("Feedback")

    recipient = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="notifications",
    )
    recipient_type = models.CharField(max_length=10, choices=RecipientType.choices)
    order = models.ForeignKey(
        "orders.Order",
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name="notifications",
    )
    message = models.TextField()
    type = models.CharField(
        max_length=20,
        choices=NotificationType.choices,
        default=NotificationType.ORDER,
    )
    is_read = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = _("Notification")
        verbose_name_plural = _("Notifications")
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["recipient", "is_read"], name="notification_unread_idx"),
        ]

    def __str__(self):
        return f"{self.recipient_type}:{self.recipient_id} {self.message[:40]}"
