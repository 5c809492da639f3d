"""
In-app notification sink.

Notifications are best-effort: every write here is isolated in its own
transaction and any failure is logged and swallowed, so a broken
notification can never fail or roll back the order that triggered it.
"""
from django.conf import settings
from django.db import transaction
import logging

from users.models import User
from .models import Notification

logger = logging.getLogger(__name__)


STATUS_MESSAGES = {
    "PREPARING": "Your order #{order_id} is being prepared.",
    "READY": "Your order #{order_id} is READY for pickup!",
    "COMPLETED": "Your order #{order_id} has been COMPLETED. Enjoy your meal!",
    "CANCELLED": "Your order #{order_id} has been cancelled.",
}


class NotificationService:

    @staticmethod
    def _create(**fields):
        """Insert one notification, returning None instead of raising."""
        try:
            with transaction.atomic():
                return Notification.objects.create(**fields)
        except Exception as e:
            logger.error(
                f"[NotificationService] Failed to create notification for recipient "
                f"{getattr(fields.get('recipient'), 'id', None)} (order {fields.get('order_id')}): {e}",
                exc_info=True,
            )
            return None

    @staticmethod
    def notify_order_placed(order_id):
        """
        Tell the student their order went through and every active staff
        member that a new order arrived.

        Returns:
            list of the notifications that were created
        """
        from orders.models import Order

        try:
            order = Order.objects.select_related("student").get(pk=order_id)
        except Exception as e:
            logger.error(f"[NotificationService.notify_order_placed] Cannot load order {order_id}: {e}", exc_info=True)
            return []

        created = [
            NotificationService._create(
                recipient=order.student,
                recipient_type=Notification.RecipientType.STUDENT,
                order_id=order.id,
                message=f"Your order #{order.id} has been placed successfully.",
            )
        ]

        student_name = order.student.display_name or "A student"
        staff_message = f"New order #{order.id} received from {student_name}!"
        for staff in User.objects.canteen_staff():
            created.append(
                NotificationService._create(
                    recipient=staff,
                    recipient_type=Notification.RecipientType.STAFF,
                    order_id=order.id,
                    message=staff_message,
                )
            )

        created = [n for n in created if n is not None]
        logger.info(f"[NotificationService.notify_order_placed] Order {order.id}: {len(created)} notifications")
        return created

    @staticmethod
    def notify_status_change(order_id, status):
        """One student-facing notification for a fulfilment status change."""
        if not settings.CANTEEN.get("ORDER_STATUS_NOTIFICATIONS", True):
            return None

        template = STATUS_MESSAGES.get(status)
        if template is None:
            return None

        from orders.models import Order

        try:
            student = Order.objects.select_related("student").get(pk=order_id).student
        except Exception as e:
            logger.error(f"[NotificationService.notify_status_change] Cannot load order {order_id}: {e}", exc_info=True)
            return None

        return NotificationService._create(
            recipient=student,
            recipient_type=Notification.RecipientType.STUDENT,
            order_id=order_id,
            message=template.format(order_id=order_id),
        )

    @staticmethod
    def notify_feedback_received(feedback_id):
        """
        Tell every active staff member that a student left feedback. The
        message quotes the first 30 characters of the comment.

        Returns:
            list of the notifications that were created
        """
        from feedback.models import Feedback

        try:
            feedback = Feedback.objects.select_related("student").get(pk=feedback_id)
        except Exception as e:
            logger.error(
                f"[NotificationService.notify_feedback_received] Cannot load feedback {feedback_id}: {e}",
                exc_info=True,
            )
            return []

        excerpt = feedback.message[:30] + ("..." if len(feedback.message) > 30 else "")
        message = f'New feedback received from {feedback.student.display_name}: "{excerpt}"'

        created = [
            NotificationService._create(
                recipient=staff,
                recipient_type=Notification.RecipientType.STAFF,
                type=Notification.NotificationType.FEEDBACK,
                message=message,
            )
            for staff in User.objects.canteen_staff()
        ]
        created = [n for n in created if n is not None]
        logger.info(
            f"[NotificationService.notify_feedback_received] Feedback {feedback.id}: {len(created)} notifications"
        )
        return created

    # ------------------------------------------------------------------
    # Recipient reads
    # ------------------------------------------------------------------

    @staticmethod
    def for_user(user):
        return Notification.objects.filter(recipient=user)

    @staticmethod
    def latest_for_user(user):
        limit = settings.CANTEEN.get("MAX_NOTIFICATIONS", 50)
        return NotificationService.for_user(user).order_by("-created_at", "-id")[:limit]

    @staticmethod
    def unread_count(user) -> int:
        return NotificationService.for_user(user).filter(is_read=False).count()

    @staticmethod
    def mark_read(user, notification_id) -> bool:
        return bool(
            NotificationService.for_user(user).filter(pk=notification_id).update(is_read=True)
        )

    @staticmethod
    def mark_all_read(user) -> int:
        return NotificationService.for_user(user).filter(is_read=False).update(is_read=True)
