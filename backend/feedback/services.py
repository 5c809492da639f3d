"""
Student feedback: submission with a staff-wide notification, and the
staff review queue.
"""
from functools import partial
from django.db import transaction
from typing import Optional
import logging

from notifications.services import NotificationService
from .exceptions import FeedbackError, FeedbackNotFoundError
from .models import Feedback

logger = logging.getLogger(__name__)


class FeedbackService:

    @staticmethod
    def submit_feedback(student, message: str, rating: Optional[int] = None) -> Feedback:
        """
        Store a student's feedback and tell every active staff member about
        it once the row is committed.

        Raises:
            FeedbackError: empty message or a rating outside 1-5
        """
        message = (message or "").strip()
        if not message:
            raise FeedbackError("Feedback message is required")
        if rating is None:
            rating = 5
        if not 1 <= rating <= 5:
            raise FeedbackError("Rating must be between 1 and 5")

        with transaction.atomic():
            feedback = Feedback.objects.create(student=student, message=message, rating=rating)
            transaction.on_commit(
                partial(NotificationService.notify_feedback_received, feedback.id)
            )

        logger.info(
            f"[FeedbackService.submit_feedback] Feedback {feedback.id} from student {student.id} ({rating}/5)"
        )
        return feedback

    @staticmethod
    def list_feedback():
        return Feedback.objects.select_related("student").order_by("-created_at", "-id")

    @staticmethod
    def delete_feedback(feedback_id, deleted_by=None) -> None:
        deleted, _ = Feedback.objects.filter(pk=feedback_id).delete()
        if not deleted:
            logger.warning(f"[FeedbackService.delete_feedback] No feedback found with id {feedback_id}")
            raise FeedbackNotFoundError(feedback_id)
        logger.info(
            f"[FeedbackService.delete_feedback] Feedback {feedback_id} deleted by "
            f"{getattr(deleted_by, 'id', None)}"
        )
