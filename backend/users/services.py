"""
Staff-side student management: the student directory with order totals,
per-student order history and account removal.
"""
from decimal import Decimal
from django.db import transaction
from django.db.models import Count, DecimalField, Q, Sum, Value
from django.db.models.functions import Coalesce
from django.utils import timezone
import logging

from .exceptions import StudentNotFoundError
from .models import User

logger = logging.getLogger(__name__)


class StudentService:

    @staticmethod
    def list_students():
        """
        Active students, newest first, annotated with ``total_orders`` (every
        order placed) and ``total_spent`` (cancelled orders excluded).
        """
        from orders.models import Order

        return (
            User.objects.students()
            .filter(is_active=True)
            .annotate(
                total_orders=Count("orders"),
                total_spent=Coalesce(
                    Sum("orders__total_amount", filter=Q(orders__status__in=Order.REVENUE_STATUSES)),
                    Value(Decimal("0.00")),
                    output_field=DecimalField(max_digits=12, decimal_places=2),
                ),
            )
            .order_by("-date_joined", "-id")
        )

    @staticmethod
    def get_student(student_id) -> User:
        """Any student account, removed ones included."""
        student = User.objects.students().filter(pk=student_id).first()
        if student is None:
            raise StudentNotFoundError(student_id)
        return student

    @staticmethod
    def get_student_history(student_id) -> dict:
        """
        Every order the student placed, newest first. Orders the student hid
        from their own history are still listed here.
        """
        student = StudentService.get_student(student_id)
        orders = student.orders.select_related("slot").order_by("-created_at", "-id")
        return {"student": student, "orders": orders}

    @staticmethod
    @transaction.atomic
    def remove_student(student_id, removed_by=None) -> User:
        """
        Soft-delete a student account.

        The account is deactivated and its email and student number are
        suffixed so both can be registered again. Orders are kept for the
        ledger; the cart and favourites are dropped.
        """
        student = (
            User.objects.students()
            .select_for_update()
            .filter(pk=student_id, is_active=True)
            .first()
        )
        if student is None:
            raise StudentNotFoundError(student_id)

        suffix = f"_deleted_{int(timezone.now().timestamp())}"
        student.is_active = False
        student.email = f"{student.email[:254 - len(suffix)]}{suffix}"
        if student.student_number:
            student.student_number = f"{student.student_number[:50 - len(suffix)]}{suffix}"
        student.save(update_fields=["is_active", "email", "student_number", "updated_at"])

        student.cart_items.all().delete()
        student.favourites.all().delete()

        logger.info(
            f"[StudentService.remove_student] Student {student.id} removed by "
            f"{getattr(removed_by, 'id', None)}"
        )
        return student
