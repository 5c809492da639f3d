"""
Read paths over the order ledger: receipts, histories and revenue figures.
"""
from decimal import Decimal
from django.db.models import Sum, Count
from django.db.models.functions import ExtractDay, ExtractMonth
from django.utils import timezone
import logging

from orders.exceptions import OrderError, OrderNotFoundError
from orders.models import Order, OrderItem

logger = logging.getLogger(__name__)


class OrderLedgerService:

    @staticmethod
    def _with_lines(queryset):
        return queryset.select_related("student", "slot").prefetch_related("items__menu_item")

    @staticmethod
    def get_order_details(order_id, user) -> Order:
        """
        A single order with its lines. Students can only see their own
        orders; staff can see any.
        """
        queryset = OrderLedgerService._with_lines(Order.objects.filter(pk=order_id))
        if not user.is_canteen_staff:
            queryset = queryset.filter(student=user)
        order = queryset.first()
        if order is None:
            raise OrderNotFoundError(order_id)
        return order

    @staticmethod
    def get_student_orders(student):
        """The student's own order history, minus orders they have hidden."""
        return OrderLedgerService._with_lines(
            Order.objects.filter(student=student, is_student_hidden=False)
        ).order_by("-created_at", "-id")

    @staticmethod
    def get_staff_orders():
        """
        Every order, hidden or not, by pickup time. Status filtering is
        applied by ``OrderFilter``.
        """
        return OrderLedgerService._with_lines(Order.objects.all()).order_by(
            "slot__start_time", "created_at", "id"
        )

    @staticmethod
    def hide_order_for_student(student, order_id) -> None:
        updated = Order.objects.filter(pk=order_id, student=student).update(is_student_hidden=True)
        if not updated:
            raise OrderNotFoundError(order_id, "Order not found or not authorized")
        logger.info(f"[OrderLedgerService.hide_order_for_student] Student {student.id} hid order {order_id}")

    @staticmethod
    def get_revenue_stats(month=None, year=None) -> dict:
        """
        Revenue for a month (breakdown by day) or a whole year (breakdown by
        month). Cancelled orders are excluded.

        Args:
            month: 1-12, or None / "all" for the whole year
            year: defaults to the current year
        """
        now = timezone.localtime()
        try:
            target_year = int(year) if year not in (None, "") else now.year
        except (TypeError, ValueError):
            raise OrderError("Invalid year")

        is_yearly = month in (None, "", "all")
        target_month = None
        if not is_yearly:
            try:
                target_month = int(month)
            except (TypeError, ValueError):
                raise OrderError("Invalid month")
            if not 1 <= target_month <= 12:
                raise OrderError("Invalid month")

        orders = Order.objects.filter(
            status__in=Order.REVENUE_STATUSES, created_at__year=target_year
        )
        if not is_yearly:
            orders = orders.filter(created_at__month=target_month)

        totals = orders.aggregate(total_orders=Count("id"), total_revenue=Sum("total_amount"))

        most_sold = (
            OrderItem.objects.filter(order__in=orders)
            .values("menu_item_id", "menu_item__name")
            .annotate(total_quantity=Sum("quantity"))
            .order_by("-total_quantity", "menu_item__name")
            .first()
        )

        bucket = ExtractMonth("created_at") if is_yearly else ExtractDay("created_at")
        breakdown = (
            orders.annotate(label=bucket)
            .values("label")
            .annotate(value=Sum("total_amount"))
            .order_by("label")
        )

        return {
            "month": "all" if is_yearly else target_month,
            "year": target_year,
            "total_orders": totals["total_orders"] or 0,
            "total_revenue": totals["total_revenue"] or Decimal("0.00"),
            "most_sold_item": (
                {
                    "id": most_sold["menu_item_id"],
                    "name": most_sold["menu_item__name"],
                    "total_quantity": most_sold["total_quantity"],
                }
                if most_sold
                else None
            ),
            "breakdown": [
                {"label": row["label"], "value": row["value"] or Decimal("0.00")}
                for row in breakdown
            ],
        }

    @staticmethod
    def get_student_spending(student) -> dict:
        """What the student spent today and this month, in local time."""
        today = timezone.localdate()
        orders = Order.objects.filter(student=student, status__in=Order.REVENUE_STATUSES)

        daily = orders.filter(created_at__date=today).aggregate(total=Sum("total_amount"))["total"]
        monthly = orders.filter(
            created_at__year=today.year, created_at__month=today.month
        ).aggregate(total=Sum("total_amount"))["total"]

        return {
            "daily_spending": daily or Decimal("0.00"),
            "monthly_spending": monthly or Decimal("0.00"),
        }
