from rest_framework import status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response
import logging

from orders.exceptions import OrderError, OrderNotFoundError
from orders.serializers import OrderSerializer
from orders.services import OrderLedgerService

logger = logging.getLogger(__name__)


class LedgerActionsMixin:
    """
    Mixin for order history, staff listing and revenue figures.

    This mixin provides action methods for OrderViewSet.
    """

    @action(detail=False, methods=["get"])
    def staff(self, request: Request) -> Response:
        """
        GET /api/orders/staff/?status=pending|preparing|ready|completed|<RAW>

        Every order by pickup time. Staff see orders students have hidden.
        """
        queryset = self.filter_queryset(OrderLedgerService.get_staff_orders())
        return Response(OrderSerializer(queryset, many=True).data)

    @action(detail=False, methods=["get"])
    def revenue(self, request: Request) -> Response:
        """GET /api/orders/revenue/?month=1-12|all&year=YYYY"""
        try:
            stats = OrderLedgerService.get_revenue_stats(
                month=request.query_params.get("month"),
                year=request.query_params.get("year"),
            )
        except OrderError as e:
            return Response({"message": str(e)}, status=status.HTTP_400_BAD_REQUEST)
        return Response(stats)

    @action(detail=False, methods=["get"])
    def spending(self, request: Request) -> Response:
        """GET /api/orders/spending/"""
        return Response(OrderLedgerService.get_student_spending(request.user))

    @action(detail=True, methods=["get", "patch"])
    def hide(self, request: Request, pk=None) -> Response:
        """
        GET|PATCH /api/orders/{id}/hide/

        Hides the order from the student's own history only.
        """
        try:
            OrderLedgerService.hide_order_for_student(request.user, pk)
        except OrderNotFoundError as e:
            return Response({"message": str(e)}, status=status.HTTP_404_NOT_FOUND)
        return Response({"success": True, "message": "Order hidden from your history"})
