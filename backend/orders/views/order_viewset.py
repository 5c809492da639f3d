from rest_framework import viewsets, status
from rest_framework.request import Request
from rest_framework.response import Response
from django_filters.rest_framework import DjangoFilterBackend
import logging

from orders.exceptions import OrderNotFoundError
from orders.filters import OrderFilter
from orders.models import Order
from orders.serializers import OrderSerializer
from orders.services import OrderLedgerService
from users.permissions import IsStudent, IsStaff, IsStudentOrStaff

logger = logging.getLogger(__name__)


# Import action mixins
from .checkout_actions import CheckoutActionsMixin
from .status_actions import StatusActionsMixin
from .ledger_actions import LedgerActionsMixin


class OrderViewSet(
    CheckoutActionsMixin,
    StatusActionsMixin,
    LedgerActionsMixin,
    viewsets.GenericViewSet,
):
    """
    ViewSet for the canteen order ledger.

    This viewset combines multiple mixins to provide:
    - Checkout flow (CheckoutActionsMixin)
    - Status transitions (StatusActionsMixin)
    - Histories and revenue (LedgerActionsMixin)
    """

    queryset = Order.objects.all()
    serializer_class = OrderSerializer
    filter_backends = [DjangoFilterBackend]
    filterset_class = OrderFilter
    lookup_value_regex = r"\d+"

    # Role required per action; anything unlisted needs a canteen identity
    action_permissions = {
        "list": [IsStudent],
        "checkout": [IsStudent],
        "complete": [IsStudent],
        "spending": [IsStudent],
        "hide": [IsStudent],
        "staff": [IsStaff],
        "update_status": [IsStaff],
        "revenue": [IsStaff],
        "cancel": [IsStudentOrStaff],
        "retrieve": [IsStudentOrStaff],
    }

    def get_permissions(self):
        classes = self.action_permissions.get(self.action, [IsStudentOrStaff])
        return [permission() for permission in classes]

    def list(self, request: Request) -> Response:
        """GET /api/orders/ - the student's own visible orders, newest first"""
        orders = OrderLedgerService.get_student_orders(request.user)
        return Response(OrderSerializer(orders, many=True).data)

    def retrieve(self, request: Request, pk=None) -> Response:
        """GET /api/orders/{id}/ - receipt; students only see their own"""
        try:
            order = OrderLedgerService.get_order_details(pk, request.user)
        except OrderNotFoundError as e:
            return Response({"message": str(e)}, status=status.HTTP_404_NOT_FOUND)
        return Response(OrderSerializer(order).data)
