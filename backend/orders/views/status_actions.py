from rest_framework import status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response
import logging

from orders.exceptions import OrderError, OrderNotFoundError
from orders.serializers import OrderSerializer, UpdateOrderStatusSerializer
from orders.services import OrderStatusService

logger = logging.getLogger(__name__)


class StatusActionsMixin:
    """
    Mixin for order status transition actions

    This mixin provides action methods for OrderViewSet.
    """

    @action(detail=True, methods=["patch"], url_path="status")
    def update_status(self, request: Request, pk=None) -> Response:
        """
        PATCH /api/orders/{id}/status/

        Moves the order through the fulfilment states. Cancelling also
        frees the order's pickup slot seat.
        """
        serializer = UpdateOrderStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        new_status = serializer.validated_data["status"]

        try:
            order = OrderStatusService.set_status(pk, new_status)
        except OrderNotFoundError as e:
            return Response({"message": str(e)}, status=status.HTTP_404_NOT_FOUND)
        except OrderError as e:
            return Response({"message": str(e)}, status=status.HTTP_400_BAD_REQUEST)
        except Exception as e:
            logger.error(f"Update order status error for order {pk}: {e}", exc_info=True)
            return Response(
                {"message": "Server error during status update"},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        return Response(
            {
                "success": True,
                "message": f"Order status updated to {new_status}",
                "order": OrderSerializer(order).data,
            }
        )
