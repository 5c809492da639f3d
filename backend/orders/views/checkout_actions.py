from rest_framework import status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response
import logging

from cart.exceptions import CartError
from inventory.exceptions import InventoryError
from timeslots.exceptions import SlotUnavailableError
from orders.serializers import (
    CheckoutSerializer,
    CompleteOrderSerializer,
    CancelReservationSerializer,
    OrderSerializer,
)
from orders.services import CheckoutService

logger = logging.getLogger(__name__)


class CheckoutActionsMixin:
    """
    Mixin for the checkout flow: pre-check, completion and seat release.

    This mixin provides action methods for OrderViewSet.
    """

    @action(detail=False, methods=["post"])
    def checkout(self, request: Request) -> Response:
        """
        POST /api/orders/checkout/

        Advisory slot check before payment. The seat is not taken here.
        """
        serializer = CheckoutSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        slot_id = serializer.validated_data["slot_id"]

        try:
            result = CheckoutService.validate_checkout(slot_id)
        except SlotUnavailableError as e:
            code = (
                status.HTTP_404_NOT_FOUND
                if e.reason == SlotUnavailableError.NOT_FOUND
                else status.HTTP_400_BAD_REQUEST
            )
            return Response({"message": str(e)}, status=code)
        except Exception as e:
            logger.error(f"Checkout validation error for slot {slot_id}: {e}", exc_info=True)
            return Response(
                {"message": "Server error during checkout validation"},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )
        return Response(result)

    @action(detail=False, methods=["post"])
    def complete(self, request: Request) -> Response:
        """
        POST /api/orders/complete/

        Takes a seat in the slot and turns the cart into a paid order, all
        or nothing.
        """
        serializer = CompleteOrderSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        slot_id = serializer.validated_data["slot_id"]

        try:
            order = CheckoutService.complete_order(
                request.user,
                slot_id,
                serializer.validated_data.get("order_notes"),
            )
        except (SlotUnavailableError, CartError) as e:
            logger.info(f"Order completion rejected for student {request.user.id}, slot {slot_id}: {e}")
            return Response({"message": str(e)}, status=status.HTTP_400_BAD_REQUEST)
        except InventoryError as e:
            logger.info(f"Order completion stock conflict for student {request.user.id}: {e}")
            return Response({"message": str(e)}, status=status.HTTP_409_CONFLICT)
        except Exception as e:
            logger.error(
                f"Order completion error for student {request.user.id}, slot {slot_id}: {e}",
                exc_info=True,
            )
            return Response(
                {"message": "Server error during order completion"},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        return Response(
            {
                "success": True,
                "message": "Order completed successfully",
                "order_id": order.id,
                "order": OrderSerializer(order).data,
            },
            status=status.HTTP_201_CREATED,
        )

    @action(detail=False, methods=["post"])
    def cancel(self, request: Request) -> Response:
        """
        POST /api/orders/cancel/

        Gives one seat back to a slot. Does not change any order; cancel a
        placed order through the status endpoint.
        """
        serializer = CancelReservationSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        if not CheckoutService.cancel_reservation(serializer.validated_data["slot_id"]):
            return Response(
                {"message": "Could not decrease order count (already at zero or slot missing)"},
                status=status.HTTP_400_BAD_REQUEST,
            )
        return Response(
            {"success": True, "message": "Order cancelled successfully and slot capacity restored"}
        )
