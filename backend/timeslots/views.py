from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.response import Response
import logging

from users.permissions import IsStaff, IsStudentOrStaff
from .exceptions import (
    SlotNotFoundError,
    SlotOverlapError,
    TimeSlotError,
)
from .models import TimeSlot
from .serializers import (
    TimeSlotSerializer,
    TimeSlotUpdateSerializer,
    AvailableSlotSerializer,
)
from .services import TimeSlotService

logger = logging.getLogger(__name__)


class TimeSlotViewSet(viewsets.GenericViewSet):
    """
    Pickup slot management.

    Staff create, edit, reset and delete slots. Any signed-in canteen user
    can read the available-capacity projection.
    """

    queryset = TimeSlot.objects.all().order_by("start_time")
    serializer_class = TimeSlotSerializer
    permission_classes = [IsStaff]
    lookup_value_regex = r"\d+"

    def get_permissions(self):
        if self.action == "available":
            return [IsStudentOrStaff()]
        return super().get_permissions()

    def _overlap_response(self, exc: SlotOverlapError):
        return Response(
            {
                "message": str(exc),
                "conflicting_slot": TimeSlotSerializer(exc.conflicting_slot).data,
            },
            status=status.HTTP_409_CONFLICT,
        )

    def list(self, request):
        serializer = self.get_serializer(self.get_queryset(), many=True)
        return Response(serializer.data)

    def retrieve(self, request, pk=None):
        serializer = self.get_serializer(self.get_object())
        return Response(serializer.data)

    def create(self, request):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        try:
            slot = TimeSlotService.create_slot(
                data["start_time"], data["end_time"], data["max_orders"]
            )
        except SlotOverlapError as e:
            return self._overlap_response(e)
        except TimeSlotError as e:
            return Response({"message": str(e)}, status=status.HTTP_400_BAD_REQUEST)
        except Exception as e:
            logger.error(f"Error creating time slot: {e}", exc_info=True)
            return Response(
                {"message": "Server error during time slot creation"},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )
        return Response(TimeSlotSerializer(slot).data, status=status.HTTP_201_CREATED)

    def update(self, request, pk=None):
        serializer = TimeSlotUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            slot = TimeSlotService.update_slot(pk, **serializer.validated_data)
        except SlotNotFoundError as e:
            return Response({"message": str(e)}, status=status.HTTP_404_NOT_FOUND)
        except SlotOverlapError as e:
            return self._overlap_response(e)
        except TimeSlotError as e:
            return Response({"message": str(e)}, status=status.HTTP_400_BAD_REQUEST)
        except Exception as e:
            logger.error(f"Error updating time slot {pk}: {e}", exc_info=True)
            return Response(
                {"message": "Server error during time slot update"},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )
        return Response(TimeSlotSerializer(slot).data)

    def partial_update(self, request, pk=None):
        return self.update(request, pk=pk)

    def destroy(self, request, pk=None):
        try:
            TimeSlotService.delete_slot(pk)
        except SlotNotFoundError as e:
            return Response({"message": str(e)}, status=status.HTTP_404_NOT_FOUND)
        except TimeSlotError as e:
            return Response({"message": str(e)}, status=status.HTTP_400_BAD_REQUEST)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=False, methods=["get"])
    def available(self, request):
        """GET /api/timeslots/available/"""
        slots = TimeSlotService.list_available()
        return Response(AvailableSlotSerializer(slots, many=True).data)

    @action(detail=True, methods=["post"])
    def reset(self, request, pk=None):
        """POST /api/timeslots/{id}/reset/"""
        try:
            slot = TimeSlotService.reset_count(pk)
        except SlotNotFoundError as e:
            return Response({"message": str(e)}, status=status.HTTP_404_NOT_FOUND)
        logger.info(f"Slot {pk} counter reset by staff {request.user.id}")
        return Response(
            {"message": "Current orders reset to 0", "slot": TimeSlotSerializer(slot).data}
        )
