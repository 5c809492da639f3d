from rest_framework import viewsets, status
from rest_framework.response import Response
import logging

from users.permissions import IsStudentOrStaff
from .serializers import NotificationSerializer
from .services import NotificationService

logger = logging.getLogger(__name__)


class NotificationViewSet(viewsets.ViewSet):
    """The caller's own notifications, newest first."""

    permission_classes = [IsStudentOrStaff]

    def list(self, request):
        notifications = NotificationService.latest_for_user(request.user)
        return Response(NotificationSerializer(notifications, many=True).data)

    def unread_count(self, request):
        return Response({"count": NotificationService.unread_count(request.user)})

    def mark_read(self, request, pk=None):
        if not NotificationService.mark_read(request.user, pk):
            return Response({"message": "Notification not found"}, status=status.HTTP_404_NOT_FOUND)
        return Response({"success": True, "message": "Notification marked as read"})

    def mark_all_read(self, request):
        updated = NotificationService.mark_all_read(request.user)
        return Response({"success": True, "updated": updated})
