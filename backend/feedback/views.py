from rest_framework import viewsets, status
from rest_framework.response import Response
import logging

from users.permissions import IsStudent, IsStaff
from .exceptions import FeedbackError, FeedbackNotFoundError
from .serializers import FeedbackSerializer, SubmitFeedbackSerializer
from .services import FeedbackService

logger = logging.getLogger(__name__)


class FeedbackViewSet(viewsets.ViewSet):
    """
    Endpoints:
    - POST /api/feedback/submit/ - student submits feedback
    - GET /api/feedback/all/ - staff review queue, newest first
    - DELETE /api/feedback/{id}/ - staff removes an entry
    """

    action_permissions = {
        "submit": [IsStudent],
        "list": [IsStaff],
        "destroy": [IsStaff],
    }

    def get_permissions(self):
        classes = self.action_permissions.get(self.action, [IsStaff])
        return [permission() for permission in classes]

    def submit(self, request):
        serializer = SubmitFeedbackSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            feedback = FeedbackService.submit_feedback(
                request.user,
                serializer.validated_data["message"],
                serializer.validated_data.get("rating"),
            )
        except FeedbackError as e:
            return Response({"message": str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(
            {
                "message": "Feedback submitted successfully",
                "feedback": FeedbackSerializer(feedback).data,
            },
            status=status.HTTP_201_CREATED,
        )

    def list(self, request):
        return Response(FeedbackSerializer(FeedbackService.list_feedback(), many=True).data)

    def destroy(self, request, pk=None):
        try:
            FeedbackService.delete_feedback(pk, deleted_by=request.user)
        except FeedbackNotFoundError as e:
            return Response({"message": str(e)}, status=status.HTTP_404_NOT_FOUND)
        return Response({"message": "Feedback deleted successfully"})
