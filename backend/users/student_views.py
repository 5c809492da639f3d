from rest_framework import viewsets, status
from rest_framework.response import Response
import logging

from .exceptions import StudentNotFoundError
from .permissions import IsStaff
from .serializers import StudentHistoryOrderSerializer, StudentSummarySerializer
from .services import StudentService

logger = logging.getLogger(__name__)


class StudentViewSet(viewsets.ViewSet):
    """
    Staff view of student accounts.

    Endpoints:
    - GET /api/students/ - active students with order count and spend
    - GET /api/students/{id}/history/ - every order the student placed
    - DELETE /api/students/{id}/ - deactivate the account
    """

    permission_classes = [IsStaff]

    def list(self, request):
        return Response(StudentSummarySerializer(StudentService.list_students(), many=True).data)

    def history(self, request, pk=None):
        try:
            history = StudentService.get_student_history(pk)
        except StudentNotFoundError as e:
            return Response({"message": str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response({
            "student_name": history["student"].display_name,
            "orders": StudentHistoryOrderSerializer(history["orders"], many=True).data,
        })

    def destroy(self, request, pk=None):
        try:
            StudentService.remove_student(pk, removed_by=request.user)
        except StudentNotFoundError as e:
            return Response({"message": str(e)}, status=status.HTTP_404_NOT_FOUND)
        return Response({"message": "Student deleted successfully"})
