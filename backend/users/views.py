from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework_simplejwt.views import TokenObtainPairView, TokenRefreshView
import logging

from .serializers import (
    UserSerializer,
    CanteenTokenObtainPairSerializer,
    CanteenTokenRefreshSerializer,
)

logger = logging.getLogger(__name__)


class LoginView(TokenObtainPairView):
    """POST /api/auth/token/ - exchange email + password for a bearer token pair."""

    permission_classes = [AllowAny]
    serializer_class = CanteenTokenObtainPairSerializer


class RefreshView(TokenRefreshView):
    permission_classes = [AllowAny]
    serializer_class = CanteenTokenRefreshSerializer


class CurrentUserView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        return Response(UserSerializer(request.user).data)
