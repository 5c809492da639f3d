from rest_framework import serializers
from rest_framework_simplejwt.serializers import (
    TokenObtainPairSerializer,
    TokenRefreshSerializer,
)
from .models import User


class UserSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = [
            "id",
            "email",
            "name",
            "student_number",
            "role",
            "date_joined",
        ]
        read_only_fields = fields


class CanteenTokenObtainPairSerializer(TokenObtainPairSerializer):
    """Issues access/refresh tokens carrying the caller's role claim."""

    @classmethod
    def get_token(cls, user):
        token = super().get_token(user)
        token["role"] = user.role
        token["name"] = user.name
        return token

    def validate(self, attrs):
        data = super().validate(attrs)
        data["user"] = UserSerializer(self.user).data
        return data


class CanteenTokenRefreshSerializer(TokenRefreshSerializer):
    pass


class StudentSummarySerializer(serializers.ModelSerializer):
    """Directory row for staff, carrying the annotated order totals."""

    total_orders = serializers.IntegerField(read_only=True)
    total_spent = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)

    class Meta:
        model = User
        fields = [
            "id",
            "student_number",
            "name",
            "email",
            "date_joined",
            "total_orders",
            "total_spent",
        ]
        read_only_fields = fields


class StudentHistoryOrderSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    total_amount = serializers.DecimalField(max_digits=10, decimal_places=2)
    status = serializers.CharField()
    created_at = serializers.DateTimeField()
    start_time = serializers.TimeField(source="slot.start_time", format="%H:%M:%S")
    end_time = serializers.TimeField(source="slot.end_time", format="%H:%M:%S")
