from rest_framework import serializers
from .models import Notification


class NotificationSerializer(serializers.ModelSerializer):
    order_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = Notification
        fields = ["id", "recipient_type", "order_id", "message", "type", "is_read", "created_at"]
        read_only_fields = fields
