from rest_framework import serializers

from .models import TimeSlot

TIME_INPUT_FORMATS = ["%H:%M:%S", "%H:%M"]


class TimeSlotSerializer(serializers.ModelSerializer):
    start_time = serializers.TimeField(format="%H:%M:%S", input_formats=TIME_INPUT_FORMATS)
    end_time = serializers.TimeField(format="%H:%M:%S", input_formats=TIME_INPUT_FORMATS)
    remaining_capacity = serializers.IntegerField(read_only=True)

    class Meta:
        model = TimeSlot
        fields = [
            "id",
            "start_time",
            "end_time",
            "max_orders",
            "current_orders",
            "remaining_capacity",
            "is_active",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "current_orders", "is_active", "created_at", "updated_at"]

    def validate_max_orders(self, value):
        if value < 1:
            raise serializers.ValidationError("max_orders must be at least 1")
        return value


class TimeSlotUpdateSerializer(serializers.Serializer):
    max_orders = serializers.IntegerField(required=False, min_value=1)
    is_active = serializers.BooleanField(required=False)

    def validate(self, attrs):
        if not attrs:
            raise serializers.ValidationError("Provide max_orders or is_active")
        return attrs


class AvailableSlotSerializer(serializers.Serializer):
    """Projection returned by ``TimeSlotService.list_available``."""

    id = serializers.IntegerField(source="slot.id")
    start_time = serializers.TimeField(source="slot.start_time", format="%H:%M:%S")
    end_time = serializers.TimeField(source="slot.end_time", format="%H:%M:%S")
    max_orders = serializers.IntegerField(source="slot.max_orders")
    current_orders = serializers.IntegerField(source="slot.current_orders")
    remaining_capacity = serializers.IntegerField()
    status = serializers.CharField()
