from rest_framework import serializers
from orders.models import Order, OrderItem


class OrderItemSerializer(serializers.ModelSerializer):
    menu_item_id = serializers.IntegerField(read_only=True)
    name = serializers.CharField(source="menu_item.name", read_only=True)
    subtotal = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)

    class Meta:
        model = OrderItem
        fields = ["id", "menu_item_id", "name", "quantity", "price_at_order", "subtotal"]
        read_only_fields = fields


class OrderSerializer(serializers.ModelSerializer):
    """
    Order receipt: header, pickup window, student and lines with item names.
    """

    items = OrderItemSerializer(many=True, read_only=True)
    slot_id = serializers.IntegerField(read_only=True)
    start_time = serializers.TimeField(source="slot.start_time", format="%H:%M:%S", read_only=True)
    end_time = serializers.TimeField(source="slot.end_time", format="%H:%M:%S", read_only=True)
    student_id = serializers.IntegerField(read_only=True)
    student_name = serializers.CharField(source="student.display_name", read_only=True)
    student_identifier = serializers.CharField(source="student.student_number", read_only=True)

    class Meta:
        model = Order
        fields = [
            "id",
            "student_id",
            "student_name",
            "student_identifier",
            "slot_id",
            "start_time",
            "end_time",
            "total_amount",
            "status",
            "order_notes",
            "is_student_hidden",
            "created_at",
            "updated_at",
            "items",
        ]
        read_only_fields = fields


class CheckoutSerializer(serializers.Serializer):
    slot_id = serializers.IntegerField(
        error_messages={"required": "Time slot is required for checkout"}
    )


class CompleteOrderSerializer(serializers.Serializer):
    slot_id = serializers.IntegerField(
        error_messages={"required": "Time slot is required to complete order"}
    )
    order_notes = serializers.CharField(
        required=False, allow_blank=True, allow_null=True, max_length=1000
    )


class CancelReservationSerializer(serializers.Serializer):
    slot_id = serializers.IntegerField(
        error_messages={"required": "Time slot is required to cancel"}
    )
