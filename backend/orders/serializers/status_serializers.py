from rest_framework import serializers
from orders.models import Order


class UpdateOrderStatusSerializer(serializers.Serializer):
    """
    Validates the requested status value. Whether the transition is
    allowed from the current status is decided by OrderStatusService.
    """

    status = serializers.ChoiceField(
        choices=Order.OrderStatus.choices,
        error_messages={"invalid_choice": "Invalid status"},
    )
