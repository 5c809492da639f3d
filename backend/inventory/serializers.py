from rest_framework import serializers
from .models import MenuItem


class MenuItemSerializer(serializers.ModelSerializer):
    """Menu item with its derived stock status."""

    stock_status = serializers.CharField(read_only=True)

    class Meta:
        model = MenuItem
        fields = [
            "id",
            "name",
            "description",
            "category",
            "price",
            "quantity",
            "low_stock_threshold",
            "is_available",
            "stock_status",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "stock_status", "created_at", "updated_at"]


class ToggleFavouriteSerializer(serializers.Serializer):
    menu_item_id = serializers.IntegerField(
        error_messages={"required": "Menu item ID is required"}
    )
