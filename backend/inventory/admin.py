from django.contrib import admin
from .models import Favourite, MenuItem


@admin.register(MenuItem)
class MenuItemAdmin(admin.ModelAdmin):
    list_display = (
        "name",
        "category",
        "price",
        "quantity",
        "low_stock_threshold",
        "stock_status",
        "is_available",
    )
    list_filter = ("is_available", "category")
    search_fields = ("name", "category")
    list_editable = ("quantity", "is_available")
    ordering = ("category", "name")


@admin.register(Favourite)
class FavouriteAdmin(admin.ModelAdmin):
    list_display = ("student", "menu_item", "created_at")
    search_fields = ("student__email", "menu_item__name")
    raw_id_fields = ("student", "menu_item")
