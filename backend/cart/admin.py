from django.contrib import admin
from .models import CartItem


@admin.register(CartItem)
class CartItemAdmin(admin.ModelAdmin):
    list_display = ("student", "menu_item", "quantity", "updated_at")
    search_fields = ("student__email", "menu_item__name")
    raw_id_fields = ("student", "menu_item")
