from django.contrib import admin
from .models import Order, OrderItem


class OrderItemInline(admin.TabularInline):
    model = OrderItem
    extra = 0
    readonly_fields = ("menu_item", "quantity", "price_at_order")
    can_delete = False


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    list_display = ("id", "student", "slot", "status", "total_amount", "is_student_hidden", "created_at")
    list_filter = ("status", "is_student_hidden")
    search_fields = ("id", "student__email", "student__student_number")
    raw_id_fields = ("student", "slot")
    # Totals and lines are fixed at checkout
    readonly_fields = ("total_amount", "created_at", "updated_at")
    inlines = [OrderItemInline]
