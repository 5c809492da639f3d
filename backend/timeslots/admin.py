from django.contrib import admin
from .models import TimeSlot


@admin.register(TimeSlot)
class TimeSlotAdmin(admin.ModelAdmin):
    list_display = ("__str__", "max_orders", "current_orders", "is_active", "updated_at")
    list_filter = ("is_active",)
    ordering = ("start_time",)
    # The counter is owned by TimeSlotService; use the reset endpoint to correct it.
    readonly_fields = ("current_orders", "created_at", "updated_at")
