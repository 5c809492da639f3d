from django.contrib import admin
from .models import Notification


@admin.register(Notification)
class NotificationAdmin(admin.ModelAdmin):
    list_display = ("id", "recipient", "recipient_type", "order", "type", "is_read", "created_at")
    list_filter = ("recipient_type", "type", "is_read")
    search_fields = ("message", "recipient__email")
    raw_id_fields = ("recipient", "order")
