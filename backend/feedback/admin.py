from django.contrib import admin
from .models import Feedback


@admin.register(Feedback)
class FeedbackAdmin(admin.ModelAdmin):
    list_display = ("id", "student", "rating", "created_at")
    list_filter = ("rating",)
    search_fields = ("message", "student__email", "student__name")
    raw_id_fields = ("student",)
