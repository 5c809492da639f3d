from django.urls import path
from .views import NotificationViewSet

app_name = "notifications"

urlpatterns = [
    path("", NotificationViewSet.as_view({"get": "list"}), name="notification-list"),
    path("unread-count/", NotificationViewSet.as_view({"get": "unread_count"}), name="notification-unread-count"),
    path("<int:pk>/read/", NotificationViewSet.as_view({"patch": "mark_read"}), name="notification-mark-read"),
    path("read-all/", NotificationViewSet.as_view({"post": "mark_all_read"}), name="notification-read-all"),
]
