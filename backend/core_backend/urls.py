"""
URL configuration for the canteen backend.

Every app mounts its own URLconf under /api/; the health check is the only
endpoint that does not require a bearer token.
"""

from django.contrib import admin
from django.urls import path, include
from django.http import JsonResponse


def health_check(request):
    """Simple health check endpoint that doesn't require authentication"""
    return JsonResponse({"status": "ok", "message": "Backend is running"})


urlpatterns = [
    path("api/health/", health_check, name="health_check"),
    path("admin/", admin.site.urls),
    path("api/auth/", include("users.urls")),
    path("api/menu/", include("inventory.urls")),
    path("api/cart/", include("cart.urls")),
    path("api/timeslots/", include("timeslots.urls")),
    # The orders app registers its own "orders" prefix on a router.
    path("api/", include("orders.urls")),
    path("api/notifications/", include("notifications.urls")),
    path("api/feedback/", include("feedback.urls")),
    path("api/students/", include("users.student_urls")),
]
