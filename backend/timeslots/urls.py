from django.urls import path, include
from rest_framework.routers import SimpleRouter

from .views import TimeSlotViewSet

# Mounted at /api/timeslots/, so the viewset takes the empty prefix.
router = SimpleRouter()
router.register(r"", TimeSlotViewSet, basename="timeslot")

urlpatterns = [
    path("", include(router.urls)),
]
