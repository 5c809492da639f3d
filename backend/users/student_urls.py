from django.urls import path
from .student_views import StudentViewSet

app_name = "students"

urlpatterns = [
    path("", StudentViewSet.as_view({"get": "list"}), name="student-list"),
    path("<int:pk>/history/", StudentViewSet.as_view({"get": "history"}), name="student-history"),
    path("<int:pk>/", StudentViewSet.as_view({"delete": "destroy"}), name="student-delete"),
]
