from django.urls import path
from .views import FeedbackViewSet

app_name = "feedback"

urlpatterns = [
    path("submit/", FeedbackViewSet.as_view({"post": "submit"}), name="feedback-submit"),
    path("all/", FeedbackViewSet.as_view({"get": "list"}), name="feedback-list"),
    path("<int:pk>/", FeedbackViewSet.as_view({"delete": "destroy"}), name="feedback-delete"),
]
