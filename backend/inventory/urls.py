from django.urls import path
from .views import FavouriteViewSet, MenuItemViewSet

app_name = "inventory"

# Explicit ViewSet action mapping keeps the catalogue at the app root
urlpatterns = [
    path("", MenuItemViewSet.as_view({"get": "list", "post": "create"}), name="menu-item-list"),
    path("<int:pk>/", MenuItemViewSet.as_view({
        "get": "retrieve",
        "put": "update",
        "patch": "partial_update",
        "delete": "destroy",
    }), name="menu-item-detail"),
    path("favourites/", FavouriteViewSet.as_view({"get": "list"}), name="favourite-list"),
    path("favourites/toggle/", FavouriteViewSet.as_view({"post": "toggle"}), name="favourite-toggle"),
]
