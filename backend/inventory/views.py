from rest_framework import viewsets, status
from rest_framework.response import Response
from django_filters.rest_framework import DjangoFilterBackend
import logging

from users.permissions import IsStudent, ReadOnlyForStudents
from .exceptions import MenuItemInUseError
from .filters import MenuItemFilter
from .models import MenuItem
from .serializers import MenuItemSerializer, ToggleFavouriteSerializer
from .services import FavouriteService, InventoryService

logger = logging.getLogger(__name__)


class MenuItemViewSet(viewsets.ModelViewSet):
    """
    Menu catalogue.

    Any authenticated user can browse; only staff can create, edit or
    delete items. Deleting an item that appears in past orders is refused.
    """

    queryset = MenuItem.objects.all()
    serializer_class = MenuItemSerializer
    permission_classes = [ReadOnlyForStudents]
    filter_backends = [DjangoFilterBackend]
    filterset_class = MenuItemFilter

    def perform_create(self, serializer):
        item = serializer.save()
        logger.info(f"Menu item {item.id} ({item.name}) created by {self.request.user.id}")

    def perform_update(self, serializer):
        item = serializer.save()
        logger.info(
            f"Menu item {item.id} updated by {self.request.user.id}: "
            f"price={item.price} quantity={item.quantity} available={item.is_available}"
        )

    def destroy(self, request, *args, **kwargs):
        item = self.get_object()
        try:
            InventoryService.delete_menu_item(item)
        except MenuItemInUseError as e:
            return Response({"message": str(e)}, status=status.HTTP_400_BAD_REQUEST)
        return Response(status=status.HTTP_204_NO_CONTENT)


class FavouriteViewSet(viewsets.ViewSet):
    """
    The signed-in student's favourite menu items.

    Endpoints:
    - GET /api/menu/favourites/ - favourite items with current stock
    - POST /api/menu/favourites/toggle/ - star or unstar an item
    """

    permission_classes = [IsStudent]

    def list(self, request):
        items = FavouriteService.list_for_student(request.user)
        return Response(MenuItemSerializer(items, many=True).data)

    def toggle(self, request):
        serializer = ToggleFavouriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        is_favourite = FavouriteService.toggle(request.user, serializer.validated_data["menu_item_id"])
        return Response({
            "message": "Added to favourites" if is_favourite else "Removed from favourites",
            "is_favourite": is_favourite,
        })
