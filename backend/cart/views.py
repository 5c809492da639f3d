"""
Cart API views for student cart operations.
"""

from rest_framework import viewsets, status
from rest_framework.response import Response
import logging

from inventory.exceptions import ItemUnavailableError
from users.permissions import IsStudent
from .exceptions import CartError
from .serializers import CartSerializer, AddToCartSerializer, UpdateCartItemSerializer
from .services import CartService

logger = logging.getLogger(__name__)


class CartViewSet(viewsets.ViewSet):
    """
    ViewSet for the signed-in student's cart.

    Endpoints:
    - GET /api/cart/ - Retrieve current cart
    - POST /api/cart/add/ - Add item to cart
    - PUT /api/cart/update/ - Set item quantity (0 removes)
    - DELETE /api/cart/items/{menu_item_id}/ - Remove item from cart
    - DELETE /api/cart/clear/ - Clear all items
    """

    permission_classes = [IsStudent]

    def _cart_response(self, request, status_code=status.HTTP_200_OK, message=None):
        data = CartSerializer(CartService.get_cart(request.user)).data
        if message:
            data = {"message": message, **data}
        return Response(data, status=status_code)

    def retrieve(self, request):
        return self._cart_response(request)

    def add(self, request):
        """
        POST /api/cart/add/

        Request body:
        {
            "menu_item_id": 1,
            "quantity": 2
        }
        """
        serializer = AddToCartSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            CartService.add_item(
                request.user,
                serializer.validated_data["menu_item_id"],
                serializer.validated_data["quantity"],
            )
        except (CartError, ItemUnavailableError) as e:
            return Response({"message": str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return self._cart_response(request, message="Item added to cart successfully")

    def update_item(self, request):
        """PUT /api/cart/update/"""
        serializer = UpdateCartItemSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            cart_item = CartService.update_item(
                request.user,
                serializer.validated_data["menu_item_id"],
                serializer.validated_data["quantity"],
            )
        except CartError as e:
            return Response({"message": str(e)}, status=status.HTTP_400_BAD_REQUEST)

        message = "Cart updated successfully" if cart_item else "Item removed from cart"
        return self._cart_response(request, message=message)

    def remove_item(self, request, menu_item_id=None):
        """DELETE /api/cart/items/{menu_item_id}/"""
        CartService.remove_item(request.user, menu_item_id)
        return self._cart_response(request, message="Item removed from cart")

    def clear(self, request):
        """DELETE /api/cart/clear/"""
        CartService.clear_cart(request.user)
        return self._cart_response(request, message="Cart cleared")
