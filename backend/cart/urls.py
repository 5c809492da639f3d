"""
URL configuration for cart app.
"""

from django.urls import path
from .views import CartViewSet

app_name = 'cart'

urlpatterns = [
    # GET /api/cart/ - Retrieve current cart
    path('', CartViewSet.as_view({'get': 'retrieve'}), name='cart-detail'),

    # POST /api/cart/add/ - Add item to cart
    path('add/', CartViewSet.as_view({'post': 'add'}), name='cart-add'),

    # PUT /api/cart/update/ - Set item quantity
    path('update/', CartViewSet.as_view({'put': 'update_item'}), name='cart-update'),

    # DELETE /api/cart/items/{menu_item_id}/ - Remove item from cart
    path('items/<int:menu_item_id>/', CartViewSet.as_view({'delete': 'remove_item'}), name='cart-remove-item'),

    # DELETE /api/cart/clear/ - Clear all items
    path('clear/', CartViewSet.as_view({'delete': 'clear'}), name='cart-clear'),
]
