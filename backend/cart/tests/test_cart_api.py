"""
Cart API Tests
"""
import pytest
from decimal import Decimal

from cart.models import CartItem


@pytest.mark.django_db
class TestCartAPI:

    def test_add_and_read_cart(self, student_client, student, tea):
        response = student_client.post('/api/cart/add/', {'menu_item_id': tea.id, 'quantity': 2}, format='json')

        assert response.status_code == 200
        assert response.data['message'] == 'Item added to cart successfully'

        response = student_client.get('/api/cart/')
        assert response.status_code == 200
        assert response.data['total'] == Decimal('30.00')
        line = response.data['items'][0]
        assert line['name'] == 'Tea'
        assert line['quantity'] == 2
        assert line['stock_quantity'] == 50

    def test_add_beyond_stock_returns_400(self, student_client, samosa):
        response = student_client.post('/api/cart/add/', {'menu_item_id': samosa.id, 'quantity': 9}, format='json')

        assert response.status_code == 400
        assert 'Available stock: 5' in response.data['message']

    def test_add_missing_item_returns_404(self, student_client):
        response = student_client.post('/api/cart/add/', {'menu_item_id': 999999, 'quantity': 1}, format='json')
        assert response.status_code == 404

    def test_update_to_zero_removes(self, student_client, student, tea):
        CartItem.objects.create(student=student, menu_item=tea, quantity=2)

        response = student_client.put('/api/cart/update/', {'menu_item_id': tea.id, 'quantity': 0}, format='json')

        assert response.status_code == 200
        assert response.data['message'] == 'Item removed from cart'
        assert response.data['items'] == []

    def test_remove_item(self, student_client, student, tea):
        CartItem.objects.create(student=student, menu_item=tea, quantity=2)

        response = student_client.delete(f'/api/cart/items/{tea.id}/')

        assert response.status_code == 200
        assert not CartItem.objects.filter(student=student).exists()

    def test_clear(self, student_client, student, student_cart):
        response = student_client.delete('/api/cart/clear/')

        assert response.status_code == 200
        assert response.data['item_count'] == 0

    def test_staff_has_no_cart(self, staff_client):
        response = staff_client.get('/api/cart/')
        assert response.status_code == 403
