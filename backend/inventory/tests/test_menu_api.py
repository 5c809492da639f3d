"""
Menu API Tests
"""
import pytest
from decimal import Decimal

from inventory.models import MenuItem


@pytest.mark.django_db
class TestMenuAPI:

    def test_student_can_browse_menu(self, student_client, tea, unavailable_item):
        response = student_client.get('/api/menu/')

        assert response.status_code == 200
        names = {item['name'] for item in response.data}
        assert names == {'Tea', 'Biryani'}

    def test_available_filter(self, student_client, tea, unavailable_item):
        response = student_client.get('/api/menu/', {'available': 'true'})

        assert response.status_code == 200
        assert [item['name'] for item in response.data] == ['Tea']
        assert response.data[0]['stock_status'] == 'IN_STOCK'

    def test_student_cannot_create_item(self, student_client):
        response = student_client.post(
            '/api/menu/', {'name': 'Coffee', 'price': '20.00', 'quantity': 10}, format='json'
        )
        assert response.status_code == 403

    def test_staff_creates_item(self, staff_client):
        response = staff_client.post(
            '/api/menu/', {'name': 'Coffee', 'price': '20.00', 'quantity': 5}, format='json'
        )

        assert response.status_code == 201
        item = MenuItem.objects.get(name='Coffee')
        assert item.price == Decimal('20.00')
        assert response.data['stock_status'] == 'LIMITED_STOCK'

    def test_stock_at_threshold_is_in_stock(self, staff_client):
        response = staff_client.post(
            '/api/menu/', {'name': 'Juice', 'price': '30.00', 'quantity': 10}, format='json'
        )

        assert response.status_code == 201
        assert response.data['stock_status'] == 'IN_STOCK'

    def test_staff_updates_stock(self, staff_client, samosa):
        response = staff_client.patch(f'/api/menu/{samosa.id}/', {'quantity': 40}, format='json')

        assert response.status_code == 200
        samosa.refresh_from_db()
        assert samosa.quantity == 40

    def test_negative_price_rejected(self, staff_client):
        response = staff_client.post(
            '/api/menu/', {'name': 'Coffee', 'price': '-1.00', 'quantity': 1}, format='json'
        )
        assert response.status_code == 400

    def test_staff_deletes_item(self, staff_client, tea):
        response = staff_client.delete(f'/api/menu/{tea.id}/')
        assert response.status_code == 204
