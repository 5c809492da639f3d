"""
API Error Shape Tests

Every failure reaches the client as ``{"message": ...}``; validation
failures also carry the field errors.
"""
import pytest
from rest_framework.exceptions import NotFound, ValidationError

from core_backend.exceptions import api_exception_handler


class TestExceptionHandler:

    def test_detail_flattened_to_message(self):
        response = api_exception_handler(NotFound("Order not found"), {})

        assert response.status_code == 404
        assert response.data == {'message': 'Order not found'}

    def test_validation_errors_kept_under_errors(self):
        response = api_exception_handler(ValidationError({'slot_id': ['This field is required.']}), {})

        assert response.status_code == 400
        assert response.data['message'] == 'Invalid request data'
        assert response.data['errors'] == {'slot_id': ['This field is required.']}

    def test_unhandled_exception_left_to_django(self):
        assert api_exception_handler(RuntimeError("boom"), {}) is None


@pytest.mark.django_db
class TestErrorShapesOverHttp:

    def test_missing_token(self, api_client):
        response = api_client.get('/api/orders/')

        assert response.status_code == 401
        assert 'message' in response.data

    def test_invalid_token(self, api_client):
        api_client.credentials(HTTP_AUTHORIZATION='Bearer not-a-token')

        response = api_client.get('/api/orders/')

        assert response.status_code == 401

    def test_wrong_role(self, staff_client):
        response = staff_client.get('/api/cart/')

        assert response.status_code == 403
        assert response.data == {'message': 'Access denied'}
