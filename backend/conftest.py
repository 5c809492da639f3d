"""
Root conftest.py for all backend tests.

This file makes fixtures available to all test files across all apps.
"""
import pytest


# ============================================================================
# API CLIENT FIXTURES
# ============================================================================

@pytest.fixture
def api_client():
    """
    Provide DRF API client for API tests.

    Usage:
        def test_my_api(api_client):
            response = api_client.get('/api/health/')
            assert response.status_code == 200
    """
    from rest_framework.test import APIClient
    return APIClient()


@pytest.fixture
def authenticated_client():
    """
    Return a factory that builds a new API client authenticated as a user.

    Issues a real access token (with the role claim) and sends it as a
    bearer header, the way the front end does. Each call gets its own
    client, so one test can act as a student and as staff side by side.

    Usage:
        def test_protected_endpoint(authenticated_client, student):
            client = authenticated_client(student)
            response = client.get('/api/orders/')
            assert response.status_code == 200
    """
    from rest_framework.test import APIClient
    from rest_framework_simplejwt.tokens import RefreshToken

    def _authenticate(user):
        refresh = RefreshToken.for_user(user)
        refresh['role'] = user.role
        client = APIClient()
        client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
        return client

    return _authenticate


@pytest.fixture
def student_client(authenticated_client, student):
    return authenticated_client(student)


@pytest.fixture
def staff_client(authenticated_client, staff_user):
    return authenticated_client(staff_user)


# ============================================================================
# IMPORT ALL FIXTURES FROM core_backend/tests/fixtures.py
# ============================================================================

from core_backend.tests.fixtures import *
