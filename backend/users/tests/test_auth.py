"""
Authentication and Role Tests

Token issue with the role claim, bearer authentication and the role
permission classes.
"""
import pytest
from rest_framework_simplejwt.tokens import AccessToken

from users.models import User


@pytest.mark.django_db
class TestTokenIssue:

    def test_login_returns_tokens_with_role_claim(self, api_client, student):
        response = api_client.post(
            '/api/auth/token/',
            {'email': 'student@college.test', 'password': 'student-pass-123'},
            format='json',
        )

        assert response.status_code == 200
        assert response.data['user']['role'] == User.Role.STUDENT
        token = AccessToken(response.data['access'])
        assert token['role'] == User.Role.STUDENT
        assert str(token['user_id']) == str(student.id)

    def test_wrong_password(self, api_client, student):
        response = api_client.post(
            '/api/auth/token/',
            {'email': 'student@college.test', 'password': 'nope'},
            format='json',
        )

        assert response.status_code == 401
        assert 'message' in response.data

    def test_refresh(self, api_client, staff_user):
        tokens = api_client.post(
            '/api/auth/token/',
            {'email': 'staff@college.test', 'password': 'staff-pass-123'},
            format='json',
        ).data

        response = api_client.post('/api/auth/token/refresh/', {'refresh': tokens['refresh']}, format='json')

        assert response.status_code == 200
        assert 'access' in response.data

    def test_me(self, staff_client, staff_user):
        response = staff_client.get('/api/auth/me/')

        assert response.status_code == 200
        assert response.data['email'] == staff_user.email
        assert response.data['role'] == User.Role.STAFF

    def test_me_requires_token(self, api_client):
        assert api_client.get('/api/auth/me/').status_code == 401


@pytest.mark.django_db
class TestUserManager:

    def test_create_user_defaults_to_student(self, db):
        user = User.objects.create_user(email='New@College.test', password='pw-123456')

        assert user.role == User.Role.STUDENT
        assert user.is_student
        assert not user.is_canteen_staff
        assert user.email == 'New@college.test'

    def test_superuser_is_staff_role(self, db):
        admin = User.objects.create_superuser(email='admin@college.test', password='pw-123456')

        assert admin.role == User.Role.STAFF
        assert admin.is_staff and admin.is_superuser

    def test_canteen_staff_excludes_inactive(self, staff_user, second_staff_user, student):
        second_staff_user.is_active = False
        second_staff_user.save()

        assert list(User.objects.canteen_staff()) == [staff_user]

    def test_email_required(self, db):
        with pytest.raises(ValueError):
            User.objects.create_user(email='', password='pw')


@pytest.mark.django_db
class TestRoleGating:

    def test_student_routes_reject_staff(self, staff_client):
        assert staff_client.get('/api/orders/spending/').status_code == 403

    def test_staff_routes_reject_students(self, student_client):
        assert student_client.get('/api/timeslots/').status_code == 403

    def test_student_and_staff_clients_act_independently(self, student_client, staff_client, student, staff_user):
        assert student_client is not staff_client
        assert student_client.get('/api/auth/me/').data['email'] == student.email
        assert staff_client.get('/api/auth/me/').data['email'] == staff_user.email

    def test_health_check_is_public(self, api_client):
        response = api_client.get('/api/health/')
        assert response.status_code == 200


@pytest.mark.django_db
class TestAdminForms:

    def test_creation_form_hashes_password_and_drops_staff_student_number(self):
        from users.forms import UserAdminCreationForm

        form = UserAdminCreationForm(data={
            'email': 'cook@college.test',
            'name': 'Cook',
            'student_number': 'X1',
            'role': User.Role.STAFF,
            'password1': 'kitchen-pass-1',
            'password2': 'kitchen-pass-1',
        })

        assert form.is_valid(), form.errors
        user = form.save()
        assert user.check_password('kitchen-pass-1')
        assert user.student_number is None

    def test_creation_form_password_mismatch(self):
        from users.forms import UserAdminCreationForm

        form = UserAdminCreationForm(data={
            'email': 'cook@college.test',
            'role': User.Role.STUDENT,
            'password1': 'kitchen-pass-1',
            'password2': 'different',
        })

        assert not form.is_valid()
        assert 'password2' in form.errors
