"""
Student Management Tests

Staff directory with order totals, per-student history and soft removal.
"""
import pytest
from decimal import Decimal

from cart.models import CartItem
from inventory.models import Favourite
from orders.models import Order
from orders.services import CheckoutService, OrderStatusService
from users.exceptions import StudentNotFoundError
from users.models import User
from users.services import StudentService


@pytest.mark.django_db
class TestStudentService:

    def test_directory_totals_exclude_cancelled_spend(self, placed_order, student, other_student, slot, tea):
        CartItem.objects.create(student=student, menu_item=tea, quantity=1)
        second = CheckoutService.complete_order(student, slot.id)
        OrderStatusService.set_status(second.id, Order.OrderStatus.CANCELLED)

        rows = {row.id: row for row in StudentService.list_students()}

        assert rows[student.id].total_orders == 2
        assert rows[student.id].total_spent == Decimal('50.00')
        assert rows[other_student.id].total_orders == 0
        assert rows[other_student.id].total_spent == Decimal('0.00')

    def test_directory_lists_only_active_students(self, student, other_student, staff_user):
        StudentService.remove_student(other_student.id)

        assert [row.id for row in StudentService.list_students()] == [student.id]

    def test_history_includes_hidden_orders(self, placed_order, student):
        Order.objects.filter(pk=placed_order.pk).update(is_student_hidden=True)

        history = StudentService.get_student_history(student.id)

        assert history['student'] == student
        assert [order.id for order in history['orders']] == [placed_order.id]

    def test_history_for_staff_account_is_not_found(self, staff_user):
        with pytest.raises(StudentNotFoundError):
            StudentService.get_student_history(staff_user.id)

    def test_remove_frees_identifiers_and_keeps_orders(self, placed_order, student, tea):
        CartItem.objects.create(student=student, menu_item=tea, quantity=1)
        Favourite.objects.create(student=student, menu_item=tea)

        StudentService.remove_student(student.id)

        student.refresh_from_db()
        assert student.is_active is False
        assert student.email.startswith('student@college.test_deleted_')
        assert student.student_number.startswith('CS2024001_deleted_')
        assert Order.objects.filter(pk=placed_order.pk).exists()
        assert not CartItem.objects.filter(student=student).exists()
        assert not Favourite.objects.filter(student=student).exists()

        again = User.objects.create_user(
            email='student@college.test', password='pw-123456', student_number='CS2024001'
        )
        assert again.pk != student.pk

    def test_remove_twice_is_not_found(self, student):
        StudentService.remove_student(student.id)

        with pytest.raises(StudentNotFoundError):
            StudentService.remove_student(student.id)


@pytest.mark.django_db
class TestStudentAPI:

    def test_staff_lists_students(self, staff_client, placed_order, student):
        response = staff_client.get('/api/students/')

        assert response.status_code == 200
        row = response.data[0]
        assert row['student_number'] == 'CS2024001'
        assert row['total_orders'] == 1
        assert row['total_spent'] == Decimal('50.00')

    def test_students_cannot_list(self, student_client):
        assert student_client.get('/api/students/').status_code == 403

    def test_history(self, staff_client, placed_order, student):
        response = staff_client.get(f'/api/students/{student.id}/history/')

        assert response.status_code == 200
        assert response.data['student_name'] == 'Test Student'
        assert response.data['orders'][0]['id'] == placed_order.id
        assert response.data['orders'][0]['start_time'] == '12:00:00'

    def test_history_unknown_student(self, staff_client):
        response = staff_client.get('/api/students/999999/history/')

        assert response.status_code == 404
        assert response.data == {'message': 'Student not found'}

    def test_delete_blocks_login(self, staff_client, api_client, student):
        response = staff_client.delete(f'/api/students/{student.id}/')
        assert response.status_code == 200

        login = api_client.post(
            '/api/auth/token/',
            {'email': 'student@college.test', 'password': 'student-pass-123'},
            format='json',
        )
        assert login.status_code == 401
