"""
Shared test fixtures for all backend tests.

This module provides reusable pytest fixtures for common test objects
like users, menu items, pickup slots and carts.
"""
import pytest
from datetime import time
from decimal import Decimal

from users.models import User
from inventory.models import MenuItem
from timeslots.models import TimeSlot
from cart.models import CartItem


# ============================================================================
# USER FIXTURES
# ============================================================================

@pytest.fixture
def student(db):
    """Create a student account"""
    return User.objects.create_user(
        email='student@college.test',
        password='student-pass-123',
        name='Test Student',
        student_number='CS2024001',
    )


@pytest.fixture
def other_student(db):
    """Create a second student account"""
    return User.objects.create_user(
        email='other@college.test',
        password='student-pass-123',
        name='Other Student',
        student_number='CS2024002',
    )


@pytest.fixture
def staff_user(db):
    """Create a canteen staff account"""
    return User.objects.create_user(
        email='staff@college.test',
        password='staff-pass-123',
        name='Canteen Staff',
        role=User.Role.STAFF,
    )


@pytest.fixture
def second_staff_user(db):
    """Create another staff account to check staff fan-out"""
    return User.objects.create_user(
        email='staff2@college.test',
        password='staff-pass-123',
        name='Second Staff',
        role=User.Role.STAFF,
    )


# ============================================================================
# MENU FIXTURES
# ============================================================================

@pytest.fixture
def tea(db):
    """Tea at 15.00 with plenty of stock"""
    return MenuItem.objects.create(
        name='Tea',
        category='Beverages',
        price=Decimal('15.00'),
        quantity=50,
    )


@pytest.fixture
def samosa(db):
    """Samosa at 20.00 with limited stock"""
    return MenuItem.objects.create(
        name='Samosa',
        category='Snacks',
        price=Decimal('20.00'),
        quantity=5,
    )


@pytest.fixture
def unavailable_item(db):
    return MenuItem.objects.create(
        name='Biryani',
        category='Meals',
        price=Decimal('120.00'),
        quantity=10,
        is_available=False,
    )


# ============================================================================
# TIME SLOT FIXTURES
# ============================================================================

@pytest.fixture
def slot(db):
    """Active 12:00-12:30 slot with room for 10 orders"""
    return TimeSlot.objects.create(
        start_time=time(12, 0),
        end_time=time(12, 30),
        max_orders=10,
    )


@pytest.fixture
def single_seat_slot(db):
    """Active 13:00-13:30 slot with exactly one seat"""
    return TimeSlot.objects.create(
        start_time=time(13, 0),
        end_time=time(13, 30),
        max_orders=1,
    )


@pytest.fixture
def inactive_slot(db):
    return TimeSlot.objects.create(
        start_time=time(16, 0),
        end_time=time(16, 30),
        max_orders=10,
        is_active=False,
    )


# ============================================================================
# CART FIXTURES
# ============================================================================

@pytest.fixture
def student_cart(student, tea, samosa):
    """Student cart holding 2 x Tea and 1 x Samosa"""
    CartItem.objects.create(student=student, menu_item=tea, quantity=2)
    CartItem.objects.create(student=student, menu_item=samosa, quantity=1)
    return CartItem.objects.filter(student=student)


# ============================================================================
# ORDER FIXTURES
# ============================================================================

@pytest.fixture
def placed_order(student, slot, student_cart):
    """A PAID order for 2 x Tea + 1 x Samosa placed through checkout"""
    from orders.services import CheckoutService
    return CheckoutService.complete_order(student, slot.id, 'No onions')
