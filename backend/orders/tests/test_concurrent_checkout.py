"""
Concurrent Checkout Tests

Real database transactions racing from separate threads. SQLite serialises
writers at the file level, so these only run against PostgreSQL:

    DB_ENGINE=postgresql DB_NAME=canteen pytest -m concurrency --create-db

The default SQLite run reports them as skipped.
"""
import threading
import pytest
from datetime import time
from decimal import Decimal
from django.db import connection

from cart.models import CartItem
from inventory.models import MenuItem
from orders.models import Order
from orders.services import CheckoutService
from timeslots.exceptions import SlotUnavailableError
from timeslots.models import TimeSlot
from timeslots.services import TimeSlotService
from users.models import User

pytestmark = [
    pytest.mark.concurrency,
    pytest.mark.skipif(
        connection.vendor == "sqlite",
        reason="Concurrent transaction tests need PostgreSQL (DB_ENGINE=postgresql)",
    ),
]


def _run_concurrently(workers):
    """Start all workers at the same instant and collect their outcomes."""
    barrier = threading.Barrier(len(workers))
    results = [None] * len(workers)

    def runner(index, worker):
        from django.db import connection as thread_connection
        try:
            barrier.wait()
            results[index] = ('ok', worker())
        except Exception as e:
            results[index] = ('error', e)
        finally:
            thread_connection.close()

    threads = [threading.Thread(target=runner, args=(i, w)) for i, w in enumerate(workers)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=30)
    return results


@pytest.mark.django_db(transaction=True)
class TestConcurrentCheckout:

    def test_last_seat_goes_to_exactly_one_student(self):
        slot = TimeSlot.objects.create(start_time=time(12, 0), end_time=time(12, 30), max_orders=1)
        tea = MenuItem.objects.create(name='Tea', price=Decimal('15.00'), quantity=10)
        students = [
            User.objects.create_user(email=f'racer{i}@college.test', password='pw-123456', name=f'Racer {i}')
            for i in range(2)
        ]
        for student in students:
            CartItem.objects.create(student=student, menu_item=tea, quantity=1)

        results = _run_concurrently(
            [lambda s=s: CheckoutService.complete_order(s, slot.id) for s in students]
        )

        outcomes = sorted(outcome for outcome, _ in results)
        assert outcomes == ['error', 'ok']
        errors = [value for outcome, value in results if outcome == 'error']
        assert isinstance(errors[0], SlotUnavailableError)

        slot.refresh_from_db()
        tea.refresh_from_db()
        assert slot.current_orders == 1
        assert Order.objects.count() == 1
        assert tea.quantity == 9

    def test_counter_never_exceeds_capacity_under_load(self):
        slot = TimeSlot.objects.create(start_time=time(14, 0), end_time=time(14, 30), max_orders=5)

        results = _run_concurrently([lambda: TimeSlotService.try_reserve(slot.id) for _ in range(12)])

        granted = [value for outcome, value in results if outcome == 'ok' and value]
        assert len(granted) == 5
        slot.refresh_from_db()
        assert slot.current_orders == 5

    def test_concurrent_releases_stop_at_zero(self):
        slot = TimeSlot.objects.create(
            start_time=time(15, 0), end_time=time(15, 30), max_orders=5, current_orders=3
        )

        results = _run_concurrently([lambda: TimeSlotService.release(slot.id) for _ in range(8)])

        released = [value for outcome, value in results if outcome == 'ok' and value]
        assert len(released) == 3
        slot.refresh_from_db()
        assert slot.current_orders == 0
