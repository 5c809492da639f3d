"""
Order Status Machine Tests
"""
import pytest

from notifications.models import Notification
from orders.exceptions import (
    InvalidOrderStatusError,
    InvalidStatusTransitionError,
    OrderNotFoundError,
)
from orders.models import Order
from orders.services import OrderStatusService

S = Order.OrderStatus


class TestTransitionTable:

    @pytest.mark.parametrize('current,new', [
        (S.PAID, S.PREPARING),
        (S.PAID, S.READY),
        (S.PAID, S.COMPLETED),
        (S.PREPARING, S.READY),
        (S.READY, S.COMPLETED),
        (S.PAID, S.CANCELLED),
        (S.PREPARING, S.CANCELLED),
        (S.READY, S.CANCELLED),
    ])
    def test_allowed(self, current, new):
        assert OrderStatusService.can_transition(current, new) is True

    @pytest.mark.parametrize('current,new', [
        (S.COMPLETED, S.PREPARING),
        (S.COMPLETED, S.CANCELLED),
        (S.CANCELLED, S.PAID),
        (S.READY, S.PREPARING),
        (S.PREPARING, S.PAID),
        (S.READY, S.READY),
    ])
    def test_rejected(self, current, new):
        assert OrderStatusService.can_transition(current, new) is False


@pytest.mark.django_db
class TestSetStatus:

    def test_ready_creates_one_student_notification(
        self, placed_order, student, django_capture_on_commit_callbacks
    ):
        before = Notification.objects.filter(recipient=student, order=placed_order).count()

        with django_capture_on_commit_callbacks(execute=True):
            OrderStatusService.set_status(placed_order.id, S.READY)

        notifications = Notification.objects.filter(recipient=student, order=placed_order)
        assert notifications.count() == before + 1
        latest = notifications.order_by('-id').first()
        assert 'READY' in latest.message
        assert latest.recipient_type == Notification.RecipientType.STUDENT

    def test_status_written(self, placed_order):
        order = OrderStatusService.set_status(placed_order.id, S.PREPARING)

        assert order.status == S.PREPARING
        placed_order.refresh_from_db()
        assert placed_order.status == S.PREPARING

    def test_completed_order_cannot_move_back(self, placed_order):
        OrderStatusService.set_status(placed_order.id, S.COMPLETED)

        with pytest.raises(InvalidStatusTransitionError):
            OrderStatusService.set_status(placed_order.id, S.PREPARING)

        placed_order.refresh_from_db()
        assert placed_order.status == S.COMPLETED

    def test_cancel_releases_slot_seat(self, placed_order, slot):
        slot.refresh_from_db()
        assert slot.current_orders == 1

        OrderStatusService.set_status(placed_order.id, S.CANCELLED)

        slot.refresh_from_db()
        assert slot.current_orders == 0

    def test_cancelled_order_cannot_be_cancelled_again(self, placed_order, slot):
        OrderStatusService.set_status(placed_order.id, S.CANCELLED)

        with pytest.raises(InvalidStatusTransitionError):
            OrderStatusService.set_status(placed_order.id, S.CANCELLED)

        slot.refresh_from_db()
        assert slot.current_orders == 0

    def test_stock_untouched_by_status_changes(self, placed_order, tea):
        tea.refresh_from_db()
        stock = tea.quantity

        OrderStatusService.set_status(placed_order.id, S.CANCELLED)

        tea.refresh_from_db()
        assert tea.quantity == stock

    def test_unknown_status(self, placed_order):
        with pytest.raises(InvalidOrderStatusError):
            OrderStatusService.set_status(placed_order.id, 'SHIPPED')

    def test_missing_order(self, db):
        with pytest.raises(OrderNotFoundError):
            OrderStatusService.set_status(999999, S.READY)

    def test_status_notifications_can_be_disabled(
        self, placed_order, settings, django_capture_on_commit_callbacks
    ):
        settings.CANTEEN = {**settings.CANTEEN, 'ORDER_STATUS_NOTIFICATIONS': False}
        before = Notification.objects.count()

        with django_capture_on_commit_callbacks(execute=True):
            OrderStatusService.set_status(placed_order.id, S.PREPARING)

        assert Notification.objects.count() == before
