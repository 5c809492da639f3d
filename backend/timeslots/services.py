"""
Pickup time slot capacity management.

``current_orders`` is shared by every concurrent checkout. All writes to it
go through single conditional UPDATE statements here, so the capacity check
and the counter change are indivisible at the database. No read-then-write
path touches the counter.
"""
from django.db import transaction
from django.db.models import F, Value
from django.db.models.functions import Greatest
from typing import Optional
import logging

from .exceptions import (
    SlotNotFoundError,
    SlotOverlapError,
    InvalidTimeRangeError,
    CapacityBelowReservationsError,
    SlotInUseError,
)
from .models import TimeSlot

logger = logging.getLogger(__name__)


class TimeSlotService:
    """Admission control and staff management for pickup slots."""

    # ------------------------------------------------------------------
    # Capacity primitives
    # ------------------------------------------------------------------

    @staticmethod
    def try_reserve(slot_id) -> bool:
        """
        Take one seat in the slot.

        Succeeds only if, at the instant of the write, the slot exists, is
        active and has ``current_orders < max_orders``. A False return is an
        admission denial, not an error.
        """
        updated = TimeSlot.objects.filter(
            pk=slot_id,
            is_active=True,
            current_orders__lt=F("max_orders"),
        ).update(current_orders=F("current_orders") + 1)

        if updated:
            logger.debug(f"[TimeSlotService.try_reserve] Reserved seat in slot {slot_id}")
        else:
            logger.info(f"[TimeSlotService.try_reserve] Admission denied for slot {slot_id}")
        return bool(updated)

    @staticmethod
    def release(slot_id) -> bool:
        """
        Give one seat back. Clamped at zero; returns False when the slot is
        missing or already empty so compensating callers can release safely.
        """
        updated = TimeSlot.objects.filter(
            pk=slot_id,
            current_orders__gt=0,
        ).update(current_orders=Greatest(F("current_orders") - 1, Value(0)))

        if updated:
            logger.debug(f"[TimeSlotService.release] Released seat in slot {slot_id}")
        else:
            logger.info(f"[TimeSlotService.release] Nothing to release for slot {slot_id}")
        return bool(updated)

    @staticmethod
    def check_availability(slot_id) -> dict:
        """
        Advisory read for pre-flight validation. The answer can be stale by
        the time the caller acts on it; only ``try_reserve`` decides.
        """
        slot = TimeSlot.objects.filter(pk=slot_id).first()
        if slot is None:
            return {"exists": False, "is_active": False, "has_capacity": False}
        return {
            "exists": True,
            "is_active": slot.is_active,
            "has_capacity": slot.current_orders < slot.max_orders,
        }

    @staticmethod
    def list_available():
        """Active slots with their remaining capacity, earliest first."""
        slots = TimeSlot.objects.filter(is_active=True).order_by("start_time")
        return [
            {
                "slot": slot,
                "remaining_capacity": slot.remaining_capacity,
                "status": "FULL" if slot.is_full else "AVAILABLE",
            }
            for slot in slots
        ]

    # ------------------------------------------------------------------
    # Staff management
    # ------------------------------------------------------------------

    @staticmethod
    def find_overlap(start_time, end_time, exclude_id=None) -> Optional[TimeSlot]:
        """
        First active slot whose half-open window ``[start, end)`` intersects
        the given one. Adjacent windows (one ends where the other starts) do
        not overlap.
        """
        qs = TimeSlot.objects.filter(
            is_active=True,
            start_time__lt=end_time,
            end_time__gt=start_time,
        )
        if exclude_id is not None:
            qs = qs.exclude(pk=exclude_id)
        return qs.order_by("start_time").first()

    @staticmethod
    @transaction.atomic
    def create_slot(start_time, end_time, max_orders: int) -> TimeSlot:
        if start_time >= end_time:
            raise InvalidTimeRangeError(start_time, end_time)

        conflict = TimeSlotService.find_overlap(start_time, end_time)
        if conflict is not None:
            logger.info(
                f"[TimeSlotService.create_slot] Rejected {start_time}-{end_time}: "
                f"overlaps slot {conflict.id}"
            )
            raise SlotOverlapError(conflict)

        slot = TimeSlot.objects.create(
            start_time=start_time,
            end_time=end_time,
            max_orders=max_orders,
            current_orders=0,
            is_active=True,
        )
        logger.info(
            f"[TimeSlotService.create_slot] Created slot {slot.id} "
            f"{start_time}-{end_time} max_orders={max_orders}"
        )
        return slot

    @staticmethod
    @transaction.atomic
    def update_slot(slot_id, max_orders: Optional[int] = None, is_active: Optional[bool] = None) -> TimeSlot:
        """
        Partial update of capacity and/or the active flag.

        Capacity is written with ``WHERE current_orders <= new_max`` so a
        reservation landing between the read and the write cannot leave the
        counter above the new ceiling.
        """
        slot = TimeSlot.objects.filter(pk=slot_id).first()
        if slot is None:
            raise SlotNotFoundError(slot_id)

        if is_active and not slot.is_active:
            conflict = TimeSlotService.find_overlap(slot.start_time, slot.end_time, exclude_id=slot.pk)
            if conflict is not None:
                raise SlotOverlapError(
                    conflict, "Cannot reactivate slot: it overlaps with an existing active slot"
                )

        if max_orders is not None:
            updated = TimeSlot.objects.filter(
                pk=slot_id, current_orders__lte=max_orders
            ).update(max_orders=max_orders)
            if not updated:
                slot.refresh_from_db()
                raise CapacityBelowReservationsError(slot, max_orders)

        if is_active is not None:
            TimeSlot.objects.filter(pk=slot_id).update(is_active=is_active)

        slot.refresh_from_db()
        logger.info(
            f"[TimeSlotService.update_slot] Slot {slot_id} now max_orders={slot.max_orders} "
            f"is_active={slot.is_active}"
        )
        return slot

    @staticmethod
    def reset_count(slot_id) -> TimeSlot:
        """Force ``current_orders`` back to zero. Manual correction only."""
        updated = TimeSlot.objects.filter(pk=slot_id).update(current_orders=0)
        if not updated:
            raise SlotNotFoundError(slot_id)
        logger.warning(f"[TimeSlotService.reset_count] Slot {slot_id} counter reset to 0")
        return TimeSlot.objects.get(pk=slot_id)

    @staticmethod
    @transaction.atomic
    def delete_slot(slot_id) -> None:
        slot = TimeSlot.objects.filter(pk=slot_id).first()
        if slot is None:
            raise SlotNotFoundError(slot_id)
        if slot.orders.exists():
            raise SlotInUseError(slot)
        slot.delete()
        logger.info(f"[TimeSlotService.delete_slot] Deleted slot {slot_id}")
