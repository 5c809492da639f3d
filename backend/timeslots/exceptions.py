"""
Custom exceptions for pickup time slot management.
"""


class TimeSlotError(ValueError):
    """Base exception for time slot errors."""
    pass


class SlotNotFoundError(TimeSlotError):
    def __init__(self, slot_id, message=None):
        self.slot_id = slot_id
        super().__init__(message or "Time slot not found")


class SlotUnavailableError(TimeSlotError):
    """
    Admission denial: the slot is missing, inactive or already full.

    This is an expected outcome of a checkout race, not a server fault.
    """

    NOT_FOUND = "not_found"
    INACTIVE = "inactive"
    FULL = "full"

    MESSAGES = {
        NOT_FOUND: "Time slot not found",
        INACTIVE: "Selected time slot is no longer active",
        FULL: "Slot full, choose another.",
    }

    def __init__(self, slot_id, reason=None, message=None):
        self.slot_id = slot_id
        self.reason = reason
        if message is None:
            message = self.MESSAGES.get(
                reason, "Time slot full or inactive. Please choose another."
            )
        super().__init__(message)


class InvalidTimeRangeError(TimeSlotError):
    def __init__(self, start_time, end_time, message=None):
        self.start_time = start_time
        self.end_time = end_time
        super().__init__(message or "Start time must be before end time")


class SlotOverlapError(TimeSlotError):
    """Raised when a slot window intersects an existing active slot."""

    def __init__(self, conflicting_slot, message=None):
        self.conflicting_slot = conflicting_slot
        super().__init__(message or "New slot overlaps with an existing active slot")


class CapacityBelowReservationsError(TimeSlotError):
    def __init__(self, slot, max_orders, message=None):
        self.slot = slot
        self.max_orders = max_orders
        if message is None:
            message = (
                f"Cannot set max_orders to {max_orders}: "
                f"{slot.current_orders} orders are already booked in this slot"
            )
        super().__init__(message)


class SlotInUseError(TimeSlotError):
    def __init__(self, slot, message=None):
        self.slot = slot
        super().__init__(
            message
            or "Cannot delete time slot because it has existing orders. Try deactivating it instead."
        )
