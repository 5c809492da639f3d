import django_filters
from django.core.exceptions import ValidationError
from .models import Order


# Front-end status names that differ from the stored value
STATUS_ALIASES = {
    "pending": Order.OrderStatus.PAID,
}


def resolve_status(value):
    """Map a front-end or raw status name to the stored value, or None."""
    normalized = value.strip().lower()
    status = STATUS_ALIASES.get(normalized, normalized.upper())
    return status if status in Order.OrderStatus.values else None


def validate_status_filter(value):
    if resolve_status(value) is None:
        raise ValidationError("Invalid status filter")


class OrderFilter(django_filters.FilterSet):
    """
    Staff order listing filter.

    ``?status=`` accepts the front-end names (``pending``, ``preparing``,
    ``ready``, ``completed``) as well as stored status values in any case.
    ``pending`` means PAID.
    """

    status = django_filters.CharFilter(method="filter_status", validators=[validate_status_filter])
    slot = django_filters.NumberFilter(field_name="slot_id")

    class Meta:
        model = Order
        fields = ["status", "slot"]

    def filter_status(self, queryset, name, value):
        return queryset.filter(status=resolve_status(value))
