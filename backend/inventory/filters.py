import django_filters
from .models import MenuItem


class MenuItemFilter(django_filters.FilterSet):
    available = django_filters.BooleanFilter(field_name="is_available")
    category = django_filters.CharFilter(field_name="category", lookup_expr="iexact")
    search = django_filters.CharFilter(field_name="name", lookup_expr="icontains")

    class Meta:
        model = MenuItem
        fields = ["available", "category", "search"]
