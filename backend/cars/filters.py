from decimal import Decimal, InvalidOperation

import django_filters

from cars.models import Car


class AvailableCarFilter(django_filters.FilterSet):
    """
    Query-string filters for the public listing. ``type`` is an exact match, so
    an unknown type simply lists nothing. A price bound that is not a number
    matches no car rather than failing the request.
    """

    type = django_filters.CharFilter(field_name="type")
    minPrice = django_filters.CharFilter(method="filter_price")
    maxPrice = django_filters.CharFilter(method="filter_price")

    class Meta:
        model = Car
        fields = ["type", "minPrice", "maxPrice"]

    def filter_price(self, queryset, name, value):
        try:
            bound = Decimal(value)
        except InvalidOperation:
            return queryset.none()
        if not bound.is_finite():
            return queryset.none()
        lookup = "gte" if name == "minPrice" else "lte"
        return queryset.filter(**{f"price_per_day__{lookup}": bound})
