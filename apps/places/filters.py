"""FilterSet definitions for the place listing."""

from __future__ import annotations

import django_filters  # type: ignore

from .models import Place


class PlaceFilterSet(django_filters.FilterSet):
    """Filters accepted by ``GET /api/places/``."""

    country = django_filters.CharFilter(field_name="country", lookup_expr="iexact")
    city = django_filters.CharFilter(field_name="city", lookup_expr="iexact")
    property_type = django_filters.ChoiceFilter(choices=Place.PropertyType.choices)
    cost_min = django_filters.NumberFilter(field_name="cost", lookup_expr="gte")
    cost_max = django_filters.NumberFilter(field_name="cost", lookup_expr="lte")
    guests = django_filters.NumberFilter(field_name="guests", lookup_expr="gte")
    owner = django_filters.NumberFilter(field_name="owner_id")

    class Meta:
        model = Place
        fields = [
            "country",
            "city",
            "property_type",
        ]
