"""FilterSet definitions for item search."""

from __future__ import annotations

import django_filters  # type: ignore
from django.db.models import Q  # type: ignore

from .models import Item


class ItemSearchFilterSet(django_filters.FilterSet):
    """Free-text search over item name and description, case-insensitive."""

    text = django_filters.CharFilter(method="filter_text")

    class Meta:
        model = Item
        fields = ["text"]

    def filter_text(self, queryset, name, value):  # type: ignore
        return queryset.filter(Q(name__icontains=value) | Q(description__icontains=value))
