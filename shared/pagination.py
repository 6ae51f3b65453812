"""
Page-window pagination for list endpoints.

Clients pass `from` (an element index) and `size`. The window is page based:
the page number is `from // size` and the rows returned are that whole page,
so `from=0&size=10` and `from=5&size=10` yield the same rows.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, TypeVar

from django.conf import settings  # type: ignore
from rest_framework import serializers  # type: ignore

T = TypeVar("T")


@dataclass(frozen=True)
class PageWindow:
    from_index: int = 0
    size: int = 10

    def __post_init__(self):
        if self.from_index < 0:
            raise ValueError("from must not be negative")
        if self.size <= 0:
            raise ValueError("size must be positive")

    @property
    def page(self) -> int:
        return self.from_index // self.size

    @property
    def offset(self) -> int:
        return self.page * self.size

    def apply(self, rows: Sequence[T]) -> list[T]:
        """Slice a queryset or sequence down to this page."""
        return list(rows[self.offset:self.offset + self.size])


class PageParamsSerializer(serializers.Serializer):
    """Validates the `from` and `size` query parameters."""

    size = serializers.IntegerField(min_value=1, required=False)

    def get_fields(self):  # type: ignore
        fields = super().get_fields()
        # "from" is a keyword, so the field cannot be declared as an attribute
        fields["from"] = serializers.IntegerField(min_value=0, required=False, default=0)
        return fields

    def to_window(self) -> PageWindow:
        data = self.validated_data
        size = data.get("size") or settings.SHAREIT_DEFAULT_PAGE_SIZE
        return PageWindow(from_index=data.get("from", 0), size=size)


def page_window(request) -> PageWindow:
    serializer = PageParamsSerializer(data=request.query_params)
    serializer.is_valid(raise_exception=True)
    return serializer.to_window()
