"""Booking store: persistence and role-scoped queries for bookings."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Iterable

from django.db import transaction  # type: ignore
from django.db.utils import NotSupportedError  # type: ignore

from shared.exceptions import NotFoundError
from shared.pagination import PageWindow

from .models import Booking

if TYPE_CHECKING:  # pragma: no cover - type checking only
    from .application.queries import BookingFilter


def _lock_queryset_if_possible(queryset):
    """Apply select_for_update when inside transaction.atomic()."""

    if not transaction.get_connection().in_atomic_block:
        return queryset

    try:
        return queryset.select_for_update()
    except NotSupportedError:
        return queryset


class BookingRepository:
    """Django ORM backed booking store.

    Listing queries are scoped by actor role (booker or item owner), narrowed
    by a BookingFilter, sorted by start descending and cut to a page window.
    """

    def _base_queryset(self):
        return Booking.objects.select_related("item", "item__owner", "item__request", "booker")

    def get_by_id(self, booking_id: int, *, for_update: bool = False) -> Booking:
        queryset = self._base_queryset()
        if for_update:
            queryset = _lock_queryset_if_possible(queryset)
        try:
            return queryset.get(pk=booking_id)
        except Booking.DoesNotExist:
            raise NotFoundError(f"Booking not found: id={booking_id}")

    def add(self, booking: Booking) -> Booking:
        booking.save(force_insert=True)
        return booking

    def save_status(self, booking: Booking) -> Booking:
        booking.save(update_fields=["status", "updated_at"])
        return booking

    def _find(self, queryset, booking_filter: "BookingFilter", window: PageWindow) -> list[Booking]:
        queryset = queryset.filter(booking_filter.as_q()).order_by("-start", "-id")
        return window.apply(queryset)

    def find_for_booker(
        self, booker_id: int, booking_filter: "BookingFilter", window: PageWindow
    ) -> list[Booking]:
        return self._find(self._base_queryset().filter(booker_id=booker_id), booking_filter, window)

    def find_for_owner(
        self, owner_id: int, booking_filter: "BookingFilter", window: PageWindow
    ) -> list[Booking]:
        return self._find(self._base_queryset().filter(item__owner_id=owner_id), booking_filter, window)

    def approved_for_items(self, item_ids: Iterable[int]) -> list[Booking]:
        return list(
            Booking.objects.filter(item_id__in=list(item_ids), status=Booking.Status.APPROVED)
            .order_by("start", "id")
        )

    def has_finished_approved(self, item_id: int, booker_id: int, now: datetime) -> bool:
        return Booking.objects.filter(
            item_id=item_id,
            booker_id=booker_id,
            status=Booking.Status.APPROVED,
            end__lt=now,
        ).exists()
