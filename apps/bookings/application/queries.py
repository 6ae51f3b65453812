"""
Booking Query Handlers

Read-side use cases of the booking domain:

- GetBookingQuery: one booking, visible to its booker and the item owner
- ListBookingsQuery: bookings of an actor, as booker or as item owner,
  filtered by a symbolic state and cut to a page window

The state token is resolved into a BookingFilter against a single "now"
captured at the start of the call, so PAST, CURRENT and FUTURE never
disagree about the same booking within one response.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Callable, Optional
import logging

from django.db.models import Q
from django.utils import timezone

from shared.exceptions import NotAuthorizedError
from shared.pagination import PageWindow
from apps.bookings.domain.states import BookingState
from apps.bookings.models import Booking

logger = logging.getLogger(__name__)


class ActorRole(Enum):
    BOOKER = "booker"
    OWNER = "owner"


@dataclass(frozen=True)
class BookingFilter:
    """Time or status condition a listed booking has to satisfy.

    Unset fields do not constrain. `active_at` selects bookings whose range
    contains the instant: start <= t <= end.
    """
    end_before: Optional[datetime] = None
    start_after: Optional[datetime] = None
    active_at: Optional[datetime] = None
    status: Optional[str] = None

    @classmethod
    def for_state(cls, state: BookingState, now: datetime) -> "BookingFilter":
        if state is BookingState.PAST:
            return cls(end_before=now)
        if state is BookingState.FUTURE:
            return cls(start_after=now)
        if state is BookingState.CURRENT:
            return cls(active_at=now)
        if state is BookingState.WAITING:
            return cls(status=Booking.Status.WAITING.value)
        if state is BookingState.REJECTED:
            return cls(status=Booking.Status.REJECTED.value)
        return cls()

    def as_q(self) -> Q:
        condition = Q()
        if self.end_before is not None:
            condition &= Q(end__lt=self.end_before)
        if self.start_after is not None:
            condition &= Q(start__gt=self.start_after)
        if self.active_at is not None:
            condition &= Q(start__lte=self.active_at, end__gte=self.active_at)
        if self.status is not None:
            condition &= Q(status=self.status)
        return condition

    def matches(self, booking: Booking) -> bool:
        if self.end_before is not None and not booking.end < self.end_before:
            return False
        if self.start_after is not None and not booking.start > self.start_after:
            return False
        if self.active_at is not None and not (booking.start <= self.active_at <= booking.end):
            return False
        if self.status is not None and str(booking.status) != self.status:
            return False
        return True


# ===== Queries =====

@dataclass
class GetBookingQuery:
    requester_id: int
    booking_id: int


@dataclass
class ListBookingsQuery:
    requester_id: int
    state: str
    window: PageWindow
    role: ActorRole = ActorRole.BOOKER


# ===== Query Handlers =====

class GetBookingHandler:
    """Returns a booking to its booker or to the owner of the booked item."""

    def __init__(self, booking_repo):
        self.booking_repo = booking_repo

    def handle(self, query: GetBookingQuery) -> Booking:
        booking = self.booking_repo.get_by_id(query.booking_id)
        if query.requester_id in (booking.booker_id, booking.item.owner_id):
            return booking
        raise NotAuthorizedError(f"Wrong user: id={query.requester_id}")


class ListBookingsHandler:
    """Temporal query resolver for booking lists."""

    def __init__(self, user_directory, booking_repo, clock: Callable[[], datetime] = timezone.now):
        self.user_directory = user_directory
        self.booking_repo = booking_repo
        self.clock = clock

    def handle(self, query: ListBookingsQuery) -> list[Booking]:
        self.user_directory.ensure_exists(query.requester_id)
        state = BookingState.parse(query.state)
        now = self.clock()
        booking_filter = BookingFilter.for_state(state, now)

        if query.role is ActorRole.OWNER:
            bookings = self.booking_repo.find_for_owner(query.requester_id, booking_filter, query.window)
        else:
            bookings = self.booking_repo.find_for_booker(query.requester_id, booking_filter, query.window)

        logger.debug(
            "Listed %d bookings for %s %s, state=%s page=%d size=%d",
            len(bookings),
            query.role.value,
            query.requester_id,
            state.value,
            query.window.page,
            query.window.size,
        )
        return list(bookings)
