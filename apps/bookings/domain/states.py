"""
Booking states

Two distinct notions live here:

- Booking.Status is persisted: WAITING -> APPROVED or WAITING -> REJECTED,
  decided once by the item owner and never left afterwards.
- BookingState is a query-side filter token (ALL, PAST, FUTURE, CURRENT,
  WAITING, REJECTED). It is never stored; it classifies bookings by status
  or by their time range relative to "now".
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from shared.exceptions import UnsupportedStateError

from apps.bookings.models import Booking


class BookingState(Enum):
    ALL = "ALL"
    PAST = "PAST"
    FUTURE = "FUTURE"
    CURRENT = "CURRENT"
    WAITING = "WAITING"
    REJECTED = "REJECTED"

    @classmethod
    def parse(cls, token: Optional[str]) -> "BookingState":
        """Case-insensitive lookup; unknown tokens never fall back to ALL."""
        try:
            return cls[str(token).upper()]
        except KeyError:
            raise UnsupportedStateError(f"Unknown state: {token}")


# (current status, approved?) -> next status
TRANSITIONS: dict[tuple[str, bool], str] = {
    (Booking.Status.WAITING.value, True): Booking.Status.APPROVED.value,
    (Booking.Status.WAITING.value, False): Booking.Status.REJECTED.value,
}


def next_status(current: str, approved: bool) -> Optional[str]:
    """Status after the owner's decision, or None when no decision is allowed."""
    return TRANSITIONS.get((str(current), bool(approved)))
