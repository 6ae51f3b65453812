"""Domain services for booking workflows.

`BookingService` is the entry point used by the API views. It wires the
command and query handlers to their collaborators: the user and item
directories, the booking store, the unit of work and the clock. Tests can
pass in-memory replacements for any of them.
"""

from __future__ import annotations

from datetime import datetime
from typing import Callable, Optional

from django.utils import timezone  # type: ignore

from apps.items.repositories import ItemDirectory
from apps.users.repositories import UserDirectory
from shared.application.uow import DjangoUnitOfWork
from shared.pagination import PageWindow

from .application.command_handlers import (
    CreateBookingCommand,
    CreateBookingHandler,
    DecideBookingCommand,
    DecideBookingHandler,
)
from .application.queries import (
    ActorRole,
    GetBookingHandler,
    GetBookingQuery,
    ListBookingsHandler,
    ListBookingsQuery,
)
from .models import Booking
from .repositories import BookingRepository


class BookingService:
    def __init__(
        self,
        user_directory=None,
        item_directory=None,
        booking_repo=None,
        uow_factory=DjangoUnitOfWork,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.user_directory = user_directory or UserDirectory()
        self.item_directory = item_directory or ItemDirectory()
        self.booking_repo = booking_repo or BookingRepository()
        self.uow_factory = uow_factory
        self.clock = clock or timezone.now

    def create_booking(self, requester_id: int, start: datetime, end: datetime, item_id: int) -> Booking:
        handler = CreateBookingHandler(
            self.user_directory,
            self.item_directory,
            self.booking_repo,
            uow_factory=self.uow_factory,
            clock=self.clock,
        )
        return handler.handle(
            CreateBookingCommand(requester_id=requester_id, item_id=item_id, start=start, end=end)
        )

    def approve_booking(self, requester_id: int, booking_id: int, approved: bool) -> Booking:
        handler = DecideBookingHandler(self.user_directory, self.booking_repo, uow_factory=self.uow_factory)
        return handler.handle(
            DecideBookingCommand(requester_id=requester_id, booking_id=booking_id, approved=approved)
        )

    def get_booking_by_id(self, requester_id: int, booking_id: int) -> Booking:
        return GetBookingHandler(self.booking_repo).handle(
            GetBookingQuery(requester_id=requester_id, booking_id=booking_id)
        )

    def _list(self, role: ActorRole, requester_id: int, state: str, window: PageWindow) -> list[Booking]:
        handler = ListBookingsHandler(self.user_directory, self.booking_repo, clock=self.clock)
        return handler.handle(
            ListBookingsQuery(requester_id=requester_id, state=state, window=window, role=role)
        )

    def list_for_booker(self, requester_id: int, state: str, window: PageWindow) -> list[Booking]:
        return self._list(ActorRole.BOOKER, requester_id, state, window)

    def list_for_owner(self, requester_id: int, state: str, window: PageWindow) -> list[Booking]:
        return self._list(ActorRole.OWNER, requester_id, state, window)
