"""
Booking Command Handlers

These are the write use cases of the booking domain. Each one runs inside
a single unit of work: the booking, item and user are loaded, the rules are
checked and the change is persisted, or nothing is.

Commands:
- CreateBookingCommand: a user asks to book someone else's item
- DecideBookingCommand: the item owner approves or rejects a waiting booking
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Callable
import logging

from django.utils import timezone

from shared.application.uow import DjangoUnitOfWork
from shared.exceptions import BusinessValidationError, ItemNotBookableError, NotAuthorizedError
from apps.bookings.domain.states import next_status
from apps.bookings.models import Booking

logger = logging.getLogger(__name__)


# ===== Commands =====

@dataclass
class CreateBookingCommand:
    """Command to create a new booking in WAITING status"""
    requester_id: int
    item_id: int
    start: datetime
    end: datetime


@dataclass
class DecideBookingCommand:
    """Command for the owner's decision on a waiting booking"""
    requester_id: int
    booking_id: int
    approved: bool


# ===== Command Handlers =====

class CreateBookingHandler:
    """
    Handler for CreateBooking command

    Rules, checked in this order:
    1. the requester exists
    2. the item exists
    3. the requester does not own the item
    4. the item is available
    5. start and end both lie in the future and start < end

    Overlapping bookings of the same item are accepted; availability is
    only the item's own flag.
    """

    def __init__(
        self,
        user_directory,
        item_directory,
        booking_repo,
        uow_factory=DjangoUnitOfWork,
        clock: Callable[[], datetime] = timezone.now,
    ):
        self.user_directory = user_directory
        self.item_directory = item_directory
        self.booking_repo = booking_repo
        self.uow_factory = uow_factory
        self.clock = clock

    def handle(self, command: CreateBookingCommand) -> Booking:
        now = self.clock()

        with self.uow_factory():
            user = self.user_directory.get_by_id(command.requester_id)
            item = self.item_directory.get_by_id(command.item_id)

            if item.owner_id == user.pk:
                raise ItemNotBookableError(
                    f"Item with id {item.pk} is not available for booking"
                )
            if not item.is_available:
                raise BusinessValidationError(f"Item with id {item.pk} is not available")
            if not (command.start > now and command.end > now and command.start < command.end):
                raise BusinessValidationError("Date is not correct")

            booking = self.booking_repo.add(
                Booking(
                    start=command.start,
                    end=command.end,
                    item=item,
                    booker=user,
                    status=Booking.Status.WAITING,
                )
            )

        logger.info(
            "Booking %s created: item=%s booker=%s %s..%s",
            booking.pk,
            item.pk,
            user.pk,
            command.start.isoformat(),
            command.end.isoformat(),
        )
        return booking


class DecideBookingHandler:
    """
    Handler for DecideBooking command (WAITING -> APPROVED | REJECTED)

    The booking row is locked for the duration of the unit of work, so two
    concurrent decisions serialize: the second one sees a decided booking
    and is rejected.
    """

    def __init__(self, user_directory, booking_repo, uow_factory=DjangoUnitOfWork):
        self.user_directory = user_directory
        self.booking_repo = booking_repo
        self.uow_factory = uow_factory

    def handle(self, command: DecideBookingCommand) -> Booking:
        with self.uow_factory() as uow:
            booking = self.booking_repo.get_by_id(command.booking_id, for_update=uow.locks_rows)
            user = self.user_directory.get_by_id(command.requester_id)

            if booking.item.owner_id != user.pk:
                raise NotAuthorizedError("You are not the owner of this item!")

            status = next_status(booking.status, command.approved)
            if status is None:
                raise BusinessValidationError(f"Booking not available: id={booking.pk}")

            booking.status = status
            self.booking_repo.save_status(booking)

        logger.info("Booking %s %s by owner %s", booking.pk, status, user.pk)
        return booking
