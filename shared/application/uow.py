"""
Unit of Work Pattern

Wraps one write use case in a single database transaction: either every
change made inside the block is committed, or none is.
"""

from abc import ABC, abstractmethod
import logging

from django.db import transaction

logger = logging.getLogger(__name__)


class AbstractUnitOfWork(ABC):
    """Abstract Unit of Work pattern"""

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            self.commit()
        else:
            self.rollback()

    @abstractmethod
    def commit(self):
        """Commit the transaction"""
        pass

    @abstractmethod
    def rollback(self):
        """Rollback the transaction"""
        pass

    @property
    def locks_rows(self) -> bool:
        """Whether row locks taken inside the block are held until it ends."""
        return False


class DjangoUnitOfWork(AbstractUnitOfWork):
    """
    Django implementation of Unit of Work

    Usage:
        with DjangoUnitOfWork() as uow:
            booking = booking_repo.get_by_id(booking_id, for_update=uow.locks_rows)
            booking.status = Booking.Status.APPROVED
            booking_repo.save_status(booking)
            # Transaction commits here
    """

    def __init__(self, using=None):
        self.using = using
        self._transaction = None

    def __enter__(self):
        """Start database transaction"""
        self._transaction = transaction.atomic(using=self.using)
        self._transaction.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Complete or rollback transaction"""
        try:
            if exc_type is None:
                self.commit()
            else:
                self.rollback()
        finally:
            if self._transaction:
                self._transaction.__exit__(exc_type, exc_val, exc_tb)

    @property
    def locks_rows(self) -> bool:
        return True

    def commit(self):
        logger.debug("Committing unit of work")

    def rollback(self):
        logger.info("Rolling back unit of work")
