"""Domain services for user management."""

from __future__ import annotations

import logging
from typing import Optional

from django.db import transaction  # type: ignore
from django.db.models import ProtectedError  # type: ignore

from shared.exceptions import AlreadyExistsError, BusinessValidationError

from .models import User
from .repositories import UserDirectory

logger = logging.getLogger(__name__)

users = UserDirectory()


def list_users() -> list[User]:
    return list(User.objects.order_by("id"))


def get_user(user_id: int) -> User:
    return users.get_by_id(user_id)


def _ensure_email_free(email: str, *, exclude_user_id: Optional[int] = None) -> None:
    taken = User.objects.filter(email__iexact=email)
    if exclude_user_id is not None:
        taken = taken.exclude(pk=exclude_user_id)
    if taken.exists():
        raise AlreadyExistsError(
            f"Пользователь с электронной почтой {email} уже зарегистрирован."
        )


@transaction.atomic
def create_user(name: str, email: str) -> User:
    _ensure_email_free(email)
    user = User.objects.create(name=name, email=email)
    logger.info("User %s created", user.pk)
    return user


@transaction.atomic
def update_user(user_id: int, *, name: Optional[str] = None, email: Optional[str] = None) -> User:
    """Partial update: fields passed as None keep their current value."""
    user = users.get_by_id(user_id)
    update_fields = []
    if email is not None:
        _ensure_email_free(email, exclude_user_id=user.pk)
        user.email = email
        update_fields.append("email")
    if name is not None:
        user.name = name
        update_fields.append("name")
    if update_fields:
        user.save(update_fields=update_fields)
    return user


@transaction.atomic
def delete_user(user_id: int) -> None:
    """A user who owns items or has bookings cannot be deleted; bookings are kept."""
    users.ensure_exists(user_id)
    try:
        User.objects.filter(pk=user_id).delete()
    except ProtectedError:
        raise BusinessValidationError(f"User id={user_id} still has items or bookings")
    logger.info("User %s deleted", user_id)
