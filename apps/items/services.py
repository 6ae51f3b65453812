"""Domain services for items and comments."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Iterable, Optional

from django.db import transaction  # type: ignore
from django.utils import timezone  # type: ignore

from apps.bookings.repositories import BookingRepository
from apps.item_requests.models import ItemRequest
from apps.users.repositories import UserDirectory
from shared.exceptions import BusinessValidationError, NotAuthorizedError, NotFoundError
from shared.pagination import PageWindow

from .filters import ItemSearchFilterSet
from .models import Comment, Item
from .repositories import ItemDirectory

logger = logging.getLogger(__name__)

users = UserDirectory()
items = ItemDirectory()
bookings = BookingRepository()

UPDATABLE_FIELDS = ("name", "description", "is_available")


def _get_request(request_id: int) -> ItemRequest:
    try:
        return ItemRequest.objects.get(pk=request_id)
    except ItemRequest.DoesNotExist:
        raise NotFoundError(f"Request not found: id={request_id}")


def attach_bookings(item_list: Iterable[Item], now: Optional[datetime] = None) -> None:
    """Set `last_booking` and `next_booking` on each item.

    Only approved bookings count. The last booking is the one that started
    before now and ends latest; the next one is the earliest to start after
    now.
    """
    item_list = list(item_list)
    now = now or timezone.now()
    by_item: dict[int, list] = {item.pk: [] for item in item_list}
    for booking in bookings.approved_for_items(by_item.keys()):
        by_item[booking.item_id].append(booking)

    for item in item_list:
        related = by_item[item.pk]
        started = [b for b in related if b.start < now]
        upcoming = [b for b in related if b.start > now]
        item.last_booking = max(started, key=lambda b: b.end) if started else None
        item.next_booking = min(upcoming, key=lambda b: b.start) if upcoming else None


@transaction.atomic
def create_item(
    owner_id: int,
    *,
    name: str,
    description: str,
    is_available: bool,
    request_id: Optional[int] = None,
) -> Item:
    owner = users.get_by_id(owner_id)
    request = _get_request(request_id) if request_id is not None else None
    item = Item.objects.create(
        name=name,
        description=description,
        is_available=is_available,
        owner=owner,
        request=request,
    )
    logger.info("Item %s created by %s", item.pk, owner.pk)
    return item


@transaction.atomic
def update_item(user_id: int, item_id: int, **fields) -> Item:
    """Partial update by the owner; unknown or missing fields are ignored."""
    item = items.get_by_id(item_id)
    if item.owner_id != user_id:
        raise NotAuthorizedError("You are not the owner of this item!")

    update_fields = []
    for field in UPDATABLE_FIELDS:
        if fields.get(field) is not None:
            setattr(item, field, fields[field])
            update_fields.append(field)
    if fields.get("request_id") is not None:
        item.request = _get_request(fields["request_id"])
        update_fields.append("request")
    if update_fields:
        item.save(update_fields=update_fields)
    return item


def list_owner_items(owner_id: int, window: PageWindow) -> list[Item]:
    users.ensure_exists(owner_id)
    queryset = Item.objects.filter(owner_id=owner_id).prefetch_related("comments__author").order_by("id")
    page = window.apply(queryset)
    attach_bookings(page)
    for item in page:
        item.comment_list = list(item.comments.all())
    return page


def get_item(user_id: int, item_id: int) -> Item:
    """Item with comments; booking summary only for its owner."""
    users.ensure_exists(user_id)
    item = items.get_by_id(item_id)
    item.comment_list = list(item.comments.select_related("author"))
    if item.owner_id == user_id:
        attach_bookings([item])
    else:
        item.last_booking = None
        item.next_booking = None
    return item


def search_items(text: str, window: PageWindow) -> list[Item]:
    if not text or not text.strip():
        return []
    filterset = ItemSearchFilterSet(
        data={"text": text.strip()},
        queryset=Item.objects.filter(is_available=True).order_by("id"),
    )
    return window.apply(filterset.qs)


@transaction.atomic
def create_comment(user_id: int, item_id: int, text: str) -> Comment:
    """A comment is accepted once the author's approved booking of the item has ended."""
    author = users.get_by_id(user_id)
    item = items.get_by_id(item_id)
    now = timezone.now()
    if not bookings.has_finished_approved(item.pk, author.pk, now):
        raise BusinessValidationError("You can add a comment only after the booking is completed.")
    comment = Comment.objects.create(text=text, item=item, author=author, created=now)
    logger.info("Comment %s added to item %s by %s", comment.pk, item.pk, author.pk)
    return comment
