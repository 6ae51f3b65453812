"""Domain services for item requests."""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Iterable

from django.db import transaction  # type: ignore
from django.utils import timezone  # type: ignore

from apps.items.models import Item
from apps.users.repositories import UserDirectory
from shared.exceptions import NotFoundError
from shared.pagination import PageWindow

from .models import ItemRequest

logger = logging.getLogger(__name__)

users = UserDirectory()


def attach_offers(requests: Iterable[ItemRequest]) -> list[ItemRequest]:
    """Set `offers` on each request: the items listed in answer to it."""
    requests = list(requests)
    offers = defaultdict(list)
    for item in Item.objects.filter(request_id__in=[r.pk for r in requests]).order_by("id"):
        offers[item.request_id].append(item)
    for item_request in requests:
        item_request.offers = offers[item_request.pk]
    return requests


@transaction.atomic
def create_request(user_id: int, description: str) -> ItemRequest:
    requestor = users.get_by_id(user_id)
    item_request = ItemRequest.objects.create(
        description=description,
        requestor=requestor,
        created=timezone.now(),
    )
    item_request.offers = []
    logger.info("Item request %s created by %s", item_request.pk, requestor.pk)
    return item_request


def list_own_requests(user_id: int) -> list[ItemRequest]:
    users.ensure_exists(user_id)
    return attach_offers(ItemRequest.objects.filter(requestor_id=user_id).order_by("-created", "-id"))


def list_other_requests(user_id: int, window: PageWindow) -> list[ItemRequest]:
    queryset = ItemRequest.objects.exclude(requestor_id=user_id).order_by("-created", "-id")
    return attach_offers(window.apply(queryset))


def get_request(user_id: int, request_id: int) -> ItemRequest:
    users.ensure_exists(user_id)
    try:
        item_request = ItemRequest.objects.get(pk=request_id)
    except ItemRequest.DoesNotExist:
        raise NotFoundError(f"Request not found: id={request_id}")
    return attach_offers([item_request])[0]
