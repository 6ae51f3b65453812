"""Item directory: id-keyed lookup used by bookings and requests."""

from __future__ import annotations

from shared.exceptions import NotFoundError

from .models import Item


class ItemDirectory:
    """Read access to items by id, with the owner loaded."""

    def get_by_id(self, item_id: int) -> Item:
        try:
            return Item.objects.select_related("owner", "request").get(pk=item_id)
        except Item.DoesNotExist:
            raise NotFoundError(f"Item not found: id={item_id}")
