"""Item request models."""

from __future__ import annotations

from django.db import models  # type: ignore
from django.utils import timezone  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class ItemRequest(models.Model):
    """Запрос на вещь, которой пока нет среди объявлений."""

    description = models.CharField(max_length=200)
    requestor = models.ForeignKey(
        "users.User",
        on_delete=models.CASCADE,
        related_name="item_requests",
    )
    created = models.DateTimeField(default=timezone.now)

    class Meta:
        verbose_name = _("Запрос вещи")
        verbose_name_plural = _("Запросы вещей")
        ordering = ["-created"]
        indexes = [
            models.Index(fields=["requestor", "created"], name="item_request_requestor_idx"),
        ]

    def __str__(self) -> str:
        return f"Request #{self.pk} by {self.requestor_id}"
