"""Item and comment models for ShareIt."""

from __future__ import annotations

from django.db import models  # type: ignore
from django.utils import timezone  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class Item(models.Model):
    """Вещь, которую владелец сдаёт в аренду."""

    name = models.CharField(max_length=255)
    description = models.CharField(max_length=200)
    is_available = models.BooleanField(
        default=True,
        help_text=_("Доступна ли вещь для бронирования."),
    )
    owner = models.ForeignKey(
        "users.User",
        on_delete=models.PROTECT,
        related_name="items",
    )
    request = models.ForeignKey(
        "item_requests.ItemRequest",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="items",
        help_text=_("Запрос, в ответ на который создана вещь."),
    )

    class Meta:
        verbose_name = _("Вещь")
        verbose_name_plural = _("Вещи")
        ordering = ["id"]
        indexes = [
            models.Index(fields=["owner"], name="item_owner_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.name} (#{self.pk})"


class Comment(models.Model):
    """Отзыв арендатора о вещи."""

    text = models.CharField(max_length=500)
    item = models.ForeignKey(
        Item,
        on_delete=models.CASCADE,
        related_name="comments",
    )
    author = models.ForeignKey(
        "users.User",
        on_delete=models.CASCADE,
        related_name="comments",
    )
    created = models.DateTimeField(default=timezone.now)

    class Meta:
        verbose_name = _("Комментарий")
        verbose_name_plural = _("Комментарии")
        ordering = ["created", "id"]

    def __str__(self) -> str:
        return f"Comment #{self.pk} on item {self.item_id}"
