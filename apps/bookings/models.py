"""Booking domain models for ShareIt."""

from __future__ import annotations

from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class Booking(models.Model):
    """Бронирование вещи на интервал времени."""

    class Status(models.TextChoices):
        WAITING = "WAITING", _("Ожидает решения владельца")
        APPROVED = "APPROVED", _("Подтверждено")
        REJECTED = "REJECTED", _("Отклонено")

    start = models.DateTimeField()
    end = models.DateTimeField()
    item = models.ForeignKey(
        "items.Item",
        on_delete=models.PROTECT,
        related_name="bookings",
    )
    booker = models.ForeignKey(
        "users.User",
        on_delete=models.PROTECT,
        related_name="bookings",
    )
    status = models.CharField(
        max_length=16,
        choices=Status.choices,
        default=Status.WAITING,
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Бронирование")
        verbose_name_plural = _("Бронирования")
        ordering = ["-start", "-id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(end__gt=models.F("start")),
                name="booking_start_before_end",
            ),
        ]
        indexes = [
            models.Index(fields=["booker", "start"], name="booking_booker_start_idx"),
            models.Index(fields=["item", "start"], name="booking_item_start_idx"),
            models.Index(fields=["status"], name="booking_status_idx"),
        ]

    def __str__(self) -> str:
        return f"Booking #{self.pk} of item {self.item_id} by {self.booker_id}"

    @property
    def is_waiting(self) -> bool:
        return self.status == self.Status.WAITING
