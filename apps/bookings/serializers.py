"""Serializers for the booking domain."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from apps.items.serializers import ItemSerializer
from apps.users.serializers import UserSerializer

from .models import Booking


class BookingCreateSerializer(serializers.Serializer):
    """Запрос на бронирование вещи.

    Only the shape is checked here; the date range and the item rules are
    enforced by the booking lifecycle handlers.
    """

    start = serializers.DateTimeField()
    end = serializers.DateTimeField()
    itemId = serializers.IntegerField(min_value=1)


class BookingDecisionSerializer(serializers.Serializer):
    approved = serializers.BooleanField()


class BookingSerializer(serializers.ModelSerializer):
    """Детальный сериализатор бронирования."""

    item = ItemSerializer(read_only=True)
    booker = UserSerializer(read_only=True)

    class Meta:
        model = Booking
        fields = ["id", "start", "end", "status", "item", "booker"]
        read_only_fields = ["id", "start", "end", "status"]
