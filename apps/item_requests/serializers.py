"""Serializers for item requests."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from apps.items.serializers import ItemSerializer

from .models import ItemRequest


class ItemRequestSerializer(serializers.ModelSerializer):
    """Запрос вместе с вещами, предложенными в ответ."""

    items = ItemSerializer(source="offers", many=True, read_only=True)

    class Meta:
        model = ItemRequest
        fields = ["id", "description", "created", "items"]
        read_only_fields = ["id", "created"]


class ItemRequestCreateSerializer(serializers.Serializer):
    description = serializers.CharField(max_length=200)
