"""Serializers for user-related API endpoints."""

from __future__ import annotations

from django.core.validators import RegexValidator  # type: ignore
from rest_framework import serializers  # type: ignore

from .models import User

NAME_VALIDATOR = RegexValidator(
    regex=r"^[A-Za-z]+(?:(?:, |-)[A-Za-z]+)*$",
    message="Name may contain latin letters separated by ', ' or '-'.",
)


class UserSerializer(serializers.ModelSerializer):
    """Пользователь в ответах API и во вложенных объектах бронирования."""

    class Meta:
        model = User
        fields = ["id", "name", "email"]
        read_only_fields = ["id"]


class UserWriteSerializer(serializers.Serializer):
    """Создание и частичное обновление пользователя.

    Uniqueness of the email is checked by the service, so that the
    conflict surfaces as 409 rather than as a field error.
    """

    name = serializers.CharField(max_length=255, validators=[NAME_VALIDATOR])
    email = serializers.EmailField(max_length=512)
