"""API views for users."""

from __future__ import annotations

from rest_framework import status, viewsets  # type: ignore
from rest_framework.response import Response  # type: ignore

from . import services
from .serializers import UserSerializer, UserWriteSerializer


class UserViewSet(viewsets.ViewSet):
    """CRUD над пользователями."""

    lookup_value_regex = r"\d+"

    def list(self, request):  # type: ignore
        return Response(UserSerializer(services.list_users(), many=True).data)

    def retrieve(self, request, pk=None):  # type: ignore
        return Response(UserSerializer(services.get_user(int(pk))).data)

    def create(self, request):  # type: ignore
        serializer = UserWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = services.create_user(**serializer.validated_data)
        return Response(UserSerializer(user).data, status=status.HTTP_201_CREATED)

    def partial_update(self, request, pk=None):  # type: ignore
        serializer = UserWriteSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        user = services.update_user(int(pk), **serializer.validated_data)
        return Response(UserSerializer(user).data)

    def destroy(self, request, pk=None):  # type: ignore
        services.delete_user(int(pk))
        return Response(status=status.HTTP_204_NO_CONTENT)
