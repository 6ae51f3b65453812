"""API views for items and comments."""

from __future__ import annotations

from rest_framework import status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore

from shared.headers import sharer_user_id
from shared.pagination import page_window

from . import services
from .serializers import (
    CommentCreateSerializer,
    CommentSerializer,
    ItemDetailSerializer,
    ItemSerializer,
    ItemWriteSerializer,
)


class ItemViewSet(viewsets.ViewSet):
    """Вещи владельца, поиск и отзывы."""

    lookup_value_regex = r"\d+"

    def list(self, request):  # type: ignore
        user_id = sharer_user_id(request)
        window = page_window(request)
        item_list = services.list_owner_items(user_id, window)
        return Response(ItemDetailSerializer(item_list, many=True).data)

    def retrieve(self, request, pk=None):  # type: ignore
        user_id = sharer_user_id(request)
        item = services.get_item(user_id, int(pk))
        return Response(ItemDetailSerializer(item).data)

    def create(self, request):  # type: ignore
        user_id = sharer_user_id(request)
        serializer = ItemWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        item = services.create_item(user_id, **serializer.to_service_kwargs())
        return Response(ItemSerializer(item).data, status=status.HTTP_201_CREATED)

    def partial_update(self, request, pk=None):  # type: ignore
        user_id = sharer_user_id(request)
        serializer = ItemWriteSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        item = services.update_item(user_id, int(pk), **serializer.to_service_kwargs())
        return Response(ItemSerializer(item).data)

    @action(detail=False, methods=["get"])
    def search(self, request):  # type: ignore
        window = page_window(request)
        item_list = services.search_items(request.query_params.get("text", ""), window)
        return Response(ItemSerializer(item_list, many=True).data)

    @action(detail=True, methods=["post"])
    def comment(self, request, pk=None):  # type: ignore
        user_id = sharer_user_id(request)
        serializer = CommentCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        comment = services.create_comment(user_id, int(pk), serializer.validated_data["text"])
        return Response(CommentSerializer(comment).data, status=status.HTTP_201_CREATED)
