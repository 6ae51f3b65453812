"""API views for item requests."""

from __future__ import annotations

from rest_framework import status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore

from shared.headers import sharer_user_id
from shared.pagination import page_window

from . import services
from .serializers import ItemRequestCreateSerializer, ItemRequestSerializer


class ItemRequestViewSet(viewsets.ViewSet):
    lookup_value_regex = r"\d+"

    def list(self, request):  # type: ignore
        user_id = sharer_user_id(request)
        return Response(ItemRequestSerializer(services.list_own_requests(user_id), many=True).data)

    @action(detail=False, methods=["get"], url_path="all")
    def all_requests(self, request):  # type: ignore
        user_id = sharer_user_id(request)
        window = page_window(request)
        requests = services.list_other_requests(user_id, window)
        return Response(ItemRequestSerializer(requests, many=True).data)

    def retrieve(self, request, pk=None):  # type: ignore
        user_id = sharer_user_id(request)
        return Response(ItemRequestSerializer(services.get_request(user_id, int(pk))).data)

    def create(self, request):  # type: ignore
        user_id = sharer_user_id(request)
        serializer = ItemRequestCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        item_request = services.create_request(user_id, serializer.validated_data["description"])
        return Response(ItemRequestSerializer(item_request).data, status=status.HTTP_201_CREATED)
