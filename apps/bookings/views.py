"""API views for the booking domain."""

from __future__ import annotations

from rest_framework import status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore

from shared.headers import sharer_user_id
from shared.pagination import page_window

from .serializers import BookingCreateSerializer, BookingDecisionSerializer, BookingSerializer
from .services import BookingService


class BookingViewSet(viewsets.ViewSet):
    """Viewset для создания, решения и просмотра бронирований."""

    lookup_value_regex = r"\d+"
    service_class = BookingService

    def get_service(self) -> BookingService:
        return self.service_class()

    def list(self, request):  # type: ignore
        user_id = sharer_user_id(request)
        window = page_window(request)
        state = request.query_params.get("state", "ALL")
        bookings = self.get_service().list_for_booker(user_id, state, window)
        return Response(BookingSerializer(bookings, many=True).data)

    @action(detail=False, methods=["get"])
    def owner(self, request):  # type: ignore
        user_id = sharer_user_id(request)
        window = page_window(request)
        state = request.query_params.get("state", "ALL")
        bookings = self.get_service().list_for_owner(user_id, state, window)
        return Response(BookingSerializer(bookings, many=True).data)

    def retrieve(self, request, pk=None):  # type: ignore
        user_id = sharer_user_id(request)
        booking = self.get_service().get_booking_by_id(user_id, int(pk))
        return Response(BookingSerializer(booking).data)

    def create(self, request):  # type: ignore
        user_id = sharer_user_id(request)
        serializer = BookingCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        booking = self.get_service().create_booking(user_id, data["start"], data["end"], data["itemId"])
        return Response(BookingSerializer(booking).data, status=status.HTTP_201_CREATED)

    def partial_update(self, request, pk=None):  # type: ignore
        user_id = sharer_user_id(request)
        # plain dict: on a QueryDict a missing BooleanField silently reads as False
        decision = BookingDecisionSerializer(data=request.query_params.dict())
        decision.is_valid(raise_exception=True)
        booking = self.get_service().approve_booking(user_id, int(pk), decision.validated_data["approved"])
        return Response(BookingSerializer(booking).data)
