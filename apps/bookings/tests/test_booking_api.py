"""Integration tests for booking API endpoints."""

from __future__ import annotations

from datetime import timedelta

from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APITestCase

from apps.bookings.models import Booking
from apps.items.models import Item
from apps.users.models import User


class BookingAPITestCase(APITestCase):
    def setUp(self) -> None:
        self.owner = User.objects.create(name="Owner", email="owner@example.com")
        self.booker = User.objects.create(name="Booker", email="booker@example.com")
        self.stranger = User.objects.create(name="Stranger", email="stranger@example.com")
        self.item = Item.objects.create(
            name="Drill",
            description="Cordless drill with two batteries",
            is_available=True,
            owner=self.owner,
        )
        self.list_url = reverse("booking-list")
        self.owner_url = reverse("booking-owner")

    def as_user(self, user: User) -> dict[str, str]:
        return {"HTTP_X_SHARER_USER_ID": str(user.pk)}

    def _payload(self, start, end, item: Item | None = None) -> dict:
        return {
            "start": start.isoformat(),
            "end": end.isoformat(),
            "itemId": (item or self.item).pk,
        }

    def _create(self, user: User, start, end, item: Item | None = None):
        return self.client.post(self.list_url, self._payload(start, end, item), format="json", **self.as_user(user))

    def _future_window(self, minutes: int = 1):
        now = timezone.now()
        return now + timedelta(minutes=minutes), now + timedelta(minutes=minutes * 2)

    def _decide(self, user: User, booking_id: int, approved: str):
        url = reverse("booking-detail", args=[booking_id])
        return self.client.patch(f"{url}?approved={approved}", **self.as_user(user))


class BookingLifecycleTests(BookingAPITestCase):
    """Создание, подтверждение и отклонение бронирований."""

    def test_booker_creates_waiting_booking(self) -> None:
        start, end = self._future_window()

        response = self._create(self.booker, start, end)

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data["status"], "WAITING")
        self.assertEqual(response.data["item"]["id"], self.item.pk)
        self.assertEqual(response.data["item"]["available"], True)
        self.assertEqual(response.data["booker"]["id"], self.booker.pk)
        self.assertEqual(response.data["booker"]["email"], "booker@example.com")
        self.assertEqual(Booking.objects.get().status, Booking.Status.WAITING)

    def test_owner_approves_once(self) -> None:
        start, end = self._future_window()
        booking_id = self._create(self.booker, start, end).data["id"]

        approved = self._decide(self.owner, booking_id, "true")
        self.assertEqual(approved.status_code, status.HTTP_200_OK, approved.data)
        self.assertEqual(approved.data["status"], "APPROVED")

        second = self._decide(self.owner, booking_id, "false")
        self.assertEqual(second.status_code, status.HTTP_400_BAD_REQUEST, second.data)
        self.assertEqual(second.data["error"], f"Booking not available: id={booking_id}")
        self.assertEqual(Booking.objects.get(pk=booking_id).status, Booking.Status.APPROVED)

    def test_owner_rejects_booking(self) -> None:
        start, end = self._future_window()
        booking_id = self._create(self.booker, start, end).data["id"]

        response = self._decide(self.owner, booking_id, "false")

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["status"], "REJECTED")
        again = self._decide(self.owner, booking_id, "true")
        self.assertEqual(again.status_code, status.HTTP_400_BAD_REQUEST)

    def test_only_owner_can_decide(self) -> None:
        start, end = self._future_window()
        booking_id = self._create(self.booker, start, end).data["id"]

        for user in (self.booker, self.stranger):
            response = self._decide(user, booking_id, "true")
            self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND, response.data)
            self.assertEqual(response.data["error"], "You are not the owner of this item!")
        self.assertEqual(Booking.objects.get(pk=booking_id).status, Booking.Status.WAITING)

    def test_decision_requires_approved_parameter(self) -> None:
        start, end = self._future_window()
        booking_id = self._create(self.booker, start, end).data["id"]
        url = reverse("booking-detail", args=[booking_id])

        response = self.client.patch(url, **self.as_user(self.owner))

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data[0]["fieldName"], "approved")
        self.assertEqual(Booking.objects.get(pk=booking_id).status, Booking.Status.WAITING)

    def test_decision_on_missing_booking(self) -> None:
        response = self._decide(self.owner, 999, "true")

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["error"], "Booking not found: id=999")

    def test_start_in_the_past_is_rejected(self) -> None:
        now = timezone.now()

        response = self._create(self.booker, now - timedelta(seconds=60), now + timedelta(minutes=1))

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
        self.assertEqual(response.data["error"], "Date is not correct")
        self.assertEqual(response.data["status"], "BAD_REQUEST")
        self.assertFalse(Booking.objects.exists())

    def test_end_before_start_is_rejected(self) -> None:
        start, end = self._future_window(minutes=10)

        response = self._create(self.booker, end, start)

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"], "Date is not correct")

    def test_equal_start_and_end_are_rejected(self) -> None:
        start, _ = self._future_window()

        response = self._create(self.booker, start, start)

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_owner_cannot_book_own_item(self) -> None:
        start, end = self._future_window()

        response = self._create(self.owner, start, end)

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND, response.data)
        self.assertEqual(
            response.data["error"], f"Item with id {self.item.pk} is not available for booking"
        )

    def test_unavailable_item_cannot_be_booked(self) -> None:
        self.item.is_available = False
        self.item.save()
        start, end = self._future_window()

        response = self._create(self.booker, start, end)

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
        self.assertEqual(response.data["error"], f"Item with id {self.item.pk} is not available")

    def test_unknown_user_and_item(self) -> None:
        start, end = self._future_window()

        ghost = self.client.post(
            self.list_url, self._payload(start, end), format="json", HTTP_X_SHARER_USER_ID="999"
        )
        self.assertEqual(ghost.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(ghost.data["error"], "User not found: id=999")

        payload = self._payload(start, end)
        payload["itemId"] = 999
        missing_item = self.client.post(self.list_url, payload, format="json", **self.as_user(self.booker))
        self.assertEqual(missing_item.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(missing_item.data["error"], "Item not found: id=999")

    def test_overlapping_waiting_bookings_are_accepted(self) -> None:
        start, end = self._future_window()
        other = User.objects.create(name="Other", email="other@example.com")

        first = self._create(self.booker, start, end)
        second = self._create(other, start, end)

        self.assertEqual(first.status_code, status.HTTP_201_CREATED)
        self.assertEqual(second.status_code, status.HTTP_201_CREATED)
        self.assertEqual(Booking.objects.filter(item=self.item).count(), 2)

    def test_missing_fields_are_reported_by_name(self) -> None:
        response = self.client.post(self.list_url, {"itemId": self.item.pk}, format="json", **self.as_user(self.booker))

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual({error["fieldName"] for error in response.data}, {"start", "end"})

    def test_sharer_header_is_required(self) -> None:
        start, end = self._future_window()

        response = self.client.post(self.list_url, self._payload(start, end), format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data[0]["fieldName"], "X-Sharer-User-Id")


class BookingVisibilityTests(BookingAPITestCase):
    def setUp(self) -> None:
        super().setUp()
        start, end = self._future_window()
        self.booking_id = self._create(self.booker, start, end).data["id"]
        self.detail_url = reverse("booking-detail", args=[self.booking_id])

    def test_booker_and_owner_see_booking(self) -> None:
        for user in (self.booker, self.owner):
            response = self.client.get(self.detail_url, **self.as_user(user))
            self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
            self.assertEqual(response.data["id"], self.booking_id)

    def test_stranger_gets_not_found(self) -> None:
        response = self.client.get(self.detail_url, **self.as_user(self.stranger))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["error"], f"Wrong user: id={self.stranger.pk}")
        self.assertEqual(response.data["code"], 404)
        self.assertEqual(response.data["status"], "NOT_FOUND")


class BookingListingTests(BookingAPITestCase):
    """Фильтрация по состоянию и постраничная выдача."""

    def setUp(self) -> None:
        super().setUp()
        now = timezone.now()
        self.past = Booking.objects.create(
            item=self.item, booker=self.booker, status=Booking.Status.APPROVED,
            start=now - timedelta(days=3), end=now - timedelta(days=2),
        )
        self.current = Booking.objects.create(
            item=self.item, booker=self.booker, status=Booking.Status.APPROVED,
            start=now - timedelta(hours=1), end=now + timedelta(hours=1),
        )
        self.future = Booking.objects.create(
            item=self.item, booker=self.booker, status=Booking.Status.WAITING,
            start=now + timedelta(days=1), end=now + timedelta(days=2),
        )
        self.rejected = Booking.objects.create(
            item=self.item, booker=self.booker, status=Booking.Status.REJECTED,
            start=now + timedelta(days=5), end=now + timedelta(days=6),
        )

    def _ids(self, url: str, user: User, **params) -> list[int]:
        response = self.client.get(url, params, **self.as_user(user))
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        return [booking["id"] for booking in response.data]

    def test_all_is_sorted_by_start_descending(self) -> None:
        expected = [self.rejected.pk, self.future.pk, self.current.pk, self.past.pk]

        self.assertEqual(self._ids(self.list_url, self.booker), expected)
        self.assertEqual(self._ids(self.owner_url, self.owner, state="all"), expected)

    def test_states_partition_by_time(self) -> None:
        for url, user in ((self.list_url, self.booker), (self.owner_url, self.owner)):
            self.assertEqual(self._ids(url, user, state="PAST"), [self.past.pk])
            self.assertEqual(self._ids(url, user, state="CURRENT"), [self.current.pk])
            self.assertEqual(self._ids(url, user, state="FUTURE"), [self.rejected.pk, self.future.pk])

    def test_states_by_status(self) -> None:
        self.assertEqual(self._ids(self.list_url, self.booker, state="waiting"), [self.future.pk])
        self.assertEqual(self._ids(self.owner_url, self.owner, state="Rejected"), [self.rejected.pk])

    def test_listing_is_scoped_to_actor_role(self) -> None:
        self.assertEqual(self._ids(self.list_url, self.owner), [])
        self.assertEqual(self._ids(self.owner_url, self.booker), [])
        self.assertEqual(self._ids(self.owner_url, self.stranger), [])

    def test_unknown_state_is_rejected(self) -> None:
        for url, user in ((self.list_url, self.booker), (self.owner_url, self.owner)):
            response = self.client.get(url, {"state": "FAIL"}, **self.as_user(user))
            self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
            self.assertEqual(response.data["error"], "Unknown state: FAIL")

    def test_pagination_is_page_based(self) -> None:
        first_page = self._ids(self.list_url, self.booker, **{"from": 0, "size": 2})
        same_page = self._ids(self.list_url, self.booker, **{"from": 1, "size": 2})
        second_page = self._ids(self.list_url, self.booker, **{"from": 2, "size": 2})

        self.assertEqual(first_page, [self.rejected.pk, self.future.pk])
        self.assertEqual(same_page, first_page)
        self.assertEqual(second_page, [self.current.pk, self.past.pk])
        self.assertEqual(
            self._ids(self.owner_url, self.owner, **{"from": 0, "size": 10}),
            self._ids(self.owner_url, self.owner, **{"from": 5, "size": 10}),
        )

    def test_invalid_window_is_rejected(self) -> None:
        negative = self.client.get(self.list_url, {"from": -1}, **self.as_user(self.booker))
        zero_size = self.client.get(self.list_url, {"size": 0}, **self.as_user(self.booker))

        self.assertEqual(negative.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(negative.data[0]["fieldName"], "from")
        self.assertEqual(zero_size.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(zero_size.data[0]["fieldName"], "size")

    def test_unknown_user_cannot_list(self) -> None:
        response = self.client.get(self.owner_url, HTTP_X_SHARER_USER_ID="999")

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["error"], "User not found: id=999")
