"""API tests for reservations."""

from __future__ import annotations

from datetime import date

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.places.models import Place
from apps.reservations.models import Reservation
from apps.users.models import User


class ReservationAPITests(APITestCase):
    def setUp(self) -> None:
        self.owner = User.objects.create_user(
            email="owner@example.com",
            username="owner",
            phone="+77000000001",
            password="StrongPass123",
            role=User.Role.OWNER,
        )
        self.guest = User.objects.create_user(
            email="guest@example.com",
            username="guest",
            phone="+77000000002",
            password="StrongPass123",
        )
        self.other_guest = User.objects.create_user(
            email="other@example.com",
            username="other",
            phone="+77000000003",
            password="StrongPass123",
        )
        self.place = Place.objects.create(
            owner=self.owner,
            name="Lake house",
            property_type=Place.PropertyType.VILLA,
            description="House by the lake",
            cost=120,
            country="Italy",
            city="Como",
            address="Via Lago 5",
            latitude=45.81,
            longitude=9.08,
            area=140,
            guests=4,
            bedrooms=2,
            beds=3,
            bathrooms=2,
        )
        self.url = reverse("reservations:place-reservations", args=[self.place.id])

    def test_create_reservation(self) -> None:
        self.client.force_authenticate(self.guest)
        payload = {"check_in": "2030-07-01", "check_out": "2030-07-05"}
        response = self.client.post(self.url, payload, format="json")
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data["user_id"], self.guest.id)
        self.assertEqual(response.data["place_id"], self.place.id)
        self.assertEqual(response.data["nights"], 4)
        self.assertTrue(Reservation.objects.filter(user=self.guest, place=self.place).exists())

    def test_overlapping_reservations_are_rejected(self) -> None:
        Reservation.objects.create(
            user=self.other_guest,
            place=self.place,
            check_in=date(2030, 7, 1),
            check_out=date(2030, 7, 5),
        )
        self.client.force_authenticate(self.guest)
        for check_in, check_out in [
            ("2030-06-28", "2030-07-02"),  # overlaps the start
            ("2030-07-02", "2030-07-03"),  # inside
            ("2030-07-04", "2030-07-10"),  # overlaps the end
            ("2030-06-20", "2030-07-20"),  # covers
            ("2030-07-05", "2030-07-08"),  # starts on check-out day
        ]:
            with self.subTest(check_in=check_in, check_out=check_out):
                response = self.client.post(
                    self.url, {"check_in": check_in, "check_out": check_out}, format="json"
                )
                self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
                self.assertEqual(response.data["message"], "Failed to create reservation.")
        self.assertEqual(Reservation.objects.count(), 1)

    def test_adjacent_reservation_is_accepted(self) -> None:
        Reservation.objects.create(
            user=self.other_guest,
            place=self.place,
            check_in=date(2030, 7, 1),
            check_out=date(2030, 7, 5),
        )
        self.client.force_authenticate(self.guest)
        response = self.client.post(
            self.url, {"check_in": "2030-07-06", "check_out": "2030-07-08"}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)

    def test_inverted_or_empty_range_is_rejected(self) -> None:
        self.client.force_authenticate(self.guest)
        for check_in, check_out in [("2030-07-05", "2030-07-01"), ("2030-07-05", "2030-07-05")]:
            with self.subTest(check_in=check_in, check_out=check_out):
                response = self.client.post(
                    self.url, {"check_in": check_in, "check_out": check_out}, format="json"
                )
                self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
        self.assertFalse(Reservation.objects.exists())

    def test_unknown_place(self) -> None:
        self.client.force_authenticate(self.guest)
        response = self.client.post(
            reverse("reservations:place-reservations", args=[9999]),
            {"check_in": "2030-07-01", "check_out": "2030-07-05"},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND, response.data)

    def test_user_reservations(self) -> None:
        reservation = Reservation.objects.create(
            user=self.guest, place=self.place, check_in=date(2030, 7, 1), check_out=date(2030, 7, 5)
        )
        foreign = Reservation.objects.create(
            user=self.other_guest, place=self.place, check_in=date(2030, 8, 1), check_out=date(2030, 8, 5)
        )
        self.client.force_authenticate(self.guest)

        listing = self.client.get(reverse("reservations:user-reservations", args=[self.guest.id]))
        self.assertEqual(listing.status_code, status.HTTP_200_OK, listing.data)
        self.assertEqual([r["id"] for r in listing.data], [reservation.id])

        detail = self.client.get(
            reverse("reservations:user-reservation-detail", args=[self.guest.id, reservation.id])
        )
        self.assertEqual(detail.status_code, status.HTTP_200_OK, detail.data)
        self.assertEqual(detail.data["check_in"], "2030-07-01")

        not_mine = self.client.get(
            reverse("reservations:user-reservation-detail", args=[self.guest.id, foreign.id])
        )
        self.assertEqual(not_mine.status_code, status.HTTP_404_NOT_FOUND)

        other_user = self.client.get(reverse("reservations:user-reservations", args=[self.other_guest.id]))
        self.assertEqual(other_user.status_code, status.HTTP_403_FORBIDDEN)

    def test_place_reservations_visible_to_owner_only(self) -> None:
        reservation = Reservation.objects.create(
            user=self.guest, place=self.place, check_in=date(2030, 7, 1), check_out=date(2030, 7, 5)
        )
        self.client.force_authenticate(self.owner)
        listing = self.client.get(self.url)
        self.assertEqual(listing.status_code, status.HTTP_200_OK, listing.data)
        self.assertEqual(len(listing.data), 1)

        detail = self.client.get(
            reverse("reservations:place-reservation-detail", args=[self.place.id, reservation.id])
        )
        self.assertEqual(detail.status_code, status.HTTP_200_OK, detail.data)

        missing = self.client.get(
            reverse("reservations:place-reservation-detail", args=[self.place.id, 9999])
        )
        self.assertEqual(missing.status_code, status.HTTP_404_NOT_FOUND)

        self.client.force_authenticate(self.other_guest)
        forbidden = self.client.get(self.url)
        self.assertEqual(forbidden.status_code, status.HTTP_403_FORBIDDEN)

    def test_place_of_reservation(self) -> None:
        reservation = Reservation.objects.create(
            user=self.guest, place=self.place, check_in=date(2030, 7, 1), check_out=date(2030, 7, 5)
        )
        self.client.force_authenticate(self.guest)
        response = self.client.get(reverse("reservations:reservation-place", args=[reservation.id]))
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["id"], self.place.id)

        self.client.force_authenticate(self.other_guest)
        forbidden = self.client.get(reverse("reservations:reservation-place", args=[reservation.id]))
        self.assertEqual(forbidden.status_code, status.HTTP_403_FORBIDDEN)
