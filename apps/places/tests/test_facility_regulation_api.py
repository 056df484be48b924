"""Tests for the per-place facility and regulation sheets."""

from __future__ import annotations

from unittest.mock import patch

from django.db.models.query import QuerySet
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.places.models import Facility, Place, Regulation
from apps.users.models import User


def make_place(owner, **overrides) -> Place:
    data = {
        "name": "Mountain lodge",
        "property_type": Place.PropertyType.RESORT,
        "description": "Lodge",
        "cost": 90,
        "country": "Austria",
        "city": "Innsbruck",
        "address": "Alpenweg 3",
        "latitude": 47.26,
        "longitude": 11.39,
        "area": 70,
        "guests": 2,
        "bedrooms": 1,
        "beds": 1,
        "bathrooms": 1,
    }
    data.update(overrides)
    return Place.objects.create(owner=owner, **data)


class FacilityAPITests(APITestCase):
    def setUp(self) -> None:
        self.owner = User.objects.create_user(
            email="owner@example.com",
            username="owner",
            phone="+77000000001",
            password="StrongPass123",
            role=User.Role.OWNER,
        )
        self.stranger = User.objects.create_user(
            email="stranger@example.com",
            username="stranger",
            phone="+77000000002",
            password="StrongPass123",
            role=User.Role.OWNER,
        )
        self.place = make_place(self.owner)
        self.url = reverse("places:place-facility", args=[self.place.id])
        self.client.force_authenticate(self.owner)

    def test_create_and_fetch(self) -> None:
        response = self.client.post(self.url, {"breakfast": True, "free_wifi": True}, format="json")
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertTrue(response.data["free_wifi"])
        self.assertFalse(response.data["balcony"])
        self.assertEqual(response.data["place_id"], self.place.id)

        fetched = self.client.get(self.url)
        self.assertEqual(fetched.status_code, status.HTTP_200_OK, fetched.data)
        self.assertEqual(fetched.data["id"], response.data["id"])

    def test_breakfast_is_required(self) -> None:
        response = self.client.post(self.url, {"free_wifi": True}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
        self.assertIn("breakfast", response.data["errors"])

    def test_second_facility_conflicts(self) -> None:
        Facility.objects.create(place=self.place, breakfast=True)
        response = self.client.post(self.url, {"breakfast": False}, format="json")
        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT, response.data)
        self.assertEqual(response.data["message"], "Facility already exists.")

    def test_facility_conflict_caught_at_insert(self) -> None:
        Facility.objects.create(place=self.place, breakfast=True)
        with patch.object(QuerySet, "exists", return_value=False):
            response = self.client.post(self.url, {"breakfast": False}, format="json")
        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT, response.data)
        self.assertEqual(response.data["message"], "Facility already exists.")
        self.assertEqual(Facility.objects.filter(place=self.place).count(), 1)

    def test_missing_facility_and_place(self) -> None:
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["message"], "Facility not found.")

        missing_place = self.client.post(
            reverse("places:place-facility", args=[9999]), {"breakfast": True}, format="json"
        )
        self.assertEqual(missing_place.status_code, status.HTTP_404_NOT_FOUND)

    def test_non_owner_cannot_create(self) -> None:
        self.client.force_authenticate(self.stranger)
        response = self.client.post(self.url, {"breakfast": True}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
        self.assertFalse(Facility.objects.exists())

    def test_update_keeps_unsent_flags(self) -> None:
        facility = Facility.objects.create(place=self.place, breakfast=True, free_parking=True)
        response = self.client.put(
            reverse("places:place-facility-detail", args=[self.place.id, facility.id]),
            {"free_parking": False},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        facility.refresh_from_db()
        self.assertFalse(facility.free_parking)
        self.assertTrue(facility.breakfast)

    def test_update_facility_of_other_place_is_not_found(self) -> None:
        other_place = make_place(self.owner, name="Second")
        facility = Facility.objects.create(place=other_place, breakfast=True)
        response = self.client.put(
            reverse("places:place-facility-detail", args=[self.place.id, facility.id]),
            {"balcony": True},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND, response.data)

    def test_delete(self) -> None:
        facility = Facility.objects.create(place=self.place, breakfast=True)
        response = self.client.delete(
            reverse("places:place-facility-detail", args=[self.place.id, facility.id])
        )
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(Facility.objects.exists())

    def test_list_all(self) -> None:
        Facility.objects.create(place=self.place, breakfast=True)
        Facility.objects.create(place=make_place(self.stranger, name="Other"), breakfast=False)
        response = self.client.get(reverse("places:facility-list"))
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(len(response.data), 2)


class RegulationAPITests(APITestCase):
    def setUp(self) -> None:
        self.owner = User.objects.create_user(
            email="owner@example.com",
            username="owner",
            phone="+77000000001",
            password="StrongPass123",
            role=User.Role.OWNER,
        )
        self.place = make_place(self.owner)
        self.url = reverse("places:place-regulation", args=[self.place.id])
        self.payload = {
            "arrival_time": "14:00",
            "departure_time": "11:00",
            "payment_method": "CASH_AND_CARD",
            "pets_allowed": True,
        }
        self.client.force_authenticate(self.owner)

    def test_create_and_fetch(self) -> None:
        response = self.client.post(self.url, self.payload, format="json")
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data["payment_method"], "CASH_AND_CARD")
        self.assertTrue(response.data["pets_allowed"])
        self.assertEqual(response.data["quiet_hours"], "")

        fetched = self.client.get(self.url)
        self.assertEqual(fetched.status_code, status.HTTP_200_OK, fetched.data)
        self.assertEqual(fetched.data["arrival_time"], "14:00")

    def test_required_fields_and_payment_method(self) -> None:
        response = self.client.post(self.url, {"payment_method": "BITCOIN"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
        errors = response.data["errors"]
        self.assertIn("arrival_time", errors)
        self.assertIn("departure_time", errors)
        self.assertIn(
            "Invalid payment method. Available payment methods are: CASH_ONLY, CARD_ONLY, CASH_AND_CARD",
            errors["payment_method"],
        )

    def test_second_regulation_conflicts(self) -> None:
        self.client.post(self.url, self.payload, format="json")
        response = self.client.post(self.url, self.payload, format="json")
        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT, response.data)

    def test_regulation_conflict_caught_at_insert(self) -> None:
        self.client.post(self.url, self.payload, format="json")
        with patch.object(QuerySet, "exists", return_value=False):
            response = self.client.post(self.url, self.payload, format="json")
        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT, response.data)
        self.assertEqual(response.data["message"], "Regulation already exists.")

    def test_update_and_delete(self) -> None:
        regulation = Regulation.objects.create(
            place=self.place,
            arrival_time="15:00",
            departure_time="10:00",
            payment_method=Regulation.PaymentMethod.CARD_ONLY,
        )
        detail = reverse("places:place-regulation-detail", args=[self.place.id, regulation.id])
        response = self.client.patch(detail, {"quiet_hours": "22:00-07:00"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        regulation.refresh_from_db()
        self.assertEqual(regulation.quiet_hours, "22:00-07:00")
        self.assertEqual(regulation.payment_method, Regulation.PaymentMethod.CARD_ONLY)

        deleted = self.client.delete(detail)
        self.assertEqual(deleted.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(Regulation.objects.exists())

    def test_missing_regulation(self) -> None:
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["message"], "Regulation not found.")
