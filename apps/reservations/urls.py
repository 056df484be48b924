"""URL routing for reservations."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .views import ReservationViewSet

app_name = "reservations"

place_reservations = ReservationViewSet.as_view({"get": "list_for_place", "post": "create"})
place_reservation_detail = ReservationViewSet.as_view({"get": "retrieve_for_place"})
user_reservations = ReservationViewSet.as_view({"get": "list_for_user"})
user_reservation_detail = ReservationViewSet.as_view({"get": "retrieve_for_user"})
reservation_place = ReservationViewSet.as_view({"get": "place"})

urlpatterns = [
    path("places/<int:place_id>/reservations/", place_reservations, name="place-reservations"),
    path(
        "places/<int:place_id>/reservations/<int:pk>/",
        place_reservation_detail,
        name="place-reservation-detail",
    ),
    path("users/<int:user_id>/reservations/", user_reservations, name="user-reservations"),
    path(
        "users/<int:user_id>/reservations/<int:pk>/",
        user_reservation_detail,
        name="user-reservation-detail",
    ),
    path("reservations/<int:pk>/place/", reservation_place, name="reservation-place"),
]
