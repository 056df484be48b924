"""Reservation API views."""

from __future__ import annotations

from drf_spectacular.utils import extend_schema  # type: ignore
from rest_framework import status, viewsets  # type: ignore
from rest_framework.response import Response  # type: ignore

from apps.places import services as place_services
from apps.places.serializers import PlaceSerializer
from apps.users import services as user_services

from . import services
from .serializers import ReservationCreateSerializer, ReservationSerializer


class ReservationViewSet(viewsets.GenericViewSet):
    """Reservations reached through their place, their guest, or directly."""

    serializer_class = ReservationSerializer

    @extend_schema(request=ReservationCreateSerializer, responses={201: ReservationSerializer})
    def create(self, request, place_id=None):  # type: ignore
        place = place_services.get_place(place_id)
        serializer = ReservationCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        reservation = services.make_reservation(request.user, place, **serializer.validated_data)
        return Response(ReservationSerializer(reservation).data, status=status.HTTP_201_CREATED)

    def list_for_place(self, request, place_id=None):  # type: ignore
        place = place_services.get_place(place_id)
        reservations = services.list_place_reservations(request.user, place)
        return Response(ReservationSerializer(reservations, many=True).data)

    def retrieve_for_place(self, request, place_id=None, pk=None):  # type: ignore
        place = place_services.get_place(place_id)
        reservation = services.get_place_reservation(request.user, place, pk)
        return Response(ReservationSerializer(reservation).data)

    def list_for_user(self, request, user_id=None):  # type: ignore
        user = user_services.get_user(user_id)
        reservations = services.list_user_reservations(request.user, user)
        return Response(ReservationSerializer(reservations, many=True).data)

    def retrieve_for_user(self, request, user_id=None, pk=None):  # type: ignore
        user = user_services.get_user(user_id)
        reservation = services.get_user_reservation(request.user, user, pk)
        return Response(ReservationSerializer(reservation).data)

    @extend_schema(responses={200: PlaceSerializer})
    def place(self, request, pk=None):  # type: ignore
        place = services.get_reservation_place(request.user, pk)
        return Response(PlaceSerializer(place).data)
