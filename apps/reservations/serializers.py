"""Serializers for reservations."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .models import Reservation


class ReservationSerializer(serializers.ModelSerializer):
    user_id = serializers.ReadOnlyField()
    place_id = serializers.ReadOnlyField()
    nights = serializers.ReadOnlyField()

    class Meta:
        model = Reservation
        fields = ["id", "check_in", "check_out", "nights", "user_id", "place_id"]
        read_only_fields = ["id"]


class ReservationCreateSerializer(serializers.Serializer):
    check_in = serializers.DateField()
    check_out = serializers.DateField()
