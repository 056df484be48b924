"""Serializers for places, facilities and regulations."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from shared.serializers import EnumChoiceField

from .models import Facility, Place, Regulation


class PlaceSerializer(serializers.ModelSerializer):
    owner_id = serializers.ReadOnlyField()
    property_type = EnumChoiceField(Place.PropertyType.choices, label_name="property type")

    class Meta:
        model = Place
        fields = [
            "id",
            "name",
            "property_type",
            "description",
            "main_image",
            "cost",
            "country",
            "city",
            "address",
            "latitude",
            "longitude",
            "area",
            "guests",
            "bedrooms",
            "beds",
            "bathrooms",
            "owner_id",
        ]
        read_only_fields = ["id", "main_image", "owner_id"]


class FacilitySerializer(serializers.ModelSerializer):
    place_id = serializers.ReadOnlyField()

    class Meta:
        model = Facility
        fields = [
            "id",
            "free_parking",
            "non_smoking",
            "free_wifi",
            "breakfast",
            "balcony",
            "swimming_pool",
            "place_id",
        ]
        read_only_fields = ["id", "place_id"]
        extra_kwargs = {"breakfast": {"required": True}}


class RegulationSerializer(serializers.ModelSerializer):
    place_id = serializers.ReadOnlyField()
    payment_method = EnumChoiceField(Regulation.PaymentMethod.choices, label_name="payment method")

    class Meta:
        model = Regulation
        fields = [
            "id",
            "arrival_time",
            "departure_time",
            "cancellation_policy",
            "payment_method",
            "age_restriction",
            "pets_allowed",
            "events_allowed",
            "smoking_allowed",
            "quiet_hours",
            "place_id",
        ]
        read_only_fields = ["id", "place_id"]


class AvailabilityQuerySerializer(serializers.Serializer):
    city = serializers.CharField()
    country = serializers.CharField()
    guests = serializers.IntegerField(min_value=1)
    check_in = serializers.DateField(input_formats=["%Y-%m-%d"])
    check_out = serializers.DateField(input_formats=["%Y-%m-%d"])
