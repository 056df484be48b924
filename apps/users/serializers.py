"""Serializers for user-related API endpoints."""

from __future__ import annotations

from django.contrib.auth import get_user_model  # type: ignore
from rest_framework import serializers  # type: ignore

from .models import PHONE_VALIDATOR

User = get_user_model()


class UserSerializer(serializers.ModelSerializer):
    """Public profile of an account."""

    class Meta:
        model = User
        fields = [
            "id",
            "username",
            "email",
            "first_name",
            "last_name",
            "phone",
            "image_name",
            "role",
        ]
        read_only_fields = fields


class UserUpdateSerializer(serializers.Serializer):
    """Profile fields a user may change; every field is optional."""

    first_name = serializers.CharField(max_length=150, required=False)
    last_name = serializers.CharField(max_length=150, required=False)
    phone = serializers.CharField(max_length=20, required=False, validators=[PHONE_VALIDATOR])
    image_name = serializers.CharField(max_length=255, required=False)
