"""Serializers for authentication flows (register, login)."""

from __future__ import annotations

from typing import Any

from django.contrib.auth import get_user_model  # type: ignore
from rest_framework import serializers  # type: ignore

from shared.serializers import EnumChoiceField

from .models import PHONE_VALIDATOR

User = get_user_model()


class RegisterSerializer(serializers.Serializer):
    username = serializers.CharField(max_length=150)
    first_name = serializers.CharField(max_length=150)
    last_name = serializers.CharField(max_length=150)
    email = serializers.EmailField()
    password = serializers.CharField(min_length=8, write_only=True)
    phone = serializers.CharField(max_length=20, validators=[PHONE_VALIDATOR])
    role = EnumChoiceField(User.Role.choices, label_name="role")

    def validate_phone(self, value: str) -> str:
        return User.objects.normalize_phone(value)


class LoginSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True)

    def validate(self, attrs: dict[str, Any]) -> dict[str, Any]:  # type: ignore
        attrs["email"] = attrs["email"].strip()
        return attrs


class AuthResponseSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    token = serializers.CharField()
    refresh = serializers.CharField()
