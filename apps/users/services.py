"""Domain services for accounts: registration, login and profile changes."""

from __future__ import annotations

import logging
from typing import Any

from django.contrib.auth import get_user_model  # type: ignore
from django.db import IntegrityError, transaction  # type: ignore
from rest_framework.exceptions import AuthenticationFailed, PermissionDenied  # type: ignore
from rest_framework_simplejwt.tokens import RefreshToken  # type: ignore

from shared.exceptions import ResourceAlreadyExists, ResourceNotFound

logger = logging.getLogger(__name__)

User = get_user_model()

EDITABLE_PROFILE_FIELDS = ("first_name", "last_name", "phone", "image_name")


def tokens_for_user(user) -> dict[str, str]:
    refresh = RefreshToken.for_user(user)
    return {"token": str(refresh.access_token), "refresh": str(refresh)}


@transaction.atomic
def register_user(*, username: str, email: str, password: str, **extra_fields: Any):
    """Create an account, rejecting a taken username or email with 409."""

    if User.objects.filter(username=username).exists() or User.objects.filter(email__iexact=email).exists():
        logger.warning("register_rejected email=%s username=%s reason=exists", email, username)
        raise ResourceAlreadyExists("User already exists.")

    try:
        with transaction.atomic():
            user = User.objects.create_user(email=email, password=password, username=username, **extra_fields)
    except IntegrityError:
        logger.warning("register_rejected email=%s username=%s reason=conflict", email, username)
        raise ResourceAlreadyExists("User already exists.")

    logger.info("user_registered user_id=%s role=%s", user.pk, user.role)
    return user


def authenticate_user(email: str, password: str):
    user = User.objects.filter(email__iexact=email).order_by("id").first()
    if user is None:
        raise ResourceNotFound("User not found.")

    if not user.is_active or not user.check_password(password):
        logger.warning("login_rejected user_id=%s", user.pk)
        raise AuthenticationFailed("Invalid email or password.")
    return user


def get_user(user_id) -> Any:
    try:
        return User.objects.get(pk=user_id)
    except User.DoesNotExist:
        raise ResourceNotFound("User not found.")


def ensure_is_self_or_staff(actor, user) -> None:
    """Only the account holder or platform staff may act on an account."""

    if actor.pk != user.pk and not actor.is_staff:
        raise PermissionDenied("You can only manage your own account.")


@transaction.atomic
def update_user(actor, user, data: dict[str, Any]):
    """Apply the profile fields present in ``data``; others stay unchanged."""

    ensure_is_self_or_staff(actor, user)
    changed = [field for field in EDITABLE_PROFILE_FIELDS if field in data]
    for field in changed:
        setattr(user, field, data[field])
    if changed:
        user.save(update_fields=changed)
    logger.info("user_updated user_id=%s fields=%s", user.pk, ",".join(changed))
    return user


@transaction.atomic
def delete_user(actor, user) -> None:
    ensure_is_self_or_staff(actor, user)
    user_id = user.pk
    user.delete()
    logger.info("user_deleted user_id=%s by=%s", user_id, actor.pk)
