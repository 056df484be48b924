"""Domain services for reservation workflows."""

from __future__ import annotations

import logging

from django.db import transaction  # type: ignore
from django.db.utils import NotSupportedError  # type: ignore
from rest_framework.exceptions import PermissionDenied  # type: ignore

from apps.places.models import Place
from shared.exceptions import BusinessRuleViolation, ResourceNotFound

from .models import Reservation

logger = logging.getLogger(__name__)

RESERVATION_FAILED = "Failed to create reservation."


def _lock_queryset_if_possible(queryset):
    """Apply select_for_update when inside transaction.atomic()."""

    if not transaction.get_connection().in_atomic_block:
        return queryset

    try:
        return queryset.select_for_update()
    except NotSupportedError:
        return queryset


def is_place_available(place: Place, check_in, check_out) -> bool:
    overlapping = Reservation.objects.for_place(place).overlapping(check_in, check_out)
    return not _lock_queryset_if_possible(overlapping).exists()


@transaction.atomic
def make_reservation(user, place: Place, check_in, check_out) -> Reservation:
    """Book ``place`` for ``user``; 400 on an inverted range or a clash."""

    if check_in >= check_out:
        logger.warning(
            "reservation_rejected place_id=%s user_id=%s reason=invalid_range", place.pk, user.pk
        )
        raise BusinessRuleViolation(RESERVATION_FAILED)

    # Serialises concurrent bookings of the same place.
    _lock_queryset_if_possible(Place.objects.filter(pk=place.pk)).exists()

    if not is_place_available(place, check_in, check_out):
        logger.warning(
            "reservation_rejected place_id=%s user_id=%s reason=overlap check_in=%s check_out=%s",
            place.pk,
            user.pk,
            check_in,
            check_out,
        )
        raise BusinessRuleViolation(RESERVATION_FAILED)

    reservation = Reservation.objects.create(
        user=user,
        place=place,
        check_in=check_in,
        check_out=check_out,
    )
    logger.info(
        "reservation_created reservation_id=%s place_id=%s user_id=%s",
        reservation.pk,
        place.pk,
        user.pk,
    )
    return reservation


def ensure_can_view_user_reservations(actor, user) -> None:
    if actor.pk != user.pk and not actor.is_staff:
        raise PermissionDenied("You can only view your own reservations.")


def ensure_can_view_place_reservations(actor, place: Place) -> None:
    if not place.is_owned_by(actor) and not actor.is_staff:
        raise PermissionDenied("Only the owner can view reservations of the place.")


def list_user_reservations(actor, user):
    ensure_can_view_user_reservations(actor, user)
    return Reservation.objects.for_user(user).select_related("place")


def get_user_reservation(actor, user, reservation_id) -> Reservation:
    ensure_can_view_user_reservations(actor, user)
    return _get_scoped(Reservation.objects.for_user(user), reservation_id)


def list_place_reservations(actor, place: Place):
    ensure_can_view_place_reservations(actor, place)
    return Reservation.objects.for_place(place).select_related("user")


def get_place_reservation(actor, place: Place, reservation_id) -> Reservation:
    ensure_can_view_place_reservations(actor, place)
    return _get_scoped(Reservation.objects.for_place(place), reservation_id)


def get_reservation_place(actor, reservation_id) -> Place:
    reservation = _get_scoped(Reservation.objects.select_related("place"), reservation_id)
    if reservation.user_id != actor.pk:
        ensure_can_view_place_reservations(actor, reservation.place)
    return reservation.place


def _get_scoped(queryset, reservation_id) -> Reservation:
    try:
        return queryset.get(pk=reservation_id)
    except Reservation.DoesNotExist:
        raise ResourceNotFound("Reservation not found.")


def has_reservation(user, place: Place) -> bool:
    return Reservation.objects.for_user(user).for_place(place).exists()
