"""Domain services for listings and their facility and regulation sheets."""

from __future__ import annotations

import logging
from typing import Any, TYPE_CHECKING

from django.db import IntegrityError, transaction  # type: ignore

from shared.exceptions import BusinessRuleViolation, ResourceAlreadyExists, ResourceNotFound

from .models import Facility, Place, Regulation

if TYPE_CHECKING:  # pragma: no cover - type checking only
    from django.db.models import Model, QuerySet  # type: ignore

logger = logging.getLogger(__name__)


def get_place(place_id) -> Place:
    try:
        return Place.objects.select_related("owner").get(pk=place_id)
    except Place.DoesNotExist:
        raise ResourceNotFound("Place not found.")


def ensure_is_owner_role(user) -> None:
    if not user.is_owner():
        logger.warning("place_rejected user_id=%s reason=not_owner_role", user.pk)
        raise BusinessRuleViolation("User is not an owner.")


def ensure_owns_place(user, place: Place) -> None:
    if not place.is_owned_by(user) and not user.is_staff:
        logger.warning("place_rejected user_id=%s place_id=%s reason=not_place_owner", user.pk, place.pk)
        raise BusinessRuleViolation("User is not the owner of the place.")


def _apply_changes(instance: "Model", data: dict[str, Any]) -> list[str]:
    changed = list(data)
    for field, value in data.items():
        setattr(instance, field, value)
    if changed:
        instance.save(update_fields=changed)
    return changed


@transaction.atomic
def create_place(owner, data: dict[str, Any]) -> Place:
    ensure_is_owner_role(owner)
    place = Place.objects.create(owner=owner, **data)
    logger.info("place_created place_id=%s owner_id=%s", place.pk, owner.pk)
    return place


@transaction.atomic
def update_place(actor, place: Place, data: dict[str, Any]) -> Place:
    ensure_owns_place(actor, place)
    changed = _apply_changes(place, data)
    logger.info("place_updated place_id=%s fields=%s", place.pk, ",".join(changed))
    return place


@transaction.atomic
def delete_place(actor, place: Place) -> None:
    ensure_owns_place(actor, place)
    place_id = place.pk
    place.delete()
    logger.info("place_deleted place_id=%s by=%s", place_id, actor.pk)


def find_available_places(*, city: str, country: str, guests: int, check_in, check_out) -> "QuerySet[Place]":
    if check_in >= check_out:
        raise BusinessRuleViolation("Check-in date must be before check-out date.")
    return Place.objects.available(
        city=city,
        country=country,
        guests=guests,
        check_in=check_in,
        check_out=check_out,
    )


# --- Facility and regulation sheets ----------------------------------------
# At most one record of each kind per place.


def _label(model) -> str:
    return model._meta.verbose_name.title()


def _get_for_place(model, place: Place):
    try:
        return model.objects.get(place=place)
    except model.DoesNotExist:
        raise ResourceNotFound(f"{_label(model)} not found.")


def _get_by_id_for_place(model, place: Place, record_id):
    try:
        return model.objects.get(pk=record_id, place=place)
    except model.DoesNotExist:
        raise ResourceNotFound(f"{_label(model)} not found.")


@transaction.atomic
def _create_for_place(model, actor, place: Place, data: dict[str, Any]):
    ensure_owns_place(actor, place)
    if model.objects.filter(place=place).exists():
        raise ResourceAlreadyExists(f"{_label(model)} already exists.")
    try:
        with transaction.atomic():
            record = model.objects.create(place=place, **data)
    except IntegrityError:
        raise ResourceAlreadyExists(f"{_label(model)} already exists.")
    logger.info("%s_created place_id=%s id=%s", model._meta.model_name, place.pk, record.pk)
    return record


@transaction.atomic
def _update_for_place(model, actor, place: Place, record_id, data: dict[str, Any]):
    ensure_owns_place(actor, place)
    record = _get_by_id_for_place(model, place, record_id)
    _apply_changes(record, data)
    logger.info("%s_updated place_id=%s id=%s", model._meta.model_name, place.pk, record.pk)
    return record


@transaction.atomic
def _delete_for_place(model, actor, place: Place, record_id) -> None:
    ensure_owns_place(actor, place)
    record = _get_by_id_for_place(model, place, record_id)
    record.delete()
    logger.info("%s_deleted place_id=%s id=%s", model._meta.model_name, place.pk, record_id)


def get_facility(place: Place) -> Facility:
    return _get_for_place(Facility, place)


def create_facility(actor, place: Place, data: dict[str, Any]) -> Facility:
    return _create_for_place(Facility, actor, place, data)


def update_facility(actor, place: Place, facility_id, data: dict[str, Any]) -> Facility:
    return _update_for_place(Facility, actor, place, facility_id, data)


def delete_facility(actor, place: Place, facility_id) -> None:
    _delete_for_place(Facility, actor, place, facility_id)


def get_regulation(place: Place) -> Regulation:
    return _get_for_place(Regulation, place)


def create_regulation(actor, place: Place, data: dict[str, Any]) -> Regulation:
    return _create_for_place(Regulation, actor, place, data)


def update_regulation(actor, place: Place, regulation_id, data: dict[str, Any]) -> Regulation:
    return _update_for_place(Regulation, actor, place, regulation_id, data)


def delete_regulation(actor, place: Place, regulation_id) -> None:
    _delete_for_place(Regulation, actor, place, regulation_id)
