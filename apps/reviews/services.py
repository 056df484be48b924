"""Domain services for reviews."""

from __future__ import annotations

import logging
from typing import Any

from django.db import IntegrityError, transaction  # type: ignore
from rest_framework.exceptions import PermissionDenied  # type: ignore

from apps.reservations.services import has_reservation
from shared.exceptions import BusinessRuleViolation, ResourceAlreadyExists, ResourceNotFound

from .models import Review

logger = logging.getLogger(__name__)


def _get_scoped(queryset, review_id) -> Review:
    try:
        return queryset.get(pk=review_id)
    except Review.DoesNotExist:
        raise ResourceNotFound('Review not found.')


def get_review(review_id) -> Review:
    return _get_scoped(Review.objects.select_related('user', 'place'), review_id)


def list_reviews():
    return Review.objects.select_related('user', 'place')


def list_user_reviews(user):
    return Review.objects.filter(user=user).select_related('place')


def get_user_review(user, review_id) -> Review:
    return _get_scoped(Review.objects.filter(user=user), review_id)


def list_place_reviews(place):
    return Review.objects.filter(place=place).select_related('user')


def get_place_review(place, review_id) -> Review:
    return _get_scoped(Review.objects.filter(place=place), review_id)


def create_review(user, place, *, rating: str, comment: str = '') -> Review:
    """Only guests with a reservation at the place may review it, once."""

    if not has_reservation(user, place):
        logger.warning('review_rejected user_id=%s place_id=%s reason=no_reservation', user.pk, place.pk)
        raise BusinessRuleViolation('User has no reservation for this place.')

    if Review.objects.filter(user=user, place=place).exists():
        raise ResourceAlreadyExists('Review already exists.')

    try:
        with transaction.atomic():
            review = Review.objects.create(user=user, place=place, rating=rating, comment=comment)
    except IntegrityError:
        raise ResourceAlreadyExists('Review already exists.')

    logger.info('review_created review_id=%s user_id=%s place_id=%s', review.pk, user.pk, place.pk)
    return review


def ensure_is_author(actor, user) -> None:
    if actor.pk != user.pk and not actor.is_staff:
        raise PermissionDenied('You can only manage your own reviews.')


@transaction.atomic
def update_review(actor, user, review_id, data: dict[str, Any]) -> Review:
    ensure_is_author(actor, user)
    review = get_user_review(user, review_id)
    changed = [field for field in ('rating', 'comment') if field in data]
    for field in changed:
        setattr(review, field, data[field])
    review.save(update_fields=[*changed, 'updated_at'])
    logger.info('review_updated review_id=%s fields=%s', review.pk, ','.join(changed))
    return review


@transaction.atomic
def delete_review(actor, user, review_id) -> None:
    ensure_is_author(actor, user)
    review = get_user_review(user, review_id)
    review.delete()
    logger.info('review_deleted review_id=%s user_id=%s', review_id, user.pk)
