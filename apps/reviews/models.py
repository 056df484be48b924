"""Models for the review domain.

Defines the ``Review`` entity: a star rating and an optional comment left
by a guest for a place they have a reservation at. One user can leave at
most one review per place.
"""

from __future__ import annotations

from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class Review(models.Model):
    """Represents a review left by a guest for a place."""

    class Rating(models.TextChoices):
        UNRATED = 'UNRATED', _('Unrated')
        ONE_STAR = 'ONE_STAR', _('One star')
        TWO_STARS = 'TWO_STARS', _('Two stars')
        THREE_STARS = 'THREE_STARS', _('Three stars')
        FOUR_STARS = 'FOUR_STARS', _('Four stars')
        FIVE_STARS = 'FIVE_STARS', _('Five stars')

    STARS = {
        Rating.UNRATED: 0,
        Rating.ONE_STAR: 1,
        Rating.TWO_STARS: 2,
        Rating.THREE_STARS: 3,
        Rating.FOUR_STARS: 4,
        Rating.FIVE_STARS: 5,
    }

    user = models.ForeignKey(
        'users.CustomUser', on_delete=models.CASCADE, related_name='reviews'
    )
    place = models.ForeignKey(
        'places.Place', on_delete=models.CASCADE, related_name='reviews'
    )
    rating = models.CharField(
        max_length=20,
        choices=Rating.choices,
        default=Rating.UNRATED,
    )
    comment = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _('Review')
        verbose_name_plural = _('Reviews')
        ordering = ['-created_at', '-id']
        constraints = [
            models.UniqueConstraint(fields=['user', 'place'], name='unique_review_per_user_place'),
        ]
        indexes = [
            models.Index(fields=['place', '-created_at'], name='review_place_created_idx'),
        ]

    def __str__(self) -> str:
        return f"Review by {self.user_id} for place {self.place_id} ({self.rating})"

    @property
    def stars(self) -> int:
        return self.STARS.get(self.rating, 0)
