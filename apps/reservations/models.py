"""Reservation model and its overlap query."""

from __future__ import annotations

from django.conf import settings  # type: ignore
from django.db import models  # type: ignore
from django.db.models import Q  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class ReservationQuerySet(models.QuerySet):
    def overlapping(self, check_in, check_out):
        """Reservations sharing at least one day with ``[check_in, check_out]``.

        Both ends are inclusive, so a stay starting on another stay's
        check-out day counts as a clash.
        """
        return self.filter(Q(check_in__lte=check_out) & Q(check_out__gte=check_in))

    def for_user(self, user):
        return self.filter(user=user)

    def for_place(self, place):
        return self.filter(place=place)


class Reservation(models.Model):
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="reservations",
    )
    place = models.ForeignKey(
        "places.Place",
        on_delete=models.CASCADE,
        related_name="reservations",
    )
    check_in = models.DateField(_("Check-in"))
    check_out = models.DateField(_("Check-out"))

    objects = ReservationQuerySet.as_manager()

    class Meta:
        verbose_name = _("Reservation")
        verbose_name_plural = _("Reservations")
        ordering = ["check_in", "id"]
        indexes = [
            models.Index(fields=["place", "check_in", "check_out"], name="reservation_period_idx"),
        ]

    def __str__(self) -> str:
        return f"Reservation {self.pk}: place {self.place_id} {self.check_in}..{self.check_out}"

    @property
    def nights(self) -> int:
        return (self.check_out - self.check_in).days
