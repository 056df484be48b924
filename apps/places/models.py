"""Listing models: places, their facilities and their regulations."""

from __future__ import annotations

from django.conf import settings  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class PlaceQuerySet(models.QuerySet):
    def owned_by(self, user):
        return self.filter(owner=user)

    def available(self, *, city: str, country: str, guests: int, check_in, check_out):
        """Places in a city that sleep exactly ``guests`` and are free for the dates."""

        from apps.reservations.models import Reservation  # Local import to prevent circular dependency

        booked_place_ids = Reservation.objects.overlapping(check_in, check_out).values_list(
            "place_id", flat=True
        )
        return self.filter(
            city__iexact=city,
            country__iexact=country,
            guests=guests,
        ).exclude(pk__in=booked_place_ids)


class Place(models.Model):
    """A rentable listing."""

    class PropertyType(models.TextChoices):
        VILLA = "VILLA", _("Villa")
        RESORT = "RESORT", _("Resort")
        CAMPSITE = "CAMPSITE", _("Campsite")
        APARTMENT = "APARTMENT", _("Apartment")
        HOTEL = "HOTEL", _("Hotel")

    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="places",
    )
    name = models.CharField(_("Name"), max_length=255)
    property_type = models.CharField(
        _("Property type"),
        max_length=20,
        choices=PropertyType.choices,
    )
    description = models.TextField(_("Description"))
    main_image = models.CharField(_("Main image"), max_length=255, blank=True, default="")
    cost = models.PositiveIntegerField(_("Cost per night"))
    country = models.CharField(_("Country"), max_length=100)
    city = models.CharField(_("City"), max_length=100)
    address = models.CharField(_("Address"), max_length=255)
    latitude = models.FloatField(_("Latitude"))
    longitude = models.FloatField(_("Longitude"))
    area = models.PositiveIntegerField(_("Area"))
    guests = models.PositiveIntegerField(_("Guests"))
    bedrooms = models.PositiveIntegerField(_("Bedrooms"))
    beds = models.PositiveIntegerField(_("Beds"))
    bathrooms = models.PositiveIntegerField(_("Bathrooms"))

    objects = PlaceQuerySet.as_manager()

    class Meta:
        verbose_name = _("Place")
        verbose_name_plural = _("Places")
        ordering = ["id"]
        indexes = [
            models.Index(fields=["country", "city", "guests"], name="place_location_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.name} ({self.city}, {self.country})"

    def is_owned_by(self, user) -> bool:
        return self.owner_id == getattr(user, "pk", None)


class Facility(models.Model):
    """Amenities offered by a place."""

    place = models.OneToOneField(Place, on_delete=models.CASCADE, related_name="facility")
    free_parking = models.BooleanField(default=False)
    non_smoking = models.BooleanField(default=False)
    free_wifi = models.BooleanField(default=False)
    breakfast = models.BooleanField(default=False)
    balcony = models.BooleanField(default=False)
    swimming_pool = models.BooleanField(default=False)

    class Meta:
        verbose_name = _("Facility")
        verbose_name_plural = _("Facilities")
        ordering = ["id"]

    def __str__(self) -> str:
        return f"Facilities of place {self.place_id}"


class Regulation(models.Model):
    """House rules of a place."""

    class PaymentMethod(models.TextChoices):
        CASH_ONLY = "CASH_ONLY", _("Cash only")
        CARD_ONLY = "CARD_ONLY", _("Card only")
        CASH_AND_CARD = "CASH_AND_CARD", _("Cash and card")

    place = models.OneToOneField(Place, on_delete=models.CASCADE, related_name="regulation")
    arrival_time = models.CharField(_("Arrival time"), max_length=50)
    departure_time = models.CharField(_("Departure time"), max_length=50)
    cancellation_policy = models.TextField(_("Cancellation policy"), blank=True, default="")
    payment_method = models.CharField(
        _("Payment method"),
        max_length=20,
        choices=PaymentMethod.choices,
    )
    age_restriction = models.BooleanField(default=False)
    pets_allowed = models.BooleanField(default=False)
    events_allowed = models.BooleanField(default=False)
    smoking_allowed = models.BooleanField(default=False)
    quiet_hours = models.CharField(_("Quiet hours"), max_length=100, blank=True, default="")

    class Meta:
        verbose_name = _("Regulation")
        verbose_name_plural = _("Regulations")
        ordering = ["id"]

    def __str__(self) -> str:
        return f"Regulations of place {self.place_id}"
