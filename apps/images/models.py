"""Image records pointing at files kept in the default storage."""

from __future__ import annotations

from django.conf import settings  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


def user_image_path(user_id, image_name: str) -> str:
    return f"users/{user_id}/{image_name}"


def place_image_path(place_id, image_name: str) -> str:
    return f"places/{place_id}/{image_name}"


class Image(models.Model):
    """A stored picture that belongs either to a place gallery or to a user."""

    image_name = models.CharField(_("File name"), max_length=255)
    place = models.ForeignKey(
        "places.Place",
        on_delete=models.CASCADE,
        related_name="images",
        null=True,
        blank=True,
    )
    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="image",
        null=True,
        blank=True,
    )
    uploaded_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = _("Image")
        verbose_name_plural = _("Images")
        ordering = ["id"]

    def __str__(self) -> str:
        return self.image_name

    @property
    def storage_path(self) -> str | None:
        if self.user_id is not None:
            return user_image_path(self.user_id, self.image_name)
        if self.place_id is not None:
            return place_image_path(self.place_id, self.image_name)
        return None
