"""Domain services for stored pictures of users and places."""

from __future__ import annotations

import logging
import mimetypes
import os
from typing import Iterable

from django.conf import settings  # type: ignore
from django.core.files.storage import default_storage  # type: ignore
from django.db import transaction  # type: ignore
from django.utils.text import get_valid_filename  # type: ignore
from PIL import Image as PILImage, UnidentifiedImageError
from rest_framework.exceptions import PermissionDenied  # type: ignore

from apps.places.models import Place
from apps.places.services import ensure_owns_place
from shared.exceptions import BusinessRuleViolation, ResourceAlreadyExists, ResourceNotFound

from .models import Image, place_image_path, user_image_path

logger = logging.getLogger(__name__)

ALLOWED_FORMATS = ("JPEG", "PNG", "WEBP", "GIF")


# ---------- file helpers ----------


def validate_image(file_obj) -> None:
    """Reject oversized files and anything Pillow cannot read as a picture."""

    max_size = getattr(settings, "IMAGE_MAX_SIZE", 5 * 1024 * 1024)
    size = getattr(file_obj, "size", None)
    if size is not None and size > max_size:
        raise BusinessRuleViolation(f"File is too large. Maximum is {max_size / 1024 / 1024:.1f} MB.")

    try:
        file_obj.seek(0)
        with PILImage.open(file_obj) as img:
            image_format = img.format
            img.verify()
    except (UnidentifiedImageError, OSError, SyntaxError) as exc:
        raise BusinessRuleViolation(f"Invalid image: {exc}")
    finally:
        file_obj.seek(0)

    if image_format not in ALLOWED_FORMATS:
        raise BusinessRuleViolation(f"Unsupported image format: {image_format}")


def _clean_name(file_obj) -> str:
    name = get_valid_filename(os.path.basename(file_obj.name or "")) or "image"
    return name


def _store(path_for, file_obj) -> str:
    """Save ``file_obj`` and return the file name actually used."""

    validate_image(file_obj)
    saved_path = default_storage.save(path_for(_clean_name(file_obj)), file_obj)
    return os.path.basename(saved_path)


def open_stored(path: str):
    """Open a stored picture; returns ``(file, content_type)``."""

    if not default_storage.exists(path):
        raise ResourceNotFound("Image file not found.")
    content_type = mimetypes.guess_type(path)[0] or "image/jpeg"
    return default_storage.open(path, "rb"), content_type


def list_images():
    return Image.objects.all()


# ---------- user pictures ----------


def _ensure_is_self(actor, user) -> None:
    if actor.pk != user.pk and not actor.is_staff:
        raise PermissionDenied("You can only change your own image.")


@transaction.atomic
def upload_user_image(actor, user, file_obj) -> Image:
    _ensure_is_self(actor, user)
    if Image.objects.filter(user=user).exists():
        raise ResourceAlreadyExists("User image already exists.")

    name = _store(lambda n: user_image_path(user.pk, n), file_obj)
    image = Image.objects.create(user=user, image_name=name)
    user.image_name = name
    user.save(update_fields=["image_name"])
    logger.info("user_image_uploaded user_id=%s image_id=%s", user.pk, image.pk)
    return image


@transaction.atomic
def replace_user_image(actor, user, file_obj) -> Image:
    """Store a new picture and drop the previous file, if any."""

    _ensure_is_self(actor, user)
    name = _store(lambda n: user_image_path(user.pk, n), file_obj)

    image = Image.objects.filter(user=user).first()
    if image is None:
        image = Image.objects.create(user=user, image_name=name)
    else:
        old_path = image.storage_path
        image.image_name = name
        image.save(update_fields=["image_name"])
        if old_path != image.storage_path:
            transaction.on_commit(lambda: default_storage.delete(old_path))

    user.image_name = name
    user.save(update_fields=["image_name"])
    logger.info("user_image_replaced user_id=%s image_id=%s", user.pk, image.pk)
    return image


def user_image_file(user):
    image = Image.objects.filter(user=user).first()
    if image is None:
        raise ResourceNotFound("User has no image.")
    return open_stored(image.storage_path)


# ---------- place pictures ----------


def list_gallery(place: Place):
    return Image.objects.filter(place=place)


def get_gallery_image(place: Place, image_id) -> Image:
    try:
        image = Image.objects.get(pk=image_id)
    except Image.DoesNotExist:
        raise ResourceNotFound("Image not found.")
    if image.place_id != place.pk:
        raise ResourceNotFound("Image is not associated with the Place.")
    return image


@transaction.atomic
def upload_gallery_images(actor, place: Place, files: Iterable) -> list[Image]:
    ensure_owns_place(actor, place)
    images = []
    for file_obj in files:
        name = _store(lambda n: place_image_path(place.pk, n), file_obj)
        images.append(Image.objects.create(place=place, image_name=name))
    logger.info("gallery_uploaded place_id=%s count=%s", place.pk, len(images))
    return images


@transaction.atomic
def delete_gallery_image(actor, place: Place, image_id) -> None:
    ensure_owns_place(actor, place)
    image = get_gallery_image(place, image_id)
    if place.main_image == image.image_name:
        place.main_image = ""
        place.save(update_fields=["main_image"])
    image.delete()
    logger.info("gallery_image_deleted place_id=%s image_id=%s", place.pk, image_id)


@transaction.atomic
def upload_main_image(actor, place: Place, file_obj) -> Image:
    """Add the picture to the gallery and make it the main one."""

    ensure_owns_place(actor, place)
    name = _store(lambda n: place_image_path(place.pk, n), file_obj)
    image = Image.objects.create(place=place, image_name=name)
    place.main_image = name
    place.save(update_fields=["main_image"])
    logger.info("main_image_uploaded place_id=%s image_id=%s", place.pk, image.pk)
    return image


@transaction.atomic
def replace_main_image(actor, place: Place, file_obj) -> Place:
    """Swap the main picture without adding a gallery record."""

    ensure_owns_place(actor, place)
    old_name = place.main_image
    place.main_image = _store(lambda n: place_image_path(place.pk, n), file_obj)
    place.save(update_fields=["main_image"])

    # Files behind gallery records go away with the record.
    if old_name and old_name != place.main_image and not list_gallery(place).filter(image_name=old_name).exists():
        old_path = place_image_path(place.pk, old_name)
        transaction.on_commit(lambda: default_storage.delete(old_path))
    logger.info("main_image_replaced place_id=%s name=%s", place.pk, place.main_image)
    return place


def main_image_file(place: Place):
    if not place.main_image:
        raise ResourceNotFound("Place has no main image.")
    return open_stored(place_image_path(place.pk, place.main_image))
