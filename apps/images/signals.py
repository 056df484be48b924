"""Remove stored files once their image record or place is gone."""

from django.core.files.storage import default_storage
from django.db import transaction
from django.db.models.signals import post_delete
from django.dispatch import receiver

from apps.places.models import Place

from .models import Image, place_image_path


@receiver(post_delete, sender=Image)
def delete_stored_file(sender, instance, **kwargs):
    """Runs for direct deletes and for cascades from users and places."""
    path = instance.storage_path
    if path:
        transaction.on_commit(lambda: default_storage.delete(path))


@receiver(post_delete, sender=Place)
def delete_main_image_file(sender, instance, **kwargs):
    # A main picture set by replacement has no Image record of its own.
    if instance.main_image:
        path = place_image_path(instance.pk, instance.main_image)
        transaction.on_commit(lambda: default_storage.delete(path))
