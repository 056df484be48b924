"""Admin registrations for stored pictures."""

from __future__ import annotations

from django.contrib import admin

from .models import Image


@admin.register(Image)
class ImageAdmin(admin.ModelAdmin):
    list_display = ("id", "image_name", "place", "user", "uploaded_at")
    search_fields = ("image_name", "place__name", "user__email")
    raw_id_fields = ("place", "user")
