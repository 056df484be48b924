"""Admin registrations for chat."""

from __future__ import annotations

from django.contrib import admin

from .models import Message


@admin.register(Message)
class MessageAdmin(admin.ModelAdmin):
    list_display = ("id", "sender", "receiver", "timestamp")
    search_fields = ("sender__email", "receiver__email", "message")
    raw_id_fields = ("sender", "receiver")
    date_hierarchy = "timestamp"
