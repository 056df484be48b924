"""Admin registrations for reservations."""

from __future__ import annotations

from django.contrib import admin

from .models import Reservation


@admin.register(Reservation)
class ReservationAdmin(admin.ModelAdmin):
    list_display = ("id", "place", "user", "check_in", "check_out")
    list_filter = ("check_in",)
    search_fields = ("place__name", "user__email")
    raw_id_fields = ("place", "user")
    date_hierarchy = "check_in"
