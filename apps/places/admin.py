"""Admin registrations for the places domain."""

from __future__ import annotations

from django.contrib import admin

from .models import Facility, Place, Regulation


class FacilityInline(admin.StackedInline):
    model = Facility
    extra = 0


class RegulationInline(admin.StackedInline):
    model = Regulation
    extra = 0


@admin.register(Place)
class PlaceAdmin(admin.ModelAdmin):
    list_display = ("name", "property_type", "city", "country", "cost", "guests", "owner")
    list_filter = ("property_type", "country", "city")
    search_fields = ("name", "city", "country", "address", "owner__email")
    raw_id_fields = ("owner",)
    inlines = [FacilityInline, RegulationInline]


@admin.register(Facility)
class FacilityAdmin(admin.ModelAdmin):
    list_display = ("place", "free_parking", "free_wifi", "breakfast", "swimming_pool")
    raw_id_fields = ("place",)


@admin.register(Regulation)
class RegulationAdmin(admin.ModelAdmin):
    list_display = ("place", "arrival_time", "departure_time", "payment_method", "pets_allowed")
    list_filter = ("payment_method",)
    raw_id_fields = ("place",)
