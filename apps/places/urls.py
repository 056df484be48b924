"""URL routing for places, facilities and regulations."""

from __future__ import annotations

from django.urls import include, path  # type: ignore
from rest_framework.routers import DefaultRouter  # type: ignore

from .views import (
    AvailablePlacesView,
    FacilityViewSet,
    PlaceViewSet,
    RegulationViewSet,
    UserPlacesView,
)

app_name = "places"

router = DefaultRouter()
router.register(r"places", PlaceViewSet, basename="place")

facility_list = FacilityViewSet.as_view({"get": "list"})
place_facility = FacilityViewSet.as_view({"get": "retrieve_for_place", "post": "create"})
place_facility_detail = FacilityViewSet.as_view(
    {"put": "update", "patch": "update", "delete": "destroy"}
)

regulation_list = RegulationViewSet.as_view({"get": "list"})
place_regulation = RegulationViewSet.as_view({"get": "retrieve_for_place", "post": "create"})
place_regulation_detail = RegulationViewSet.as_view(
    {"put": "update", "patch": "update", "delete": "destroy"}
)

urlpatterns = [
    path(
        "places/availability/<str:city>/<str:country>/<int:guests>/<str:check_in>/<str:check_out>/",
        AvailablePlacesView.as_view(),
        name="place-availability",
    ),
    path("users/<int:user_id>/places/", UserPlacesView.as_view(), name="user-places"),
    # Facilities
    path("facilities/", facility_list, name="facility-list"),
    path("places/<int:place_id>/facilities/", place_facility, name="place-facility"),
    path(
        "places/<int:place_id>/facilities/<int:pk>/",
        place_facility_detail,
        name="place-facility-detail",
    ),
    # Regulations
    path("regulations/", regulation_list, name="regulation-list"),
    path("places/<int:place_id>/regulations/", place_regulation, name="place-regulation"),
    path(
        "places/<int:place_id>/regulations/<int:pk>/",
        place_regulation_detail,
        name="place-regulation-detail",
    ),
    path("", include(router.urls)),
]
