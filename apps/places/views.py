"""Place API views."""

from __future__ import annotations

from django_filters.rest_framework import DjangoFilterBackend  # type: ignore
from drf_spectacular.utils import extend_schema  # type: ignore
from rest_framework import generics, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.filters import OrderingFilter  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from apps.users import services as user_services
from apps.users.serializers import UserSerializer

from . import services
from .filters import PlaceFilterSet
from .models import Facility, Place, Regulation
from .serializers import (
    AvailabilityQuerySerializer,
    FacilitySerializer,
    PlaceSerializer,
    RegulationSerializer,
)


class PlaceViewSet(viewsets.ModelViewSet):
    """Listings.

    Creating requires the OWNER role; changing or deleting requires owning
    the place. ``PUT`` and ``PATCH`` both change only the fields sent.
    """

    queryset = Place.objects.select_related("owner").all()
    serializer_class = PlaceSerializer
    filter_backends = [DjangoFilterBackend, OrderingFilter]
    filterset_class = PlaceFilterSet
    ordering_fields = ["cost", "guests", "id"]
    lookup_value_regex = r"\d+"

    def get_object(self):  # type: ignore
        return services.get_place(self.kwargs["pk"])

    def create(self, request, *args, **kwargs):  # type: ignore
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        place = services.create_place(request.user, serializer.validated_data)
        return Response(self.get_serializer(place).data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):  # type: ignore
        place = self.get_object()
        serializer = self.get_serializer(place, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        place = services.update_place(request.user, place, serializer.validated_data)
        return Response(self.get_serializer(place).data)

    def partial_update(self, request, *args, **kwargs):  # type: ignore
        return self.update(request, *args, **kwargs)

    def destroy(self, request, *args, **kwargs):  # type: ignore
        services.delete_place(request.user, self.get_object())
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(responses={200: UserSerializer})
    @action(detail=True, methods=["get"])
    def owner(self, request, pk=None):
        """Owner account of the place."""
        place = self.get_object()
        return Response(UserSerializer(place.owner).data)


class AvailablePlacesView(APIView):
    """Places free for a stay; ``204`` when nothing matches."""

    @extend_schema(responses={200: PlaceSerializer(many=True), 204: None})
    def get(self, request, **kwargs):  # type: ignore
        query = AvailabilityQuerySerializer(data=kwargs)
        query.is_valid(raise_exception=True)
        places = list(services.find_available_places(**query.validated_data))
        if not places:
            return Response(status=status.HTTP_204_NO_CONTENT)
        return Response(PlaceSerializer(places, many=True).data)


class UserPlacesView(generics.ListAPIView):
    serializer_class = PlaceSerializer

    def get_queryset(self):  # type: ignore
        user = user_services.get_user(self.kwargs["user_id"])
        return Place.objects.owned_by(user).select_related("owner")


class PlaceScopedMixin:
    """Loads the place named by the ``place_id`` URL kwarg, when present."""

    place_lookup_url_kwarg = "place_id"

    def initial(self, request, *args, **kwargs):  # type: ignore
        super().initial(request, *args, **kwargs)
        place_id = kwargs.get(self.place_lookup_url_kwarg)
        self.place_object = services.get_place(place_id) if place_id is not None else None

    def get_place(self) -> Place:
        return self.place_object


class PlaceSheetViewSet(PlaceScopedMixin, viewsets.GenericViewSet):
    """Shared CRUD for the one-per-place facility and regulation records."""

    fetch_for_place = None
    create_for_place = None
    update_for_place = None
    delete_for_place = None

    def list(self, request):  # type: ignore
        serializer = self.get_serializer(self.get_queryset(), many=True)
        return Response(serializer.data)

    def retrieve_for_place(self, request, place_id=None):  # type: ignore
        record = self.fetch_for_place(self.get_place())
        return Response(self.get_serializer(record).data)

    def create(self, request, place_id=None):  # type: ignore
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        record = self.create_for_place(request.user, self.get_place(), serializer.validated_data)
        return Response(self.get_serializer(record).data, status=status.HTTP_201_CREATED)

    def update(self, request, place_id=None, pk=None):  # type: ignore
        serializer = self.get_serializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        record = self.update_for_place(request.user, self.get_place(), pk, serializer.validated_data)
        return Response(self.get_serializer(record).data)

    def destroy(self, request, place_id=None, pk=None):  # type: ignore
        self.delete_for_place(request.user, self.get_place(), pk)
        return Response(status=status.HTTP_204_NO_CONTENT)


class FacilityViewSet(PlaceSheetViewSet):
    queryset = Facility.objects.all()
    serializer_class = FacilitySerializer
    fetch_for_place = staticmethod(services.get_facility)
    create_for_place = staticmethod(services.create_facility)
    update_for_place = staticmethod(services.update_facility)
    delete_for_place = staticmethod(services.delete_facility)


class RegulationViewSet(PlaceSheetViewSet):
    queryset = Regulation.objects.all()
    serializer_class = RegulationSerializer
    fetch_for_place = staticmethod(services.get_regulation)
    create_for_place = staticmethod(services.create_regulation)
    update_for_place = staticmethod(services.update_regulation)
    delete_for_place = staticmethod(services.delete_regulation)
