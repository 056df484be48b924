"""API views for managing reviews."""

from __future__ import annotations

from drf_spectacular.utils import extend_schema  # type: ignore
from rest_framework import status, viewsets  # type: ignore
from rest_framework.response import Response  # type: ignore

from apps.places import services as place_services
from apps.users import services as user_services
from apps.users.serializers import UserSerializer

from . import services
from .serializers import ReviewSerializer, ReviewWriteSerializer


class ReviewViewSet(viewsets.GenericViewSet):
    """Reviews, listed globally, per place and per author.

    Only the author may change or delete a review; the routes for that live
    under ``users/<id>/reviews/``.
    """

    serializer_class = ReviewSerializer

    def list(self, request):  # type: ignore
        return Response(ReviewSerializer(services.list_reviews(), many=True).data)

    @extend_schema(responses={200: UserSerializer})
    def author(self, request, pk=None):  # type: ignore
        review = services.get_review(pk)
        return Response(UserSerializer(review.user).data)

    @extend_schema(request=ReviewWriteSerializer, responses={201: ReviewSerializer})
    def create(self, request, place_id=None):  # type: ignore
        place = place_services.get_place(place_id)
        serializer = ReviewWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        review = services.create_review(request.user, place, **serializer.validated_data)
        return Response(ReviewSerializer(review).data, status=status.HTTP_201_CREATED)

    def list_for_place(self, request, place_id=None):  # type: ignore
        place = place_services.get_place(place_id)
        return Response(ReviewSerializer(services.list_place_reviews(place), many=True).data)

    def retrieve_for_place(self, request, place_id=None, pk=None):  # type: ignore
        place = place_services.get_place(place_id)
        return Response(ReviewSerializer(services.get_place_review(place, pk)).data)

    def list_for_user(self, request, user_id=None):  # type: ignore
        user = user_services.get_user(user_id)
        return Response(ReviewSerializer(services.list_user_reviews(user), many=True).data)

    def retrieve_for_user(self, request, user_id=None, pk=None):  # type: ignore
        user = user_services.get_user(user_id)
        return Response(ReviewSerializer(services.get_user_review(user, pk)).data)

    @extend_schema(request=ReviewWriteSerializer, responses={200: ReviewSerializer})
    def update(self, request, user_id=None, pk=None):  # type: ignore
        user = user_services.get_user(user_id)
        serializer = ReviewWriteSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        review = services.update_review(request.user, user, pk, serializer.validated_data)
        return Response(ReviewSerializer(review).data)

    def destroy(self, request, user_id=None, pk=None):  # type: ignore
        user = user_services.get_user(user_id)
        services.delete_review(request.user, user, pk)
        return Response(status=status.HTTP_204_NO_CONTENT)
