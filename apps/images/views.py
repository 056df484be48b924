"""Image API views: uploads are multipart, downloads return raw bytes."""

from __future__ import annotations

from django.http import FileResponse  # type: ignore
from drf_spectacular.types import OpenApiTypes  # type: ignore
from drf_spectacular.utils import extend_schema  # type: ignore
from rest_framework import status, viewsets  # type: ignore
from rest_framework.parsers import FormParser, MultiPartParser  # type: ignore
from rest_framework.response import Response  # type: ignore

from apps.places import services as place_services
from apps.places.serializers import PlaceSerializer
from apps.users import services as user_services

from . import services
from .serializers import GalleryUploadSerializer, ImageSerializer, ImageUploadSerializer


def _file_response(opened) -> FileResponse:
    file_obj, content_type = opened
    return FileResponse(file_obj, content_type=content_type)


class ImageViewSet(viewsets.GenericViewSet):
    serializer_class = ImageSerializer
    parser_classes = [MultiPartParser, FormParser]

    def _uploaded_image(self, request):
        serializer = ImageUploadSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        return serializer.validated_data["image"]

    def list(self, request):  # type: ignore
        return Response(ImageSerializer(services.list_images(), many=True).data)

    # --- users/<id>/image ---

    @extend_schema(responses={(200, "image/*"): OpenApiTypes.BINARY})
    def user_image(self, request, user_id=None):  # type: ignore
        user = user_services.get_user(user_id)
        return _file_response(services.user_image_file(user))

    @extend_schema(request=ImageUploadSerializer, responses={201: ImageSerializer})
    def upload_user_image(self, request, user_id=None):  # type: ignore
        user = user_services.get_user(user_id)
        image = services.upload_user_image(request.user, user, self._uploaded_image(request))
        return Response(ImageSerializer(image).data, status=status.HTTP_201_CREATED)

    @extend_schema(request=ImageUploadSerializer, responses={200: ImageSerializer})
    def replace_user_image(self, request, user_id=None):  # type: ignore
        user = user_services.get_user(user_id)
        image = services.replace_user_image(request.user, user, self._uploaded_image(request))
        return Response(ImageSerializer(image).data)

    # --- places/<id>/gallery ---

    def gallery(self, request, place_id=None):  # type: ignore
        place = place_services.get_place(place_id)
        return Response(ImageSerializer(services.list_gallery(place), many=True).data)

    @extend_schema(request=GalleryUploadSerializer, responses={201: ImageSerializer(many=True)})
    def upload_gallery(self, request, place_id=None):  # type: ignore
        place = place_services.get_place(place_id)
        serializer = GalleryUploadSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        images = services.upload_gallery_images(request.user, place, serializer.validated_data["images"])
        return Response(ImageSerializer(images, many=True).data, status=status.HTTP_201_CREATED)

    @extend_schema(responses={(200, "image/*"): OpenApiTypes.BINARY})
    def gallery_image(self, request, place_id=None, pk=None):  # type: ignore
        place = place_services.get_place(place_id)
        image = services.get_gallery_image(place, pk)
        return _file_response(services.open_stored(image.storage_path))

    def delete_gallery_image(self, request, place_id=None, pk=None):  # type: ignore
        place = place_services.get_place(place_id)
        services.delete_gallery_image(request.user, place, pk)
        return Response(status=status.HTTP_204_NO_CONTENT)

    # --- places/<id>/main-image ---

    @extend_schema(responses={(200, "image/*"): OpenApiTypes.BINARY})
    def main_image(self, request, place_id=None):  # type: ignore
        place = place_services.get_place(place_id)
        return _file_response(services.main_image_file(place))

    @extend_schema(request=ImageUploadSerializer, responses={201: ImageSerializer})
    def upload_main_image(self, request, place_id=None):  # type: ignore
        place = place_services.get_place(place_id)
        image = services.upload_main_image(request.user, place, self._uploaded_image(request))
        return Response(ImageSerializer(image).data, status=status.HTTP_201_CREATED)

    @extend_schema(request=ImageUploadSerializer, responses={200: PlaceSerializer})
    def replace_main_image(self, request, place_id=None):  # type: ignore
        place = place_services.get_place(place_id)
        place = services.replace_main_image(request.user, place, self._uploaded_image(request))
        return Response(PlaceSerializer(place).data)
