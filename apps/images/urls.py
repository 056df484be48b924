"""URL routing for stored pictures."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .views import ImageViewSet

app_name = "images"

image_list = ImageViewSet.as_view({"get": "list"})
user_image = ImageViewSet.as_view(
    {"get": "user_image", "post": "upload_user_image", "put": "replace_user_image"}
)
place_gallery = ImageViewSet.as_view({"get": "gallery", "post": "upload_gallery"})
place_gallery_image = ImageViewSet.as_view({"get": "gallery_image", "delete": "delete_gallery_image"})
place_main_image = ImageViewSet.as_view(
    {"get": "main_image", "post": "upload_main_image", "put": "replace_main_image"}
)

urlpatterns = [
    path("images/", image_list, name="image-list"),
    path("images/users/<int:user_id>/image/", user_image, name="user-image"),
    path("images/places/<int:place_id>/gallery/", place_gallery, name="place-gallery"),
    path(
        "images/places/<int:place_id>/gallery/<int:pk>/",
        place_gallery_image,
        name="place-gallery-image",
    ),
    path("images/places/<int:place_id>/main-image/", place_main_image, name="place-main-image"),
]
