"""Serializers for image records and uploads."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .models import Image


class ImageSerializer(serializers.ModelSerializer):
    place_id = serializers.ReadOnlyField()
    user_id = serializers.ReadOnlyField()

    class Meta:
        model = Image
        fields = ["id", "image_name", "place_id", "user_id", "uploaded_at"]
        read_only_fields = fields


class ImageUploadSerializer(serializers.Serializer):
    image = serializers.ImageField()


class GalleryUploadSerializer(serializers.Serializer):
    images = serializers.ListField(child=serializers.ImageField(), allow_empty=False)
