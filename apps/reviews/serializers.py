"""Serializers for reviews.

The author and the place come from the URL and the request, never from
the payload.
"""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from shared.serializers import EnumChoiceField

from .models import Review


class ReviewSerializer(serializers.ModelSerializer):
    user_id = serializers.ReadOnlyField()
    username = serializers.ReadOnlyField(source='user.username')
    place_id = serializers.ReadOnlyField()
    stars = serializers.ReadOnlyField()

    class Meta:
        model = Review
        fields = [
            'id',
            'rating',
            'stars',
            'comment',
            'user_id',
            'username',
            'place_id',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class ReviewWriteSerializer(serializers.Serializer):
    rating = EnumChoiceField(Review.Rating.choices, label_name='rating')
    comment = serializers.CharField(required=False, allow_blank=True)
