"""Serializers for direct messages."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .models import Message


class MessageSerializer(serializers.ModelSerializer):
    sender_id = serializers.ReadOnlyField()
    sender_username = serializers.ReadOnlyField(source="sender.username")
    sender_image_name = serializers.ReadOnlyField(source="sender.image_name")
    receiver_id = serializers.ReadOnlyField()
    receiver_username = serializers.ReadOnlyField(source="receiver.username")
    receiver_image_name = serializers.ReadOnlyField(source="receiver.image_name")
    message_timestamp = serializers.DateTimeField(source="timestamp", read_only=True)

    class Meta:
        model = Message
        fields = [
            "id",
            "sender_id",
            "sender_username",
            "sender_image_name",
            "receiver_id",
            "receiver_username",
            "receiver_image_name",
            "message",
            "message_timestamp",
        ]
        read_only_fields = fields


class MessageCreateSerializer(serializers.Serializer):
    message = serializers.CharField(max_length=5000, trim_whitespace=True)
