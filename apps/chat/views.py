"""Chat API views."""

from __future__ import annotations

from drf_spectacular.utils import extend_schema  # type: ignore
from rest_framework import status, viewsets  # type: ignore
from rest_framework.response import Response  # type: ignore

from apps.users import services as user_services

from . import services
from .serializers import MessageCreateSerializer, MessageSerializer


class MessageViewSet(viewsets.GenericViewSet):
    """Inbox, conversation history and sending for one user."""

    serializer_class = MessageSerializer

    def inbox(self, request, user_id=None):  # type: ignore
        user = user_services.get_user(user_id)
        messages = services.inbox(request.user, user)
        return Response(MessageSerializer(messages, many=True).data)

    def conversation(self, request, user_id=None, other_id=None):  # type: ignore
        user = user_services.get_user(user_id)
        other = user_services.get_user(other_id)
        messages = services.conversation(request.user, user, other)
        return Response(MessageSerializer(messages, many=True).data)

    @extend_schema(request=MessageCreateSerializer, responses={201: MessageSerializer})
    def send(self, request, user_id=None, other_id=None):  # type: ignore
        sender = user_services.get_user(user_id)
        receiver = user_services.get_user(other_id)
        serializer = MessageCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        message = services.send_message(request.user, sender, receiver, serializer.validated_data["message"])
        return Response(MessageSerializer(message).data, status=status.HTTP_201_CREATED)
