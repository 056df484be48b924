"""URL routing for direct messages."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .views import MessageViewSet

app_name = "chat"

inbox = MessageViewSet.as_view({"get": "inbox"})
conversation = MessageViewSet.as_view({"get": "conversation", "post": "send"})

urlpatterns = [
    path("users/<int:user_id>/messages/", inbox, name="inbox"),
    path("users/<int:user_id>/messages/<int:other_id>/", conversation, name="conversation"),
]
