"""Domain services for direct messages."""

from __future__ import annotations

import logging

from django.db import transaction  # type: ignore
from rest_framework.exceptions import PermissionDenied  # type: ignore

from shared.exceptions import BusinessRuleViolation

from .models import Message

logger = logging.getLogger(__name__)


def ensure_is_participant(actor, user) -> None:
    if actor.pk != user.pk and not actor.is_staff:
        raise PermissionDenied("You can only access your own messages.")


def inbox(actor, user):
    ensure_is_participant(actor, user)
    return Message.objects.latest_per_conversation(user).select_related("sender", "receiver")


def conversation(actor, user, other):
    ensure_is_participant(actor, user)
    return Message.objects.between(user, other).select_related("sender", "receiver")


@transaction.atomic
def send_message(actor, sender, receiver, text: str) -> Message:
    if actor.pk != sender.pk:
        raise PermissionDenied("You can only send messages as yourself.")
    if sender.pk == receiver.pk:
        raise BusinessRuleViolation("Cannot send a message to yourself.")

    message = Message.objects.create(sender=sender, receiver=receiver, message=text)
    logger.info("message_sent message_id=%s sender_id=%s receiver_id=%s", message.pk, sender.pk, receiver.pk)
    return message
