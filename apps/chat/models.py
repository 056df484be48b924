"""Chat domain models.

Direct messages between two users. A conversation is simply the set of
messages exchanged by one pair of users, in either direction.
"""

from __future__ import annotations

from django.conf import settings
from django.db import models
from django.db.models import Exists, OuterRef, Q
from django.utils import timezone
from django.utils.translation import gettext_lazy as _


class MessageQuerySet(models.QuerySet):
    def involving(self, user):
        return self.filter(Q(sender=user) | Q(receiver=user))

    def between(self, user, other):
        """Both directions of the conversation, oldest first."""
        return self.filter(
            Q(sender=user, receiver=other) | Q(sender=other, receiver=user)
        ).order_by("timestamp", "id")

    def latest_per_conversation(self, user):
        """Newest message of every conversation ``user`` takes part in.

        A message qualifies when no later message exists for the same pair
        of users; ties on the timestamp are broken by id.
        """
        later_in_same_pair = self.model.objects.filter(
            Q(sender=OuterRef("sender"), receiver=OuterRef("receiver"))
            | Q(sender=OuterRef("receiver"), receiver=OuterRef("sender"))
        ).filter(
            Q(timestamp__gt=OuterRef("timestamp"))
            | Q(timestamp=OuterRef("timestamp"), id__gt=OuterRef("id"))
        )
        return (
            self.involving(user)
            .filter(~Exists(later_in_same_pair))
            .order_by("-timestamp", "-id")
        )


class Message(models.Model):
    """A single direct message."""

    sender = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="sent_messages",
    )
    receiver = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="received_messages",
    )
    message = models.TextField(_("Message"))
    timestamp = models.DateTimeField(_("Sent at"), default=timezone.now, db_index=True)

    objects = MessageQuerySet.as_manager()

    class Meta:
        verbose_name = _("Message")
        verbose_name_plural = _("Messages")
        ordering = ["timestamp", "id"]
        indexes = [
            models.Index(fields=["sender", "receiver", "timestamp"], name="message_pair_time_idx"),
        ]

    def __str__(self) -> str:
        return f"Message {self.pk} from {self.sender_id} to {self.receiver_id}"
