"""API tests for direct messages."""

from __future__ import annotations

from datetime import timedelta

from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APITestCase

from apps.chat.models import Message
from apps.users.models import User


class MessageAPITests(APITestCase):
    def setUp(self) -> None:
        self.alice = User.objects.create_user(
            email="alice@example.com",
            username="alice",
            phone="+77000000001",
            password="StrongPass123",
        )
        self.bob = User.objects.create_user(
            email="bob@example.com",
            username="bob",
            phone="+77000000002",
            password="StrongPass123",
        )
        self.carol = User.objects.create_user(
            email="carol@example.com",
            username="carol",
            phone="+77000000003",
            password="StrongPass123",
        )
        self.start = timezone.now() - timedelta(hours=1)

    def _message(self, sender, receiver, text, minutes):
        return Message.objects.create(
            sender=sender,
            receiver=receiver,
            message=text,
            timestamp=self.start + timedelta(minutes=minutes),
        )

    def test_inbox_keeps_latest_message_per_conversation(self) -> None:
        self._message(self.alice, self.bob, "hi bob", 1)
        bob_reply = self._message(self.bob, self.alice, "hi alice", 2)
        self._message(self.carol, self.alice, "hello", 3)
        carol_latest = self._message(self.alice, self.carol, "hey carol", 4)
        self._message(self.bob, self.carol, "not alice's business", 5)

        self.client.force_authenticate(self.alice)
        response = self.client.get(reverse("chat:inbox", args=[self.alice.id]))
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual([m["id"] for m in response.data], [carol_latest.id, bob_reply.id])

    def test_empty_inbox(self) -> None:
        self.client.force_authenticate(self.carol)
        response = self.client.get(reverse("chat:inbox", args=[self.carol.id]))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data, [])

    def test_conversation_is_oldest_first(self) -> None:
        first = self._message(self.alice, self.bob, "one", 1)
        second = self._message(self.bob, self.alice, "two", 2)
        third = self._message(self.alice, self.bob, "three", 3)
        self._message(self.alice, self.carol, "elsewhere", 4)

        self.client.force_authenticate(self.bob)
        response = self.client.get(reverse("chat:conversation", args=[self.bob.id, self.alice.id]))
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual([m["id"] for m in response.data], [first.id, second.id, third.id])

    def test_send_message(self) -> None:
        self.client.force_authenticate(self.alice)
        url = reverse("chat:conversation", args=[self.alice.id, self.bob.id])
        response = self.client.post(url, {"message": "Is the villa free?"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data["sender_id"], self.alice.id)
        self.assertEqual(response.data["sender_username"], "alice")
        self.assertEqual(response.data["receiver_id"], self.bob.id)
        self.assertEqual(response.data["receiver_username"], "bob")
        self.assertEqual(response.data["receiver_image_name"], self.bob.image_name)
        self.assertEqual(response.data["message"], "Is the villa free?")
        self.assertIn("message_timestamp", response.data)
        self.assertTrue(Message.objects.filter(sender=self.alice, receiver=self.bob).exists())

    def test_blank_message_rejected(self) -> None:
        self.client.force_authenticate(self.alice)
        url = reverse("chat:conversation", args=[self.alice.id, self.bob.id])
        response = self.client.post(url, {"message": "   "}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)

    def test_cannot_message_yourself(self) -> None:
        self.client.force_authenticate(self.alice)
        url = reverse("chat:conversation", args=[self.alice.id, self.alice.id])
        response = self.client.post(url, {"message": "note to self"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
        self.assertEqual(response.data["message"], "Cannot send a message to yourself.")

    def test_other_users_messages_are_private(self) -> None:
        self._message(self.alice, self.bob, "secret", 1)
        self.client.force_authenticate(self.carol)

        inbox = self.client.get(reverse("chat:inbox", args=[self.alice.id]))
        self.assertEqual(inbox.status_code, status.HTTP_403_FORBIDDEN)

        history = self.client.get(reverse("chat:conversation", args=[self.alice.id, self.bob.id]))
        self.assertEqual(history.status_code, status.HTTP_403_FORBIDDEN)

        spoofed = self.client.post(
            reverse("chat:conversation", args=[self.alice.id, self.bob.id]),
            {"message": "pretending to be alice"},
            format="json",
        )
        self.assertEqual(spoofed.status_code, status.HTTP_403_FORBIDDEN)

    def test_unknown_user(self) -> None:
        self.client.force_authenticate(self.alice)
        response = self.client.get(reverse("chat:conversation", args=[self.alice.id, 9999]))
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
