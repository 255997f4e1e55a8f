"""
Chat models

Chat:
- One row per conversation. `kind` is either "private" (exactly two
  participants) or "group" (named, with an admin and a mutable member list).
- The last-message snapshot (`last_message_*`) is denormalised onto the chat
  so chat lists never need to scan messages.
- `updated_at` is bumped explicitly when a message is sent; it drives the
  newest-first ordering of chat lists.

ChatParticipant:
- Membership of a user in a chat plus that user's `unread_count`. The counter
  only grows when someone else sends a message and is reset to zero by the
  owning user marking the chat read.

ChatMessage:
- A single message with a `message_type` used for previews.
"""

from community.utils.uuid import uuid7_or_4
from django.conf import settings
from django.db import models
from django.utils import timezone


class Chat(models.Model):
    KIND_PRIVATE = "private"
    KIND_GROUP = "group"
    KIND_CHOICES = [
        (KIND_PRIVATE, "Private"),
        (KIND_GROUP, "Group"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid7_or_4, editable=False)
    kind = models.CharField(max_length=10, choices=KIND_CHOICES, default=KIND_PRIVATE)

    # group-only fields
    name = models.CharField(max_length=100, blank=True)
    description = models.TextField(max_length=500, blank=True)
    image = models.CharField(max_length=500, blank=True, null=True)
    admin = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        related_name="administered_chats",
    )

    last_message_content = models.TextField(blank=True)
    last_message_type = models.CharField(max_length=20, blank=True)
    last_message_sender = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        related_name="+",
    )
    last_message_at = models.DateTimeField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = "chat"
        ordering = ["-updated_at"]

    def __str__(self):
        return self.name or f"{self.kind} chat {self.id}"

    @property
    def is_group(self):
        return self.kind == self.KIND_GROUP


class ChatParticipant(models.Model):
    chat = models.ForeignKey(Chat, on_delete=models.CASCADE, related_name="participants")
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="chat_memberships",
    )
    unread_count = models.PositiveIntegerField(default=0)
    joined_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "chat_participant"
        ordering = ["joined_at", "id"]
        constraints = [
            models.UniqueConstraint(fields=["chat", "user"], name="uniq_chat_participant"),
        ]

    def __str__(self):
        return f"{self.user_id} in {self.chat_id}"


class ChatMessage(models.Model):
    TYPE_CHOICES = [
        ("text", "Text"),
        ("image", "Image"),
        ("document", "Document"),
        ("location", "Location"),
        ("audio", "Audio"),
        ("video", "Video"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid7_or_4, editable=False)
    chat = models.ForeignKey(Chat, on_delete=models.CASCADE, related_name="messages")
    sender = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="chat_messages",
    )
    content = models.TextField(max_length=5000)
    message_type = models.CharField(max_length=20, choices=TYPE_CHOICES, default="text")
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = "chat_message"
        ordering = ["created_at", "id"]

    def __str__(self):
        return f"Message by {self.sender_id} in {self.chat_id}"
