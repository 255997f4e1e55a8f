"""Private and group chat persistence: membership, messages and unread counters."""

import logging

from django.contrib.auth import get_user_model
from django.db import transaction
from django.db.models import F, Sum
from django.utils import timezone

from community.errors import Forbidden, NotFound, ValidationFailed
from community.models import Chat, ChatMessage, ChatParticipant
from community.utils.http import parse_user_id

logger = logging.getLogger(__name__)
User = get_user_model()


class ChatService:
    """Chat operations performed on behalf of ``user``."""

    def __init__(self, user):
        self.user = user

    def _base_qs(self, kind):
        return (
            Chat.objects.filter(kind=kind, participants__user=self.user)
            .select_related("admin")
            .prefetch_related("participants__user")
            .order_by("-updated_at")
        )

    def my_chats(self):
        return self._base_qs(Chat.KIND_PRIVATE)

    def my_group_chats(self):
        return self._base_qs(Chat.KIND_GROUP)

    def get_chat(self, chat_id, kind=None):
        """Fetch a chat the user participates in, or raise NotFound."""
        qs = Chat.objects.filter(id=chat_id, participants__user=self.user)
        if kind:
            qs = qs.filter(kind=kind)
        chat = qs.prefetch_related("participants__user").first()
        if chat is None:
            raise NotFound("Chat not found")
        return chat

    @transaction.atomic
    def get_or_create_private_chat(self, other):
        if other.pk == self.user.pk:
            raise ValidationFailed("Cannot start a chat with yourself")
        existing = (
            Chat.objects.filter(kind=Chat.KIND_PRIVATE, participants__user=self.user)
            .filter(participants__user=other)
            .first()
        )
        if existing:
            return existing, False
        chat = Chat.objects.create(kind=Chat.KIND_PRIVATE)
        ChatParticipant.objects.bulk_create(
            [ChatParticipant(chat=chat, user=self.user), ChatParticipant(chat=chat, user=other)]
        )
        logger.info("Private chat %s created between %s and %s", chat.id, self.user.pk, other.pk)
        return chat, True

    @transaction.atomic
    def create_group_chat(self, name, description="", participant_ids=()):
        name = (name or "").strip()
        if not name:
            raise ValidationFailed("Group chat name is required")
        parsed = [parse_user_id(pk) for pk in participant_ids or ()]
        if None in parsed:
            raise ValidationFailed("Invalid participant id")
        ids = set(parsed) - {self.user.pk}
        members = list(User.objects.filter(pk__in=ids))
        if len(members) != len(ids):
            raise NotFound("One or more participants not found")
        chat = Chat.objects.create(
            kind=Chat.KIND_GROUP,
            name=name,
            description=description or "",
            admin=self.user,
        )
        ChatParticipant.objects.bulk_create(
            [ChatParticipant(chat=chat, user=self.user)]
            + [ChatParticipant(chat=chat, user=member) for member in members]
        )
        logger.info("Group chat %s created by %s with %s members", chat.id, self.user.pk, len(members) + 1)
        return chat

    def messages(self, chat, start=0, end=50):
        """Messages oldest first within the requested page of the newest messages."""
        page = list(chat.messages.select_related("sender").order_by("-created_at", "-id")[start:end])
        page.reverse()
        return page

    @transaction.atomic
    def send_message(self, chat, content, message_type="text"):
        content = (content or "").strip()
        if not content:
            raise ValidationFailed("Message content is required")
        now = timezone.now()
        message = ChatMessage.objects.create(
            chat=chat,
            sender=self.user,
            content=content,
            message_type=message_type or "text",
            created_at=now,
        )
        chat.last_message_content = content
        chat.last_message_type = message.message_type
        chat.last_message_sender = self.user
        chat.last_message_at = now
        chat.updated_at = now
        chat.save(update_fields=[
            "last_message_content",
            "last_message_type",
            "last_message_sender",
            "last_message_at",
            "updated_at",
        ])
        ChatParticipant.objects.filter(chat=chat).exclude(user=self.user).update(
            unread_count=F("unread_count") + 1
        )
        return message

    def mark_read(self, chat):
        """Reset the user's unread counter for the chat."""
        updated = ChatParticipant.objects.filter(chat=chat, user=self.user).update(unread_count=0)
        if not updated:
            raise Forbidden("Not a participant of this chat")

    def unread_count(self):
        """Total unread messages across every chat of the user."""
        total = ChatParticipant.objects.filter(user=self.user).aggregate(total=Sum("unread_count"))["total"]
        return total or 0
