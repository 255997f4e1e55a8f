"""
Unified chat list: private and group chats merged into one newest-first list.

Records come from the chat store in its wire shape. Private chats carry an
``otherUser`` block, group chats carry their own ``name``/``image``. The
merged list is always fully re-sorted (stable, descending ``updatedAt``)
after a change, so chats with identical timestamps keep their relative order.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timedelta
from enum import Enum
from typing import Any, Dict, Iterable, List, Mapping, Optional

from django.utils import timezone

from community.utils.timestamps import EPOCH, to_datetime

UNKNOWN_USER = "Unknown User"
EMPTY_PREVIEW = "Start a conversation..."

MESSAGE_TYPE_PREVIEWS = {
    "image": "📷 Image",
    "document": "📎 File",
    "location": "📍 Location",
    "audio": "🎵 Voice message",
    "video": "🎥 Video",
}


class ChatKind(str, Enum):
    PRIVATE = "private"
    GROUP = "group"


def unknown_kind(kind) -> None:
    raise ValueError(f"Unknown chat kind: {kind!r}")


@dataclass(frozen=True)
class LastMessage:
    content: str
    sender_id: Optional[str] = None
    sender_name: Optional[str] = None
    created_at: Optional[datetime] = None
    message_type: str = "text"

    @classmethod
    def from_record(cls, record: Optional[Mapping[str, Any]]) -> Optional["LastMessage"]:
        if not record:
            return None
        sender = record.get("senderId") or record.get("sender")
        created = record.get("createdAt")
        return cls(
            content=record.get("content") or "",
            sender_id=str(sender) if sender is not None else None,
            sender_name=record.get("senderName"),
            created_at=to_datetime(created) if created else None,
            message_type=record.get("messageType") or "text",
        )


@dataclass
class UnifiedChat:
    chat_id: str
    kind: ChatKind
    display_name: str
    display_avatar: Optional[str]
    participants_count: int
    updated_at: datetime
    unread_count: int = 0
    last_message: Optional[LastMessage] = None
    record: Dict[str, Any] = field(default_factory=dict, repr=False)

    def as_dict(self) -> Dict[str, Any]:
        """Wire-friendly view used by API responses and the presentation layer."""
        data = dict(self.record)
        data.update(
            {
                "_id": self.chat_id,
                "chatType": self.kind.value,
                "displayName": self.display_name,
                "displayAvatar": self.display_avatar,
                "participantsCount": self.participants_count,
                "unreadCount": self.unread_count,
                "updatedAt": self.updated_at.isoformat(),
            }
        )
        return data


def _chat_id(record: Mapping[str, Any]) -> str:
    return str(record.get("_id") or record.get("id") or "")


def _unread(record: Mapping[str, Any]) -> int:
    try:
        return max(0, int(record.get("unreadCount") or 0))
    except (TypeError, ValueError):
        return 0


def tag_chat(record: Mapping[str, Any], kind: ChatKind) -> UnifiedChat:
    """Annotate one store record with its kind and display fields."""
    if kind is ChatKind.PRIVATE:
        other = record.get("otherUser") or {}
        display_name = other.get("userName") or UNKNOWN_USER
        display_avatar = other.get("userAvatar")
        participants_count = 2
    elif kind is ChatKind.GROUP:
        display_name = record.get("name") or ""
        display_avatar = record.get("image")
        participants_count = record.get("participantsCount") or len(record.get("participants") or ())
    else:
        unknown_kind(kind)

    return UnifiedChat(
        chat_id=_chat_id(record),
        kind=kind,
        display_name=display_name,
        display_avatar=display_avatar,
        participants_count=participants_count,
        updated_at=to_datetime(record.get("updatedAt")),
        unread_count=_unread(record),
        last_message=LastMessage.from_record(record.get("lastMessage")),
        record=dict(record),
    )


def sort_chats(chats: Iterable[UnifiedChat]) -> List[UnifiedChat]:
    # sorted() is stable with reverse=True, ties keep insertion order
    return sorted(chats, key=lambda chat: chat.updated_at, reverse=True)


def merge_chat_lists(
    private_chats: Iterable[Mapping[str, Any]],
    group_chats: Iterable[Mapping[str, Any]],
) -> List[UnifiedChat]:
    """Tag private then group chats and sort them newest first."""
    tagged = [tag_chat(record, ChatKind.PRIVATE) for record in private_chats or ()]
    tagged.extend(tag_chat(record, ChatKind.GROUP) for record in group_chats or ())
    return sort_chats(tagged)


class ChatList:
    """Merged chat list owned by one view; search never mutates it."""

    def __init__(self, chats: Iterable[UnifiedChat] = ()):
        self.chats: List[UnifiedChat] = sort_chats(chats)

    @classmethod
    def merge(cls, private_chats, group_chats) -> "ChatList":
        return cls(merge_chat_lists(private_chats, group_chats))

    def __len__(self):
        return len(self.chats)

    def __iter__(self):
        return iter(self.chats)

    def find(self, chat_id) -> Optional[UnifiedChat]:
        chat_id = str(chat_id)
        for chat in self.chats:
            if chat.chat_id == chat_id:
                return chat
        return None

    def apply_new_message(self, event: Mapping[str, Any]) -> Optional[UnifiedChat]:
        """
        Apply a live "new message" event and re-sort the whole list.

        The event carries ``chatId`` (private) or ``groupChatId`` (group),
        ``content``, optional ``senderName``/``senderId``/``messageType`` and
        ``createdAt``. Returns the updated chat, or None for unknown chats.
        """
        chat_id = event.get("groupChatId") or event.get("chatId")
        chat = self.find(chat_id) if chat_id else None
        if chat is None:
            return None

        created_at = to_datetime(event.get("createdAt"))
        if created_at == EPOCH:
            created_at = timezone.now()
        chat.last_message = replace(
            LastMessage.from_record(event) or LastMessage(content=""),
            created_at=created_at,
        )
        chat.unread_count += 1
        chat.updated_at = created_at
        self.chats = sort_chats(self.chats)
        return chat

    def mark_read(self, chat_id) -> bool:
        chat = self.find(chat_id)
        if chat is None:
            return False
        chat.unread_count = 0
        return True

    def search(self, query: Optional[str]) -> List[UnifiedChat]:
        """Case-insensitive substring match on display names."""
        if not query or not query.strip():
            return list(self.chats)
        needle = query.strip().casefold()
        return [chat for chat in self.chats if needle in (chat.display_name or "").casefold()]

    def unread_chats_count(self) -> int:
        return sum(1 for chat in self.chats if chat.unread_count > 0)

    def as_dicts(self) -> List[Dict[str, Any]]:
        return [chat.as_dict() for chat in self.chats]


def message_preview(message: Optional[Mapping[str, Any]], max_length: int = 50) -> str:
    """Short preview text for a chat row."""
    if not message:
        return EMPTY_PREVIEW
    message_type = message.get("messageType") or "text"
    if message_type in MESSAGE_TYPE_PREVIEWS:
        return MESSAGE_TYPE_PREVIEWS[message_type]
    content = message.get("content") or "Message"
    if len(content) > max_length:
        return content[:max_length] + "..."
    return content


def format_message_time(value, now: Optional[datetime] = None) -> str:
    """Relative time label: now, 5m, 3h, yesterday, 4d, else MM/DD/YYYY."""
    sent = to_datetime(value)
    now = now or timezone.now()
    elapsed = now - sent
    minutes = int(elapsed / timedelta(minutes=1))
    if minutes < 1:
        return "now"
    if minutes < 60:
        return f"{minutes}m"
    hours = minutes // 60
    if hours < 24:
        return f"{hours}h"
    days = hours // 24
    if days == 1:
        return "yesterday"
    if days < 7:
        return f"{days}d"
    return f"{sent.month}/{sent.day}/{sent.year}"
