from datetime import datetime, timedelta, timezone as dt_timezone

from django.test import SimpleTestCase

from community.services.chat_list import (
    EMPTY_PREVIEW,
    UNKNOWN_USER,
    ChatKind,
    ChatList,
    format_message_time,
    merge_chat_lists,
    message_preview,
    tag_chat,
)
from community.tests.helpers import chat_record


class MergeChatListsTestCase(SimpleTestCase):
    def test_merged_list_is_newest_first(self):
        merged = merge_chat_lists(
            [chat_record("p1", 10), chat_record("p2", 30)],
            [chat_record("g1", 20, kind="group")],
        )
        self.assertEqual([chat.chat_id for chat in merged], ["p2", "g1", "p1"])

    def test_ties_keep_private_before_group(self):
        merged = merge_chat_lists(
            [chat_record("p1", 10)],
            [chat_record("g1", 10, kind="group")],
        )
        self.assertEqual([chat.chat_id for chat in merged], ["p1", "g1"])
        self.assertEqual([chat.kind for chat in merged], [ChatKind.PRIVATE, ChatKind.GROUP])

    def test_private_display_fields_come_from_other_user(self):
        chat = tag_chat(chat_record("p1", 0, name="Maya Cohen"), ChatKind.PRIVATE)
        self.assertEqual(chat.display_name, "Maya Cohen")
        self.assertEqual(chat.participants_count, 2)

    def test_private_chat_without_other_user(self):
        record = chat_record("p1", 0)
        del record["otherUser"]
        self.assertEqual(tag_chat(record, ChatKind.PRIVATE).display_name, UNKNOWN_USER)

    def test_group_display_fields(self):
        chat = tag_chat(chat_record("g1", 0, kind="group", name="Bakers"), ChatKind.GROUP)
        self.assertEqual(chat.display_name, "Bakers")
        self.assertEqual(chat.participants_count, 3)

    def test_unknown_kind_raises(self):
        with self.assertRaises(ValueError):
            tag_chat(chat_record("x", 0), "channel")

    def test_missing_timestamp_sorts_last(self):
        record = chat_record("old", 0)
        del record["updatedAt"]
        merged = merge_chat_lists([record, chat_record("new", 5)], [])
        self.assertEqual([chat.chat_id for chat in merged], ["new", "old"])

    def test_as_dict_carries_kind_and_display(self):
        data = tag_chat(chat_record("g1", 0, kind="group", name="Bakers"), ChatKind.GROUP).as_dict()
        self.assertEqual(data["chatType"], "group")
        self.assertEqual(data["displayName"], "Bakers")
        self.assertEqual(data["_id"], "g1")


class ChatListTestCase(SimpleTestCase):
    def setUp(self):
        self.chats = ChatList.merge(
            [chat_record("p1", 30, name="Alice"), chat_record("p2", 10, unread=2, name="Bob")],
            [chat_record("g1", 20, kind="group", name="Sourdough Club")],
        )

    def test_new_message_increments_unread_and_moves_to_top(self):
        updated = self.chats.apply_new_message({
            "chatId": "p2",
            "content": "hi",
            "senderName": "Bob",
            "createdAt": datetime.now(dt_timezone.utc).isoformat(),
        })
        self.assertEqual(updated.unread_count, 3)
        self.assertEqual(self.chats.chats[0].chat_id, "p2")
        self.assertEqual(updated.last_message.content, "hi")

    def test_group_message_event_uses_group_chat_id(self):
        self.chats.apply_new_message({"groupChatId": "g1", "content": "bread?"})
        self.assertEqual(self.chats.chats[0].chat_id, "g1")
        self.assertEqual(self.chats.find("g1").unread_count, 1)

    def test_unparseable_event_time_counts_as_now(self):
        updated = self.chats.apply_new_message({"chatId": "p2", "content": "hi", "createdAt": "not a date"})
        self.assertEqual(self.chats.chats[0].chat_id, "p2")
        self.assertGreater(updated.updated_at, datetime.now(dt_timezone.utc) - timedelta(minutes=1))

    def test_event_for_unknown_chat_is_ignored(self):
        before = [chat.chat_id for chat in self.chats]
        self.assertIsNone(self.chats.apply_new_message({"chatId": "nope", "content": "x"}))
        self.assertEqual([chat.chat_id for chat in self.chats], before)

    def test_search_is_case_insensitive_and_leaves_list_intact(self):
        results = self.chats.search("sOURdough")
        self.assertEqual([chat.chat_id for chat in results], ["g1"])
        self.assertEqual(len(self.chats), 3)

    def test_blank_search_returns_everything(self):
        self.assertEqual(len(self.chats.search("   ")), 3)

    def test_mark_read_and_unread_chats_count(self):
        self.assertEqual(self.chats.unread_chats_count(), 1)
        self.assertTrue(self.chats.mark_read("p2"))
        self.assertEqual(self.chats.unread_chats_count(), 0)
        self.assertFalse(self.chats.mark_read("missing"))


class MessagePreviewTestCase(SimpleTestCase):
    def test_no_message(self):
        self.assertEqual(message_preview(None), EMPTY_PREVIEW)

    def test_media_types(self):
        self.assertEqual(message_preview({"messageType": "image", "content": "x.png"}), "📷 Image")
        self.assertEqual(message_preview({"messageType": "audio"}), "🎵 Voice message")

    def test_long_text_is_truncated(self):
        preview = message_preview({"content": "a" * 80})
        self.assertEqual(preview, "a" * 50 + "...")

    def test_short_text_is_kept(self):
        self.assertEqual(message_preview({"content": "hello"}), "hello")


class FormatMessageTimeTestCase(SimpleTestCase):
    def setUp(self):
        self.now = datetime(2024, 1, 10, 12, 0, tzinfo=dt_timezone.utc)

    def label(self, delta):
        return format_message_time(self.now - delta, now=self.now)

    def test_labels(self):
        self.assertEqual(self.label(timedelta(seconds=20)), "now")
        self.assertEqual(self.label(timedelta(minutes=5)), "5m")
        self.assertEqual(self.label(timedelta(hours=3)), "3h")
        self.assertEqual(self.label(timedelta(days=1, hours=2)), "yesterday")
        self.assertEqual(self.label(timedelta(days=4)), "4d")

    def test_older_than_a_week_shows_date(self):
        sent = datetime(2023, 12, 25, 9, 0, tzinfo=dt_timezone.utc)
        self.assertEqual(format_message_time(sent.isoformat(), now=self.now), "12/25/2023")
