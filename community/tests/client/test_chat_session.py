import threading
from unittest.mock import MagicMock

from django.test import SimpleTestCase

from community.client import ChatSession
from community.errors import ErrorKind, fail, ok
from community.services.chat_list import ChatKind
from community.tests.helpers import chat_record


class ChatSessionTestCase(SimpleTestCase):
    def setUp(self):
        self.api = MagicMock()
        self.session = ChatSession(self.api, 7, poll_interval=60)

    def tearDown(self):
        self.session.stop()

    def test_poll_once_notifies_unread_subscribers(self):
        self.api.get.return_value = ok({"count": 4})
        seen = []
        self.session.subscribe_unread(seen.append)
        self.assertEqual(self.session.poll_once(), 4)
        self.api.get.assert_called_once_with("/chats/unread-count")
        self.assertEqual(seen, [4])

    def test_poll_failure_is_logged_not_raised(self):
        self.api.get.return_value = fail(ErrorKind.TIMEOUT, "timeout")
        seen = []
        self.session.subscribe_unread(seen.append)
        with self.assertLogs("community.client.session", level="WARNING"):
            self.assertIsNone(self.session.poll_once())
        self.assertEqual(seen, [])

    def test_unsubscribe_handle(self):
        self.api.get.return_value = ok({"count": 1})
        seen = []
        unsubscribe = self.session.subscribe_unread(seen.append)
        unsubscribe()
        unsubscribe()
        self.session.poll_once()
        self.assertEqual(seen, [])

    def test_start_polls_and_stop_joins_thread(self):
        polled = threading.Event()
        self.api.get.return_value = ok({"count": 2})
        self.session.subscribe_unread(lambda count: polled.set())
        self.session.subscribe_messages(lambda message: None)

        self.session.start()
        self.assertTrue(polled.wait(2))
        thread = self.session._thread
        self.session.stop()

        self.assertFalse(thread.is_alive())
        self.assertFalse(self.session.running)
        self.assertEqual(self.session._unread_subscribers, [])
        self.assertEqual(self.session._message_subscribers, [])

    def test_no_poll_after_stop(self):
        self.api.get.return_value = ok({"count": 2})
        self.session.start()
        self.session.stop()
        calls = self.api.get.call_count
        threading.Event().wait(0.1)
        self.assertEqual(self.api.get.call_count, calls)
        self.assertFalse(self.session.running)

    def test_all_chats_merges_both_halves(self):
        responses = {
            "/chats/my": ok([chat_record("p1", 10)]),
            "/group-chats/my": ok([chat_record("g1", 20, kind="group")]),
        }
        self.api.get.side_effect = lambda path: responses[path]
        chats = self.session.all_chats()
        self.assertEqual([chat.chat_id for chat in chats], ["g1", "p1"])

    def test_all_chats_skips_failing_half(self):
        responses = {
            "/chats/my": ok([chat_record("p1", 10)]),
            "/group-chats/my": fail(ErrorKind.UNAVAILABLE, "down"),
        }
        self.api.get.side_effect = lambda path: responses[path]
        with self.assertLogs("community.client.session", level="WARNING"):
            chats = self.session.all_chats()
        self.assertEqual([chat.chat_id for chat in chats], ["p1"])

    def test_send_message_routes_by_kind_and_notifies(self):
        responses = {
            "/chats/my": ok([chat_record("p1", 10)]),
            "/group-chats/my": ok([chat_record("g1", 20, kind="group")]),
        }
        self.api.get.side_effect = lambda path: responses[path]
        chats = self.session.all_chats()
        self.api.post.return_value = ok({"_id": "m1", "content": "hi"})
        received = []
        self.session.subscribe_messages(received.append)

        self.session.send_message(chats.find("g1"), "hi")
        self.api.post.assert_called_with(
            "/group-chats/g1/messages", json={"content": "hi", "messageType": "text"}
        )
        self.session.send_message(chats.find("p1"), "hi", "image")
        self.api.post.assert_called_with(
            "/chats/p1/messages", json={"content": "hi", "messageType": "image"}
        )
        self.assertEqual(len(received), 2)

    def test_failed_send_does_not_notify(self):
        self.api.get.side_effect = lambda path: ok([chat_record("p1", 10)]) if path == "/chats/my" else ok([])
        chat = self.session.all_chats().find("p1")
        self.api.post.return_value = fail(ErrorKind.PERMISSION, "nope", status=403)
        received = []
        self.session.subscribe_messages(received.append)
        with self.assertLogs("community.client.session", level="WARNING"):
            result = self.session.send_message(chat, "hi")
        self.assertFalse(result["success"])
        self.assertEqual(received, [])

    def test_mark_read_resets_local_counter(self):
        self.api.get.side_effect = lambda path: ok([chat_record("g1", 10, kind="group", unread=5)]) if path == "/group-chats/my" else ok([])
        chat = self.session.all_chats().find("g1")
        self.assertEqual(chat.kind, ChatKind.GROUP)
        self.api.put.return_value = ok({"message": "Messages marked as read"})
        self.session.mark_read(chat)
        self.api.put.assert_called_once_with("/group-chats/g1/read")
        self.assertEqual(self.session.chats.find("g1").unread_count, 0)

    def test_get_or_create_private_chat_adds_it_to_the_list(self):
        self.api.post.return_value = ok(chat_record("p9", 50, name="Dana"), status=201)
        result = self.session.get_or_create_private_chat(12)
        self.api.post.assert_called_once_with("/chats/private", json={"otherUserId": "12"})
        self.assertTrue(result["success"])
        self.assertEqual(self.session.chats.find("p9").display_name, "Dana")

        self.session.get_or_create_private_chat(12)
        self.assertEqual(len(self.session.chats), 1)

    def test_get_or_create_private_chat_failure_is_returned(self):
        self.api.post.return_value = fail(ErrorKind.NOT_FOUND, "User not found", status=404)
        with self.assertLogs("community.client.session", level="WARNING"):
            result = self.session.get_or_create_private_chat(99)
        self.assertEqual(result["kind"], "NotFoundError")
        self.assertEqual(len(self.session.chats), 0)

    def test_create_group_chat(self):
        self.api.post.return_value = ok(chat_record("g5", 10, kind="group", name="Bakers"), status=201)
        self.session.create_group_chat("Bakers", [3, 4], description="bread")
        self.api.post.assert_called_once_with(
            "/group-chats",
            json={"name": "Bakers", "description": "bread", "participantIds": ["3", "4"]},
        )
        self.assertEqual(self.session.chats.find("g5").kind, ChatKind.GROUP)

    def test_get_messages_uses_the_chat_kind_path(self):
        self.api.get.side_effect = lambda path, **kwargs: (
            ok([chat_record("g1", 10, kind="group")]) if path == "/group-chats/my" else ok([])
        )
        chat = self.session.all_chats().find("g1")
        self.api.get.side_effect = None
        self.api.get.return_value = ok([{"_id": "m1", "content": "hi"}])
        result = self.session.get_messages(chat, page=2)
        self.api.get.assert_called_with("/group-chats/g1/messages", params={"page": 2, "limit": 50})
        self.assertEqual(result["data"][0]["content"], "hi")

    def test_search_users(self):
        self.assertEqual(self.session.search_users("  "), ok([]))
        self.api.get.assert_not_called()
        self.api.get.return_value = ok([{"userId": "3"}])
        self.session.search_users(" ana ")
        self.api.get.assert_called_once_with("/users/search", params={"q": "ana"})

    def test_followers_and_following(self):
        self.api.get.return_value = ok([])
        self.session.get_followers(3)
        self.api.get.assert_called_with("/users/3/followers", params={"page": 1, "limit": 20})
        self.session.get_following(3, page=2)
        self.api.get.assert_called_with("/users/3/following", params={"page": 2, "limit": 20})
