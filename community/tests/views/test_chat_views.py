from django.test import TestCase
from django.urls import reverse
from rest_framework.test import APIClient

from community.models import Chat, ChatParticipant
from community.tests.helpers import make_private_chat, make_user


class PrivateChatApiTestCase(TestCase):
    def setUp(self):
        self.alice = make_user(username="alice", first_name="Alice", last_name="Levi")
        self.bob = make_user(username="bob", first_name="Bob", last_name="Stone")
        self.alice_client = APIClient()
        self.alice_client.force_authenticate(user=self.alice)
        self.bob_client = APIClient()
        self.bob_client.force_authenticate(user=self.bob)

    def test_get_or_create_private_chat(self):
        url = reverse("private_chat")
        first = self.alice_client.post(url, {"otherUserId": str(self.bob.pk)}, format="json")
        self.assertEqual(first.status_code, 201)
        self.assertEqual(first.json()["otherUser"]["userName"], "Bob Stone")
        second = self.bob_client.post(url, {"otherUserId": self.alice.pk}, format="json")
        self.assertEqual(second.status_code, 200)
        self.assertEqual(second.json()["_id"], first.json()["_id"])
        self.assertEqual(second.json()["otherUser"]["userName"], "Alice Levi")

    def test_private_chat_with_unknown_user(self):
        response = self.alice_client.post(reverse("private_chat"), {"otherUserId": 99999}, format="json")
        self.assertEqual(response.status_code, 404)

    def test_send_increments_unread_and_read_resets(self):
        chat = make_private_chat(self.alice, self.bob)
        messages_url = reverse("chat_messages", args=[chat.id])

        response = self.alice_client.post(messages_url, {"content": "Dinner?", "messageType": "text"}, format="json")
        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.json()["senderId"], str(self.alice.pk))

        self.assertEqual(self.bob_client.get(reverse("chat_unread_count")).json(), {"count": 1})
        chats = self.bob_client.get(reverse("my_chats")).json()
        self.assertEqual(chats[0]["unreadCount"], 1)
        self.assertEqual(chats[0]["lastMessage"]["content"], "Dinner?")

        self.assertEqual(self.bob_client.put(reverse("chat_read", args=[chat.id])).status_code, 200)
        self.assertEqual(self.bob_client.get(reverse("chat_unread_count")).json(), {"count": 0})
        self.assertEqual(ChatParticipant.objects.get(chat=chat, user=self.bob).unread_count, 0)

    def test_list_messages(self):
        chat = make_private_chat(self.alice, self.bob)
        url = reverse("chat_messages", args=[chat.id])
        for text in ("one", "two"):
            self.alice_client.post(url, {"content": text}, format="json")
        response = self.bob_client.get(url)
        self.assertEqual([m["content"] for m in response.json()], ["one", "two"])

    def test_outsider_cannot_read_chat(self):
        chat = make_private_chat(self.alice, self.bob)
        outsider = APIClient()
        outsider.force_authenticate(user=make_user(username="cara"))
        self.assertEqual(outsider.get(reverse("chat_messages", args=[chat.id])).status_code, 404)

    def test_acting_user_from_header(self):
        chat = make_private_chat(self.alice, self.bob)
        client = APIClient()
        response = client.post(
            reverse("chat_messages", args=[chat.id]),
            {"content": "via header"},
            format="json",
            HTTP_X_USER_ID=str(self.bob.pk),
        )
        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.json()["senderId"], str(self.bob.pk))

    def test_requires_authentication(self):
        self.assertIn(APIClient().get(reverse("my_chats")).status_code, [401, 403])


class GroupChatApiTestCase(TestCase):
    def setUp(self):
        self.alice = make_user(username="alice")
        self.bob = make_user(username="bob")
        self.cara = make_user(username="cara")
        self.client = APIClient()
        self.client.force_authenticate(user=self.alice)

    def create(self):
        response = self.client.post(
            reverse("create_group_chat"),
            {"name": "Bakers", "description": "bread", "participantIds": [str(self.bob.pk), str(self.cara.pk)]},
            format="json",
        )
        self.assertEqual(response.status_code, 201)
        return response.json()

    def test_create_group_chat(self):
        data = self.create()
        self.assertEqual(data["chatType"], "group")
        self.assertEqual(data["adminId"], str(self.alice.pk))
        self.assertEqual(data["participantsCount"], 3)
        self.assertIsNone(data["otherUser"])

    def test_group_chat_without_name(self):
        response = self.client.post(reverse("create_group_chat"), {"participantIds": []}, format="json")
        self.assertEqual(response.status_code, 400)

    def test_group_message_flow(self):
        chat_id = self.create()["_id"]
        self.client.post(reverse("group_chat_messages", args=[chat_id]), {"content": "hi all"}, format="json")

        bob_client = APIClient()
        bob_client.force_authenticate(user=self.bob)
        chats = bob_client.get(reverse("my_group_chats")).json()
        self.assertEqual(chats[0]["unreadCount"], 1)
        bob_client.put(reverse("group_chat_read", args=[chat_id]))
        self.assertEqual(bob_client.get(reverse("group_chat_detail", args=[chat_id])).json()["unreadCount"], 0)

    def test_private_endpoint_does_not_serve_group_chats(self):
        chat_id = self.create()["_id"]
        self.assertEqual(self.client.get(reverse("chat_messages", args=[chat_id])).status_code, 404)
        self.assertTrue(Chat.objects.filter(kind=Chat.KIND_GROUP).exists())
