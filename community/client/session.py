"""
Per-login chat session.

One ``ChatSession`` is created when a user logs in and stopped on logout.
It owns the unread-count poller and the message/unread subscriber lists,
so nothing outlives ``stop()``.
"""

import logging
import threading

from django.conf import settings

from community.errors import ok
from community.services.chat_list import ChatKind, ChatList, tag_chat, unknown_kind

logger = logging.getLogger(__name__)


def _default_poll_interval():
    if settings.configured:
        return getattr(settings, "FLAVORWORLD_UNREAD_POLL_SECONDS", 30)
    return 30


class ChatSession:
    def __init__(self, api, user_id, poll_interval=None):
        self.api = api
        self.user_id = str(user_id)
        self.poll_interval = poll_interval if poll_interval is not None else _default_poll_interval()
        self.chats = ChatList()
        self.unread_count = 0
        self._message_subscribers = []
        self._unread_subscribers = []
        self._lock = threading.Lock()
        self._stop_event = threading.Event()
        self._thread = None

    @property
    def running(self):
        return self._thread is not None and self._thread.is_alive()

    def start(self):
        """Start polling the unread count; a second call is a no-op."""
        if self.running:
            return
        self._stop_event.clear()
        self._thread = threading.Thread(
            target=self._poll_loop,
            name=f"unread-poller-{self.user_id}",
            daemon=True,
        )
        self._thread.start()
        logger.debug("Chat session for %s started (every %ss)", self.user_id, self.poll_interval)

    def stop(self):
        """Stop the poller, wait for it, and drop every subscriber."""
        self._stop_event.set()
        thread, self._thread = self._thread, None
        if thread is not None and thread is not threading.current_thread():
            thread.join()
        with self._lock:
            self._message_subscribers.clear()
            self._unread_subscribers.clear()
        logger.debug("Chat session for %s stopped", self.user_id)

    def _poll_loop(self):
        while not self._stop_event.is_set():
            self.poll_once()
            if self._stop_event.wait(self.poll_interval):
                break

    def poll_once(self):
        """Fetch the unread count and push it to unread subscribers."""
        result = self.api.get("/chats/unread-count")
        if not result["success"]:
            logger.warning("Unread count poll failed: %s", result["message"])
            return None
        count = (result.get("data") or {}).get("count", 0)
        if self._stop_event.is_set():
            return count
        self.unread_count = count
        self._notify(self._unread_subscribers, count)
        return count

    def _subscribe(self, subscribers, callback):
        with self._lock:
            subscribers.append(callback)

        def unsubscribe():
            with self._lock:
                if callback in subscribers:
                    subscribers.remove(callback)

        return unsubscribe

    def subscribe_messages(self, callback):
        return self._subscribe(self._message_subscribers, callback)

    def subscribe_unread(self, callback):
        return self._subscribe(self._unread_subscribers, callback)

    def _notify(self, subscribers, payload):
        with self._lock:
            callbacks = list(subscribers)
        for callback in callbacks:
            try:
                callback(payload)
            except Exception:
                logger.exception("Chat subscriber %r failed", callback)

    def all_chats(self):
        """Private and group chats merged newest first; a failing half is left out."""
        private = self.api.get("/chats/my")
        if not private["success"]:
            logger.warning("Could not load private chats: %s", private["message"])
        groups = self.api.get("/group-chats/my")
        if not groups["success"]:
            logger.warning("Could not load group chats: %s", groups["message"])

        self.chats = ChatList.merge(
            (private.get("data") or []) if private["success"] else [],
            (groups.get("data") or []) if groups["success"] else [],
        )
        return self.chats

    def _chat_path(self, chat):
        if chat.kind is ChatKind.PRIVATE:
            return f"/chats/{chat.chat_id}"
        elif chat.kind is ChatKind.GROUP:
            return f"/group-chats/{chat.chat_id}"
        unknown_kind(chat.kind)

    def send_message(self, chat, content, message_type="text"):
        result = self.api.post(
            f"{self._chat_path(chat)}/messages",
            json={"content": content, "messageType": message_type},
        )
        if not result["success"]:
            logger.warning("Sending to %s chat %s failed: %s", chat.kind.value, chat.chat_id, result["message"])
            return result
        self._notify(self._message_subscribers, result["data"])
        return result

    def mark_read(self, chat):
        result = self.api.put(f"{self._chat_path(chat)}/read")
        if result["success"]:
            chat.unread_count = 0
            self.chats.mark_read(chat.chat_id)
        else:
            logger.warning("Marking %s chat %s read failed: %s", chat.kind.value, chat.chat_id, result["message"])
        return result

    def _remember(self, record, kind):
        chat = tag_chat(record, kind)
        if self.chats.find(chat.chat_id) is None:
            self.chats = ChatList([*self.chats.chats, chat])
        return chat

    def get_or_create_private_chat(self, other_user_id):
        """Open the private chat with ``other_user_id``, creating it on first contact."""
        result = self.api.post("/chats/private", json={"otherUserId": str(other_user_id)})
        if result["success"]:
            self._remember(result["data"], ChatKind.PRIVATE)
        else:
            logger.warning("Could not open chat with %s: %s", other_user_id, result["message"])
        return result

    def create_group_chat(self, name, participant_ids, description=""):
        result = self.api.post(
            "/group-chats",
            json={
                "name": name,
                "description": description,
                "participantIds": [str(user_id) for user_id in participant_ids],
            },
        )
        if result["success"]:
            self._remember(result["data"], ChatKind.GROUP)
        else:
            logger.warning("Could not create group chat %r: %s", name, result["message"])
        return result

    def get_messages(self, chat, page=1, limit=50):
        """One page of a chat's history, oldest first."""
        return self.api.get(f"{self._chat_path(chat)}/messages", params={"page": page, "limit": limit})

    def search_users(self, query):
        query = (query or "").strip()
        if not query:
            return ok([])
        return self.api.get("/users/search", params={"q": query})

    def get_followers(self, user_id, page=1, limit=20):
        return self.api.get(f"/users/{user_id}/followers", params={"page": page, "limit": limit})

    def get_following(self, user_id, page=1, limit=20):
        return self.api.get(f"/users/{user_id}/following", params={"page": page, "limit": limit})
