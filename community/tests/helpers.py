from datetime import timedelta
import uuid

from django.utils import timezone

from community.models import Chat, ChatParticipant, RecipePost, User


def make_user(**kwargs):
    username = kwargs.pop("username", "johndoe")
    email = kwargs.pop(
        "email",
        f"{username}_{uuid.uuid4().hex[:6]}@example.org"
    )
    password = kwargs.pop("password", "Password123")

    user = User.objects.create_user(
        username=username,
        email=email,
        password=password,
        first_name=kwargs.pop("first_name", "John"),
        last_name=kwargs.pop("last_name", "Doe"),
        bio=kwargs.pop("bio", "Test bio"),
        **kwargs,
    )
    return user


def make_recipe_post(
    *,
    author=None,
    title="test post",
    description="desc",
    age=None,
    **extra,
):
    """
    creates and returns a recipe post. age (a timedelta) backdates created_at.
    """
    if author is None:
        author = make_user()

    post = RecipePost.objects.create(
        author=author,
        title=title,
        description=description,
        **extra,
    )
    if age is not None:
        RecipePost.objects.filter(pk=post.pk).update(created_at=timezone.now() - age)
        post.refresh_from_db()
    return post


def make_private_chat(first, second):
    chat = Chat.objects.create(kind=Chat.KIND_PRIVATE)
    ChatParticipant.objects.create(chat=chat, user=first)
    ChatParticipant.objects.create(chat=chat, user=second)
    return chat


def chat_record(chat_id, updated_seconds, *, kind="private", unread=0, name=None):
    """Chat record in the wire shape returned by /chats/my and /group-chats/my."""
    updated_at = (timezone.now().replace(microsecond=0) - timedelta(days=1)) + timedelta(seconds=updated_seconds)
    record = {
        "_id": chat_id,
        "chatType": kind,
        "unreadCount": unread,
        "updatedAt": updated_at.isoformat(),
        "lastMessage": None,
    }
    if kind == "group":
        record.update({"name": name or f"Group {chat_id}", "image": None, "participants": ["1", "2", "3"]})
    else:
        record["otherUser"] = {"userId": "9", "userName": name or f"User {chat_id}", "userAvatar": None}
    return record
