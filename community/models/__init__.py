from .user import User
from .recipe_post import RecipePost
from .like import Like
from .comment import Comment
from .followers import Follower
from .group import Group, GroupMembership, GroupJoinRequest
from .chat import Chat, ChatParticipant, ChatMessage
from .notification import Notification

__all__ = [
    "User",
    "RecipePost",
    "Like",
    "Comment",
    "Follower",
    "Group",
    "GroupMembership",
    "GroupJoinRequest",
    "Chat",
    "ChatParticipant",
    "ChatMessage",
    "Notification",
]
