from .accounts import AccountService
from .follow import FollowService
from .notifications import NotificationService
from .recipe_posts import RecipePostService
from .comments import CommentService
from .groups import GroupService
from .group_posts import GroupPostService
from .chats import ChatService
from .statistics import StatisticsService, compute_statistics
from .chat_list import ChatKind, ChatList, merge_chat_lists

__all__ = [
    "AccountService",
    "FollowService",
    "NotificationService",
    "RecipePostService",
    "CommentService",
    "GroupService",
    "GroupPostService",
    "ChatService",
    "StatisticsService",
    "compute_statistics",
    "ChatKind",
    "ChatList",
    "merge_chat_lists",
]
