from .api import ApiClient
from .follow import FAILURE_MESSAGES, FollowFailure, FollowReconciler, FollowState
from .session import ChatSession

__all__ = [
    "ApiClient",
    "FAILURE_MESSAGES",
    "FollowFailure",
    "FollowReconciler",
    "FollowState",
    "ChatSession",
]
