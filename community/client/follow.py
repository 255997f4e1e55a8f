"""
Follow/unfollow from the client side.

The server count is authoritative: after a successful toggle the local
follower counter is replaced with the value the server returned, never
incremented locally. A result that arrives after its screen was left is
dropped through the ``is_current`` guard.
"""

import logging
from dataclasses import dataclass
from enum import Enum

from community.errors import ErrorKind, fail, ok

logger = logging.getLogger(__name__)


class FollowFailure(str, Enum):
    ALREADY_FOLLOWING = "AlreadyFollowing"
    NOT_FOLLOWING = "NotFollowing"
    SELF_FOLLOW = "SelfFollow"
    USER_NOT_FOUND = "UserNotFound"
    SERVICE_UNAVAILABLE = "ServiceUnavailable"
    TIMEOUT = "Timeout"
    UNKNOWN = "Unknown"


FAILURE_MESSAGES = {
    FollowFailure.ALREADY_FOLLOWING: "You are already following this user",
    FollowFailure.NOT_FOLLOWING: "You are not following this user",
    FollowFailure.SELF_FOLLOW: "You cannot follow yourself",
    FollowFailure.USER_NOT_FOUND: "User not found",
    FollowFailure.SERVICE_UNAVAILABLE: "Database not available. Please try again later.",
    FollowFailure.TIMEOUT: "Connection timeout. Please check your network and try again.",
}
DEFAULT_FAILURE_MESSAGE = "Failed to update follow status"


def classify_failure(result):
    """Pick the follow failure reason for a failed API result."""
    status = result.get("status")
    message = (result.get("message") or "").lower()
    kind = result.get("kind")

    if kind == ErrorKind.TIMEOUT.value:
        return FollowFailure.TIMEOUT
    if status == 404:
        return FollowFailure.USER_NOT_FOUND
    if status == 503 or kind == ErrorKind.UNAVAILABLE.value:
        return FollowFailure.SERVICE_UNAVAILABLE
    if status == 400:
        if "already following" in message:
            return FollowFailure.ALREADY_FOLLOWING
        if "not following" in message:
            return FollowFailure.NOT_FOLLOWING
        if "cannot follow yourself" in message:
            return FollowFailure.SELF_FOLLOW
    return FollowFailure.UNKNOWN


def failure_message(reason, server_message=None):
    if reason is FollowFailure.UNKNOWN:
        return server_message or DEFAULT_FAILURE_MESSAGE
    return FAILURE_MESSAGES[reason]


class FollowReconciler:
    """Issues follow toggles through an ``ApiClient``; exactly one request per toggle."""

    def __init__(self, api):
        self.api = api

    def toggle_follow(self, target_user_id, follower_id, currently_following):
        if not target_user_id or not follower_id:
            return fail(ErrorKind.VALIDATION, "Missing user information", reason=FollowFailure.UNKNOWN.value)
        if str(target_user_id) == str(follower_id):
            return fail(
                ErrorKind.VALIDATION,
                FAILURE_MESSAGES[FollowFailure.SELF_FOLLOW],
                reason=FollowFailure.SELF_FOLLOW.value,
            )

        method = "DELETE" if currently_following else "POST"
        result = self.api.request(
            method,
            f"/users/{target_user_id}/follow",
            json={"followerId": str(follower_id)},
        )
        if not result["success"]:
            reason = classify_failure(result)
            logger.warning(
                "%s follow %s -> %s failed: %s",
                method, follower_id, target_user_id, reason.value,
            )
            return fail(
                result["kind"],
                failure_message(reason, result.get("message")),
                reason=reason.value,
                status=result.get("status"),
            )

        data = result.get("data") or {}
        logger.info("User %s %s %s", follower_id, "unfollowed" if currently_following else "followed", target_user_id)
        return ok({
            "isFollowing": not currently_following,
            "followersCount": data.get("followersCount"),
            "followingCount": data.get("followingCount"),
        })

    def get_follow_status(self, user_id, viewer_id):
        """``{followersCount, followingCount, isFollowing}`` for ``user_id`` as seen by ``viewer_id``."""
        if not user_id or not viewer_id:
            return fail(ErrorKind.VALIDATION, "Missing user information")
        return self.api.get(f"/users/{user_id}/follow-status/{viewer_id}")


@dataclass
class FollowState:
    """Follow state shown on one profile screen."""

    is_following: bool = False
    followers_count: int = 0
    following_count: int = 0

    def apply(self, result, is_current=None):
        """
        Fold a toggle or status result into the state.

        Returns True when the state changed. Failed results and results whose
        screen is no longer current leave the state untouched.
        """
        if is_current is not None and not is_current():
            logger.debug("Dropping follow result for a screen that is no longer current")
            return False
        if not result.get("success"):
            return False

        data = result.get("data") or {}
        if "isFollowing" in data:
            self.is_following = bool(data["isFollowing"])
        if data.get("followersCount") is not None:
            self.followers_count = int(data["followersCount"])
        if data.get("followingCount") is not None:
            self.following_count = int(data["followingCount"])
        return True
