"""Follow/unfollow with authoritative follower counts."""

import logging

from django.db import IntegrityError, transaction

from community.errors import Conflict, ValidationFailed
from community.repos.followers_repo import FollowersRepo
from .notifications import NotificationService

logger = logging.getLogger(__name__)

ALREADY_FOLLOWING = "Already following this user"
NOT_FOLLOWING = "Not following this user"
CANNOT_FOLLOW_SELF = "Cannot follow yourself"


class FollowService:
    def __init__(self, actor, *, repo=None, notifications=None):
        self.actor = actor
        self.repo = repo or FollowersRepo()
        self.notifications = notifications or NotificationService()

    def _check_target(self, target):
        if target.pk == self.actor.pk:
            raise ValidationFailed(CANNOT_FOLLOW_SELF)

    def counts(self, target):
        """Server-side counts returned after every follow mutation."""
        return {
            "followersCount": self.repo.followers_count(author_id=target.pk),
            "followingCount": self.repo.following_count(follower_id=self.actor.pk),
        }

    def status(self, target, viewer=None):
        return {
            "followersCount": self.repo.followers_count(author_id=target.pk),
            "followingCount": self.repo.following_count(follower_id=target.pk),
            "isFollowing": bool(viewer) and self.repo.is_following(follower_id=viewer.pk, author_id=target.pk),
        }

    @transaction.atomic
    def follow_user(self, target):
        self._check_target(target)
        if self.repo.is_following(follower_id=self.actor.pk, author_id=target.pk):
            raise ValidationFailed(ALREADY_FOLLOWING)
        try:
            with transaction.atomic():
                self.repo.follow(follower_id=self.actor.pk, author_id=target.pk)
        except IntegrityError:
            # concurrent follow of the same pair
            raise Conflict(ALREADY_FOLLOWING, status_code=400)
        self.notifications.notify(target, self.actor, "follow")
        logger.info("User %s followed %s", self.actor.pk, target.pk)
        return {"message": "User followed successfully", **self.counts(target)}

    @transaction.atomic
    def unfollow(self, target):
        self._check_target(target)
        if not self.repo.unfollow(follower_id=self.actor.pk, author_id=target.pk):
            raise ValidationFailed(NOT_FOLLOWING)
        logger.info("User %s unfollowed %s", self.actor.pk, target.pk)
        return {"message": "User unfollowed successfully", **self.counts(target)}
