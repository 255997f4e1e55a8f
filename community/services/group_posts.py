"""Recipe posts published inside a cooking group."""

import logging

from django.db import transaction

from community.errors import Forbidden, NotFound
from community.models import RecipePost
from community.repos.post_repo import PostRepo

logger = logging.getLogger(__name__)


class GroupPostService:
    """
    Group-scoped posting rules.

    Only members post, and only admins when the group turns member posts off.
    In a group that requires approval, a plain member's post waits for an
    admin before anyone else sees it. Private groups are readable by members
    only.
    """

    def __init__(self, actor, *, repo=None):
        self.actor = actor
        self.repo = repo or PostRepo()

    def _signed_in(self):
        return getattr(self.actor, "is_authenticated", False)

    def _is_member(self, group):
        return self._signed_in() and group.is_member(self.actor)

    def _is_moderator(self, group):
        return self._signed_in() and (group.creator_id == self.actor.pk or group.is_admin(self.actor))

    def ensure_can_read(self, group):
        if group.is_private and not self._is_member(group):
            raise Forbidden("Access denied to private group")

    def posts(self, group):
        """Approved posts newest first; moderators also see the pending ones."""
        self.ensure_can_read(group)
        return self.repo.list_for_group(group.id, include_pending=self._is_moderator(group))

    def get_post(self, group, post_id):
        self.ensure_can_read(group)
        try:
            post = RecipePost.objects.select_related("author", "group").get(id=post_id, group=group)
        except RecipePost.DoesNotExist:
            raise NotFound("Post not found")
        hidden = not post.is_approved and post.author_id != self.actor.pk
        if hidden and not self._is_moderator(group):
            raise NotFound("Post not found")
        return post

    @transaction.atomic
    def create_post(self, group, serializer):
        """Save a validated RecipeSerializer as a post in ``group``."""
        if not self._is_member(group):
            raise Forbidden("Only group members can post")
        moderator = self._is_moderator(group)
        if not group.allow_member_posts and not moderator:
            raise Forbidden("Only admins can post in this group")

        approved = moderator or not group.require_approval
        post = serializer.save(author=self.actor, group=group, is_approved=approved)
        logger.info("Post %s created in group %s by %s (approved=%s)", post.id, group.id, self.actor.pk, approved)
        return post

    def update_post(self, post, serializer):
        if post.author_id != self.actor.pk:
            raise Forbidden("Only the author can modify this recipe")
        return serializer.save()

    def approve(self, group, post):
        if not self._is_moderator(group):
            raise Forbidden("Only group admins can do this")
        if not post.is_approved:
            post.is_approved = True
            post.save(update_fields=["is_approved", "updated_at"])
            logger.info("Post %s approved in group %s by %s", post.id, group.id, self.actor.pk)
        return post

    def delete_post(self, group, post):
        """The post's author, a group admin or the group creator may delete it."""
        if post.author_id != self.actor.pk and not self._is_moderator(group):
            raise Forbidden("Permission denied")
        post_id = post.id
        post.delete()
        logger.info("Post %s deleted from group %s by %s", post_id, group.id, self.actor.pk)
        return post_id
