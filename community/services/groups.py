"""Group lifecycle: creation, join requests, approvals and membership removal."""

import logging

from django.db import transaction

from community.errors import Conflict, Forbidden, ValidationFailed
from community.models import Group, GroupJoinRequest, GroupMembership
from .notifications import NotificationService

logger = logging.getLogger(__name__)

ACTION_APPROVE = "approve"
ACTION_REJECT = "reject"


class GroupService:
    def __init__(self, actor, *, notifications=None):
        self.actor = actor
        self.notifications = notifications or NotificationService()

    def _ensure_admin(self, group):
        if not group.is_admin(self.actor):
            raise Forbidden("Only group admins can do this")

    @transaction.atomic
    def create_group(self, serializer):
        """Save a validated GroupSerializer; the creator becomes its first admin."""
        group = serializer.save(creator=self.actor)
        GroupMembership.objects.create(group=group, user=self.actor, role=GroupMembership.ROLE_ADMIN)
        logger.info("Group %s created by %s", group.id, self.actor.pk)
        return group

    @transaction.atomic
    def join(self, group):
        """Join directly, or leave a pending request when a private group requires approval."""
        if group.is_member(self.actor):
            raise Conflict("Already a member of this group")
        if GroupJoinRequest.objects.filter(group=group, user=self.actor).exists():
            raise Conflict("Join request already pending")

        if group.is_private and group.require_approval:
            GroupJoinRequest.objects.create(group=group, user=self.actor)
            for admin in group.members.filter(role=GroupMembership.ROLE_ADMIN).select_related("user"):
                self.notifications.notify(admin.user, self.actor, "group_join_request", group=group)
            return {"status": "pending"}

        GroupMembership.objects.create(group=group, user=self.actor)
        logger.info("User %s joined group %s", self.actor.pk, group.id)
        return {"status": "joined"}

    @transaction.atomic
    def handle_request(self, group, user, action):
        self._ensure_admin(group)
        if action not in (ACTION_APPROVE, ACTION_REJECT):
            raise ValidationFailed("Action must be 'approve' or 'reject'")

        deleted, _ = GroupJoinRequest.objects.filter(group=group, user=user).delete()
        if not deleted:
            raise ValidationFailed("No pending request for this user")

        if action == ACTION_APPROVE:
            GroupMembership.objects.get_or_create(group=group, user=user)
            self.notifications.notify(user, self.actor, "group_join_approved", group=group)
            logger.info("Admin %s approved %s into group %s", self.actor.pk, user.pk, group.id)
            return {"status": "approved"}
        return {"status": "rejected"}

    @transaction.atomic
    def remove_member(self, group, user):
        """A member leaves, or an admin removes someone; the creator always stays."""
        if user.pk != self.actor.pk:
            self._ensure_admin(group)
        if user.pk == group.creator_id:
            raise ValidationFailed("The group creator cannot leave the group")
        deleted, _ = GroupMembership.objects.filter(group=group, user=user).delete()
        if not deleted:
            raise ValidationFailed("User is not a member of this group")
        return {"status": "removed"}

    def delete_group(self, group):
        if group.creator_id != self.actor.pk:
            raise Forbidden("Only the group creator can delete the group")
        group_id = group.id
        group.delete()
        logger.info("Group %s deleted by %s", group_id, self.actor.pk)
        return group_id


def groups_for(user=None):
    """All groups newest first; with a user, only the ones they belong to."""
    qs = Group.objects.all().prefetch_related("members", "pending_requests")
    if user is not None:
        qs = qs.filter(members__user=user)
    return qs
