"""Cooking groups, their memberships and pending join requests."""

from community.utils.uuid import uuid7_or_4
from django.conf import settings
from django.db import models


class Group(models.Model):
    """A community group users can join, optionally gated by admin approval."""
    id = models.UUIDField(primary_key=True, default=uuid7_or_4, editable=False)

    name = models.CharField(max_length=100)
    description = models.TextField(max_length=500, blank=True)
    image = models.CharField(max_length=500, blank=True, null=True)
    creator = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="created_groups",
    )
    is_private = models.BooleanField(default=False)
    category = models.CharField(max_length=50, default="General")
    rules = models.TextField(max_length=1000, blank=True)

    # settings
    allow_member_posts = models.BooleanField(default=True)
    require_approval = models.BooleanField(default=True)
    allow_invites = models.BooleanField(default=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "cooking_group"
        ordering = ["-created_at"]

    def __str__(self):
        return self.name

    def is_admin(self, user):
        return self.members.filter(user=user, role=GroupMembership.ROLE_ADMIN).exists()

    def is_member(self, user):
        return self.members.filter(user=user).exists()


class GroupMembership(models.Model):
    ROLE_ADMIN = "admin"
    ROLE_MEMBER = "member"
    ROLE_CHOICES = [
        (ROLE_ADMIN, "Admin"),
        (ROLE_MEMBER, "Member"),
    ]

    group = models.ForeignKey(Group, on_delete=models.CASCADE, related_name="members")
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="group_memberships",
    )
    role = models.CharField(max_length=10, choices=ROLE_CHOICES, default=ROLE_MEMBER)
    joined_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "group_membership"
        ordering = ["joined_at", "id"]
        constraints = [
            models.UniqueConstraint(fields=["group", "user"], name="uniq_group_membership"),
        ]

    def __str__(self):
        return f"{self.user_id} in {self.group_id} ({self.role})"


class GroupJoinRequest(models.Model):
    """Pending request to join a group that requires approval."""
    group = models.ForeignKey(Group, on_delete=models.CASCADE, related_name="pending_requests")
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="group_join_requests",
    )
    requested_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "group_join_request"
        ordering = ["requested_at", "id"]
        constraints = [
            models.UniqueConstraint(fields=["group", "user"], name="uniq_group_join_request"),
        ]

    def __str__(self):
        return f"JoinRequest(user={self.user_id}, group={self.group_id})"
