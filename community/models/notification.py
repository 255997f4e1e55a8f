from django.db import models
from django.conf import settings
from .recipe_post import RecipePost
from .group import Group

"""
Notification model

This table stores in-app notifications for users (the "bell" / activity feed).

Core fields:
- `recipient`: who receives the notification (the user being notified)
- `sender`: who triggered the notification (the user who did the action)
- `notification_type`: what kind of event it is

Optional links (only filled when relevant):
- `post`: the RecipePost involved (likes/comments)
- `group`: the Group involved (join requests and approvals)

Notifications are ordered newest-first.
"""

class Notification(models.Model):
    TYPES = [
        ('like', 'Like'),
        ('comment', 'Comment'),
        ('follow', 'Follow'),
        ('group_join_request', 'Group Join Request'),
        ('group_join_approved', 'Group Join Approved'),
    ]

    recipient = models.ForeignKey(settings.AUTH_USER_MODEL, related_name='notifications', on_delete=models.CASCADE)
    sender = models.ForeignKey(settings.AUTH_USER_MODEL, related_name='sent_notifications', on_delete=models.CASCADE)
    notification_type = models.CharField(max_length=30, choices=TYPES)
    post = models.ForeignKey(RecipePost, null=True, blank=True, on_delete=models.CASCADE)
    group = models.ForeignKey(Group, null=True, blank=True, on_delete=models.CASCADE)

    is_read = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-created_at', '-id']

    def __str__(self):
        return f"Notification for {self.recipient}: {self.notification_type}"
