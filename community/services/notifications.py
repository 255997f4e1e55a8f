"""Service helpers for creating, fetching and acknowledging notifications."""

import logging

from community.errors import Forbidden, NotFound
from community.models import Notification

logger = logging.getLogger(__name__)


class NotificationService:
    """Encapsulate notification querying and filtering logic."""

    def __init__(self, notification_model=Notification):
        self.notification_model = notification_model

    def notify(self, recipient, sender, notif_type, *, post=None, group=None):
        """Create a notification unless the actor is notifying themselves."""
        if recipient is None or sender is None or recipient.pk == sender.pk:
            return None
        return self.notification_model.objects.create(
            recipient=recipient,
            sender=sender,
            notification_type=notif_type,
            post=post,
            group=group,
        )

    def fetch(self, user):
        """Fetch notifications for a user, newest first."""
        return (
            self.notification_model.objects.filter(recipient=user)
            .select_related("sender", "post", "group")
            .order_by("-created_at", "-id")
        )

    def filter_notifications(self, notifs):
        """Collapse repeated follow notifications from the same sender."""
        seen_follow_senders = set()
        filtered = []
        for notif in notifs:
            if notif.notification_type != "follow":
                filtered.append(notif)
                continue
            if notif.sender_id in seen_follow_senders:
                continue
            seen_follow_senders.add(notif.sender_id)
            filtered.append(notif)
        return filtered

    def visible_notifications(self, user):
        """Return filtered notifications for a user."""
        return self.filter_notifications(list(self.fetch(user)))

    def unread_count(self, user):
        return self.notification_model.objects.filter(recipient=user, is_read=False).count()

    def _owned(self, user, notification_id):
        try:
            notification = self.notification_model.objects.get(id=notification_id)
        except self.notification_model.DoesNotExist:
            raise NotFound("Notification not found")
        if notification.recipient_id != user.id:
            raise Forbidden("Not allowed to modify this notification")
        return notification

    def mark_read(self, user, notification_id):
        notification = self._owned(user, notification_id)
        if not notification.is_read:
            notification.is_read = True
            notification.save(update_fields=["is_read"])
        return notification

    def mark_all_read(self, user):
        """Mark all unread notifications for the user as read."""
        return self.notification_model.objects.filter(recipient=user, is_read=False).update(is_read=True)

    def delete(self, user, notification_id):
        self._owned(user, notification_id).delete()
        logger.debug("Notification %s deleted by %s", notification_id, user.id)
