from django.core.management.base import BaseCommand
from django.db import transaction

from community.models import Chat, Group, User


class Command(BaseCommand):
    """
    Management command to remove (unseed) sample data from the database.

    Deletes every non-staff user (cascading to their posts, likes, comments,
    follows and notifications) along with groups and chats, so the database
    returns to a clean state while administrative accounts survive.
    """

    help = 'Removes seeded sample data'

    def handle(self, *args, **options):
        with transaction.atomic():
            Chat.objects.all().delete()
            Group.objects.all().delete()
            deleted_count, _ = User.objects.filter(is_staff=False).delete()

        self.stdout.write(self.style.SUCCESS(f"Deleted {deleted_count} non-staff users and related data."))
