"""Service helpers for recipe post ownership and engagement."""

import logging

from django.db import IntegrityError, transaction

from community.errors import Forbidden
from community.models import Like
from .notifications import NotificationService

logger = logging.getLogger(__name__)


class RecipePostService:
    """Encapsulate recipe post lifecycle and engagement operations."""

    def __init__(self, notifications=None):
        self.notifications = notifications or NotificationService()

    def ensure_author(self, recipe, user):
        if not user or recipe.author_id != user.pk:
            raise Forbidden("Only the author can modify this recipe")

    def delete(self, recipe, user):
        self.ensure_author(recipe, user)
        recipe_id = recipe.id
        recipe.delete()
        logger.info("Recipe %s deleted by %s", recipe_id, user.pk)
        return recipe_id

    @transaction.atomic
    def like(self, user, recipe):
        """Like a recipe once; repeated likes leave the count unchanged."""
        try:
            with transaction.atomic():
                _, created = Like.objects.get_or_create(user=user, recipe_post=recipe)
        except IntegrityError:
            created = False
        if created:
            self.notifications.notify(recipe.author, user, "like", post=recipe)
        return recipe.likes.count()

    def unlike(self, user, recipe):
        Like.objects.filter(user=user, recipe_post=recipe).delete()
        return recipe.likes.count()

    def toggle_like(self, user, recipe):
        """Toggle like/unlike for a recipe."""
        if Like.objects.filter(user=user, recipe_post=recipe).exists():
            self.unlike(user, recipe)
            return False
        self.like(user, recipe)
        return True
