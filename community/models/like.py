"""Model representing a user's like on a recipe post."""

from django.conf import settings
from django.db import models
from .recipe_post import RecipePost

class Like(models.Model):
    """User like on a recipe post."""
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        db_column='user_id',
        related_name='likes'
    )

    recipe_post = models.ForeignKey(
        RecipePost,
        on_delete=models.CASCADE,
        db_column='recipe_post_id',
        related_name='likes'
    )

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        """Enforce one like per user/post pair."""
        unique_together = (
            ('user', 'recipe_post'),
        )
        db_table = "like"
        ordering = ['created_at', 'id']

    def __str__(self):
        """Readable representation for admin/debugging."""
        return f"{self.user_id} → {self.recipe_post_id}"
