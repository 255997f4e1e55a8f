"""Model for user comments on recipe posts."""

from community.utils.uuid import uuid7_or_4
from django.conf import settings
from django.db import models
from .recipe_post import RecipePost

class Comment(models.Model):
    """User-authored comment on a recipe post."""
    id = models.UUIDField(primary_key=True, default=uuid7_or_4, editable=False)

    recipe_post = models.ForeignKey(
        RecipePost,
        on_delete=models.CASCADE,
        db_column='recipe_post_id',
        related_name='comments'
    )

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        db_column='user_id',
        related_name='comments'
    )

    # text (1–2000)
    text = models.TextField(max_length=2000)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        """DB table name and chronological order for comments."""
        db_table = "comment"
        ordering = ['created_at']

    def __str__(self):
        """Readable identifier for admin/debugging."""
        return f"Comment by {self.user_id} on {self.recipe_post_id}"
