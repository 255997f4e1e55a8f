from community.utils.uuid import uuid7_or_4
from django.db import models
from django.conf import settings

"""
RecipePost model

The main "post" a user publishes: title, description, ingredients,
instructions and the cuisine `category` the statistics screen groups by.

- `author` links the post to the user who created it; only the author may
  edit or delete it.
- `image` is an optional URL/path stored as a string.
- Likes and comments live in their own tables (`Like`, `Comment`) and are
  reachable as `post.likes` / `post.comments`.
- `group` is set for posts published inside a cooking group. Those stay out
  of the personal feed, and `is_approved` gates them when the group moderates
  member posts.
"""

class RecipePost(models.Model):
    DEFAULT_CATEGORY = "General"

    id = models.UUIDField(primary_key=True, default=uuid7_or_4, editable=False)

    author = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='recipe_posts',
        db_column='author_id'
    )

    title = models.CharField(max_length=255)
    description = models.TextField(max_length=4000, blank=True)
    ingredients = models.TextField(blank=True)
    instructions = models.TextField(blank=True)
    image = models.CharField(max_length=500, blank=True, null=True)

    # cuisine tag (Italian, Mexican, ...)
    category = models.CharField(max_length=50, default=DEFAULT_CATEGORY)
    meat_type = models.CharField(max_length=50, default="Mixed")
    prep_time = models.PositiveIntegerField(default=0)
    servings = models.PositiveIntegerField(default=1)

    group = models.ForeignKey(
        "community.Group",
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name="posts",
    )
    is_approved = models.BooleanField(default=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'recipe_post'
        ordering = ['-created_at']

    def __str__(self):
        return self.title

    @property
    def likes_count(self):
        return self.likes.count()
