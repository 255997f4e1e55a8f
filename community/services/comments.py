"""Service helpers for creating and deleting comments."""

from community.errors import Forbidden, NotFound
from community.models import Comment
from .notifications import NotificationService


class CommentService:
    """Encapsulate comment CRUD for recipe posts."""

    def __init__(self, notifications=None):
        self.notifications = notifications or NotificationService()

    def fetch(self, recipe, comment_id):
        """Fetch a comment of the recipe or raise NotFound."""
        try:
            return Comment.objects.select_related("user").get(id=comment_id, recipe_post=recipe)
        except (Comment.DoesNotExist, ValueError):
            raise NotFound("Comment not found")

    def create_comment(self, recipe, user, serializer):
        """Create a comment from a validated serializer."""
        comment = serializer.save(recipe_post=recipe, user=user)
        self.notifications.notify(recipe.author, user, "comment", post=recipe)
        return comment

    def can_delete(self, comment, user):
        """Return True when the user owns the comment or the recipe."""
        return comment.user_id == user.pk or comment.recipe_post.author_id == user.pk

    def delete_comment(self, comment, user):
        """Delete the given comment."""
        if not self.can_delete(comment, user):
            raise Forbidden("Not allowed to delete this comment")
        post_id = comment.recipe_post_id
        comment.delete()
        return post_id
