from unittest.mock import MagicMock

from django.test import TestCase

from community.errors import Forbidden
from community.models import Comment, Like, RecipePost
from community.services import CommentService, RecipePostService
from community.tests.helpers import make_recipe_post, make_user


class RecipePostServiceTestCase(TestCase):
    def setUp(self):
        self.notifications = MagicMock()
        self.service = RecipePostService(notifications=self.notifications)
        self.author = make_user(username="author")
        self.fan = make_user(username="fan")
        self.post = make_recipe_post(author=self.author)

    def test_like_is_idempotent(self):
        self.assertEqual(self.service.like(self.fan, self.post), 1)
        self.assertEqual(self.service.like(self.fan, self.post), 1)
        self.assertEqual(Like.objects.count(), 1)
        self.notifications.notify.assert_called_once_with(self.author, self.fan, "like", post=self.post)

    def test_unlike(self):
        self.service.like(self.fan, self.post)
        self.assertEqual(self.service.unlike(self.fan, self.post), 0)

    def test_toggle_like(self):
        self.assertTrue(self.service.toggle_like(self.fan, self.post))
        self.assertFalse(self.service.toggle_like(self.fan, self.post))
        self.assertEqual(self.post.likes_count, 0)

    def test_only_author_deletes(self):
        with self.assertRaises(Forbidden):
            self.service.delete(self.post, self.fan)
        self.service.delete(self.post, self.author)
        self.assertFalse(RecipePost.objects.exists())


class CommentServiceTestCase(TestCase):
    def setUp(self):
        self.service = CommentService(notifications=MagicMock())
        self.author = make_user(username="author")
        self.commenter = make_user(username="commenter")
        self.stranger = make_user(username="stranger")
        self.post = make_recipe_post(author=self.author)
        self.comment = Comment.objects.create(recipe_post=self.post, user=self.commenter, text="Yum")

    def test_comment_author_and_post_author_can_delete(self):
        self.assertTrue(self.service.can_delete(self.comment, self.commenter))
        self.assertTrue(self.service.can_delete(self.comment, self.author))
        self.assertFalse(self.service.can_delete(self.comment, self.stranger))

    def test_stranger_cannot_delete(self):
        with self.assertRaises(Forbidden):
            self.service.delete_comment(self.comment, self.stranger)

    def test_delete_comment_returns_post_id(self):
        self.assertEqual(self.service.delete_comment(self.comment, self.author), self.post.id)
        self.assertFalse(Comment.objects.exists())
