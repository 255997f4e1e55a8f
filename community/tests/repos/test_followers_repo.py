from django.test import TestCase

from community.repos.followers_repo import FollowersRepo
from community.tests.helpers import make_user


class FollowersRepoTestCase(TestCase):
    def setUp(self):
        self.repo = FollowersRepo()
        self.alice = make_user(username="alice")
        self.bob = make_user(username="bob")
        self.cara = make_user(username="cara")

    def test_follow_and_counts(self):
        self.repo.follow(follower_id=self.alice.id, author_id=self.bob.id)
        self.repo.follow(follower_id=self.cara.id, author_id=self.bob.id)
        self.assertTrue(self.repo.is_following(follower_id=self.alice.id, author_id=self.bob.id))
        self.assertFalse(self.repo.is_following(follower_id=self.bob.id, author_id=self.alice.id))
        self.assertEqual(self.repo.followers_count(author_id=self.bob.id), 2)
        self.assertEqual(self.repo.following_count(follower_id=self.alice.id), 1)

    def test_list_followers_as_dicts(self):
        self.repo.follow(follower_id=self.alice.id, author_id=self.bob.id)
        rows = self.repo.list_followers(author_id=self.bob.id)
        self.assertEqual(len(rows), 1)
        self.assertEqual(rows[0]["follower_id"], self.alice.id)
        self.assertEqual(len(self.repo.list_following(follower_id=self.alice.id, limit=0)), 0)

    def test_unfollow_returns_deleted_count(self):
        self.repo.follow(follower_id=self.alice.id, author_id=self.bob.id)
        self.assertEqual(self.repo.unfollow(follower_id=self.alice.id, author_id=self.bob.id), 1)
        self.assertEqual(self.repo.unfollow(follower_id=self.alice.id, author_id=self.bob.id), 0)
