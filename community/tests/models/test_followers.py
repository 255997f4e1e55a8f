from django.test import TestCase
from django.db import IntegrityError, transaction

from community.models.followers import Follower
from community.tests.helpers import make_user


class FollowerModelTestCase(TestCase):

    def setUp(self):
        self.user_a = make_user(username="usera")
        self.user_b = make_user(username="userb")

    def test_user_can_follow_another_user(self):
        follower = Follower.objects.create(
            follower=self.user_a,
            author=self.user_b,
        )

        self.assertEqual(follower.follower, self.user_a)
        self.assertEqual(follower.author, self.user_b)
        self.assertEqual(self.user_b.followers.count(), 1)
        self.assertEqual(self.user_a.following.count(), 1)

    def test_duplicate_follow_not_allowed(self):
        Follower.objects.create(
            follower=self.user_a,
            author=self.user_b,
        )

        with self.assertRaises(IntegrityError):
            with transaction.atomic():
                Follower.objects.create(
                    follower=self.user_a,
                    author=self.user_b,
                )

    def test_self_follow_not_allowed(self):
        with self.assertRaises(IntegrityError):
            with transaction.atomic():
                Follower.objects.create(
                    follower=self.user_a,
                    author=self.user_a,
                )

    def test_string_representation(self):
        follower = Follower.objects.create(
            follower=self.user_a,
            author=self.user_b,
        )

        self.assertIn(str(self.user_a.pk), str(follower))
