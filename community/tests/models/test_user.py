from django.core.exceptions import ValidationError
from django.test import TestCase

from community.tests.helpers import make_user


class UserModelTestCase(TestCase):
    def setUp(self):
        self.user = make_user(username="johndoe", email="john@example.org")

    def test_valid_user(self):
        self.user.full_clean()

    def test_username_needs_three_characters(self):
        self.user.username = "jo"
        with self.assertRaises(ValidationError):
            self.user.full_clean()

    def test_display_name_prefers_full_name(self):
        self.assertEqual(self.user.display_name, "John Doe")
        self.user.first_name = ""
        self.user.last_name = ""
        self.assertEqual(self.user.display_name, "johndoe")

    def test_avatar_falls_back_to_gravatar(self):
        self.assertIn("gravatar.com/avatar", self.user.avatar_url)
