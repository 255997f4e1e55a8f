from unittest.mock import MagicMock

from django.test import TestCase
from rest_framework import exceptions

from community.authentication import HeaderUserAuthentication
from community.tests.helpers import make_user


class HeaderUserAuthenticationTests(TestCase):
    def setUp(self):
        self.auth = HeaderUserAuthentication()
        self.request = MagicMock()
        self.user = make_user(username="user1")

    def test_authenticate_success(self):
        self.request.META = {"HTTP_X_USER_ID": str(self.user.pk)}
        user, _ = self.auth.authenticate(self.request)
        self.assertEqual(user, self.user)

    def test_authenticate_no_header(self):
        self.request.META = {}
        self.assertIsNone(self.auth.authenticate(self.request))

    def test_authenticate_malformed_header(self):
        self.request.META = {"HTTP_X_USER_ID": "not-a-number"}
        with self.assertRaises(exceptions.AuthenticationFailed):
            self.auth.authenticate(self.request)

    def test_authenticate_unknown_user(self):
        self.request.META = {"HTTP_X_USER_ID": "99999"}
        with self.assertRaises(exceptions.AuthenticationFailed):
            self.auth.authenticate(self.request)

    def test_inactive_user_is_rejected(self):
        self.user.is_active = False
        self.user.save()
        self.request.META = {"HTTP_X_USER_ID": str(self.user.pk)}
        with self.assertRaises(exceptions.AuthenticationFailed):
            self.auth.authenticate(self.request)
