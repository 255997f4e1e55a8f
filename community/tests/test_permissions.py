from types import SimpleNamespace

from django.test import SimpleTestCase

from community.permissions import IsOwnerOrReadOnly


class IsOwnerOrReadOnlyTests(SimpleTestCase):
    def setUp(self):
        self.permission = IsOwnerOrReadOnly()
        self.owner = SimpleNamespace(pk=1, is_authenticated=True)
        self.other_user = SimpleNamespace(pk=2, is_authenticated=True)
        self.view = object()

    def _make_request(self, method: str, user) -> SimpleNamespace:
        return SimpleNamespace(method=method, user=user)

    def test_safe_methods_are_allowed_for_any_user(self):
        obj = SimpleNamespace(author_id=self.other_user.pk)

        for method in ("GET", "HEAD", "OPTIONS"):
            with self.subTest(method=method):
                request = self._make_request(method, self.owner)
                self.assertTrue(
                    self.permission.has_object_permission(request, self.view, obj)
                )

    def test_unsafe_methods_allowed_for_owner(self):
        obj = SimpleNamespace(author_id=self.owner.pk)
        request = self._make_request("PUT", self.owner)

        self.assertTrue(
            self.permission.has_object_permission(request, self.view, obj)
        )

    def test_unsafe_methods_denied_for_non_owner(self):
        obj = SimpleNamespace(author_id=self.other_user.pk)
        request = self._make_request("DELETE", self.owner)

        self.assertFalse(
            self.permission.has_object_permission(request, self.view, obj)
        )

    def test_anonymous_writes_denied(self):
        obj = SimpleNamespace(author_id=self.owner.pk)
        request = self._make_request("PUT", SimpleNamespace(pk=None, is_authenticated=False))

        self.assertFalse(
            self.permission.has_object_permission(request, self.view, obj)
        )
