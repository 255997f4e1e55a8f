from django.contrib.auth import get_user_model
from rest_framework import authentication
from rest_framework import exceptions

from community.utils.http import parse_user_id

User = get_user_model()

class HeaderUserAuthentication(authentication.BaseAuthentication):
    """DRF authentication backend reading the acting user from ``X-User-Id``."""

    header = "HTTP_X_USER_ID"

    def authenticate(self, request):
        """Resolve the X-User-Id header to a user and return (user, auth)."""
        raw = request.META.get(self.header)
        if not raw:
            return None

        user_id = parse_user_id(raw)
        if user_id is None:
            raise exceptions.AuthenticationFailed('Invalid user id header')

        try:
            user = User.objects.get(pk=user_id, is_active=True)
            return (user, None)
        except User.DoesNotExist:
            raise exceptions.AuthenticationFailed('User not found')

    def authenticate_header(self, request):
        return "X-User-Id"
