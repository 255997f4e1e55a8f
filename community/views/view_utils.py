"""Lookup helpers shared by the API views."""

from django.contrib.auth import get_user_model

from community.errors import NotFound, ValidationFailed
from community.utils.http import parse_user_id

User = get_user_model()


def get_user_or_error(raw_id, *, invalid_message="Invalid user ID"):
    """Resolve a raw id to a user; 400 for malformed ids, 404 for unknown ones."""
    user_id = parse_user_id(raw_id)
    if user_id is None:
        raise ValidationFailed(invalid_message)
    try:
        return User.objects.get(pk=user_id)
    except User.DoesNotExist:
        raise NotFound("User not found")


def get_or_not_found(model, message, **lookup):
    try:
        return model.objects.get(**lookup)
    except model.DoesNotExist:
        raise NotFound(message)
