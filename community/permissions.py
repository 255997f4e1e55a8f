from rest_framework import permissions


class IsOwnerOrReadOnly(permissions.BasePermission):
    """Allow reads to anyone; writes only to the object's author."""

    def has_object_permission(self, request, view, obj):
        if request.method in permissions.SAFE_METHODS:
            return True
        return bool(request.user and request.user.is_authenticated and obj.author_id == request.user.pk)
