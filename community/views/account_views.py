"""Sign-up, log-in and profile endpoints for the mobile client."""

from django.contrib.auth import login, update_session_auth_hash
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from community.serializers import ProfileSerializer
from community.services import AccountService
from community.views.view_utils import get_user_or_error

account_service = AccountService()

MODEL_BACKEND = "django.contrib.auth.backends.ModelBackend"


def _session_payload(user):
    # userId doubles as the X-User-Id header value for later requests
    return {"userId": str(user.pk), "user": ProfileSerializer(user).data}


@api_view(["POST"])
def register(request):
    """Create an account from ``{fullName, email, password}`` and log it in."""
    data = request.data
    user = account_service.register(data.get("fullName"), data.get("email"), data.get("password"))
    login(request, user, backend=MODEL_BACKEND)
    return Response(
        {"message": "User registered successfully", "data": _session_payload(user)},
        status=status.HTTP_201_CREATED,
    )


@api_view(["POST"])
def log_in(request):
    user = account_service.check_credentials(request.data.get("email"), request.data.get("password"))
    login(request, user, backend=MODEL_BACKEND)
    return Response({"message": "Login successful", "data": _session_payload(user)})


@api_view(["GET"])
def profile_detail(request, user_id):
    return Response({"user": ProfileSerializer(get_user_or_error(user_id)).data})


@api_view(["PUT", "PATCH"])
@permission_classes([IsAuthenticated])
def profile_update(request):
    """Update the caller's name, email, bio or avatar; omitted fields stay as they are."""
    serializer = ProfileSerializer(request.user, data=request.data, partial=True)
    serializer.is_valid(raise_exception=True)
    user = serializer.save()
    return Response({"message": "Profile updated successfully", "user": ProfileSerializer(user).data})


@api_view(["PUT", "PATCH"])
@permission_classes([IsAuthenticated])
def change_password(request):
    data = request.data
    user = account_service.change_password(request.user, data.get("currentPassword"), data.get("newPassword"))
    update_session_auth_hash(request, user)
    return Response({"message": "Password changed successfully"})
