import logging
from functools import partial

from django.db.models import Q
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from community.errors import ValidationFailed
from community.repos.followers_repo import FollowersRepo
from community.serializers import UserSummarySerializer
from community.services import FollowService
from community.utils.http import page_params, parse_user_id
from community.views.view_utils import User, get_user_or_error

logger = logging.getLogger(__name__)
follow_service_factory = FollowService


def _follower_from(request):
    """Follower comes from the body's followerId, else the authenticated user."""
    raw = request.data.get("followerId") if hasattr(request.data, "get") else None
    if raw is None and request.user.is_authenticated:
        return request.user
    return get_user_or_error(raw, invalid_message="Invalid user ID or follower ID")


@api_view(["POST", "DELETE"])
def follow_user(request, user_id):
    """
    Follow (POST) or unfollow (DELETE) ``user_id`` as ``followerId``.

    The response carries the authoritative ``followersCount`` of the target,
    which clients must adopt instead of adjusting their own counter.
    """
    if parse_user_id(user_id) is None:
        raise ValidationFailed("Invalid user ID or follower ID")
    follower = _follower_from(request)
    target = get_user_or_error(user_id)
    service = follow_service_factory(follower)
    if request.method == "POST":
        payload = service.follow_user(target)
    else:
        payload = service.unfollow(target)
    return Response(payload)


@api_view(["GET"])
def follow_status(request, user_id, viewer_id):
    target = get_user_or_error(user_id)
    viewer_pk = parse_user_id(viewer_id)
    viewer = User.objects.filter(pk=viewer_pk).first() if viewer_pk else None
    return Response(follow_service_factory(viewer or target).status(target, viewer))


@api_view(["GET"])
@permission_classes([IsAuthenticated])
def search_users(request):
    query = (request.query_params.get("q") or "").strip()
    if not query:
        return Response([])
    users = (
        User.objects.filter(
            Q(username__icontains=query)
            | Q(first_name__icontains=query)
            | Q(last_name__icontains=query)
            | Q(email__icontains=query)
        )
        .exclude(pk=request.user.pk)[:20]
    )
    return Response(UserSummarySerializer(users, many=True).data)


def _users_page(request, list_rows, id_key):
    start, end, _ = page_params(request, default_limit=20)
    rows = list_rows(limit=end - start, offset=start)
    ids = [row[id_key] for row in rows]
    users = User.objects.in_bulk(ids)
    return UserSummarySerializer([users[pk] for pk in ids if pk in users], many=True).data


@api_view(["GET"])
def followers_list(request, user_id):
    """Users following ``user_id``, newest follow first (``?page=&limit=``)."""
    user = get_user_or_error(user_id)
    rows = partial(FollowersRepo().list_followers, author_id=user.pk)
    return Response(_users_page(request, rows, "follower_id"))


@api_view(["GET"])
def following_list(request, user_id):
    user = get_user_or_error(user_id)
    rows = partial(FollowersRepo().list_following, follower_id=user.pk)
    return Response(_users_page(request, rows, "author_id"))
