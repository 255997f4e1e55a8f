from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated, IsAuthenticatedOrReadOnly
from rest_framework.response import Response

from community.models import Group
from community.serializers import GroupSerializer, RecipeSerializer
from community.services import GroupPostService, GroupService
from community.services.groups import groups_for
from community.views.view_utils import get_or_not_found, get_user_or_error


def _group(group_id):
    return get_or_not_found(Group, "Group not found", id=group_id)


@api_view(["GET", "POST"])
@permission_classes([IsAuthenticatedOrReadOnly])
def group_list(request):
    """List groups (``?mine=1`` for the caller's groups) or create one."""
    if request.method == "GET":
        mine = request.query_params.get("mine") == "1" and request.user.is_authenticated
        groups = groups_for(request.user if mine else None)
        return Response(GroupSerializer(groups, many=True).data)

    serializer = GroupSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    group = GroupService(request.user).create_group(serializer)
    return Response(GroupSerializer(group).data, status=status.HTTP_201_CREATED)


@api_view(["GET", "DELETE"])
@permission_classes([IsAuthenticatedOrReadOnly])
def group_detail(request, group_id):
    group = _group(group_id)
    if request.method == "GET":
        return Response(GroupSerializer(group).data)
    GroupService(request.user).delete_group(group)
    return Response({"message": "Group deleted successfully"})


@api_view(["POST"])
@permission_classes([IsAuthenticated])
def group_join(request, group_id):
    result = GroupService(request.user).join(_group(group_id))
    return Response(result)


@api_view(["PUT"])
@permission_classes([IsAuthenticated])
def group_request(request, group_id, user_id):
    """Approve or reject a pending join request (``{"action": "approve"|"reject"}``)."""
    group = _group(group_id)
    requester = get_user_or_error(user_id)
    result = GroupService(request.user).handle_request(group, requester, request.data.get("action"))
    return Response(result)


@api_view(["DELETE"])
@permission_classes([IsAuthenticated])
def group_member(request, group_id, user_id):
    group = _group(group_id)
    member = get_user_or_error(user_id)
    return Response(GroupService(request.user).remove_member(group, member))


def _post_payload(post):
    return RecipeSerializer(post).data


@api_view(["GET", "POST"])
@permission_classes([IsAuthenticatedOrReadOnly])
def group_posts(request, group_id):
    """List a group's posts newest first, or publish one as a member."""
    group = _group(group_id)
    service = GroupPostService(request.user)
    if request.method == "GET":
        posts = service.posts(group).prefetch_related("likes", "comments__user")
        return Response(RecipeSerializer(posts, many=True).data)

    serializer = RecipeSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    post = service.create_post(group, serializer)
    return Response(_post_payload(post), status=status.HTTP_201_CREATED)


@api_view(["GET", "PUT", "DELETE"])
@permission_classes([IsAuthenticatedOrReadOnly])
def group_post_detail(request, group_id, post_id):
    group = _group(group_id)
    service = GroupPostService(request.user)
    post = service.get_post(group, post_id)
    if request.method == "GET":
        return Response(_post_payload(post))
    if request.method == "PUT":
        serializer = RecipeSerializer(post, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        return Response(_post_payload(service.update_post(post, serializer)))
    service.delete_post(group, post)
    return Response({"message": "Group post deleted successfully"})


@api_view(["PUT"])
@permission_classes([IsAuthenticated])
def group_post_approve(request, group_id, post_id):
    group = _group(group_id)
    service = GroupPostService(request.user)
    post = service.approve(group, service.get_post(group, post_id))
    return Response(_post_payload(post))
