from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from community.models import Chat
from community.serializers import ChatMessageSerializer, ChatSerializer
from community.services import ChatService
from community.utils.http import page_params
from community.views.view_utils import get_user_or_error


def _chat_payload(chat, user):
    return ChatSerializer(chat, context={"user": user}).data


def _chats_payload(chats, user):
    return ChatSerializer(chats, many=True, context={"user": user}).data


@api_view(["GET"])
@permission_classes([IsAuthenticated])
def my_chats(request):
    return Response(_chats_payload(ChatService(request.user).my_chats(), request.user))


@api_view(["POST"])
@permission_classes([IsAuthenticated])
def private_chat(request):
    """Get or create the private chat with ``otherUserId``."""
    other = get_user_or_error(request.data.get("otherUserId"))
    chat, created = ChatService(request.user).get_or_create_private_chat(other)
    return Response(
        _chat_payload(chat, request.user),
        status=status.HTTP_201_CREATED if created else status.HTTP_200_OK,
    )


def _messages(request, kind, chat_id):
    service = ChatService(request.user)
    chat = service.get_chat(chat_id, kind=kind)
    if request.method == "GET":
        start, end, _ = page_params(request)
        return Response(ChatMessageSerializer(service.messages(chat, start, end), many=True).data)

    serializer = ChatMessageSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    message = service.send_message(
        chat,
        serializer.validated_data.get("content"),
        serializer.validated_data.get("message_type", "text"),
    )
    return Response(ChatMessageSerializer(message).data, status=status.HTTP_201_CREATED)


def _read(request, kind, chat_id):
    service = ChatService(request.user)
    service.mark_read(service.get_chat(chat_id, kind=kind))
    return Response({"message": "Messages marked as read"})


@api_view(["GET", "POST"])
@permission_classes([IsAuthenticated])
def chat_messages(request, chat_id):
    return _messages(request, Chat.KIND_PRIVATE, chat_id)


@api_view(["PUT"])
@permission_classes([IsAuthenticated])
def chat_read(request, chat_id):
    return _read(request, Chat.KIND_PRIVATE, chat_id)


@api_view(["GET"])
@permission_classes([IsAuthenticated])
def unread_count(request):
    return Response({"count": ChatService(request.user).unread_count()})


@api_view(["GET"])
@permission_classes([IsAuthenticated])
def my_group_chats(request):
    return Response(_chats_payload(ChatService(request.user).my_group_chats(), request.user))


@api_view(["POST"])
@permission_classes([IsAuthenticated])
def create_group_chat(request):
    data = request.data
    chat = ChatService(request.user).create_group_chat(
        data.get("name"),
        data.get("description", ""),
        data.get("participantIds") or [],
    )
    return Response(_chat_payload(chat, request.user), status=status.HTTP_201_CREATED)


@api_view(["GET"])
@permission_classes([IsAuthenticated])
def group_chat_detail(request, chat_id):
    chat = ChatService(request.user).get_chat(chat_id, kind=Chat.KIND_GROUP)
    return Response(_chat_payload(chat, request.user))


@api_view(["GET", "POST"])
@permission_classes([IsAuthenticated])
def group_chat_messages(request, chat_id):
    return _messages(request, Chat.KIND_GROUP, chat_id)


@api_view(["PUT"])
@permission_classes([IsAuthenticated])
def group_chat_read(request, chat_id):
    return _read(request, Chat.KIND_GROUP, chat_id)
