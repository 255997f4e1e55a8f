from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from community.serializers import NotificationSerializer
from community.services import NotificationService

notification_service = NotificationService()


@api_view(["GET"])
@permission_classes([IsAuthenticated])
def notification_list(request):
    notifications = notification_service.visible_notifications(request.user)
    return Response(NotificationSerializer(notifications, many=True).data)


@api_view(["GET"])
@permission_classes([IsAuthenticated])
def notification_unread_count(request):
    return Response({"count": notification_service.unread_count(request.user)})


@api_view(["PUT"])
@permission_classes([IsAuthenticated])
def notification_read(request, notification_id):
    notification = notification_service.mark_read(request.user, notification_id)
    return Response(NotificationSerializer(notification).data)


@api_view(["PUT"])
@permission_classes([IsAuthenticated])
def notification_read_all(request):
    updated = notification_service.mark_all_read(request.user)
    return Response({"updated": updated})


@api_view(["DELETE"])
@permission_classes([IsAuthenticated])
def notification_delete(request, notification_id):
    notification_service.delete(request.user, notification_id)
    return Response({"message": "Notification deleted"})
