"""
DRF serializers producing the wire shapes the mobile client consumes.

Field names follow the JSON contract the mobile client was built against (``_id``,
``userId``, ``createdAt``, ...), so the client-side aggregation and chat list
helpers can run unchanged on either a live response or a serialized queryset.
"""

from rest_framework import serializers

from community.models import (
    Chat,
    ChatMessage,
    Comment,
    Group,
    Notification,
    RecipePost,
    User,
)
from community.utils.names import split_full_name


class UserSummarySerializer(serializers.ModelSerializer):
    """Compact user block embedded in chats, comments and search results."""
    userId = serializers.CharField(source="id", read_only=True)
    userName = serializers.CharField(source="display_name", read_only=True)
    userEmail = serializers.EmailField(source="email", read_only=True)
    userAvatar = serializers.CharField(source="avatar_url", read_only=True)
    userBio = serializers.CharField(source="bio", read_only=True)

    class Meta:
        model = User
        fields = ["userId", "userName", "userEmail", "userAvatar", "userBio"]


class ProfileSerializer(serializers.ModelSerializer):
    """Public profile; on update ``fullName`` is split into first and last name."""
    id = serializers.CharField(read_only=True)
    fullName = serializers.CharField(source="display_name", required=False, max_length=101)
    avatar = serializers.ImageField(required=False, allow_null=True, write_only=True)

    class Meta:
        model = User
        fields = ["id", "fullName", "email", "bio", "avatar"]
        extra_kwargs = {
            "email": {"required": False, "validators": []},
            "bio": {"required": False},
        }

    def validate_email(self, value):
        taken = User.objects.filter(email__iexact=value)
        if self.instance is not None:
            taken = taken.exclude(pk=self.instance.pk)
        if taken.exists():
            raise serializers.ValidationError("Email already exists")
        return value

    def update(self, instance, validated_data):
        full_name = validated_data.pop("display_name", None)
        if full_name is not None:
            instance.first_name, instance.last_name = split_full_name(full_name)
        return super().update(instance, validated_data)

    def to_representation(self, instance):
        data = super().to_representation(instance)
        data["avatar"] = instance.avatar_url
        return data


class CommentSerializer(serializers.ModelSerializer):
    _id = serializers.UUIDField(source="id", read_only=True)
    userId = serializers.CharField(source="user_id", read_only=True)
    userName = serializers.CharField(source="user.display_name", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = Comment
        fields = ["_id", "userId", "userName", "text", "createdAt"]

    def validate_text(self, value):
        if not value or not value.strip():
            raise serializers.ValidationError("Comment text is required")
        return value.strip()


class RecipeSerializer(serializers.ModelSerializer):
    """Serializer for RecipePost in the recipe store's record shape."""
    _id = serializers.UUIDField(source="id", read_only=True)
    userId = serializers.CharField(source="author_id", read_only=True)
    userName = serializers.CharField(source="author.display_name", read_only=True)
    userAvatar = serializers.CharField(source="author.avatar_url", read_only=True)
    meatType = serializers.CharField(source="meat_type", required=False)
    prepTime = serializers.IntegerField(source="prep_time", required=False, min_value=0)
    likes = serializers.SerializerMethodField()
    comments = CommentSerializer(many=True, read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    groupId = serializers.SerializerMethodField()
    groupName = serializers.SerializerMethodField()
    isApproved = serializers.BooleanField(source="is_approved", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = RecipePost
        fields = [
            "_id",
            "userId",
            "userName",
            "userAvatar",
            "title",
            "description",
            "ingredients",
            "instructions",
            "category",
            "meatType",
            "prepTime",
            "servings",
            "image",
            "likes",
            "comments",
            "groupId",
            "groupName",
            "isApproved",
            "createdAt",
            "updatedAt",
        ]
        extra_kwargs = {
            "servings": {"min_value": 1, "required": False},
            "category": {"required": False},
        }

    def get_likes(self, obj):
        return [str(like.user_id) for like in obj.likes.all()]

    def get_groupId(self, obj):
        return str(obj.group_id) if obj.group_id else None

    def get_groupName(self, obj):
        return obj.group.name if obj.group_id else None


class GroupSerializer(serializers.ModelSerializer):
    _id = serializers.UUIDField(source="id", read_only=True)
    creatorId = serializers.CharField(source="creator_id", read_only=True)
    isPrivate = serializers.BooleanField(source="is_private", required=False)
    allowMemberPosts = serializers.BooleanField(source="allow_member_posts", required=False)
    requireApproval = serializers.BooleanField(source="require_approval", required=False)
    allowInvites = serializers.BooleanField(source="allow_invites", required=False)
    members = serializers.SerializerMethodField()
    pendingRequests = serializers.SerializerMethodField()
    membersCount = serializers.SerializerMethodField()
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = Group
        fields = [
            "_id",
            "name",
            "description",
            "image",
            "category",
            "rules",
            "creatorId",
            "isPrivate",
            "allowMemberPosts",
            "requireApproval",
            "allowInvites",
            "members",
            "pendingRequests",
            "membersCount",
            "createdAt",
        ]

    def get_members(self, obj):
        return [
            {"userId": str(m.user_id), "role": m.role, "joinedAt": m.joined_at.isoformat()}
            for m in obj.members.all()
        ]

    def get_pendingRequests(self, obj):
        return [
            {"userId": str(r.user_id), "requestedAt": r.requested_at.isoformat()}
            for r in obj.pending_requests.all()
        ]

    def get_membersCount(self, obj):
        return obj.members.count()


class ChatMessageSerializer(serializers.ModelSerializer):
    _id = serializers.UUIDField(source="id", read_only=True)
    chatId = serializers.CharField(source="chat_id", read_only=True)
    senderId = serializers.CharField(source="sender_id", read_only=True)
    senderName = serializers.CharField(source="sender.display_name", read_only=True)
    messageType = serializers.ChoiceField(
        source="message_type", choices=ChatMessage.TYPE_CHOICES, required=False
    )
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = ChatMessage
        fields = ["_id", "chatId", "senderId", "senderName", "content", "messageType", "createdAt"]


class ChatSerializer(serializers.ModelSerializer):
    """
    Chat row as seen by ``context["user"]``.

    Private chats expose ``otherUser``; group chats expose their own name,
    image and admin. Both carry the viewer's ``unreadCount``.
    """
    _id = serializers.UUIDField(source="id", read_only=True)
    chatType = serializers.CharField(source="kind", read_only=True)
    participants = serializers.SerializerMethodField()
    participantsCount = serializers.SerializerMethodField()
    otherUser = serializers.SerializerMethodField()
    adminId = serializers.SerializerMethodField()
    lastMessage = serializers.SerializerMethodField()
    unreadCount = serializers.SerializerMethodField()
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = Chat
        fields = [
            "_id",
            "chatType",
            "name",
            "description",
            "image",
            "adminId",
            "participants",
            "participantsCount",
            "otherUser",
            "lastMessage",
            "unreadCount",
            "updatedAt",
        ]

    def _viewer(self):
        return self.context.get("user")

    def get_participants(self, obj):
        return [str(p.user_id) for p in obj.participants.all()]

    def get_participantsCount(self, obj):
        return len(obj.participants.all())

    def get_adminId(self, obj):
        return str(obj.admin_id) if obj.admin_id else None

    def get_otherUser(self, obj):
        if obj.is_group:
            return None
        viewer = self._viewer()
        for participant in obj.participants.all():
            if viewer is None or participant.user_id != viewer.id:
                return UserSummarySerializer(participant.user).data
        return None

    def get_lastMessage(self, obj):
        if not obj.last_message_at:
            return None
        return {
            "content": obj.last_message_content,
            "messageType": obj.last_message_type or "text",
            "senderId": str(obj.last_message_sender_id) if obj.last_message_sender_id else None,
            "createdAt": obj.last_message_at.isoformat(),
        }

    def get_unreadCount(self, obj):
        viewer = self._viewer()
        if viewer is None:
            return 0
        for participant in obj.participants.all():
            if participant.user_id == viewer.id:
                return participant.unread_count
        return 0


class NotificationSerializer(serializers.ModelSerializer):
    _id = serializers.CharField(source="id", read_only=True)
    type = serializers.CharField(source="notification_type", read_only=True)
    fromUserId = serializers.CharField(source="sender_id", read_only=True)
    fromUserName = serializers.CharField(source="sender.display_name", read_only=True)
    postId = serializers.SerializerMethodField()
    groupId = serializers.SerializerMethodField()
    read = serializers.BooleanField(source="is_read", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = Notification
        fields = ["_id", "type", "fromUserId", "fromUserName", "postId", "groupId", "read", "createdAt"]

    def get_postId(self, obj):
        return str(obj.post_id) if obj.post_id else None

    def get_groupId(self, obj):
        return str(obj.group_id) if obj.group_id else None
