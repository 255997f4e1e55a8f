from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from community.models import Chat, ChatParticipant, Comment, Group, GroupMembership, RecipePost, User


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """User admin with the profile fields added to the stock layout."""
    fieldsets = BaseUserAdmin.fieldsets + (("Profile", {"fields": ("bio", "avatar")}),)


class CommentInline(admin.TabularInline):
    model = Comment
    extra = 0
    readonly_fields = ['user', 'text', 'created_at']


@admin.register(RecipePost)
class RecipePostAdmin(admin.ModelAdmin):
    """Admin configuration for recipe posts."""
    list_display = ('title', 'author', 'category', 'group', 'created_at', 'likes_display')
    list_filter = ('category', 'created_at')
    search_fields = ('title', 'description', 'author__username')
    inlines = [CommentInline]

    @admin.display(description="Likes")
    def likes_display(self, obj):
        return obj.likes_count


class GroupMembershipInline(admin.TabularInline):
    model = GroupMembership
    extra = 0


@admin.register(Group)
class GroupAdmin(admin.ModelAdmin):
    list_display = ('name', 'creator', 'category', 'is_private', 'require_approval', 'created_at')
    list_filter = ('is_private', 'category')
    search_fields = ('name', 'description')
    inlines = [GroupMembershipInline]


class ChatParticipantInline(admin.TabularInline):
    model = ChatParticipant
    extra = 0
    readonly_fields = ['unread_count']


@admin.register(Chat)
class ChatAdmin(admin.ModelAdmin):
    list_display = ('__str__', 'kind', 'updated_at')
    list_filter = ('kind',)
    inlines = [ChatParticipantInline]
