"""
URL configuration for the flavorworld project.

Every route lives under ``/api/`` and mirrors the JSON contract the mobile
client was written against.
"""
from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.urls import path
from community import views

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/health', views.health, name='health'),

    path('api/auth/register', views.register, name='register'),
    path('api/auth/login', views.log_in, name='log_in'),
    path('api/auth/profile', views.profile_update),
    path('api/auth/change-password', views.change_password),
    path('api/user/profile', views.profile_update, name='profile_update'),
    path('api/user/profile/<str:user_id>', views.profile_detail, name='profile_detail'),
    path('api/user/change-password', views.change_password, name='change_password'),

    path('api/recipes', views.RecipeListApi.as_view(), name='recipe_list_api'),
    path('api/recipes/<uuid:recipe_id>', views.RecipeDetailApi.as_view(), name='recipe_detail_api'),
    path('api/recipes/<uuid:recipe_id>/like', views.recipe_like, name='recipe_like'),
    path('api/recipes/<uuid:recipe_id>/comments', views.recipe_comments, name='recipe_comments'),
    path('api/recipes/<uuid:recipe_id>/comments/<uuid:comment_id>', views.recipe_comment_detail, name='recipe_comment_detail'),

    path('api/users/search', views.search_users, name='search_users'),
    path('api/users/<str:user_id>/follow', views.follow_user, name='follow_user'),
    path('api/users/<str:user_id>/follow-status/<str:viewer_id>', views.follow_status, name='follow_status'),
    path('api/users/<str:user_id>/followers', views.followers_list, name='followers_list'),
    path('api/users/<str:user_id>/following', views.following_list, name='following_list'),

    path('api/groups', views.group_list, name='group_list'),
    path('api/groups/<uuid:group_id>', views.group_detail, name='group_detail'),
    path('api/groups/<uuid:group_id>/join', views.group_join, name='group_join'),
    path('api/groups/<uuid:group_id>/requests/<str:user_id>', views.group_request, name='group_request'),
    path('api/groups/<uuid:group_id>/members/<str:user_id>', views.group_member, name='group_member'),
    path('api/groups/<uuid:group_id>/posts', views.group_posts, name='group_posts'),
    path('api/groups/<uuid:group_id>/posts/<uuid:post_id>', views.group_post_detail, name='group_post_detail'),
    path('api/groups/<uuid:group_id>/posts/<uuid:post_id>/approve', views.group_post_approve, name='group_post_approve'),

    path('api/chats/my', views.my_chats, name='my_chats'),
    path('api/chats/private', views.private_chat, name='private_chat'),
    path('api/chats/unread-count', views.unread_count, name='chat_unread_count'),
    path('api/chats/<uuid:chat_id>/messages', views.chat_messages, name='chat_messages'),
    path('api/chats/<uuid:chat_id>/read', views.chat_read, name='chat_read'),

    path('api/group-chats', views.create_group_chat, name='create_group_chat'),
    path('api/group-chats/my', views.my_group_chats, name='my_group_chats'),
    path('api/group-chats/<uuid:chat_id>', views.group_chat_detail, name='group_chat_detail'),
    path('api/group-chats/<uuid:chat_id>/messages', views.group_chat_messages, name='group_chat_messages'),
    path('api/group-chats/<uuid:chat_id>/read', views.group_chat_read, name='group_chat_read'),

    path('api/notifications', views.notification_list, name='notification_list'),
    path('api/notifications/unread-count', views.notification_unread_count, name='notification_unread_count'),
    path('api/notifications/read-all', views.notification_read_all, name='notification_read_all'),
    path('api/notifications/<int:notification_id>/read', views.notification_read, name='notification_read'),
    path('api/notifications/<int:notification_id>', views.notification_delete, name='notification_delete'),

    path('api/statistics/user/<str:user_id>', views.user_statistics, name='user_statistics'),
    path('api/statistics/likes-progression/<str:user_id>', views.likes_progression, name='likes_progression'),
    path('api/statistics/categories-distribution/<str:user_id>', views.categories_distribution, name='categories_distribution'),
]

urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
