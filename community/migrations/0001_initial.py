import community.utils.uuid
import django.contrib.auth.models
import django.core.validators
import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("auth", "0012_alter_user_first_name_max_length"),
    ]

    operations = [
        migrations.CreateModel(
            name="User",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("password", models.CharField(max_length=128, verbose_name="password")),
                ("last_login", models.DateTimeField(blank=True, null=True, verbose_name="last login")),
                ("is_superuser", models.BooleanField(default=False, help_text="Designates that this user has all permissions without explicitly assigning them.", verbose_name="superuser status")),
                ("is_staff", models.BooleanField(default=False, help_text="Designates whether the user can log into this admin site.", verbose_name="staff status")),
                ("is_active", models.BooleanField(default=True, help_text="Designates whether this user should be treated as active. Unselect this instead of deleting accounts.", verbose_name="active")),
                ("date_joined", models.DateTimeField(default=django.utils.timezone.now, verbose_name="date joined")),
                ("username", models.CharField(max_length=30, unique=True, validators=[django.core.validators.RegexValidator(message="Username must consist of at least three alphanumericals", regex="^\\w{3,}$")])),
                ("first_name", models.CharField(blank=True, max_length=50)),
                ("last_name", models.CharField(blank=True, max_length=50)),
                ("email", models.EmailField(max_length=254, unique=True)),
                ("bio", models.TextField(blank=True, help_text="short user bio shown on profile", max_length=500, validators=[django.core.validators.MaxLengthValidator(500)])),
                ("avatar", models.ImageField(blank=True, null=True, upload_to="avatars/")),
                ("groups", models.ManyToManyField(blank=True, help_text="The groups this user belongs to. A user will get all permissions granted to each of their groups.", related_name="user_set", related_query_name="user", to="auth.group", verbose_name="groups")),
                ("user_permissions", models.ManyToManyField(blank=True, help_text="Specific permissions for this user.", related_name="user_set", related_query_name="user", to="auth.permission", verbose_name="user permissions")),
            ],
            options={
                "ordering": ["last_name", "first_name"],
            },
            managers=[
                ("objects", django.contrib.auth.models.UserManager()),
            ],
        ),
        migrations.CreateModel(
            name="RecipePost",
            fields=[
                ("id", models.UUIDField(default=community.utils.uuid.uuid7_or_4, editable=False, primary_key=True, serialize=False)),
                ("title", models.CharField(max_length=255)),
                ("description", models.TextField(blank=True, max_length=4000)),
                ("ingredients", models.TextField(blank=True)),
                ("instructions", models.TextField(blank=True)),
                ("image", models.CharField(blank=True, max_length=500, null=True)),
                ("category", models.CharField(default="General", max_length=50)),
                ("meat_type", models.CharField(default="Mixed", max_length=50)),
                ("prep_time", models.PositiveIntegerField(default=0)),
                ("servings", models.PositiveIntegerField(default=1)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("author", models.ForeignKey(db_column="author_id", on_delete=django.db.models.deletion.CASCADE, related_name="recipe_posts", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "recipe_post",
                "ordering": ["-created_at"],
            },
        ),
        migrations.CreateModel(
            name="Like",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("user", models.ForeignKey(db_column="user_id", on_delete=django.db.models.deletion.CASCADE, related_name="likes", to=settings.AUTH_USER_MODEL)),
                ("recipe_post", models.ForeignKey(db_column="recipe_post_id", on_delete=django.db.models.deletion.CASCADE, related_name="likes", to="community.recipepost")),
            ],
            options={
                "db_table": "like",
                "ordering": ["created_at", "id"],
                "unique_together": {("user", "recipe_post")},
            },
        ),
        migrations.CreateModel(
            name="Comment",
            fields=[
                ("id", models.UUIDField(default=community.utils.uuid.uuid7_or_4, editable=False, primary_key=True, serialize=False)),
                ("text", models.TextField(max_length=2000)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("recipe_post", models.ForeignKey(db_column="recipe_post_id", on_delete=django.db.models.deletion.CASCADE, related_name="comments", to="community.recipepost")),
                ("user", models.ForeignKey(db_column="user_id", on_delete=django.db.models.deletion.CASCADE, related_name="comments", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "comment",
                "ordering": ["created_at"],
            },
        ),
        migrations.CreateModel(
            name="Follower",
            fields=[
                ("id", models.UUIDField(default=community.utils.uuid.uuid7_or_4, editable=False, primary_key=True, serialize=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("author", models.ForeignKey(db_column="author_id", on_delete=django.db.models.deletion.CASCADE, related_name="followers", to=settings.AUTH_USER_MODEL)),
                ("follower", models.ForeignKey(db_column="follower_id", on_delete=django.db.models.deletion.CASCADE, related_name="following", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "followers",
                "indexes": [
                    models.Index(fields=["follower"], name="followers_follower_idx"),
                    models.Index(fields=["author"], name="followers_author_idx"),
                ],
                "constraints": [
                    models.UniqueConstraint(fields=("follower", "author"), name="uniq_followers_follower_author"),
                    models.CheckConstraint(condition=models.Q(("follower", models.F("author")), _negated=True), name="chk_followers_not_self"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Group",
            fields=[
                ("id", models.UUIDField(default=community.utils.uuid.uuid7_or_4, editable=False, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=100)),
                ("description", models.TextField(blank=True, max_length=500)),
                ("image", models.CharField(blank=True, max_length=500, null=True)),
                ("is_private", models.BooleanField(default=False)),
                ("category", models.CharField(default="General", max_length=50)),
                ("rules", models.TextField(blank=True, max_length=1000)),
                ("allow_member_posts", models.BooleanField(default=True)),
                ("require_approval", models.BooleanField(default=True)),
                ("allow_invites", models.BooleanField(default=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("creator", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="created_groups", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "cooking_group",
                "ordering": ["-created_at"],
            },
        ),
        migrations.CreateModel(
            name="GroupMembership",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("role", models.CharField(choices=[("admin", "Admin"), ("member", "Member")], default="member", max_length=10)),
                ("joined_at", models.DateTimeField(auto_now_add=True)),
                ("group", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="members", to="community.group")),
                ("user", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="group_memberships", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "group_membership",
                "ordering": ["joined_at", "id"],
                "constraints": [
                    models.UniqueConstraint(fields=("group", "user"), name="uniq_group_membership"),
                ],
            },
        ),
        migrations.CreateModel(
            name="GroupJoinRequest",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("requested_at", models.DateTimeField(auto_now_add=True)),
                ("group", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="pending_requests", to="community.group")),
                ("user", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="group_join_requests", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "group_join_request",
                "ordering": ["requested_at", "id"],
                "constraints": [
                    models.UniqueConstraint(fields=("group", "user"), name="uniq_group_join_request"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Chat",
            fields=[
                ("id", models.UUIDField(default=community.utils.uuid.uuid7_or_4, editable=False, primary_key=True, serialize=False)),
                ("kind", models.CharField(choices=[("private", "Private"), ("group", "Group")], default="private", max_length=10)),
                ("name", models.CharField(blank=True, max_length=100)),
                ("description", models.TextField(blank=True, max_length=500)),
                ("image", models.CharField(blank=True, max_length=500, null=True)),
                ("last_message_content", models.TextField(blank=True)),
                ("last_message_type", models.CharField(blank=True, max_length=20)),
                ("last_message_at", models.DateTimeField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(default=django.utils.timezone.now)),
                ("admin", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="administered_chats", to=settings.AUTH_USER_MODEL)),
                ("last_message_sender", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="+", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "chat",
                "ordering": ["-updated_at"],
            },
        ),
        migrations.CreateModel(
            name="ChatParticipant",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("unread_count", models.PositiveIntegerField(default=0)),
                ("joined_at", models.DateTimeField(auto_now_add=True)),
                ("chat", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="participants", to="community.chat")),
                ("user", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="chat_memberships", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "chat_participant",
                "ordering": ["joined_at", "id"],
                "constraints": [
                    models.UniqueConstraint(fields=("chat", "user"), name="uniq_chat_participant"),
                ],
            },
        ),
        migrations.CreateModel(
            name="ChatMessage",
            fields=[
                ("id", models.UUIDField(default=community.utils.uuid.uuid7_or_4, editable=False, primary_key=True, serialize=False)),
                ("content", models.TextField(max_length=5000)),
                ("message_type", models.CharField(choices=[("text", "Text"), ("image", "Image"), ("document", "Document"), ("location", "Location"), ("audio", "Audio"), ("video", "Video")], default="text", max_length=20)),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
                ("chat", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="messages", to="community.chat")),
                ("sender", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="chat_messages", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "chat_message",
                "ordering": ["created_at", "id"],
            },
        ),
        migrations.CreateModel(
            name="Notification",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("notification_type", models.CharField(choices=[("like", "Like"), ("comment", "Comment"), ("follow", "Follow"), ("group_join_request", "Group Join Request"), ("group_join_approved", "Group Join Approved")], max_length=30)),
                ("is_read", models.BooleanField(default=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("group", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, to="community.group")),
                ("post", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, to="community.recipepost")),
                ("recipient", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="notifications", to=settings.AUTH_USER_MODEL)),
                ("sender", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="sent_notifications", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "ordering": ["-created_at", "-id"],
            },
        ),
    ]
