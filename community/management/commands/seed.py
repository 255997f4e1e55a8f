"""Management command to seed the database with sample cooks, recipes, follows, groups and chats."""

import re
from random import choice, randint, sample
from typing import List

from faker import Faker
from django.core.management.base import BaseCommand
from django.db import IntegrityError, transaction

from community.models import (
    Comment,
    Follower,
    Group,
    GroupMembership,
    Like,
    RecipePost,
    User,
)
from community.services import ChatService
from .seed_data import (
    categories,
    chat_phrases,
    comment_phrases,
    group_names,
    ingredient_pool,
    meat_types,
    user_fixtures,
)


def create_username(first_name, last_name):
    """Build a simple lowercase username from a name."""
    return re.sub(r"\W", "", (first_name + last_name).lower())[:30]


def create_email(first_name, last_name):
    """Build a deterministic email for seeded users."""
    return re.sub(r"[^\w.@]", "", f"{first_name}.{last_name}@example.org".lower())


class Command(BaseCommand):
    """Management command to seed the database with sample data."""
    DEFAULT_PASSWORD = 'Password123'
    help = 'Seeds the database with sample data'

    def add_arguments(self, parser):
        parser.add_argument("--users", type=int, default=50, help="Total number of users to reach.")
        parser.add_argument("--posts-per-user", type=int, default=2)
        parser.add_argument("--follows", type=int, default=5, help="Authors each user follows.")

    def __init__(self, *args, **kwargs):
        """Set up faker instance for generating seed content."""
        super().__init__(*args, **kwargs)
        self.faker = Faker('en_GB')

    def handle(self, *args, **options):
        """Run the full seeding sequence."""
        self.create_users(options["users"])
        self.seed_followers(follow_k=options["follows"])
        self.seed_recipe_posts(per_user=options["posts_per_user"])
        self.seed_likes(max_likes_per_post=10)
        self.seed_comments(max_comments_per_post=3)
        self.seed_groups()
        self.seed_chats()
        self.stdout.write(self.style.SUCCESS("Seeding complete"))

    def create_users(self, user_count):
        for data in user_fixtures:
            self.try_create_user(data)
        attempts = 0
        while User.objects.count() < user_count and attempts < user_count * 5:
            attempts += 1
            first_name = self.faker.first_name()
            last_name = self.faker.last_name()
            self.try_create_user({
                'username': create_username(first_name, last_name),
                'email': create_email(first_name, last_name),
                'first_name': first_name,
                'last_name': last_name,
            })
        self.stdout.write(f"users: {User.objects.count()}")

    def try_create_user(self, data):
        """Create a user; duplicates of an existing username or email are skipped."""
        try:
            with transaction.atomic():
                User.objects.create_user(
                    username=data['username'],
                    email=data['email'],
                    password=self.DEFAULT_PASSWORD,
                    first_name=data['first_name'],
                    last_name=data['last_name'],
                    bio=self.faker.sentence(nb_words=10),
                )
        except IntegrityError:
            return None

    def seed_followers(self, follow_k: int = 5) -> None:
        """Create follower -> author edges for sample users."""
        ids = list(User.objects.values_list("id", flat=True))
        if len(ids) < 2:
            return
        k = max(0, min(follow_k, len(ids) - 1))
        rows = []
        for follower_id in ids:
            pool = [x for x in ids if x != follower_id]
            for author_id in sample(pool, k):
                rows.append(Follower(follower_id=follower_id, author_id=author_id))
        with transaction.atomic():
            Follower.objects.bulk_create(rows, ignore_conflicts=True, batch_size=1000)
        self.stdout.write(f"follower edges created (attempted): {len(rows)}")

    def _build_recipe_post(self, author_id) -> RecipePost:
        """Construct an unsaved RecipePost with randomized fields."""
        ingredients = sample(ingredient_pool, randint(3, 7))
        return RecipePost(
            author_id=author_id,
            title=self.faker.sentence(nb_words=4).rstrip(".")[:255],
            description=self.faker.paragraph(nb_sentences=2)[:4000],
            ingredients="\n".join(ingredients),
            instructions="\n".join(self.faker.sentence(nb_words=10) for _ in range(randint(3, 6))),
            category=choice(categories),
            meat_type=choice(meat_types),
            prep_time=randint(5, 90),
            servings=choice([1, 2, 4, 6]),
        )

    def seed_recipe_posts(self, *, per_user: int = 2) -> None:
        user_ids = list(User.objects.values_list("id", flat=True))
        posts: List[RecipePost] = [
            self._build_recipe_post(author_id) for author_id in user_ids for _ in range(per_user)
        ]
        with transaction.atomic():
            RecipePost.objects.bulk_create(posts, batch_size=500)
        self.stdout.write(f"recipe posts created: {len(posts)}")

    def seed_likes(self, max_likes_per_post: int = 10) -> None:
        """Create random likes for posts up to a max per post."""
        users = list(User.objects.values_list("id", flat=True))
        posts = list(RecipePost.objects.values_list("id", "author_id"))
        rows = []
        for post_id, author_id in posts:
            pool = [u for u in users if u != author_id]
            for user_id in sample(pool, min(len(pool), randint(0, max_likes_per_post))):
                rows.append(Like(user_id=user_id, recipe_post_id=post_id))
        with transaction.atomic():
            Like.objects.bulk_create(rows, ignore_conflicts=True, batch_size=1000)
        self.stdout.write(f"likes created: {len(rows)}")

    def seed_comments(self, max_comments_per_post: int = 3) -> None:
        users = list(User.objects.values_list("id", flat=True))
        posts = list(RecipePost.objects.values_list("id", flat=True))
        rows = []
        for post_id in posts:
            for user_id in sample(users, min(len(users), randint(0, max_comments_per_post))):
                rows.append(Comment(recipe_post_id=post_id, user_id=user_id, text=choice(comment_phrases)))
        with transaction.atomic():
            Comment.objects.bulk_create(rows, batch_size=1000)
        self.stdout.write(f"comments created: {len(rows)}")

    def seed_groups(self) -> None:
        users = list(User.objects.all()[:20])
        if not users:
            return
        for name in group_names:
            creator = choice(users)
            group, created = Group.objects.get_or_create(
                name=name,
                defaults={
                    "creator": creator,
                    "description": self.faker.sentence(nb_words=12),
                    "category": choice(categories),
                    "is_private": choice([True, False]),
                    "require_approval": choice([True, False]),
                },
            )
            if not created:
                continue
            GroupMembership.objects.create(group=group, user=creator, role=GroupMembership.ROLE_ADMIN)
            others = [u for u in users if u.pk != creator.pk]
            GroupMembership.objects.bulk_create(
                [GroupMembership(group=group, user=u) for u in sample(others, min(len(others), 5))],
                ignore_conflicts=True,
            )
        self.stdout.write(f"groups: {Group.objects.count()}")

    def seed_chats(self, chats_per_user: int = 2) -> None:
        """Start private chats through ChatService so snapshots and unread counters stay consistent."""
        users = list(User.objects.all()[:20])
        if len(users) < 2:
            return
        messages = 0
        for user in users:
            service = ChatService(user)
            others = [u for u in users if u.pk != user.pk]
            for other in sample(others, min(len(others), chats_per_user)):
                chat, _ = service.get_or_create_private_chat(other)
                for _ in range(randint(1, 3)):
                    service.send_message(chat, choice(chat_phrases))
                    messages += 1
        self.stdout.write(f"chat messages sent: {messages}")
