"""
Profile statistics: likes, categories and follower counts for one author.

``compute_statistics`` is a pure function over post records in the recipe
store's wire shape (``{_id, userId, title, category, likes, comments,
createdAt}``). It never raises on partial data: missing likes count as
zero, missing categories fall into ``"Other"``.
"""

import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, List, Mapping, Sequence

from django.utils import timezone

from community.repos.followers_repo import FollowersRepo
from community.repos.post_repo import PostRepo
from community.serializers import RecipeSerializer
from community.utils.timestamps import to_datetime

logger = logging.getLogger(__name__)

OTHER_CATEGORY = "Other"


def round_half_up(value) -> int:
    """Round to the nearest integer with .5 going up."""
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def empty_statistics() -> Dict[str, Any]:
    return {
        "totalPosts": 0,
        "totalLikes": 0,
        "totalFollowers": 0,
        "averageLikes": 0,
        "likesProgression": [],
        "categoriesDistribution": [],
        "followersGrowth": [],
    }


def _likes_of(post: Mapping[str, Any]) -> int:
    """Number of likers; anything but a list of likers counts as zero."""
    likes = post.get("likes")
    if isinstance(likes, (list, tuple, set, frozenset)):
        return len(likes)
    return 0


def _category_of(post: Mapping[str, Any]) -> str:
    category = post.get("category") or post.get("cuisine")
    if not category:
        return OTHER_CATEGORY
    if isinstance(category, str):
        return category
    if isinstance(category, (list, tuple)):
        return ",".join(str(part) for part in category) or OTHER_CATEGORY
    return str(category)


def _belongs_to(post: Mapping[str, Any], user_id) -> bool:
    owner = post.get("userId")
    if owner is None or user_id is None:
        return True
    return str(owner) == str(user_id)


def likes_progression(posts: Sequence[Mapping[str, Any]]) -> List[Dict[str, Any]]:
    """Posts oldest first, each tagged with its 1-based position and like count."""
    ordered = sorted(posts, key=lambda post: to_datetime(post.get("createdAt")))
    return [
        {
            "postIndex": index,
            "likes": _likes_of(post),
            "postTitle": post.get("title") or post.get("recipeName") or f"Recipe {index}",
            "postId": post.get("_id") or post.get("id"),
            "createdAt": post.get("createdAt"),
        }
        for index, post in enumerate(ordered, start=1)
    ]


def categories_distribution(posts: Sequence[Mapping[str, Any]]) -> List[Dict[str, Any]]:
    """Histogram of categories in first-seen order with rounded percentages."""
    total = len(posts)
    if not total:
        return []
    counts: Dict[str, int] = {}
    for post in posts:
        category = _category_of(post)
        counts[category] = counts.get(category, 0) + 1
    return [
        {
            "category": category,
            "count": count,
            "percentage": round_half_up(count * 100 / total),
        }
        for category, count in counts.items()
    ]


def compute_statistics(posts: Sequence[Mapping[str, Any]], user_id) -> Dict[str, Any]:
    """Return the statistics snapshot for ``user_id``'s posts."""
    own_posts = [post for post in (posts or ()) if post and _belongs_to(post, user_id)]
    if not own_posts:
        return empty_statistics()

    total_posts = len(own_posts)
    total_likes = sum(_likes_of(post) for post in own_posts)

    stats = empty_statistics()
    stats.update(
        {
            "totalPosts": total_posts,
            "totalLikes": total_likes,
            "averageLikes": round_half_up(total_likes / total_posts),
            "likesProgression": likes_progression(own_posts),
            "categoriesDistribution": categories_distribution(own_posts),
        }
    )
    return stats


def followers_growth(current_count: int, now=None) -> List[Dict[str, Any]]:
    """Single data point for the current month; follower history is not kept."""
    now = now or timezone.now()
    return [
        {
            "month": now.strftime("%b"),
            "monthYear": now.strftime("%b %Y"),
            "date": now.isoformat(),
            "followers": current_count,
        }
    ]


class StatisticsService:
    """Build statistics snapshots for a user from the recipe and follow stores."""

    def __init__(self, *, post_repo: PostRepo | None = None, followers_repo: FollowersRepo | None = None):
        self.post_repo = post_repo or PostRepo()
        self.followers_repo = followers_repo or FollowersRepo()

    def post_records(self, user) -> List[Dict[str, Any]]:
        """Serialize the user's posts into recipe store records."""
        posts = self.post_repo.list_for_user(user.id).prefetch_related("likes", "comments__user")
        return list(RecipeSerializer(posts, many=True).data)

    def user_statistics(self, user) -> Dict[str, Any]:
        records = self.post_records(user)
        stats = compute_statistics(records, user.id)
        followers = self.followers_repo.followers_count(author_id=user.id)
        stats["totalFollowers"] = followers
        stats["followersGrowth"] = followers_growth(followers)
        logger.debug("Statistics for user %s: %s posts, %s likes", user.id, stats["totalPosts"], stats["totalLikes"])
        return stats
