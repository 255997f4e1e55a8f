"""Repository helpers for follower relationships."""

from typing import Any, Dict, List
from community.db_accessor import DB_Accessor
from community.models.followers import Follower


class FollowersRepo(DB_Accessor):
    """Repository wrapper for follower relationships."""
    def __init__(self) -> None:
        """Initialise with the Follower model."""
        super().__init__(Follower)

    def list_followers(self, *, author_id, limit: int = 20, offset: int = 0) -> List[Dict[str, Any]]:
        """List followers of an author with optional paging."""
        return self.list(filters={"author_id": author_id}, order_by=("-created_at",), limit=limit, offset=offset, as_dict=True)  # type: ignore[return-value]

    def list_following(self, *, follower_id, limit: int = 20, offset: int = 0) -> List[Dict[str, Any]]:
        """List authors a user follows with optional paging."""
        return self.list(filters={"follower_id": follower_id}, order_by=("-created_at",), limit=limit, offset=offset, as_dict=True)  # type: ignore[return-value]

    def is_following(self, *, follower_id, author_id) -> bool:
        """Return True if follower_id follows author_id."""
        return self.exists(follower_id=follower_id, author_id=author_id)

    def followers_count(self, *, author_id) -> int:
        return self.count(author_id=author_id)

    def following_count(self, *, follower_id) -> int:
        return self.count(follower_id=follower_id)

    def follow(self, *, follower_id, author_id) -> Follower:
        """Create a follower relation."""
        return self.create(follower_id=follower_id, author_id=author_id)

    def unfollow(self, *, follower_id, author_id) -> int:
        """Remove a follower relation."""
        return self.delete(follower_id=follower_id, author_id=author_id)
