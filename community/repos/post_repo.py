"""Repository helpers for fetching recipe posts."""

from typing import Any, Dict, Optional, Sequence
from django.db.models import QuerySet
from community.db_accessor import DB_Accessor
from community.models.recipe_post import RecipePost


class PostRepo(DB_Accessor):
    """Repository for RecipePost queries (feed and user-specific)."""
    def __init__(self) -> None:
        """Initialise with the RecipePost model."""
        super().__init__(RecipePost)

    def list_for_feed(
        self,
        *,
        category: Optional[str] = None,
        author_id: Optional[int] = None,
        search: Optional[str] = None,
        personal_only: bool = True,
        order_by: Sequence[str] = ("-created_at",),
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> QuerySet:
        """Return posts for feed with optional filters and paging; group posts are left out by default."""
        filters: Dict[str, Any] = {}

        if personal_only:
            filters["group__isnull"] = True

        if category and category.lower() != "all":
            filters["category__iexact"] = category

        if author_id is not None:
            filters["author_id"] = author_id

        if search:
            filters["title__icontains"] = search

        qs = self.list(
            filters=filters or None,
            order_by=order_by,
            limit=limit,
            offset=offset,
            as_dict=False,
        )
        return qs.select_related("author")

    def list_for_user(
        self,
        user_id: int,
        *,
        order_by: Sequence[str] = ("created_at",),
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> QuerySet:
        """Return posts authored by a given user."""
        return self.list_for_feed(
            author_id=user_id,
            order_by=order_by,
            limit=limit,
            offset=offset,
        )

    def list_for_group(self, group_id, *, include_pending: bool = False) -> QuerySet:
        """Posts published in a group, newest first; pending ones only on request."""
        filters: Dict[str, Any] = {"group_id": group_id}
        if not include_pending:
            filters["is_approved"] = True
        return self.list(filters=filters, order_by=("-created_at",)).select_related("author", "group")
