from typing import Any, Dict, List, Mapping, Optional, Sequence, Type
from django.db.models import Model, QuerySet


class DB_Accessor:
    """Generic data accessor to wrap basic queryset operations."""

    def __init__(self, model: Type[Model]) -> None:
        self.model = model

    def list(
        self,
        *,
        filters: Optional[Mapping[str, Any]] = None,
        order_by: Sequence[str] = (),
        limit: Optional[int] = None,
        offset: int = 0,
        as_dict: bool = False,
    ) -> QuerySet | List[Dict[str, Any]]:
        """Return a filtered/sliced queryset (or list of dicts)."""
        qs: QuerySet = self.model.objects.filter(**(filters or {}))
        if order_by:
            qs = qs.order_by(*order_by)
        if offset or limit is not None:
            start = max(0, int(offset))
            end = None if limit is None else start + max(0, int(limit))
            qs = qs[start:end]
        return list(qs.values()) if as_dict else qs

    def count(self, **lookup: Any) -> int:
        """Count objects matching lookup."""
        return self.model.objects.filter(**lookup).count()

    def exists(self, **lookup: Any) -> bool:
        """Return True if any object matches lookup."""
        return self.model.objects.filter(**lookup).exists()

    def get(self, **lookup: Any) -> Model:
        """Fetch a single object matching the lookup."""
        return self.model.objects.get(**lookup)

    def create(self, **data: Any) -> Model:
        """Create and return a new object."""
        return self.model.objects.create(**data)

    def delete(self, **lookup: Any) -> int:
        """Delete objects matching lookup; return count deleted."""
        count, _ = self.model.objects.filter(**lookup).delete()
        return count
