"""HTTP-related utility helpers."""


def parse_user_id(raw):
    """Return an int user id from a path/body value, or None when malformed."""
    if raw is None or isinstance(raw, bool):
        return None
    try:
        value = int(str(raw).strip())
    except (TypeError, ValueError):
        return None
    return value if value > 0 else None


def page_params(request, default_limit=50, max_limit=100):
    """Read ``page``/``limit`` query params as a (start, end, page) slice."""
    try:
        page = max(1, int(request.query_params.get("page") or 1))
    except ValueError:
        page = 1
    try:
        limit = int(request.query_params.get("limit") or default_limit)
    except ValueError:
        limit = default_limit
    limit = min(max(1, limit), max_limit)
    start = (page - 1) * limit
    return start, start + limit, page
