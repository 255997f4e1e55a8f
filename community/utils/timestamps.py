"""Timestamp coercion shared by the statistics and chat list helpers."""

from datetime import datetime, timezone as dt_timezone

from django.utils.dateparse import parse_datetime

EPOCH = datetime.min.replace(tzinfo=dt_timezone.utc)


def to_datetime(value) -> datetime:
    """
    Coerce an API timestamp into an aware datetime.

    Accepts datetimes, ISO-8601 strings (a trailing ``Z`` included) and epoch
    seconds. Anything missing or unparseable sorts first as ``EPOCH``; naive
    values are read as UTC.
    """
    if value is None or value == "":
        return EPOCH
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        return datetime.fromtimestamp(value, tz=dt_timezone.utc)
    else:
        try:
            parsed = parse_datetime(str(value).replace("Z", "+00:00"))
        except ValueError:
            parsed = None
        if parsed is None:
            return EPOCH
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=dt_timezone.utc)
    return parsed
