"""Time utilities for database models."""

from datetime import UTC, datetime, timedelta
from zoneinfo import ZoneInfo


def utcnow() -> datetime:
    """Return the current UTC time as a timezone-aware datetime."""
    return datetime.now(UTC)


def local_day_bounds(
    tz_name: str | None = None,
    now: datetime | None = None,
) -> tuple[datetime, datetime]:
    """Return the UTC bounds of the local calendar day containing ``now``.

    Args:
        tz_name: IANA zone name; the system local zone is used when omitted.
        now: Reference instant; defaults to the current time.

    Returns:
        ``(start, end)`` where ``start`` is local midnight and ``end`` is
        ``start + 24h``, both converted to UTC.
    """
    now = now or utcnow()
    local_now = now.astimezone(ZoneInfo(tz_name)) if tz_name else now.astimezone()
    start = local_now.replace(hour=0, minute=0, second=0, microsecond=0)
    end = start + timedelta(hours=24)
    return start.astimezone(UTC), end.astimezone(UTC)
