from datetime import UTC, datetime


def ensure_utc(v: datetime) -> datetime:
    """Treat naive datetimes as UTC and convert aware ones to UTC."""
    if v.tzinfo is None:
        return v.replace(tzinfo=UTC)
    return v.astimezone(UTC)


def iso_day(v: datetime) -> str:
    """Calendar day of ``v`` in UTC as ``YYYY-MM-DD``."""
    return ensure_utc(v).date().isoformat()
