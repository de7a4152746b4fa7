"""
Time-related utilities for the application.

All timestamps are generated in UTC and serialized using
ISO-8601 format with timezone information.
"""

from datetime import datetime, timedelta, timezone


def utc_now() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def utc_now_iso() -> str:
    """Return current UTC time in ISO-8601 format.

    Example:
        2024-01-15T10:42:31.123456+00:00
    """
    return utc_now().isoformat()


def days_ago(days: int, *, now: datetime | None = None) -> datetime:
    """Return the UTC instant ``days`` days before ``now``."""
    return (now or utc_now()) - timedelta(days=days)


def parse_timestamp(value: str | None) -> datetime | None:
    """Parse a provider timestamp such as ``2024-01-15T10:42:31Z``.

    Naive values are treated as UTC. Returns ``None`` for missing or
    unparseable input.
    """
    if not value or not isinstance(value, str):
        return None

    text = value.strip()
    if text.endswith("Z"):
        text = f"{text[:-1]}+00:00"

    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)

    return parsed
