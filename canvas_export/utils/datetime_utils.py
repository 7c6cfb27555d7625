"""
UTC timestamps for response envelopes.
"""
from datetime import datetime, timezone
from typing import Optional


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def to_iso_string(dt: Optional[datetime] = None) -> str:
    """
    ISO 8601 with millisecond precision and a ``Z`` suffix.

    Naive datetimes are taken to be UTC.

    >>> to_iso_string(datetime(2026, 1, 15, 10, 30, 45, 123456))
    '2026-01-15T10:30:45.123Z'
    """
    dt = dt or utc_now()
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    dt = dt.astimezone(timezone.utc)
    return f"{dt:%Y-%m-%dT%H:%M:%S}.{dt.microsecond // 1000:03d}Z"
