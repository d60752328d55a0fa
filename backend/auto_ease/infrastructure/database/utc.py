"""Timestamp normalization for backends that drop tzinfo (SQLite)."""

from datetime import datetime, timezone


def as_utc(value: datetime) -> datetime:
    """Return ``value`` as an aware UTC datetime; naive values are assumed UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
