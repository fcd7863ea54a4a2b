"""
Utility functions and helpers
"""

from datetime import datetime, timezone

def utc_now() -> datetime:
    return datetime.now(timezone.utc)

def to_utc(value: datetime) -> datetime:
    """Normalize a timestamp to timezone-aware UTC; naive values are taken as UTC"""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
